"""Tests for config loading."""
import pytest

from wordcounter.config import Config, get_default_config_path, load_config
from wordcounter.exceptions import ConfigError


class TestBundledConfig:

    def test_bundled_config_exists(self):
        assert get_default_config_path().is_file()

    def test_bundled_defaults(self):
        """Bundled config.yaml matches the built-in defaults."""
        config = load_config()

        assert config.report.top_n == 5
        assert config.input.encoding == "utf-8"
        assert config == Config()


class TestConfigOverrides:

    def test_override_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("report:\n  top_n: 12\ninput:\n  encoding: latin-1\n")

        config = load_config(path)

        assert config.report.top_n == 12
        assert config.input.encoding == "latin-1"

    def test_missing_keys_use_defaults(self, tmp_path):
        """Partial config fills in the rest."""
        path = tmp_path / "config.yaml"
        path.write_text("report:\n  top_n: 3\n")

        config = load_config(str(path))

        assert config.report.top_n == 3
        assert config.input.encoding == "utf-8"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert load_config(path) == Config()


class TestInvalidConfig:
    """Every problem surfaces as ConfigError."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read config"):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("report: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- one\n- two\n")

        with pytest.raises(ConfigError, match="must be a mapping"):
            load_config(path)

    @pytest.mark.parametrize("value", ["0", "-1", "five", "true", "2.5"])
    def test_bad_top_n(self, tmp_path, value):
        path = tmp_path / "config.yaml"
        path.write_text(f"report:\n  top_n: {value}\n")

        with pytest.raises(ConfigError, match="top_n"):
            load_config(path)

    def test_unknown_encoding(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("input:\n  encoding: not-a-codec\n")

        with pytest.raises(ConfigError, match="encoding"):
            load_config(path)

    def test_section_not_a_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("report: 5\n")

        with pytest.raises(ConfigError, match="report"):
            load_config(path)

    @pytest.mark.parametrize("codec", ["rot13", "base64", "hex"])
    def test_non_text_codec(self, tmp_path, codec):
        """Bytes-to-bytes codecs can't decode a text file."""
        path = tmp_path / "config.yaml"
        path.write_text(f"input:\n  encoding: {codec}\n")

        with pytest.raises(ConfigError, match="text encoding"):
            load_config(path)
