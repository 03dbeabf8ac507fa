"""Tests for reading input files."""
import pytest

from wordcounter.core.file_loader import read_text
from wordcounter.exceptions import FileAccessError


class TestReadText:

    def test_reads_utf8(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_text("héllo wörld\n", encoding="utf-8")

        assert read_text(path) == "héllo wörld\n"

    def test_keeps_crlf(self, tmp_path):
        """Line endings are not translated."""
        path = tmp_path / "doc.txt"
        path.write_bytes(b"a\r\nb\r\n")

        assert read_text(str(path)) == "a\r\nb\r\n"

    def test_alternate_encoding(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_bytes(b"caf\xe9\n")

        assert read_text(path, encoding="latin-1") == "café\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileAccessError, match="Error opening file"):
            read_text(tmp_path / "missing.txt")

    def test_invalid_text(self, tmp_path):
        path = tmp_path / "doc.bin"
        path.write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(FileAccessError, match="Error reading file"):
            read_text(path)

    def test_non_text_codec(self, tmp_path):
        """A codec open() rejects is a file access error, not a crash."""
        path = tmp_path / "doc.txt"
        path.write_text("hello\n")

        with pytest.raises(FileAccessError, match="Error opening file"):
            read_text(path, encoding="rot13")
