"""Read the input document."""
from pathlib import Path
from typing import Union

from ..exceptions import FileAccessError


def read_text(file_path: Union[str, Path], encoding: str = "utf-8") -> str:
    """Read a whole text file into memory.

    Newlines are left untranslated so line counts reflect the file as written.

    Args:
        file_path: Path to file
        encoding: Text encoding (decoding errors are not ignored)

    Returns:
        File content

    Raises:
        FileAccessError: If the file can't be opened, read, or decoded
    """
    path = Path(file_path).expanduser()

    try:
        f = open(path, "r", encoding=encoding, newline="")
    except (OSError, LookupError) as e:
        raise FileAccessError(f"Error opening file: {e}") from e

    with f:
        try:
            return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileAccessError(f"Error reading file: {e}") from e
