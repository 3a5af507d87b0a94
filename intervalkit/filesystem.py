"""Small file-name helpers."""

import os


def file_exists(name: "str | os.PathLike[str]") -> bool:
    """Return True if ``name`` names an existing regular file."""
    return os.path.isfile(name)


def get_extension(name: str) -> str:
    """Return the text after the last '.' in ``name``, or '' if there is none."""
    _, dot, extension = name.rpartition(".")
    return extension if dot else ""