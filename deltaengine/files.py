"""Reading whole text files such as shader sources."""

from __future__ import annotations

import os


def read_file(file_path: str | os.PathLike[str]) -> str:
    """Return the text of file_path, or an empty string if it cannot be opened.

    The text ends at the first NUL character, if there is one.
    """
    try:
        with open(file_path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError:
        return ""
    return text.split("\0", 1)[0]