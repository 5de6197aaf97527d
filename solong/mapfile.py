"""Reading map files from disk into rows of tiles."""

from __future__ import annotations

from os import PathLike


class MapError(ValueError):
    """Raised when a map file cannot be read or has blank lines."""


def check_blank_lines(text: str) -> str:
    """Reject a map text that starts with, or contains, an empty line.

    Returns the text unchanged when it is acceptable.
    """
    if text.startswith("\n"):
        raise MapError("Ligne vide")
    if "\n\n" in text:
        raise MapError("trop despaces")
    return text


def split_rows(text: str) -> list[str]:
    """Split a map text on newlines, dropping empty pieces."""
    return [row for row in text.split("\n") if row]


def read_map_text(path: str | PathLike[str]) -> str:
    """Return the whole content of a map file, line endings untouched."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise MapError("Fichier inexistant") from exc


def load_map(path: str | PathLike[str]) -> list[str]:
    """Read a map file and return its rows."""
    return split_rows(check_blank_lines(read_map_text(path)))