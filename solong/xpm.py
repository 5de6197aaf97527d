"""Reader for the XPM pixmap text format used by the game's textures."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from solong.colors import text_to_rgb

#: Pixel value stored for the ``None`` (transparent) colour.
TRANSPARENT = 0xFF000000

_WORD_SEPARATOR = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image: rows of 32-bit pixel values, top row first."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` of row ``y``."""
        return self.pixels[y][x]


def split_words(line: str) -> list[str]:
    """Split ``line`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATOR.split(line) if word]


def _find_outside_quotes(text: str, token: str) -> int:
    """Position of the first ``token`` not inside a double-quoted run, or -1."""
    pattern = re.compile(r'"[^"]*(?:"|\Z)|(?P<token>' + re.escape(token) + ")")
    for match in pattern.finditer(text):
        if match.group("token") is not None:
            return match.start()
    return -1


def strip_comments(text: str) -> str:
    """Blank out ``/* */`` and ``//`` comments that lie outside quotes.

    Comment characters are replaced by spaces, so the length of the text is
    kept. A comment with no terminator is blanked to the end of the text.
    """
    for opener, closer in (("/*", "*/"), ("//", "\n")):
        while (begin := _find_outside_quotes(text, opener)) != -1:
            end = text.find(closer, begin + len(opener))
            stop = len(text) if end == -1 else end + len(closer)
            text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in ``text``, in order."""
    for match in _QUOTED.finditer(text):
        yield match.group(1)


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _color_of(words: list[str]) -> int:
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError("colour entry has no 'c' key") from None
    if index >= len(words):
        raise XpmError("colour entry has no colour after 'c'")
    end = words[index + 1] if index + 1 < len(words) else None
    return text_to_rgb(words[index], end)


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an XPM image from its strings: header, colours, then pixel rows."""
    source = iter(lines)

    def take() -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError("unexpected end of XPM data") from None

    header = split_words(take())
    if len(header) < 4:
        raise XpmError("incomplete XPM header")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("invalid XPM header values")

    # Short keys keep the last definition of a key, longer keys the first.
    keep_last = cpp <= 2
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = take()
        rgb = _color_of(split_words(line[cpp:]))
        key = line[:cpp]
        if keep_last:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    def decode(value: int) -> int:
        return TRANSPARENT if value == -1 else value

    rows = []
    for _ in range(height):
        line = take()
        rows.append(
            tuple(
                decode(colors.get(line[x * cpp:(x + 1) * cpp], 0))
                for x in range(width)
            )
        )
    return XpmImage(width=width, height=height, pixels=tuple(rows))


def parse_xpm(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    return parse_xpm_lines(quoted_lines(strip_comments(text)))


def read_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}") from exc
    return parse_xpm(text)