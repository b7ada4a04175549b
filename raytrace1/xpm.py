"""Reading XPM pixmaps into 0xRRGGBB pixel arrays."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from .colornames import lookup_color

TRANSPARENT = 0xFF000000
_NAME_LIMIT = 63
_HEX_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded pixmap: pixels are row-major 0xRRGGBB values.

    Transparent pixels hold 0xFF000000.
    """

    width: int
    height: int
    pixels: tuple[int, ...]


def _check_needle(find: str) -> None:
    if not find:
        raise ValueError("the searched text must not be empty")


def find_substring(s: str, find: str, length: int) -> Optional[int]:
    """Return the position of ``find`` in ``s``, or None.

    Nothing is found when ``find`` is longer than ``length``.
    """
    _check_needle(find)
    if len(find) > length:
        return None
    index = s.find(find)
    return None if index < 0 else index


def find_unquoted(s: str, find: str, length: int) -> Optional[int]:
    """Like find_substring, but skip matches inside double quotes."""
    _check_needle(find)
    if len(find) > length:
        return None
    last = len(s) - len(find)
    quoted = False
    for pos, ch in enumerate(s):
        if pos > last:
            break
        if ch == '"':
            quoted = not quoted
        if not quoted and s.startswith(find, pos):
            return pos
    return None


def split_words(s: str) -> list[str]:
    """Split ``s`` on spaces and tabs, dropping empty words."""
    return s.replace("\t", " ").split(" ") and [
        word for word in s.replace("\t", " ").split(" ") if word
    ]


def _blank(text: str, opener: str, closer: str, extra: int) -> str:
    while (begin := find_unquoted(text, opener, len(text))) is not None:
        after = begin + len(opener)
        end = find_substring(text[after:], closer, len(text) - after)
        span = (-1 if end is None else end) + extra
        stop = min(begin + span, len(text))
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments outside quotes with spaces.

    The length of the text is kept.
    """
    text = _blank(text, "/*", "*/", 4)
    return _blank(text, "//", "\n", 3)


def text_to_rgb(name: str, end: Optional[str]) -> int:
    """Turn an XPM colour spec into 0xRRGGBB.

    ``#rrggbb`` is read as hexadecimal; otherwise ``name`` (joined with
    ``end`` when given) is looked up among the colour names. ``None`` gives
    -1; unknown names give 0.
    """
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name[1:])
        if not match:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    if end:
        name = f"{name} {end}"[:_NAME_LIMIT]
    value = lookup_color(name)
    return 0 if value is None else value


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _read_colors(lines: Iterator[str], count: int, cpp: int) -> dict[str, int]:
    # With one or two characters per pixel a later definition replaces an
    # earlier one; with more, the first definition of a key is kept.
    replace = cpp <= 2
    colors: dict[str, int] = {}
    for _ in range(count):
        line = _next_line(lines, "colour definition")
        if len(line) < cpp:
            raise XpmError(f"colour line too short: {line!r}")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"no colour in line: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"no colour in line: {line!r}")
        end = words[index + 2] if index + 2 < len(words) else None
        rgb = text_to_rgb(words[index + 1], end)
        key = line[:cpp]
        if replace:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)
    return colors


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM from its quoted strings: values, colours, then pixel rows."""
    it = iter(lines)
    words = split_words(_next_line(it, "values line"))
    if len(words) < 4:
        raise XpmError("values line needs width, height, colours and cpp")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("width, height, colours and cpp must be positive")
    colors = _read_colors(it, ncolors, cpp)
    pixels: list[int] = []
    for _ in range(height):
        row = _next_line(it, "pixel row")
        if len(row) < width * cpp:
            raise XpmError(f"pixel row too short: {row!r}")
        for x in range(width):
            col = colors.get(row[x * cpp:(x + 1) * cpp], 0)
            pixels.append(TRANSPARENT if col == -1 else col)
    return XpmImage(width, height, tuple(pixels))


def xpm_to_image(data: Iterable[str]) -> XpmImage:
    """Decode XPM given as its sequence of strings, as in an included source array."""
    return parse_xpm(data)


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while (start := text.find('"', pos)) >= 0:
        close = text.find('"', start + 1)
        if close < 0:
            return
        yield text[start + 1:close]
        pos = close + 1


def xpm_file_to_image(path: Union[str, Path]) -> XpmImage:
    """Read and decode an XPM file; OSError propagates if it cannot be read."""
    text = Path(path).read_bytes().decode("latin-1")
    return parse_xpm(_quoted_strings(strip_comments(text)))