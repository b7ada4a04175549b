"""Small string helpers used by the scene reader."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

_BLANKS = " \n\t"
_ASCII_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ASCII_LOWER = "abcdefghijklmnopqrstuvwxyz"
_TO_LOWER = str.maketrans(_ASCII_UPPER, _ASCII_LOWER)
_TO_UPPER = str.maketrans(_ASCII_LOWER, _ASCII_UPPER)


def _require_char(c: str, name: str) -> None:
    if len(c) != 1:
        raise ValueError(f"{name} must be a single character, got {c!r}")


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    _require_char(sep, "sep")
    return [word for word in s.split(sep) if word]


def find(haystack: str, needle: str) -> Optional[int]:
    """Return the index of the first occurrence of ``needle``, or None."""
    index = haystack.find(needle)
    return None if index < 0 else index


def find_bounded(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``."""
    if length < 0:
        raise ValueError("length must not be negative")
    if length == 0:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def rfind_char(s: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _require_char(c, "c")
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def substring(s: str, start: int, length: int) -> str:
    """Return ``length`` characters of ``s`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise IndexError("start and length must not be negative")
    if start + length > len(s):
        raise IndexError(
            f"substring [{start}, {start + length}) out of range for length {len(s)}"
        )
    return s[start:start + length]


def trim(s: str) -> str:
    """Remove spaces, newlines and tabs from both ends of ``s``."""
    return s.strip(_BLANKS)


def to_lower(c: str) -> str:
    """Lower-case ASCII letters only; everything else is left unchanged."""
    return c.translate(_TO_LOWER)


def to_upper(c: str) -> str:
    """Upper-case ASCII letters only; everything else is left unchanged."""
    return c.translate(_TO_UPPER)


def iter_lines(stream: Iterable[str]) -> Iterator[str]:
    """Yield the lines of a text stream without their trailing newline.

    A final line lacking a newline is still yielded; a newline at the very
    end of the stream does not produce an extra empty line.
    """
    for raw in stream:
        yield raw[:-1] if raw.endswith("\n") else raw