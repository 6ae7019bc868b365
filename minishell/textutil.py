"""Small string helpers with the exact semantics the shell relies on."""

from __future__ import annotations

from itertools import zip_longest

_LONG_MAX = 2**63 - 1
_WHITESPACE = " \t\n\v\f\r"


def _to_c_int(value: int) -> int:
    """Wrap an integer to the 32-bit signed range."""
    return ((value + 2**31) % 2**32) - 2**31


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library routine does.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit.  A value that does not fit a 64-bit long
    yields -1 when positive and 0 when negative; the result is then wrapped
    to a 32-bit signed int.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    number = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        number = number * 10 + (ord(char) - ord("0"))
        if number > _LONG_MAX:
            return 0 if negative else -1
    return _to_c_int(-number if negative else number)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch."""
    if n <= 0:
        return 0
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def isalpha(char: str | int) -> bool:
    """Tell whether a character (or its code) is an ASCII letter."""
    code = ord(char) if isinstance(char, str) else char
    if code > 255:
        return False
    code &= 0xFF
    return 65 <= code <= 90 or 97 <= code <= 122


def itoa(number: int) -> str:
    """Render an integer in decimal."""
    return f"{number:d}"


def strtrim(text: str, chars: str) -> str:
    """Remove every character of ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` wholly inside the first ``limit`` characters of ``haystack``.

    Returns the index of the match, or None if there is none.  An empty
    needle matches at index 0.
    """
    if not needle:
        return 0
    if limit <= 0:
        return None
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]