"""String helpers: splitting, bounded search, trimming, joining and comparing."""

from __future__ import annotations

from typing import Optional, Union


def _single_char(value: Union[int, str], name: str) -> str:
    """Return a one-character str from a character given as a str or an int code."""
    if isinstance(value, bool):
        raise TypeError(f"{name} must be a one-character str or an int, got bool")
    if isinstance(value, int):
        return chr(value & 0xFF)
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"{name} must be a single character, got {value!r}")
        return value
    raise TypeError(f"{name} must be a one-character str or an int, got {type(value).__name__}")


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split_words(text: str, sep: Union[int, str]) -> list[str]:
    """Split text on a separator character, dropping empty pieces."""
    separator = _single_char(sep, "sep")
    return [word for word in text.split(separator) if word]


def find_bounded(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of the first whole occurrence of needle within the
    first ``length`` characters of haystack, or None.

    An empty needle is always found at index 0.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index < 0 else index


def trim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in charset."""
    if not charset:
        return text
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of text beginning at ``start``.

    A start at or past the end yields an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def join_with(first: str, second: str, separator: str) -> str:
    """Join two strings with a separator between them."""
    return f"{first}{separator}{second}"


def count_char(text: str, char: Union[int, str]) -> int:
    """Count how many times a character occurs in text."""
    return text.count(_single_char(char, "char"))


def compare_prefix(first: str, second: str, n: int) -> int:
    """Compare at most n characters of two strings like strncmp.

    Returns the difference of the codes at the first position that differs,
    treating the end of a string as code 0; returns 0 when they agree.
    """
    _non_negative(n, "n")
    left, right = first[:n], second[:n]
    for a, b in zip(left, right):
        if a != b:
            return ord(a) - ord(b)
    if len(left) > len(right):
        return ord(left[len(right)])
    if len(left) < len(right):
        return -ord(right[len(left)])
    return 0