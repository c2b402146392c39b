"""String helpers: splitting, comparison, searching, trimming and bounded copies."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest

_NUL = "\0"


def _single(character: str) -> str:
    if not isinstance(character, str) or len(character) != 1:
        raise ValueError(f"expected a single character, got {character!r}")
    return character


def _compare(first: str, second: str, limit: int | None = None) -> int:
    """Difference of the first differing code points; a missing one counts as 0."""
    for index, (a, b) in enumerate(zip_longest(first, second, fillvalue=_NUL)):
        if limit is not None and index >= limit:
            break
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``, dropping empty pieces."""
    _single(delimiter)
    return [word for word in text.split(delimiter) if word]


def strcmp(first: str, second: str) -> int:
    """Compare two strings; negative, zero or positive like the C function."""
    return _compare(first, second)


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters of two strings."""
    if count < 0:
        raise ValueError("count must not be negative")
    return _compare(first, second, count)


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``limit`` characters.

    An empty needle is found at index 0; ``None`` means no match.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return index if index >= 0 else None


def strchr(text: str, character: str) -> int | None:
    """Index of the first ``character`` in ``text``.

    Searching for the NUL character finds the end of the string.
    """
    _single(character)
    index = text.find(character)
    if index >= 0:
        return index
    if character == _NUL:
        return len(text)
    return None


def strrchr(text: str, character: str) -> int | None:
    """Index of the last ``character`` in ``text``.

    Searching for the NUL character finds the end of the string.
    """
    _single(character)
    if character == _NUL:
        return len(text)
    index = text.rfind(character)
    return index if index >= 0 else None


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        raise TypeError("text and charset are required")
    return text.strip(charset)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the C function reports: the
    length it tried to create.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dest_len = min(len(dest), size)
    if size <= dest_len:
        return dest, size + len(src)
    room = size - 1 - dest_len
    return dest + src[:room], dest_len + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    chars: MutableSequence[str] | None, func: Callable[[int, str], str | None]
) -> None:
    """Call ``func(index, char)`` on each item; a non-None result replaces it in place."""
    if chars is None:
        return
    for index, char in enumerate(list(chars)):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``; empty past the end."""
    if text is None:
        raise TypeError("text is required")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second