"""ASCII character classification and integer/text conversion helpers."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(character: int | str) -> int:
    """Return the code point of a one-character string or an int."""
    if isinstance(character, str):
        if len(character) != 1:
            raise ValueError(f"expected a single character, got {character!r}")
        return ord(character)
    if isinstance(character, bool) or not isinstance(character, int):
        raise TypeError(f"expected int or str, got {type(character).__name__}")
    return character


def isalpha(character: int | str) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(character)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(character: int | str) -> bool:
    """True for ASCII digits 0-9."""
    code = _code(character)
    return ord("0") <= code <= ord("9")


def isalnum(character: int | str) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(character) or isdigit(character)


def isascii(character: int | str) -> bool:
    """True for code points 0 through 127."""
    return 0 <= _code(character) <= 127


def isprint(character: int | str) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(character) <= 126


def tolower(character: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(character)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(character, str) else code


def toupper(character: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(character)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(character, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one optional sign.

    Parsing stops at the first non-digit; text without digits yields 0.
    """
    stripped = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    value = 0
    for char in stripped:
        if not ("0" <= char <= "9"):
            break
        value = value * 10 + (ord(char) - ord("0"))
    return sign * value


def itoa(number: int) -> str:
    """Render an integer in decimal, with a leading '-' when negative."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected int, got {type(number).__name__}")
    if number == 0:
        return "0"
    magnitude = -number if number < 0 else number
    digits = []
    while magnitude:
        magnitude, remainder = divmod(magnitude, 10)
        digits.append(chr(ord("0") + remainder))
    if number < 0:
        digits.append("-")
    return "".join(reversed(digits))