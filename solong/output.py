"""Writing characters, strings and numbers to text streams, and a small printf."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

from solong.charclass import itoa

_UINT32 = 1 << 32
_UINT64 = 1 << 64


def _char_of(character: int | str) -> str:
    if isinstance(character, str):
        if len(character) != 1:
            raise ValueError(f"expected a single character, got {character!r}")
        return character
    if not isinstance(character, int):
        raise TypeError(f"expected int or str, got {type(character).__name__}")
    return chr(character & 0xFF)


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(character: int | str, stream: TextIO | None = None) -> None:
    """Write one character."""
    _target(stream).write(_char_of(character))


def put_str(text: str, stream: TextIO | None = None) -> None:
    """Write a string as is."""
    _target(stream).write(text)


def put_endl(text: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    _target(stream).write(text + "\n")


def put_nbr(number: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal."""
    _target(stream).write(itoa(number))


def _as_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return int(value)


def _signed(value: Any) -> str:
    number = _as_int(value, "d") % _UINT32
    if number >= _UINT32 // 2:
        number -= _UINT32
    return itoa(number)


def _unsigned(value: Any) -> str:
    return itoa(_as_int(value, "u") % _UINT32)


def _hex_lower(value: Any) -> str:
    return format(_as_int(value, "x") % _UINT32, "x")


def _hex_upper(value: Any) -> str:
    return format(_as_int(value, "X") % _UINT32, "X")


def _pointer(value: Any) -> str:
    number = 0 if value is None else _as_int(value, "p") % _UINT64
    if number == 0:
        return "(nil)"
    return "0x" + format(number, "x")


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char_of,
    "s": _string,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
    "p": _pointer,
}


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"missing argument for %{spec}") from None


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``%c %s %d %i %u %x %X %p`` in ``fmt``.

    Any other character after ``%`` is emitted as is, so ``%%`` gives ``%``;
    a lone ``%`` at the end of the format produces nothing.
    """
    if fmt is None:
        raise TypeError("format string is required")
    values = iter(args)
    chars = iter(fmt)
    pieces: list[str] = []
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        conversion = _CONVERSIONS.get(spec)
        if conversion is None:
            pieces.append(spec)
        else:
            pieces.append(conversion(_next_arg(values, spec)))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Format and write to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    _target(stream).write(text)
    return len(text)