"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

import re
import sys
from collections.abc import Callable, Iterator
from typing import Any

_SPEC = re.compile(r"%(.)", re.DOTALL)
_UINT_MASK = (1 << 32) - 1
_PTR_MASK = (1 << 64) - 1


def _int32(value: Any) -> int:
    value = int(value) & _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _uint32(value: Any) -> int:
    return int(value) & _UINT_MASK


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c needs a single character")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    return f"0x{address & _PTR_MASK:x}"


_HANDLERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda value: str(_int32(value)),
    "i": lambda value: str(_int32(value)),
    "u": lambda value: str(_uint32(value)),
    "x": lambda value: format(_uint32(value), "x"),
    "X": lambda value: format(_uint32(value), "X"),
}


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    handler = _HANDLERS.get(spec)
    if handler is None:
        return ""
    try:
        value = next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    return handler(value)


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    Unknown conversions are dropped together with their ``%``; a lone
    ``%`` at the end is kept as it is.
    """
    if fmt is None:
        raise TypeError("format must be a string")
    values = iter(args)
    parts = []
    pos = 0
    for match in _SPEC.finditer(fmt):
        parts.append(fmt[pos:match.start()])
        parts.append(_convert(match.group(1), values))
        pos = match.end()
    parts.append(fmt[pos:])
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)