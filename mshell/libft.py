"""Small string helpers shared by the shell and the pipeline runner."""

_SPACES = " \t\n\r\v\f"
_INT_BITS = 32


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def is_space(char: str) -> bool:
    """Return True if ``char`` is one of the classic whitespace characters."""
    return len(char) == 1 and char in _SPACES


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring what follows it.

    Leading whitespace and one optional sign are accepted. Text without
    digits yields 0. The result wraps like a 32-bit signed integer.
    """
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    number = int("".join(digits)) if digits else 0
    return _to_int32(number * sign)


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return f"{int(number):d}"


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if text is None:
        raise TypeError("text must be a string")
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strtrim(text: str, chars: str) -> str:
    """Remove every character of ``chars`` from both ends of ``text``."""
    if text is None or chars is None:
        raise TypeError("text and chars must be strings")
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end of the text gives an empty string.
    """
    if text is None:
        raise TypeError("text must be a string")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]