"""Split a command line into words, honouring single and double quotes."""

import re

_WORD_PATTERN = re.compile(
    r"""'(?P<single>[^']*)'?"""
    r"""|"(?P<double>[^"]*)"?"""
    r"""|(?P<bare>[^ \t\n\v\f\r'"]+)"""
)

_GROUPS = ("single", "double", "bare")


def tokenize(line: str) -> list[str]:
    """Return the words of ``line``.

    Words are separated by whitespace. A quoted section becomes one word
    without its quotes; an unterminated quote runs to the end of the line.
    Quotes also end an unquoted word. There is no escape handling.
    """
    words = []
    for match in _WORD_PATTERN.finditer(line):
        for group in _GROUPS:
            value = match.group(group)
            if value is not None:
                words.append(value)
                break
    return words