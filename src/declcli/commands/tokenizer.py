"""Split an input line into positional tokens, honouring double quotes."""

from __future__ import annotations

QUOTE = '"'
DELIMITER = " "


def tokenize(line: str) -> list[str]:
    """Split *line* on spaces; ``"..."`` groups words into one token.

    An unterminated quote runs to the end of the line. There are no escapes,
    so a quoted token can never contain a quote. Empty tokens are dropped.
    """
    tokens: list[str] = []
    i = 0
    while i < len(line):
        if line[i] == QUOTE:
            i += 1
            end = line.find(QUOTE, i)
        else:
            end = line.find(DELIMITER, i)
        if end < 0:
            end = len(line)
        if end != i:
            tokens.append(line[i:end])
        i = end + 1
    return tokens
