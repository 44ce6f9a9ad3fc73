"""Row parsing: split a pasted line into trimmed field values.

Character-delimited lines go through a two-state scanner (NORMAL and
IN_QUOTES).  A double quote toggles the state and is dropped from the
output; delimiters inside quotes are kept as literal text.  The CSV ``""``
escape is not recognised: every quote toggles, so ``"a""b"`` parses as
``ab``.  Fixed-width lines are split on runs of two or more whitespace
characters.
"""

from enum import Enum

from paste_detect.detection.patterns import FIXED_WIDTH, FIXED_WIDTH_RE, QUOTE_CHAR


class _ScanState(Enum):
    NORMAL = "normal"
    IN_QUOTES = "in_quotes"


def _split_fixed_width(line: str) -> list[str]:
    """Split on 2+ whitespace runs, dropping empty fragments."""
    return [part.strip() for part in FIXED_WIDTH_RE.split(line) if part.strip()]


def _split_delimited(line: str, delimiter: str) -> list[str]:
    """Scan *line* once, honouring double-quoted fields."""
    values: list[str] = []
    current: list[str] = []
    state = _ScanState.NORMAL

    for char in line:
        if char == QUOTE_CHAR:
            state = _ScanState.NORMAL if state is _ScanState.IN_QUOTES else _ScanState.IN_QUOTES
        elif char == delimiter and state is _ScanState.NORMAL:
            values.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    # Whatever is left (even an unterminated quote) is the last field
    values.append("".join(current).strip())
    return values


def parse_row(line: str, delimiter: str) -> list[str]:
    """Return the ordered, trimmed field values of *line*.

    Fixed-width rows may come back empty; character-delimited rows always
    yield at least one (possibly empty) value.
    """
    if delimiter == FIXED_WIDTH:
        return _split_fixed_width(line)
    return _split_delimited(line, delimiter)
