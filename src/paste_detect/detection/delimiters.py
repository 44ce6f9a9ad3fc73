"""Delimiter detection for the first line of a pasted table."""

import logging

from paste_detect.detection.patterns import DELIMITER_CANDIDATES, FIXED_WIDTH, FIXED_WIDTH_RE

logger = logging.getLogger(__name__)


def detect_delimiter(line: str) -> str | None:
    """Return the column delimiter of *line*, FIXED_WIDTH, or None.

    Candidates are tried in priority order and the first one present wins;
    a single occurrence is enough.  Column-count stability across lines is
    left to looks_like_structured_data.
    """
    for delimiter in DELIMITER_CANDIDATES:
        if delimiter in line:
            return delimiter

    # No single-character delimiter: fall back to fixed-width columns
    if FIXED_WIDTH_RE.search(line):
        return FIXED_WIDTH

    logger.debug("No delimiter found in %r", line[:80])
    return None
