"""Detection entry points: the cheap pre-check and the full detector.

looks_like_structured_data is a boolean gate the paste handler calls on
every paste.  Only when it passes is detect_structured_data run to build
the headers, rows, and classification shown on the preview card.

Neither function raises for odd input.  "Not a table" is reported as
False / None, which callers treat as a normal outcome.

Usage:
    paste-detect roster.csv
    pbpaste | paste-detect --format markdown
"""

import argparse
import logging
import sys
from pathlib import Path

from paste_detect.config import PREVIEW_COLUMN_LIMIT, PREVIEW_ROW_LIMIT
from paste_detect.detection.classifiers import classify_headers
from paste_detect.detection.delimiters import detect_delimiter
from paste_detect.detection.formatting import generate_summary, render_markdown
from paste_detect.detection.parsing import parse_row
from paste_detect.detection.patterns import DELIMITER_CHAR_RE, FIXED_WIDTH_RE, TRIM_RE
from paste_detect.detection.schema import DetectedStructuredData

logger = logging.getLogger(__name__)


# ─── Line Splitting ───────────────────────────────────────────────────────────


def _trim(text: str) -> str:
    """Strip surrounding whitespace and byte-order marks (Excel exports lead with U+FEFF)."""
    return TRIM_RE.sub("", text)


def _non_blank_lines(trimmed: str) -> list[str]:
    """Split on newlines and drop lines that are empty or whitespace-only."""
    return [line for line in trimmed.split("\n") if line.strip()]


def _build_row(headers: list[str], values: list[str]) -> dict[str, str]:
    """Map headers to positional values; pad short rows with "" and drop extras."""
    return {header: values[idx] if idx < len(values) else "" for idx, header in enumerate(headers)}


# ─── Public Operations ────────────────────────────────────────────────────────


def detect_structured_data(text: str) -> DetectedStructuredData | None:
    """Detect a header + rows table in pasted *text* and classify it.

    Returns None when the text is empty, has fewer than two non-blank lines,
    has no recognisable delimiter on its first line, has fewer than two
    non-empty headers, or has no data rows.
    """
    trimmed = _trim(text)
    if not trimmed:
        return None

    # Need a header line plus at least one data line
    lines = _non_blank_lines(trimmed)
    if len(lines) < 2:
        logger.debug("Not structured: only %d non-blank line(s)", len(lines))
        return None

    delimiter = detect_delimiter(lines[0])
    if delimiter is None:
        return None

    headers = parse_row(lines[0], delimiter)
    if sum(1 for header in headers if header) < 2:
        logger.debug("Not structured: fewer than 2 non-empty headers in %r", headers)
        return None

    rows: list[dict[str, str]] = []
    for line in lines[1:]:
        values = parse_row(line, delimiter)
        if not values:
            continue
        rows.append(_build_row(headers, values))

    if not rows:
        logger.debug("Not structured: no data rows under %d headers", len(headers))
        return None

    data_type, confidence = classify_headers(headers)
    logger.debug("Detected %s: %d columns, %d rows, delimiter=%r", data_type.value, len(headers), len(rows), delimiter)

    return DetectedStructuredData(
        type=data_type,
        confidence=confidence,
        headers=headers,
        rows=rows,
        raw_text=trimmed,
        summary=generate_summary(data_type, len(rows), headers),
    )


def looks_like_structured_data(text: str) -> bool:
    """Cheap gate: True if *text* plausibly holds a delimited table.

    Requires two non-blank lines, a delimiter on the first line, at least two
    columns on that line, and a second line whose column count is within one
    of the first.
    """
    trimmed = _trim(text)
    if not trimmed:
        return False

    lines = _non_blank_lines(trimmed)
    if len(lines) < 2:
        return False

    first_line = lines[0]
    if not (DELIMITER_CHAR_RE.search(first_line) or FIXED_WIDTH_RE.search(first_line)):
        return False

    delimiter = detect_delimiter(first_line)
    if delimiter is None:
        return False

    # Similar column counts on the first two lines suggest a real table
    first_cols = len(parse_row(first_line, delimiter))
    second_cols = len(parse_row(lines[1], delimiter))
    return abs(first_cols - second_cols) <= 1 and first_cols >= 2


# ─── Command Line ─────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Detect structured data in a file (or stdin) and print the result."""
    parser = argparse.ArgumentParser(description="Detect and classify tabular data in pasted text")
    parser.add_argument("file", nargs="?", type=Path, help="Text file to inspect (default: stdin)")
    parser.add_argument("--format", choices=("json", "markdown", "summary"), default="json", help="Output format (default: json)")
    parser.add_argument("--check", action="store_true", help="Only run the cheap pre-check and print true/false")
    parser.add_argument("--preview-rows", type=int, default=PREVIEW_ROW_LIMIT, help=f"Rows shown in the markdown preview (default: {PREVIEW_ROW_LIMIT})")
    parser.add_argument("--preview-columns", type=int, default=PREVIEW_COLUMN_LIMIT, help=f"Columns shown in the markdown preview (default: {PREVIEW_COLUMN_LIMIT})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.file is None:
        text = sys.stdin.read()
    else:
        with open(args.file, "r", encoding="utf-8-sig") as fopen:
            text = fopen.read()

    if args.check:
        looks_like = looks_like_structured_data(text)
        print("true" if looks_like else "false")
        return 0 if looks_like else 1

    result = detect_structured_data(text)
    if result is None:
        logger.info("No structured data detected")
        print("No structured data detected", file=sys.stderr)
        return 1

    if args.format == "markdown":
        print(render_markdown(result, args.preview_rows, args.preview_columns))
    elif args.format == "summary":
        print(result.summary)
    else:
        print(result.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
