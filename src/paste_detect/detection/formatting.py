"""Summary text, display labels, and markdown previews for detection results.

generate_summary produces the one-line description stored on the result.
The remaining helpers serve the preview card and the command line: card
titles and import labels per type, confidence badges, and a capped
markdown table of the first few rows.
"""

from typing import NamedTuple

from paste_detect.config import HIGH_CONFIDENCE_THRESHOLD, PREVIEW_COLUMN_LIMIT, PREVIEW_ROW_LIMIT
from paste_detect.detection.patterns import SUMMARY_MAX_HEADERS
from paste_detect.detection.schema import DetectedDataType, DetectedStructuredData

# ─── Labels ───────────────────────────────────────────────────────────────────

# Lowercase prose label used inside the summary sentence
SUMMARY_LABELS: dict[DetectedDataType, str] = {
    DetectedDataType.STUDENT_ROSTER: "student roster",
    DetectedDataType.CLASS_SCHEDULE: "class schedule",
    DetectedDataType.LEAD_LIST: "lead list",
    DetectedDataType.UNKNOWN: "data",
}


class DisplayConfig(NamedTuple):
    """Preview-card wording for one data type."""

    title: str
    import_label: str


DISPLAY_CONFIG: dict[DetectedDataType, DisplayConfig] = {
    DetectedDataType.STUDENT_ROSTER: DisplayConfig("Student Roster", "Import Students"),
    DetectedDataType.CLASS_SCHEDULE: DisplayConfig("Class Schedule", "Import Classes"),
    DetectedDataType.LEAD_LIST: DisplayConfig("Lead List", "Import Leads"),
    DetectedDataType.UNKNOWN: DisplayConfig("Structured Data", "Import Data"),
}

# Shown under the preview when confidence is below HIGH_CONFIDENCE_THRESHOLD
LOW_CONFIDENCE_WARNING = "Some columns may not be mapped correctly. Review before importing."


def _entries(count: int) -> str:
    return f"{count} {'entry' if count == 1 else 'entries'}"


# ─── Summary ──────────────────────────────────────────────────────────────────


def generate_summary(data_type: DetectedDataType, row_count: int, headers: list[str]) -> str:
    """Return e.g. 'Detected student roster with 2 entries (columns: Name, Email)'."""
    columns = ", ".join(headers[:SUMMARY_MAX_HEADERS])
    ellipsis = "..." if len(headers) > SUMMARY_MAX_HEADERS else ""
    return f"Detected {SUMMARY_LABELS[data_type]} with {_entries(row_count)} (columns: {columns}{ellipsis})"


# ─── Preview Helpers ──────────────────────────────────────────────────────────


def entry_count_text(count: int) -> str:
    """Return '1 entry found' / 'N entries found'."""
    return f"{_entries(count)} found"


def confidence_percent(confidence: float) -> int:
    """Return the confidence as a whole-number percentage for the badge."""
    return round(confidence * 100)


def confidence_level(confidence: float) -> str:
    """Return 'high' for confident detections, 'review' for everything else."""
    return "high" if confidence >= HIGH_CONFIDENCE_THRESHOLD else "review"


def preview_rows(data: DetectedStructuredData, limit: int = PREVIEW_ROW_LIMIT) -> tuple[list[dict[str, str]], bool]:
    """Return the first *limit* rows and whether any rows were left out."""
    limit = max(limit, 0)
    return data.rows[:limit], len(data.rows) > limit


def low_confidence_warning(confidence: float) -> str | None:
    """Return the review warning shown under the preview, or None when confident."""
    if confidence_level(confidence) == "high":
        return None
    return LOW_CONFIDENCE_WARNING


def _cell(text: str) -> str:
    """Escape pipes so a value cannot open a phantom markdown column."""
    return text.replace("|", "\\|")


def _markdown_row(cells: list[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def render_markdown(data: DetectedStructuredData, limit: int = PREVIEW_ROW_LIMIT, column_limit: int = PREVIEW_COLUMN_LIMIT) -> str:
    """Render a capped markdown table preview of a detection result.

    Only the first *column_limit* headers are shown; the rest collapse into a
    "+N more" column with "..." cells.  Empty cells render as "-".
    """
    display = DISPLAY_CONFIG[data.type]
    lines: list[str] = [
        f"**{display.title} Detected** ({entry_count_text(len(data.rows))}, {confidence_percent(data.confidence)}% confidence)",
        "",
    ]

    column_limit = max(column_limit, 0)
    headers = data.headers[:column_limit]
    hidden_columns = len(data.headers) - len(headers)

    # Column header row + separator
    header_cells = [_cell(header) for header in headers]
    if hidden_columns:
        header_cells.append(f"+{hidden_columns} more")
    lines.append(_markdown_row(header_cells))
    lines.append(_markdown_row(["---"] * len(header_cells)))

    # Previewed rows, in header order
    rows, has_more = preview_rows(data, limit)
    for row in rows:
        cells = [_cell(row[header]) if row[header] else "-" for header in headers]
        if hidden_columns:
            cells.append("...")
        lines.append(_markdown_row(cells))

    if has_more:
        lines.append("")
        lines.append(f"> ... and {len(data.rows) - len(rows)} more")

    warning = low_confidence_warning(data.confidence)
    if warning:
        lines.append("")
        lines.append(f"> {warning}")

    return "\n".join(lines)
