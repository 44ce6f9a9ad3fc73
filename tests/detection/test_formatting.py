"""Unit tests for summary generation and preview formatting."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from paste_detect.detection.formatting import (
    DISPLAY_CONFIG,
    LOW_CONFIDENCE_WARNING,
    confidence_level,
    confidence_percent,
    entry_count_text,
    generate_summary,
    low_confidence_warning,
    preview_rows,
    render_markdown,
)
from paste_detect.detection.schema import DetectedDataType, DetectedStructuredData


def make_roster(row_count: int) -> DetectedStructuredData:
    """Build a roster result with *row_count* numbered students."""
    rows = [{"Name": f"Student {i}", "Belt": "White"} for i in range(row_count)]
    return DetectedStructuredData(
        type=DetectedDataType.STUDENT_ROSTER,
        confidence=0.95,
        headers=["Name", "Belt"],
        rows=rows,
        raw_text="",
        summary=generate_summary(DetectedDataType.STUDENT_ROSTER, row_count, ["Name", "Belt"]),
    )


# ===========================================================================
# generate_summary tests
# ===========================================================================


class TestGenerateSummary:

    def test_plural_entries(self):
        summary = generate_summary(DetectedDataType.STUDENT_ROSTER, 2, ["First Name", "Last Name", "Email"])
        assert summary == "Detected student roster with 2 entries (columns: First Name, Last Name, Email)"

    def test_single_entry(self):
        summary = generate_summary(DetectedDataType.CLASS_SCHEDULE, 1, ["Class", "Day"])
        assert summary == "Detected class schedule with 1 entry (columns: Class, Day)"

    def test_lead_label(self):
        assert generate_summary(DetectedDataType.LEAD_LIST, 3, ["Lead", "Source"]).startswith("Detected lead list with 3 entries")

    def test_unknown_label(self):
        assert generate_summary(DetectedDataType.UNKNOWN, 1, ["Foo", "Bar"]) == "Detected data with 1 entry (columns: Foo, Bar)"

    def test_exactly_four_headers_no_ellipsis(self):
        summary = generate_summary(DetectedDataType.UNKNOWN, 1, ["A", "B", "C", "D"])
        assert summary.endswith("(columns: A, B, C, D)")

    def test_more_than_four_headers_ellipsis(self):
        summary = generate_summary(DetectedDataType.UNKNOWN, 1, ["A", "B", "C", "D", "E"])
        assert summary.endswith("(columns: A, B, C, D...)")


# ===========================================================================
# Display helper tests
# ===========================================================================


class TestDisplayHelpers:

    def test_display_config_covers_every_type(self):
        assert set(DISPLAY_CONFIG) == set(DetectedDataType)

    def test_roster_labels(self):
        config = DISPLAY_CONFIG[DetectedDataType.STUDENT_ROSTER]
        assert config.title == "Student Roster"
        assert config.import_label == "Import Students"

    def test_unknown_labels(self):
        config = DISPLAY_CONFIG[DetectedDataType.UNKNOWN]
        assert config.title == "Structured Data"
        assert config.import_label == "Import Data"

    def test_entry_count_text(self):
        assert entry_count_text(1) == "1 entry found"
        assert entry_count_text(12) == "12 entries found"

    def test_confidence_percent(self):
        assert confidence_percent(0.95) == 95
        assert confidence_percent(0.3) == 30

    def test_confidence_level(self):
        assert confidence_level(0.95) == "high"
        assert confidence_level(0.7) == "high"
        assert confidence_level(0.69) == "review"
        assert confidence_level(0.3) == "review"


# ===========================================================================
# Preview tests
# ===========================================================================


class TestPreviewRows:

    def test_capped(self):
        rows, has_more = preview_rows(make_roster(7), 5)
        assert len(rows) == 5
        assert has_more is True

    def test_under_limit(self):
        rows, has_more = preview_rows(make_roster(3), 5)
        assert len(rows) == 3
        assert has_more is False

    def test_exactly_limit(self):
        rows, has_more = preview_rows(make_roster(5), 5)
        assert len(rows) == 5
        assert has_more is False

    def test_zero_limit(self):
        rows, has_more = preview_rows(make_roster(2), 0)
        assert rows == []
        assert has_more is True


class TestRenderMarkdown:

    def test_basic_render(self):
        md = render_markdown(make_roster(2), 5)
        assert md.startswith("**Student Roster Detected** (2 entries found, 95% confidence)")
        assert "| Name | Belt |" in md
        assert "| --- | --- |" in md
        assert "| Student 0 | White |" in md
        assert "| Student 1 | White |" in md
        assert "more" not in md

    def test_render_with_more_rows(self):
        md = render_markdown(make_roster(8), 5)
        assert "| Student 4 | White |" in md
        assert "| Student 5 | White |" not in md
        assert md.endswith("> ... and 3 more")

    def test_empty_cells_render_as_dash(self):
        data = DetectedStructuredData(
            type=DetectedDataType.STUDENT_ROSTER,
            confidence=0.95,
            headers=["Name", "Belt"],
            rows=[{"Name": "John", "Belt": ""}],
            raw_text="Name,Belt\nJohn",
            summary="",
        )
        assert "| John | - |" in render_markdown(data)

    def test_columns_capped_with_more_marker(self):
        headers = ["Name", "Email", "Phone", "Belt", "Age", "Parent", "Address"]
        data = DetectedStructuredData(
            type=DetectedDataType.STUDENT_ROSTER,
            confidence=0.95,
            headers=headers,
            rows=[{header: header.lower() for header in headers}],
            raw_text="",
            summary="",
        )
        md = render_markdown(data, 5, 5)
        assert "| Name | Email | Phone | Belt | Age | +2 more |" in md
        assert "| --- | --- | --- | --- | --- | --- |" in md
        assert "| name | email | phone | belt | age | ... |" in md
        assert "parent" not in md

    def test_exactly_column_limit_has_no_more_marker(self):
        md = render_markdown(make_roster(1), 5, 2)
        assert "| Name | Belt |" in md
        assert "more" not in md

    def test_pipes_in_values_are_escaped(self):
        data = DetectedStructuredData(
            type=DetectedDataType.UNKNOWN,
            confidence=0.3,
            headers=["Name", "Notes|Extra"],
            rows=[{"Name": "John", "Notes|Extra": "a|b"}],
            raw_text="",
            summary="",
        )
        md = render_markdown(data)
        assert "| Name | Notes\\|Extra |" in md
        assert "| John | a\\|b |" in md

    def test_low_confidence_warning_appended(self):
        data = DetectedStructuredData(
            type=DetectedDataType.UNKNOWN,
            confidence=0.3,
            headers=["Foo", "Bar"],
            rows=[{"Foo": "1", "Bar": "2"}],
            raw_text="Foo,Bar\n1,2",
            summary="",
        )
        assert render_markdown(data).endswith(f"> {LOW_CONFIDENCE_WARNING}")

    def test_confident_result_has_no_warning(self):
        assert LOW_CONFIDENCE_WARNING not in render_markdown(make_roster(2))


class TestLowConfidenceWarning:

    def test_below_threshold(self):
        assert low_confidence_warning(0.69) == "Some columns may not be mapped correctly. Review before importing."

    def test_at_threshold(self):
        assert low_confidence_warning(0.7) is None
