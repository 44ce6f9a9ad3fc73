"""Pydantic models for detected structured data.

DetectedStructuredData is the single result of a detection call.  It is
handed to the preview card and to the import pipeline, which is why the
invariants below are enforced at construction rather than trusted.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DetectedDataType(str, Enum):
    """The kind of entity list a pasted table represents."""

    STUDENT_ROSTER = "student_roster"
    CLASS_SCHEDULE = "class_schedule"
    LEAD_LIST = "lead_list"
    UNKNOWN = "unknown"


class DetectedStructuredData(BaseModel):
    """Headers, rows, and classification recovered from a block of pasted text.

    Every row maps each header to a string value; short rows are padded with
    empty strings during parsing so the model_validator can require that the
    row keys are exactly the header names.  Instances are frozen: one is built
    per detection call and owned by the caller afterwards.
    """

    model_config = ConfigDict(frozen=True)

    type: DetectedDataType
    confidence: float = Field(ge=0.0, le=1.0)
    headers: list[str] = Field(min_length=2)
    rows: list[dict[str, str]] = Field(min_length=1)
    raw_text: str
    summary: str

    @model_validator(mode="after")
    def validate_row_keys(self) -> "DetectedStructuredData":
        """Ensure every row is keyed by exactly the header names."""
        expected = set(self.headers)
        for i, row in enumerate(self.rows):
            if set(row) != expected:
                raise ValueError(f"Row {i} keys {sorted(row)} do not match headers {sorted(expected)}")
        return self
