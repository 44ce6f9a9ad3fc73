"""Detect and classify tabular data pasted as plain text.

Call looks_like_structured_data first as a cheap gate, then
detect_structured_data to recover headers and rows and learn whether the
paste is a student roster, class schedule, or lead list.
"""

from paste_detect.detection.pipeline import detect_structured_data, looks_like_structured_data
from paste_detect.detection.schema import DetectedDataType, DetectedStructuredData

__all__ = [
    "DetectedDataType",
    "DetectedStructuredData",
    "detect_structured_data",
    "looks_like_structured_data",
]
