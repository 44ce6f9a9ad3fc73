"""Header classification and confidence scoring.

Each header is lowercased and checked for any vocabulary term as a
substring.  A header adds at most one point per type, so the score for a
type is the number of headers that mention it.
"""

import logging
from typing import NamedTuple

from paste_detect.detection.patterns import (
    LEAD_HEADERS,
    MATCH_BASE_CONFIDENCE,
    MAX_CONFIDENCE,
    NO_MATCH_CONFIDENCE,
    ROSTER_HEADERS,
    SCHEDULE_HEADERS,
)
from paste_detect.detection.schema import DetectedDataType

logger = logging.getLogger(__name__)


class HeaderScores(NamedTuple):
    """Number of headers matching each vocabulary."""

    roster: int
    schedule: int
    lead: int

    @property
    def max_score(self) -> int:
        return max(self.roster, self.schedule, self.lead)


def _matches_any(header: str, vocabulary: tuple[str, ...]) -> bool:
    return any(term in header for term in vocabulary)


def score_headers(headers: list[str]) -> HeaderScores:
    """Count, per entity type, how many headers contain a vocabulary term."""
    lowered = [header.lower() for header in headers]
    return HeaderScores(
        roster=sum(1 for header in lowered if _matches_any(header, ROSTER_HEADERS)),
        schedule=sum(1 for header in lowered if _matches_any(header, SCHEDULE_HEADERS)),
        lead=sum(1 for header in lowered if _matches_any(header, LEAD_HEADERS)),
    )


def pick_type(scores: HeaderScores) -> DetectedDataType:
    """Return the best-scoring type; ties go roster, then schedule, then lead."""
    if scores.max_score == 0:
        return DetectedDataType.UNKNOWN
    if scores.roster >= scores.schedule and scores.roster >= scores.lead:
        return DetectedDataType.STUDENT_ROSTER
    if scores.schedule >= scores.lead:
        return DetectedDataType.CLASS_SCHEDULE
    return DetectedDataType.LEAD_LIST


def compute_confidence(max_score: int, header_count: int) -> float:
    """Map a match count onto [0.3, 0.95].

    No match at all gives 0.3.  One or more matches start at 0.5 and grow
    with the share of matching headers, capped at 0.95 so that even a
    perfect match still goes through review.
    """
    if max_score == 0 or header_count == 0:
        return NO_MATCH_CONFIDENCE
    return min(MAX_CONFIDENCE, MATCH_BASE_CONFIDENCE + (max_score / header_count) * 0.5)


def classify_headers(headers: list[str]) -> tuple[DetectedDataType, float]:
    """Classify a header row, returning (type, confidence)."""
    scores = score_headers(headers)
    data_type = pick_type(scores)
    confidence = compute_confidence(scores.max_score, len(headers))
    logger.debug("Header scores %s -> %s (%.2f)", scores, data_type.value, confidence)
    return data_type, confidence
