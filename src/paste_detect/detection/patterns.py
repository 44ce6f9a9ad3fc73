"""Compiled regex patterns and constant tuples for pasted-data detection.

These constants describe the delimiters a pasted table may use and the
header vocabularies that identify what kind of list it is.  Used by
delimiters.py, parsing.py, classifiers.py, and formatting.py.
"""

import re

# ─── Delimiters ───────────────────────────────────────────────────────────────

# Single-character delimiters in priority order (tab outranks comma even when
# the comma would produce more columns)
DELIMITER_CANDIDATES = ("\t", ",", "|", ";")

# Sentinel returned for fixed-width text (columns separated by 2+ spaces)
FIXED_WIDTH = "  "

# Two or more consecutive whitespace characters
FIXED_WIDTH_RE = re.compile(r"\s{2,}")

# Any single-character delimiter, used by the cheap pre-check
DELIMITER_CHAR_RE = re.compile(r"[\t,|;]")

# Leading/trailing whitespace and byte-order marks, trimmed from the whole paste
TRIM_RE = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")

# Field quoting character; toggles quoted state, never escaped
QUOTE_CHAR = '"'


# ─── Header Vocabularies ──────────────────────────────────────────────────────

# Matched as substrings of the lowercased header ("Student Email" hits "email")
ROSTER_HEADERS = (
    "name",
    "first name",
    "last name",
    "firstname",
    "lastname",
    "student",
    "student name",
    "email",
    "phone",
    "belt",
    "rank",
    "age",
    "dob",
    "date of birth",
    "birthday",
    "guardian",
    "parent",
    "contact",
    "address",
    "program",
    "level",
)

SCHEDULE_HEADERS = (
    "class",
    "time",
    "day",
    "instructor",
    "room",
    "location",
    "start",
    "end",
    "duration",
    "program",
    "level",
    "schedule",
)

LEAD_HEADERS = (
    "lead",
    "prospect",
    "source",
    "status",
    "interest",
    "inquiry",
    "trial",
    "follow up",
    "followup",
)


# ─── Confidence ───────────────────────────────────────────────────────────────

# Confidence reported when no header matched any vocabulary
NO_MATCH_CONFIDENCE = 0.3

# Floor once at least one header matched, and the ceiling left for human review
MATCH_BASE_CONFIDENCE = 0.5
MAX_CONFIDENCE = 0.95


# ─── Summary ──────────────────────────────────────────────────────────────────

# Headers listed in the summary line before it is cut off with "..."
SUMMARY_MAX_HEADERS = 4
