"""Shared configuration for previews and the detection service.

Values are read from the environment (and the project ``.env`` file) once at
import time.  The detection core itself is not configurable.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

# Rows shown in a preview card or markdown preview before "... and N more"
PREVIEW_ROW_LIMIT = int(os.getenv("PASTE_DETECT_PREVIEW_ROWS", "5"))

# Columns shown in a preview before the rest collapse into a "+N more" column
PREVIEW_COLUMN_LIMIT = int(os.getenv("PASTE_DETECT_PREVIEW_COLUMNS", "5"))

# Confidence at or above which a detection is badged as "high" rather than "review"
HIGH_CONFIDENCE_THRESHOLD = float(os.getenv("PASTE_DETECT_HIGH_CONFIDENCE", "0.7"))

# Largest text the HTTP service accepts in one request
MAX_INPUT_CHARS = int(os.getenv("PASTE_DETECT_MAX_INPUT_CHARS", "200000"))
