"""FastAPI service exposing pasted-data detection to the chat UI.

The paste handler posts the pasted text to /api/looks-like on every paste
and, when that returns true, to /api/detect to get the preview card payload.

Usage:
    python -m paste_detect.web.app
    # => Uvicorn running on http://localhost:8000
"""

import logging

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from paste_detect.config import MAX_INPUT_CHARS, PREVIEW_ROW_LIMIT
from paste_detect.detection.formatting import (
    DISPLAY_CONFIG,
    confidence_level,
    confidence_percent,
    entry_count_text,
    low_confidence_warning,
    preview_rows,
)
from paste_detect.detection.pipeline import detect_structured_data, looks_like_structured_data

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class PasteRequest(BaseModel):
    text: str = ""


class DetectRequest(PasteRequest):
    preview_rows: int = Field(default=PREVIEW_ROW_LIMIT, ge=0)


def _validated_text(body: PasteRequest) -> str:
    """Raise 400/413 for blank or oversized input; return the text otherwise."""
    if not body.text.strip():
        raise HTTPException(status_code=400, detail="Text is required")
    if len(body.text) > MAX_INPUT_CHARS:
        raise HTTPException(status_code=413, detail=f"Text exceeds {MAX_INPUT_CHARS} characters")
    return body.text


# ---------------------------------------------------------------------------
# FastAPI application
# ---------------------------------------------------------------------------

app = FastAPI(title="Paste Detect")


@app.get("/api/health")
async def health():
    return {"ok": True}


@app.post("/api/looks-like")
async def looks_like(body: PasteRequest):
    """Run the cheap pre-check only."""
    text = _validated_text(body)
    return {"looks_like": looks_like_structured_data(text)}


@app.post("/api/detect")
async def detect(body: DetectRequest):
    """Detect structured data and return the result plus preview-card fields."""
    text = _validated_text(body)
    result = detect_structured_data(text)
    if result is None:
        logger.info("No structured data in %d-char paste", len(text))
        return {"detected": False}

    rows, has_more = preview_rows(result, body.preview_rows)
    display = DISPLAY_CONFIG[result.type]
    logger.info("Detected %s with %d rows (confidence %.2f)", result.type.value, len(result.rows), result.confidence)
    return {
        "detected": True,
        "result": result.model_dump(mode="json"),
        "display": {
            "title": display.title,
            "import_label": display.import_label,
            "confidence_percent": confidence_percent(result.confidence),
            "confidence_level": confidence_level(result.confidence),
            "entry_count_text": entry_count_text(len(result.rows)),
            "warning": low_confidence_warning(result.confidence),
        },
        "preview": rows,
        "has_more_rows": has_more,
    }


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------


def main():
    """Start the web server via uvicorn."""
    import uvicorn  # pylint: disable=import-outside-toplevel

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
