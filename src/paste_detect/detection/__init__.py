"""Pasted-table detection, classification, and preview formatting.

Submodules:
  patterns     -- delimiter candidates, regexes, and header vocabularies
  schema       -- DetectedDataType enum and DetectedStructuredData Pydantic model
  delimiters   -- first-line delimiter detection
  parsing      -- quote-aware row splitting
  classifiers  -- header scoring, type selection, and confidence
  formatting   -- summary line, display labels, and markdown previews
  pipeline     -- detect_structured_data / looks_like_structured_data and the CLI
"""
