"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env from project root so config overrides apply to tests too
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture
def roster_csv() -> str:
    """A two-student roster pasted from a spreadsheet export."""
    return "First Name,Last Name,Email,Belt\nJohn,Doe,john@x.com,White\nJane,Smith,jane@x.com,Blue"
