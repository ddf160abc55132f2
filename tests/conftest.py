"""Pytest configuration.

The application code lives in the top-level `peak/` package. Depending on
how pytest is invoked and the active import mode, the repository root may
not be on `sys.path`, which breaks imports like `from peak.modules...`.

This file makes test imports robust by explicitly adding the repo root to
`sys.path` during test collection.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]

# NOTE: Insert at the front so local imports win over any similarly named
# third-party packages.
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


PEAK_ENV_VARS = (
    "PEAK_ENCODING",
    "PEAK_MAX_MESSAGE_BYTES",
    "PEAK_COLOR",
    "PEAK_DEFAULT_PANES",
    "LOG_LEVEL",
    "LOG_FILE",
    "LOG_FORMAT",
    "NO_COLOR",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every PEAK/LOG setting so tests start from the defaults.

    load_dotenv writes into os.environ; setting each key first makes
    monkeypatch remove whatever an env file added once the test ends.
    """
    for key in PEAK_ENV_VARS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch


@pytest.fixture
def sample_eml(tmp_path):
    """A small, well-formed phishing-style sample on disk."""
    path = tmp_path / "invoice.eml"
    path.write_bytes(
        b"Received: from mx1.example.net\r\n"
        b"From: \"PayPal Support\" <support@paypa1.example>\r\n"
        b"To: victim@example.com\r\n"
        b"Subject: Your account is\r\n"
        b" suspended\r\n"
        b"\r\n"
        b"Click here to verify.\r\n"
    )
    return path
