"""Load settings from environment (.env and env vars)."""

from __future__ import annotations

import os
from pathlib import Path

_ROOT_DIR = Path(__file__).resolve().parent.parent.parent

# Load .env from the repository root if present
_env_path = _ROOT_DIR / ".env"
if _env_path.exists():
    from dotenv import load_dotenv
    load_dotenv(_env_path)


def _str(key: str, default: str = "") -> str:
    return (os.environ.get(key) or "").strip() or default


def _int(key: str, default: int) -> int:
    raw = _str(key)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


# Logging
LOG_LEVEL = _str("MD_TO_HTML_LOG_LEVEL", "INFO").upper()

# Conversion limits (0 disables the check)
MAX_INPUT_CHARS = _int("MD_TO_HTML_MAX_INPUT_CHARS", 200_000)

# Data dir for persisted uploads
DATA_DIR = _str("MD_TO_HTML_DATA_DIR", str(_ROOT_DIR / ".data"))
