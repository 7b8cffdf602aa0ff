"""Upload store: keeps Markdown uploads in memory and on disk."""

from __future__ import annotations

import json
import logging
import uuid
from pathlib import Path
from typing import Any

from .. import config

logger = logging.getLogger(__name__)

# - in-memory for fast path
# - persisted on disk so `render` still works after server reload/restart
_upload_store: dict[str, dict[str, Any]] = {}

PREVIEW_CHARS = 5000


def _upload_dir() -> Path:
    return Path(config.DATA_DIR) / "uploads"


def _persist_upload(file_id: str, record: dict[str, Any]) -> None:
    upload_dir = _upload_dir()
    upload_dir.mkdir(parents=True, exist_ok=True)
    path = upload_dir / f"{file_id}.json"
    path.write_text(json.dumps(record, ensure_ascii=False), encoding="utf-8")


def _load_upload_from_disk(file_id: str) -> dict[str, Any] | None:
    # ids are uuid4 hex; anything else cannot name a stored file
    if not file_id.isalnum():
        return None
    path = _upload_dir() / f"{file_id}.json"
    if not path.exists():
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        logger.warning("Unreadable upload record %s", path, exc_info=True)
        return None


def save_upload(content: str | bytes, filename: str = "README.md") -> dict[str, Any]:
    """Store uploaded content and return file_id and preview_markdown."""
    file_id = uuid.uuid4().hex
    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Upload %s is not valid UTF-8; undecodable bytes replaced", filename)
            content = content.decode("utf-8", errors="replace")
    preview = content[:PREVIEW_CHARS] + ("..." if len(content) > PREVIEW_CHARS else "")
    record = {
        "content": content,
        "filename": filename,
        "preview_markdown": preview,
    }
    _upload_store[file_id] = record
    _persist_upload(file_id, record)
    logger.info("Stored upload %s (%s, %d chars)", file_id, filename, len(content))
    return {"file_id": file_id, "preview_markdown": preview}


def get_upload(file_id: str) -> dict[str, Any] | None:
    """Retrieve stored upload by file_id."""
    rec = _upload_store.get(file_id)
    if rec is not None:
        return rec
    rec = _load_upload_from_disk(file_id)
    if rec is not None:
        _upload_store[file_id] = rec
    return rec
