"""
Utility functions for reading and writing JSON data files.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """
    Current UTC time as ISO-8601 with millisecond precision, e.g.
    ``2024-05-01T12:00:00.123Z``.
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def ensure_parent_dir(path: Path) -> None:
    """Create the parent directory of ``path`` if it doesn't exist."""
    path.parent.mkdir(parents=True, exist_ok=True)


def write_json(payload: Any, path: Path) -> None:
    """
    Write ``payload`` to ``path`` as 2-space indented JSON, replacing the
    file in full.

    The payload is serialised before anything touches the disk and the new
    content is swapped in with ``os.replace``, so an existing file is either
    fully replaced or left as it was.
    """
    path = Path(path)
    text = json.dumps(payload, indent=2, ensure_ascii=False)

    ensure_parent_dir(path)
    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        tmp_path.write_text(text, encoding="utf-8")
        os.replace(tmp_path, path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()

    logger.debug("Wrote %d bytes to %s", len(text), path)


def read_json(path: Path) -> Any:
    """
    Load a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the content is not valid JSON
    """
    with Path(path).open("r", encoding="utf-8") as fh:
        return json.load(fh)
