"""Persist the extracted tree as formatted JSON."""

import json
from pathlib import Path

from api_extractor.exceptions import OutputError


def write_json(data: dict, path: Path) -> Path:
    """Write ``data`` to ``path``, creating missing directories."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Failed to write {path}: {e}") from e
    return path
