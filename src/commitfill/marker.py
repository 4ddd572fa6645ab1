from __future__ import annotations

import json
from pathlib import Path
from typing import Any

DEFAULT_MARKER_PATH = "data.json"


def write_marker(path: Path | str, data: dict[str, Any]) -> None:
    """Overwrite ``path`` with ``data`` as a single JSON line."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(data, ensure_ascii=False) + "\n", encoding="utf-8")


def read_marker(path: Path | str) -> dict[str, Any]:
    return json.loads(Path(path).read_text(encoding="utf-8"))
