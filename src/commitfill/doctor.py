from __future__ import annotations

import shutil
from typing import Any, Dict

from .config import Settings
from .git import GitClient
from .marker import read_marker


def check_binary(name: str) -> Dict[str, Any]:
    path = shutil.which(name)
    return {
        "ok": path is not None,
        "path": path,
        "details": f"Found at {path}" if path else "Not found in PATH",
    }


def check_work_tree(settings: Settings) -> Dict[str, Any]:
    if not settings.repo_dir.is_dir():
        return {"ok": False, "details": f"{settings.repo_dir} is not a directory"}
    ok = GitClient(settings.repo_dir, git_binary=settings.git_binary).is_work_tree()
    return {
        "ok": ok,
        "details": f"{settings.repo_dir} is a git work tree" if ok else f"{settings.repo_dir} is not inside a git work tree",
    }


def check_marker(settings: Settings) -> Dict[str, Any]:
    path = settings.repo_dir / settings.marker_path
    if not path.exists():
        return {"ok": True, "path": str(path), "details": "No marker written yet"}
    try:
        data = read_marker(path)
    except (OSError, ValueError) as e:
        return {"ok": False, "path": str(path), "details": f"Unreadable marker: {e}"}
    last = data.get("date") if isinstance(data, dict) else None
    return {"ok": True, "path": str(path), "last_date": last, "details": f"Last committed date {last}"}


def run_doctor(settings: Settings) -> Dict[str, Any]:
    checks = []

    res = check_binary(settings.git_binary)
    res["name"] = f"binary:{settings.git_binary}"
    checks.append(res)

    if res["ok"]:
        res_tree = check_work_tree(settings)
    else:
        res_tree = {"ok": False, "details": "skipped, git not available"}
    res_tree["name"] = "repo:work-tree"
    checks.append(res_tree)

    res_marker = check_marker(settings)
    res_marker["name"] = "repo:marker"
    checks.append(res_marker)

    return {
        "ok": all(c["ok"] for c in checks),
        "checks": checks,
    }
