from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from .marker import DEFAULT_MARKER_PATH


@dataclass(frozen=True)
class Settings:
    repo_dir: Path
    marker_path: str
    git_binary: str
    remote: str | None
    branch: str | None


def load_settings() -> Settings:
    repo_dir = Path(os.getenv("COMMITFILL_REPO_DIR", ".")).resolve()
    marker_path = os.getenv("COMMITFILL_MARKER_PATH", DEFAULT_MARKER_PATH)
    git_binary = os.getenv("COMMITFILL_GIT", "git")

    remote = os.getenv("COMMITFILL_REMOTE") or None
    branch = os.getenv("COMMITFILL_BRANCH") or None

    return Settings(
        repo_dir=repo_dir,
        marker_path=marker_path,
        git_binary=git_binary,
        remote=remote,
        branch=branch,
    )
