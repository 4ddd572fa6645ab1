from __future__ import annotations

import os
import random
import shutil
import subprocess
import time
from pathlib import Path
from typing import Any

import pytest


class FakeGit:
    """Records every git call into a shared event list."""

    def __init__(self, events: list[tuple[Any, ...]], repo_dir: Path) -> None:
        self.events = events
        self.repo_dir = repo_dir

    def add(self, paths: list[str]) -> None:
        self.events.append(("add", list(paths)))

    def commit(self, message: str, options: dict[str, str]) -> None:
        self.events.append(("commit", message, dict(options)))

    def push(self, remote: str | None = None, branch: str | None = None) -> None:
        self.events.append(("push", remote, branch))


@pytest.fixture
def events() -> list[tuple[Any, ...]]:
    return []


@pytest.fixture
def writer(events):
    def _write(path: Path, data: dict[str, Any]) -> None:
        events.append(("write", path, dict(data)))

    return _write


@pytest.fixture
def git_factory(events):
    def _factory(repo_dir: Path) -> FakeGit:
        return FakeGit(events, repo_dir)

    return _factory


def _git(cwd: Path, *args: str) -> str:
    return subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True, text=True).stdout


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    if shutil.which("git") is None:
        pytest.skip("git not installed")
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    _git(repo, "config", "user.name", "Tester")
    _git(repo, "config", "user.email", "tester@example.com")
    _git(repo, "config", "commit.gpgsign", "false")
    return repo


class ScriptedRandom(random.Random):
    """Replays fixed randrange values, then falls back to seeded draws."""

    def __init__(self, script: list[int]) -> None:
        super().__init__(0)
        self._script = list(script)

    def randrange(self, *args, **kwargs):  # type: ignore[override]
        if self._script:
            return self._script.pop(0)
        return super().randrange(*args, **kwargs)


@pytest.fixture
def scripted_rng():
    return ScriptedRandom


@pytest.fixture
def new_york_tz():
    """Pin local time to US Eastern (spring-forward 2025-03-09 02:00)."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset not available")
    old = os.environ.get("TZ")
    os.environ["TZ"] = "EST5EDT,M3.2.0,M11.1.0"
    time.tzset()
    yield
    if old is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = old
    time.tzset()
