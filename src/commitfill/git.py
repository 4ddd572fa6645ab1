from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Iterable, Mapping

from .errors import GitCommandError

LOG = logging.getLogger(__name__)


class GitClient:
    """
    Thin wrapper over the ``git`` executable for one work tree.

    Every call blocks until git exits. A non-zero exit raises
    :class:`GitCommandError`.
    """

    def __init__(self, repo_dir: Path | str = ".", *, git_binary: str = "git") -> None:
        self.repo_dir = Path(repo_dir)
        self.git_binary = git_binary

    def _run(self, *args: str) -> subprocess.CompletedProcess[str]:
        cmd = [self.git_binary, *args]
        LOG.debug("running %s in %s", cmd, self.repo_dir)
        try:
            return subprocess.run(cmd, cwd=self.repo_dir, check=True, capture_output=True, text=True)
        except subprocess.CalledProcessError as e:
            raise GitCommandError(cmd, e.returncode, e.stderr or "") from e
        except FileNotFoundError as e:
            raise GitCommandError(cmd, None, str(e)) from e

    def add(self, paths: Iterable[str]) -> None:
        self._run("add", "--", *paths)

    def commit(self, message: str, options: Mapping[str, str] | None = None) -> None:
        """Commit staged changes; ``{"--date": v}`` becomes ``--date=v``."""
        extra = [f"{k}={v}" for k, v in (options or {}).items()]
        self._run("commit", "-m", message, *extra)

    def push(self, remote: str | None = None, branch: str | None = None) -> None:
        args = ["push"]
        if remote:
            args.append(remote)
            if branch:
                args.append(branch)
        self._run(*args)

    def is_work_tree(self) -> bool:
        try:
            out = self._run("rev-parse", "--is-inside-work-tree").stdout
        except GitCommandError:
            return False
        return out.strip() == "true"
