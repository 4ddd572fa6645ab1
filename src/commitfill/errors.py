from __future__ import annotations


class CommitfillError(Exception):
    """Base class for every error raised by commitfill."""


class MissingArgument(CommitfillError, ValueError):
    pass


class InvalidDateFormat(CommitfillError, ValueError):
    def __init__(self, value: object, *, what: str = "date") -> None:
        self.value = value
        super().__init__(f"Invalid {what} format: {value}. Expected YYYY-MM-DD format")


class RangeOrderError(CommitfillError, ValueError):
    pass


class InvalidCommitCount(CommitfillError, ValueError):
    pass


class InvalidArgumentType(CommitfillError, TypeError):
    pass


class InvalidCallback(CommitfillError, TypeError):
    pass


class GitCommandError(CommitfillError):
    """A git invocation exited non-zero or could not be started."""

    def __init__(self, cmd: list[str], returncode: int | None, stderr: str = "") -> None:
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip()[:2000]
        msg = f"git failed (exit={returncode}): {' '.join(cmd)}"
        if detail:
            msg += f"\n{detail}"
        super().__init__(msg)
