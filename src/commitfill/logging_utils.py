from __future__ import annotations

import logging
import os

LOGGER_NAME = "commitfill"


def configure_logging(level: str | None = None) -> int:
    """
    Route ``commitfill.*`` records to stderr at ``level``.

    The level falls back to ``COMMITFILL_LOG_LEVEL``, then INFO. Other
    libraries stay at WARNING so git/typer chatter does not mix with the
    per-commit date lines. Returns the numeric level applied.
    """
    chosen = (level or os.environ.get("COMMITFILL_LOG_LEVEL") or "INFO").upper()
    numeric = getattr(logging, chosen, None)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger(LOGGER_NAME).setLevel(numeric)
    return numeric
