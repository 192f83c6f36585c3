"""Structured event logging for the passagekit pipeline.

Events go through the ``passagekit.events`` logger with no handler or level of
their own, so whatever configures logging (``--log-level`` in the CLI) decides
whether they are shown.
"""
from __future__ import annotations

import logging
from typing import Any, Dict

import orjson

EVENT_LOGGER = logging.getLogger("passagekit.events")


def log_event(event: str, *, level: int = logging.INFO, **payload: Any) -> None:
    """Emit ``event`` and ``payload`` as one JSON line at ``level``."""

    if not EVENT_LOGGER.isEnabledFor(level):
        return
    data: Dict[str, Any] = {"event": event, **payload}
    EVENT_LOGGER.log(level, orjson.dumps(data).decode("utf-8"))
