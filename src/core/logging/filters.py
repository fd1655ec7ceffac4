"""Logging filters for context injection.

Injects the online id of the user being queried so that page fetches can be
correlated. The context is scoped with `query_context`; nothing outlives the
block that set it.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

online_id_var: ContextVar[Optional[str]] = ContextVar("online_id", default=None)


class ContextFilter(logging.Filter):
    """Logging filter that adds the query context to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context variables to the log record.

        Returns:
            Always True (doesn't filter out any records)
        """
        setattr(record, "online_id", online_id_var.get())
        setattr(record, "sdk_name", "psn-trophies")
        return True


def clear_query_context() -> None:
    """Clear all query context variables."""
    online_id_var.set(None)


@contextmanager
def query_context(online_id: Optional[str]) -> Iterator[None]:
    """Set ``online_id`` for the duration of the block, then restore it."""
    token = online_id_var.set(online_id)
    try:
        yield
    finally:
        online_id_var.reset(token)
