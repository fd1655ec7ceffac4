"""Logging infrastructure for psn-trophies.

Plain text or JSON output configured through ``dictConfig``, with the
queried user's online id stamped on every record.
"""

from core.logging.filters import ContextFilter, clear_query_context, query_context
from core.logging.logger import JsonFormatter, get_logger, setup_logging

__all__ = [
    "ContextFilter",
    "JsonFormatter",
    "clear_query_context",
    "get_logger",
    "query_context",
    "setup_logging",
]
