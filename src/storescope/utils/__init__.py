"""Shared utilities."""

from .log import (
    log_done,
    log_section,
    log_start,
    log_store,
    log_summary,
    log_warn,
)

__all__ = [
    "log_done",
    "log_section",
    "log_start",
    "log_store",
    "log_summary",
    "log_warn",
]
