"""
Observability: logging setup and per-run/per-source log context.
"""

from infrastructure.observability.logging import (
    configure_logging,
    get_log_context,
    make_run_tag,
    set_log_context,
    source_context,
)

__all__ = [
    "configure_logging",
    "set_log_context",
    "get_log_context",
    "source_context",
    "make_run_tag",
]
