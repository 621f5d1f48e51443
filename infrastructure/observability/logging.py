"""
Logging setup for catalog builds.

Every line carries the short run tag and the taxonomy source it concerns
(``local``, ``http:...``, ``mock``), taken from contextvars so that a refresh
running inside ``source_context(...)`` is labelled without threading the value
through each call.
"""

import contextlib
import contextvars
import hashlib
import logging
from collections.abc import Iterator
from logging.handlers import RotatingFileHandler
from pathlib import Path

UNSET = "-"

cv_run_id_full = contextvars.ContextVar("run_id_full", default=UNSET)
cv_run_tag = contextvars.ContextVar("run_tag", default=UNSET)
cv_source = contextvars.ContextVar("source", default=UNSET)

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] r=%(run)s src=%(source)s | %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s | r=%(run)s src=%(source)s | %(message)s"

# Third-party loggers that are chatty at INFO
QUIET_LOGGERS = ("httpx", "httpcore")


def make_run_tag(run_id_full: str, length: int = 8) -> str:
    """Short, stable tag for a run id (BLAKE2s hex prefix)."""
    digest = hashlib.blake2s(run_id_full.encode("utf-8"), digest_size=8).hexdigest()
    return digest[:length]


class ContextInjectFilter(logging.Filter):
    """Copy the run tag and source from contextvars onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run = cv_run_tag.get() or UNSET
        record.source = cv_source.get() or UNSET
        return True


def set_log_context(*, run_id_full: str | None = None, source: str | None = None) -> None:
    if run_id_full is not None:
        cv_run_id_full.set(str(run_id_full))
        cv_run_tag.set(make_run_tag(str(run_id_full)))
    if source is not None:
        cv_source.set(str(source))


def get_log_context() -> dict[str, str]:
    """Current context as a dict, for JSON artifacts."""
    return {
        "run_tag": cv_run_tag.get(),
        "run_id_full": cv_run_id_full.get(),
        "source": cv_source.get(),
    }


@contextlib.contextmanager
def source_context(source: str) -> Iterator[None]:
    """Label log lines emitted inside the block with ``source``."""
    token = cv_source.set(source)
    try:
        yield
    finally:
        cv_source.reset(token)


def _handler(handler: logging.Handler, level: int, fmt: str, datefmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    handler.addFilter(ContextInjectFilter())
    return handler


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 5_000_000,
    backup_count: int = 3,
) -> None:
    """
    Install console (and optionally rotating file) handlers on the root logger.

    Calling it again replaces the previous handlers.

    Args:
        log_file: Per-run log file; console only when None
        console_level: Minimum level printed to the console
        file_level: Minimum level written to the file
        max_bytes: Rotation threshold for the file handler
        backup_count: Rotated files to keep
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)

    root.addHandler(_handler(logging.StreamHandler(), console_level, CONSOLE_FORMAT, "%H:%M:%S"))

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        root.addHandler(_handler(file_handler, file_level, FILE_FORMAT, "%Y-%m-%d %H:%M:%S"))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        "Logging configured (console=%s, file=%s)",
        logging.getLevelName(console_level),
        log_file,
    )
