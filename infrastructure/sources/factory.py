"""Build the configured taxonomy source."""

from typing import Any

from infrastructure.config.models import RunConfig

from .base import TaxonomySource
from .mock import MockSource
from .registry import source_class


def make_source(
    cfg: RunConfig,
    *,
    use_mock: bool = False,
    mock_records: list[dict[str, Any]] | None = None,
) -> TaxonomySource | None:
    """
    Return the remote/alternate source selected by ``cfg``.

    ``use_mock`` short-circuits to a MockSource holding ``mock_records``. Returns None
    when the run serves the built-in catalog only.
    """
    if use_mock:
        return MockSource(records=mock_records)
    if not cfg.remote_enabled:
        return None
    return source_class(cfg.source).from_cfg(cfg)
