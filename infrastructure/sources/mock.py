"""Mock source for testing."""

import copy
import logging
from typing import Any

from infrastructure.config.models import SourceKind

from .base import TaxonomySource

logger = logging.getLogger(__name__)


class MockSource(TaxonomySource):
    """In-memory source: returns fixture records, or raises a configured error."""

    kind = SourceKind.LOCAL

    def __init__(
        self,
        *,
        records: list[dict[str, Any]] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.records = records or []
        self.error = error
        self.calls = 0
        logger.info("Initialized Mock source (no real fetch will be made)")

    @property
    def description(self) -> str:
        return "mock"

    def fetch_records(self) -> list[dict[str, Any]]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        logger.debug("Mock source returned %d records", len(self.records))
        return copy.deepcopy(self.records)
