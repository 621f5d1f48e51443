"""Base interface for taxonomy record sources."""

import logging
from abc import ABC, abstractmethod
from typing import Any

from infrastructure.config.models import RunConfig, SourceKind

logger = logging.getLogger(__name__)


class TaxonomySource(ABC):
    """
    Abstract base class for sources of raw taxonomy records.
    Common interface for remote/alternate bases (HTTP collection, file, etc.).

    All concrete sources must implement:
    - fetch_records(): return the raw records (one per category document)

    Sources raise on failure; deciding whether to degrade is the caller's job.
    """

    kind: SourceKind

    @classmethod
    def from_cfg(cls, cfg: RunConfig) -> "TaxonomySource":
        raise NotImplementedError(f"{cls.__name__} cannot be built from RunConfig")

    @property
    def description(self) -> str:
        return self.kind.value

    @abstractmethod
    def fetch_records(self) -> list[dict[str, Any]]:
        """
        Fetch raw category records.

        Returns:
            List of raw records, structurally equivalent to the static table rows

        Raises:
            Exception: Any transport or parsing error
        """

        raise NotImplementedError


def ensure_record_list(data: Any, origin: str) -> list[dict[str, Any]]:
    """Validate that a decoded payload is a list of mappings."""
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of records from {origin}, got {type(data).__name__}")
    bad = [i for i, rec in enumerate(data) if not isinstance(rec, dict)]
    if bad:
        raise ValueError(f"Non-mapping records at positions {bad[:10]} from {origin}")
    return data
