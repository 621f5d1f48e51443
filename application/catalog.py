"""Taxonomy context: builds the catalog once and optionally refreshes it from a remote source."""

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from domain.schemas import Category
from domain.taxonomy import (
    LOCAL_ADDITIONS,
    LOCAL_TAXONOMY,
    TaxonomyRules,
    build_taxonomy,
    compose_taxonomy,
    normalize_categories,
    slugify,
)
from infrastructure.config import RunConfig
from infrastructure.observability import source_context
from infrastructure.sources import TaxonomySource, make_source

logger = logging.getLogger(__name__)

ErrorObserver = Callable[[Exception], None]


def log_swallowed_error(exc: Exception) -> None:
    """Default observer: report a suppressed remote failure as a warning."""
    logger.warning("Remote taxonomy unavailable, keeping local tree: %s: %s", type(exc).__name__, exc)


class TaxonomyContext:
    """
    Holds the catalog tree for one consumer lifecycle.

    - The local tree (built-in base + additions) is built lazily on first access and
      cached on the instance.
    - ``refresh()`` fetches the configured source once, rebuilds the tree with the
      remote records as base, and swaps it in whole. Any failure keeps the local
      tree and is reported to ``on_error`` instead of being raised.
    - ``loading`` is True until a configured remote refresh has completed.
    """

    def __init__(
        self,
        *,
        base_records: Iterable[Any] | None = None,
        addition_records: Iterable[Any] | None = None,
        rules: TaxonomyRules | None = None,
        source: TaxonomySource | None = None,
        on_error: ErrorObserver | None = None,
    ) -> None:
        self._base_records = LOCAL_TAXONOMY if base_records is None else base_records
        self._addition_records = LOCAL_ADDITIONS if addition_records is None else addition_records
        self.rules = rules or TaxonomyRules()
        self.source = source
        self.on_error = on_error if on_error is not None else log_swallowed_error

        self._local: list[Category] | None = None
        self._additions: list[Category] | None = None
        self._remote: list[Category] | None = None
        self._refreshed = False

    @classmethod
    def from_cfg(
        cls,
        cfg: RunConfig,
        *,
        use_mock: bool = False,
        mock_records: list[dict[str, Any]] | None = None,
        on_error: ErrorObserver | None = None,
    ) -> "TaxonomyContext":
        return cls(
            addition_records=cfg.additions,
            rules=cfg.rules,
            source=make_source(cfg, use_mock=use_mock, mock_records=mock_records),
            on_error=on_error,
        )

    @property
    def local_tree(self) -> list[Category]:
        if self._local is None:
            self._local = build_taxonomy(self._base_records, self._addition_records, self.rules)
            logger.info("Built local taxonomy: %d categories", len(self._local))
        return self._local

    @property
    def additions(self) -> list[Category]:
        if self._additions is None:
            self._additions = normalize_categories(self._addition_records)
        return self._additions

    @property
    def categories(self) -> list[Category]:
        """Current tree: the remote-based one after a successful refresh, else the local one."""
        return list(self._remote if self._remote is not None else self.local_tree)

    @property
    def loading(self) -> bool:
        return self.source is not None and not self._refreshed

    @property
    def is_remote(self) -> bool:
        return self._remote is not None

    def refresh(self) -> list[Category]:
        """
        One-shot remote refresh. No retry: later calls return the current tree.

        The remote collection replaces the built-in base; additions and rules still
        apply. An empty remote result also falls back to the local tree.
        """
        if self.source is None or self._refreshed:
            return self.categories

        try:
            with source_context(self.source.description):
                records = self.source.fetch_records()
            base = normalize_categories(records)
            if base:
                self._remote = compose_taxonomy(base, self.additions, self.rules)
                logger.info(
                    "Refreshed taxonomy from %s: %d categories",
                    self.source.description,
                    len(self._remote),
                )
            else:
                logger.info("Source %s returned no categories; keeping local tree", self.source.description)
        except Exception as exc:
            self.on_error(exc)
        finally:
            self._refreshed = True

        return self.categories


def category_names(categories: Sequence[Category]) -> list[str]:
    """Display names of the top-level categories, in tree order."""
    return [cat.name for cat in categories]


def find_unknown_categories(names: Iterable[Any], categories: Sequence[Category]) -> list[str]:
    """
    Return the stored category names that no longer exist in the tree.

    Names are compared by identifier, so accent/case variants of a current category
    are not reported. Blank entries are ignored; each unknown name is reported once.
    """
    known = {cat.id for cat in categories}
    unknown: list[str] = []
    seen: set[str] = set()
    for raw in names or []:
        name = str(raw).strip() if raw is not None else ""
        key = slugify(name)
        if not key or key in known or key in seen:
            continue
        seen.add(key)
        unknown.append(name)
    return unknown
