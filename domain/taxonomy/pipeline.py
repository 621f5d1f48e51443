"""Taxonomy pipeline: normalize -> merge -> split -> specialize -> dedupe."""

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from domain.schemas import Category
from domain.taxonomy.dedupe import dedupe_categories
from domain.taxonomy.merger import merge_categories
from domain.taxonomy.normalizer import normalize_categories
from domain.taxonomy.rules import TaxonomyRules
from domain.taxonomy.specializer import specialize_categories
from domain.taxonomy.splitter import split_categories

logger = logging.getLogger(__name__)


def compose_taxonomy(
    base: Sequence[Category],
    additions: Sequence[Category] = (),
    rules: TaxonomyRules | None = None,
) -> list[Category]:
    """Run merge, split, specialize and dedupe over already-normalized trees."""
    rules = rules or TaxonomyRules()
    merged = merge_categories(base, additions)
    split = split_categories(merged, rules.split_table)
    specialized = specialize_categories(split, rules.specializations)
    tree = dedupe_categories(specialized)
    logger.debug("Composed taxonomy: %d categories", len(tree))
    return tree


def build_taxonomy(
    base_records: Iterable[Any] | None,
    addition_records: Iterable[Any] | None = None,
    rules: TaxonomyRules | None = None,
) -> list[Category]:
    """
    Build the canonical taxonomy from raw records.

    Pure and synchronous: every call returns freshly allocated nodes, so results can
    be built concurrently from independent call sites.

    Args:
        base_records: Raw base records (static table or a remote collection)
        addition_records: Raw records merged on top of the base
        rules: Split/specialization rules (defaults to the built-in tables)

    Returns:
        Deduplicated list of categories
    """
    return compose_taxonomy(
        normalize_categories(base_records),
        normalize_categories(addition_records),
        rules,
    )
