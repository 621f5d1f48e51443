"""
Taxonomy engine: normalization, merging, splitting, specialization and dedupe.

All functions in this module are pure (no file I/O).
"""

from domain.taxonomy.catalog import LOCAL_ADDITIONS, LOCAL_TAXONOMY
from domain.taxonomy.dedupe import dedupe_categories
from domain.taxonomy.loader import parse_taxonomy_rules
from domain.taxonomy.merger import merge_categories
from domain.taxonomy.normalizer import normalize_categories
from domain.taxonomy.pipeline import build_taxonomy, compose_taxonomy
from domain.taxonomy.rules import (
    BELT_KEYWORD,
    SPECIALIZATION_RULES,
    SPLIT_TABLE,
    SpecializationRule,
    SubcategoryRoute,
    TaxonomyRules,
)
from domain.taxonomy.slug import slugify
from domain.taxonomy.specializer import specialize_categories
from domain.taxonomy.splitter import split_categories

__all__ = [
    # Pipeline (most commonly used)
    "build_taxonomy",
    "compose_taxonomy",
    # Stages
    "slugify",
    "normalize_categories",
    "merge_categories",
    "split_categories",
    "specialize_categories",
    "dedupe_categories",
    # Rules
    "TaxonomyRules",
    "SpecializationRule",
    "SubcategoryRoute",
    "SPLIT_TABLE",
    "BELT_KEYWORD",
    "SPECIALIZATION_RULES",
    "parse_taxonomy_rules",
    # Static tables
    "LOCAL_TAXONOMY",
    "LOCAL_ADDITIONS",
]
