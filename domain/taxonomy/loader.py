"""Parse taxonomy rule overrides from a YAML dict."""

from typing import Any

from domain.taxonomy.rules import (
    BELT_KEYWORD,
    SPLIT_TABLE,
    SpecializationRule,
    TaxonomyRules,
    default_specializations,
)
from domain.taxonomy.slug import slugify


def parse_taxonomy_rules(data: dict[str, Any]) -> TaxonomyRules:
    """
    Parse pre-loaded YAML dict into TaxonomyRules.

    This is a pure function - it does NOT perform file I/O.
    The YAML loading happens in infrastructure.config.loader.

    Recognized keys (all optional, defaults are the built-in tables):
      - split_table: mapping of source category (id or display name) -> list of target names
      - belt_keyword: keyword used by the default specializations
      - specializations: list of rule mappings (replaces the defaults)

    Args:
        data: Dictionary from yaml.safe_load()

    Returns:
        TaxonomyRules

    Raises:
        ValueError: If a key has the wrong type or a blank name
    """
    split_raw = data.get("split_table")
    keyword = data.get("belt_keyword") or BELT_KEYWORD
    specs_raw = data.get("specializations")

    if split_raw is None:
        split_table = dict(SPLIT_TABLE)
    elif isinstance(split_raw, dict):
        split_table = {}
        for source, targets in split_raw.items():
            if not isinstance(targets, list) or not all(isinstance(t, str) for t in targets):
                raise ValueError(f"split_table[{source!r}] must be a list of names")
            # keys may be written as display names; matching is by id
            source_id = slugify(source)
            if not source_id:
                raise ValueError(f"split_table key {source!r} has no usable identifier")
            if not targets:
                raise ValueError(f"split_table[{source!r}] must list at least one target")
            blank = [t for t in targets if not slugify(t)]
            if blank:
                raise ValueError(f"split_table[{source!r}] has blank target names: {blank}")
            split_table[source_id] = tuple(t.strip() for t in targets)
    else:
        raise ValueError("split_table must be a mapping")

    if not isinstance(keyword, str):
        raise ValueError("belt_keyword must be a string")

    if specs_raw is None:
        specializations = default_specializations(keyword)
    elif isinstance(specs_raw, list):
        if not all(isinstance(spec, dict) for spec in specs_raw):
            raise ValueError("specializations must be a list of mappings")
        specializations = [SpecializationRule(**{"keyword": keyword, **spec}) for spec in specs_raw]
    else:
        raise ValueError("specializations must be a list")

    return TaxonomyRules(split_table=split_table, specializations=specializations)
