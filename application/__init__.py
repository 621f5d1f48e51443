"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure: it owns the
taxonomy context consumed by forms and dropdowns, and the export workflows.
"""

from application.catalog import (
    TaxonomyContext,
    category_names,
    find_unknown_categories,
    log_swallowed_error,
)
from application.serialize import (
    export_taxonomy_table,
    flatten_taxonomy,
    taxonomy_to_dict,
    write_taxonomy_json,
)
from application.summary import log_taxonomy_summary, summarize_taxonomy

__all__ = [
    # Main entry point
    "TaxonomyContext",
    "log_swallowed_error",
    # Catalog helpers
    "category_names",
    "find_unknown_categories",
    # Serialization
    "taxonomy_to_dict",
    "flatten_taxonomy",
    "write_taxonomy_json",
    "export_taxonomy_table",
    # Summaries
    "summarize_taxonomy",
    "log_taxonomy_summary",
]
