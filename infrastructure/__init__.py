"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Taxonomy sources (HTTP collection, file, mock)
- Configuration loading (YAML, environment)
- Tabular import/export (CSV, Excel)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import (
    RunConfig,
    SourceKind,
    load_run_config,
)
from infrastructure.sources import TaxonomySource, make_source

__all__ = [
    # Sources (most commonly used)
    "make_source",
    "TaxonomySource",
    # Configuration (most commonly used)
    "load_run_config",
    "RunConfig",
    "SourceKind",
]
