"""
Configuration management: models, loading, and validation.

Handles:
- RunConfig: source selection, rules and output settings
- Source configs: HTTP collection, local file
- Taxonomy rule overrides from YAML

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_run_config, load_taxonomy_rules
from infrastructure.config.models import (
    ExportFormat,
    FileSourceConfig,
    HttpSourceConfig,
    RunConfig,
    SourceKind,
)

__all__ = [
    # Main config (most commonly used)
    "RunConfig",
    "load_run_config",
    # Enums
    "SourceKind",
    "ExportFormat",
    # Source configs
    "HttpSourceConfig",
    "FileSourceConfig",
    # Loaders
    "load_taxonomy_rules",
]
