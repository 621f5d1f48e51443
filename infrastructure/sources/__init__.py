"""
Taxonomy record sources.

Implements the adapter pattern for alternate taxonomy bases:
- HTTP (plain JSON collection or Firestore REST)
- File (YAML/JSON)
- Mock (for testing)

All sources implement the TaxonomySource interface.
"""

from infrastructure.sources.base import TaxonomySource
from infrastructure.sources.factory import make_source
from infrastructure.sources.file import FileSource
from infrastructure.sources.http import HttpSource
from infrastructure.sources.mock import MockSource

__all__ = [
    # Abstract base
    "TaxonomySource",
    # Concrete implementations
    "HttpSource",
    "FileSource",
    "MockSource",
    # Factory (most commonly used)
    "make_source",
]
