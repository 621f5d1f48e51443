"""Source kind -> TaxonomySource class lookup.

Source modules register themselves on import. A kind's module is named after
``SourceKind.value`` (``http`` -> ``infrastructure/sources/http.py``) and is imported
on first lookup.
"""

import importlib
import logging

from infrastructure.config.models import SourceKind

from .base import TaxonomySource

logger = logging.getLogger(__name__)

_SOURCES: dict[SourceKind, type[TaxonomySource]] = {}


def register_source(kind: SourceKind, source_cls: type[TaxonomySource]) -> None:
    current = _SOURCES.get(kind)
    if current is not None and current is not source_cls:
        raise RuntimeError(f"kind={kind.value} is already served by {current.__name__}")
    _SOURCES[kind] = source_cls
    logger.debug("Registered %s for source=%s", source_cls.__name__, kind.value)


def source_class(kind: SourceKind) -> type[TaxonomySource]:
    """Class serving ``kind``, importing its module on first use."""
    if kind not in _SOURCES:
        importlib.import_module(f"{__package__}.{kind.value}")
    try:
        return _SOURCES[kind]
    except KeyError:
        raise RuntimeError(f"infrastructure/sources/{kind.value}.py did not register a source") from None
