"""Stable identifiers for taxonomy nodes."""

import re
import unicodedata

_NON_TOKEN = re.compile(r"[^A-Za-z0-9_\s-]")
_WHITESPACE = re.compile(r"\s+")


def slugify(name: object) -> str:
    """
    Derive the identifier of a taxonomy node from its display name.

    The identifier is a pure function of the name: accents and case never produce
    distinct ids, so it doubles as the merge/dedupe key.

    Examples:
        >>> slugify("Britador Cônico")
        'britador-conico'
        >>> slugify("  Peças   de reposição ")
        'pecas-de-reposicao'
        >>> slugify("Linha Amarela / Fora de Estrada")
        'linha-amarela-fora-de-estrada'
        >>> slugify("   ")
        ''

    Args:
        name: Display name (None and non-strings are tolerated)

    Returns:
        Lower-case hyphenated ASCII token, or empty string
    """
    if name is None:
        return ""
    decomposed = unicodedata.normalize("NFD", str(name))
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    s = _NON_TOKEN.sub("", stripped).strip()
    return _WHITESPACE.sub("-", s).lower()
