"""Decoding of Firestore REST documents into plain Python values."""

from typing import Any


def decode_value(value: dict[str, Any]) -> Any:
    """
    Decode one Firestore REST typed value.

    Examples:
        >>> decode_value({"stringValue": "Britagem"})
        'Britagem'
        >>> decode_value({"arrayValue": {"values": [{"stringValue": "a"}]}})
        ['a']
        >>> decode_value({"arrayValue": {}})
        []
    """
    if "stringValue" in value:
        return value["stringValue"]
    if "arrayValue" in value:
        return [decode_value(v) for v in (value["arrayValue"] or {}).get("values", [])]
    if "mapValue" in value:
        return decode_fields((value["mapValue"] or {}).get("fields", {}))
    if "integerValue" in value:
        # int64 values are transported as strings
        return int(value["integerValue"])
    if "doubleValue" in value:
        return float(value["doubleValue"])
    if "booleanValue" in value:
        return bool(value["booleanValue"])
    if "nullValue" in value:
        return None
    for key in ("timestampValue", "referenceValue", "bytesValue"):
        if key in value:
            return value[key]
    if "geoPointValue" in value:
        return dict(value["geoPointValue"])
    raise ValueError(f"Unsupported Firestore value: {sorted(value)}")


def decode_fields(fields: dict[str, Any]) -> dict[str, Any]:
    return {key: decode_value(val) for key, val in (fields or {}).items()}


def is_firestore_document(doc: Any) -> bool:
    return isinstance(doc, dict) and isinstance(doc.get("fields"), dict)


def decode_document(doc: dict[str, Any]) -> dict[str, Any]:
    """Decode a REST document (``{"name": ..., "fields": {...}}``) to its data."""
    return decode_fields(doc.get("fields", {}))
