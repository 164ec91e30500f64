from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Dict, List

from .accessors import is_list

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


def to_json_text(value: Any) -> str:
    """Compact JSON text, the form arrays take when stored in a single cell."""
    try:
        return json.dumps(value, ensure_ascii=False, separators=(',', ':'))
    except TypeError:
        return str(value)


def flatten_object(obj: Any, prefix: str = '') -> Row:
    """Flatten nested mappings into one row keyed by dotted paths.

    Lists are not expanded; they are stored as JSON text under their own key.
    """
    result: Row = {}
    items = obj.items() if isinstance(obj, Mapping) else enumerate(obj)
    for key, value in items:
        new_key = f"{prefix}.{key}" if prefix else str(key)

        if isinstance(value, Mapping):
            merged = flatten_object(value, new_key)
        elif is_list(value):
            merged = {new_key: to_json_text(value)}
        else:
            merged = {new_key: value}

        for k, v in merged.items():
            if k in result:
                # Later keys win, e.g. {"a.b": 1, "a": {"b": 2}} -> {"a.b": 2}
                logger.warning("Flattened key '%s' collides with an earlier key; keeping the later value", k)
            result[k] = v
    return result


def flatten(document: Any) -> List[Row]:
    """Generic table conversion for documents without the remittance layout."""
    if is_list(document) and document and isinstance(document[0], Mapping):
        rows: List[Row] = []
        for item in document:
            rows.append(dict(item) if isinstance(item, Mapping) else {'value': item})
        return rows

    if isinstance(document, Mapping) or is_list(document):
        return [flatten_object(document)]

    return [{'value': document}]
