from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Optional

from .paths import CLAIM_INDEX, FieldPath, Placeholder


def is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def get_child(container: Any, key: Any) -> Any:
    """Index one level into a mapping or list; None when the step is impossible."""
    if isinstance(container, Mapping):
        if isinstance(key, str) and key in container:
            return container[key]
        return None
    if is_list(container) and isinstance(key, int) and not isinstance(key, bool):
        if 0 <= key < len(container):
            return container[key]
    return None


def resolve(
    document: Any,
    path: FieldPath,
    claim_index: Optional[int] = None,
    activity_index: Optional[int] = None,
) -> Any:
    """Walk `document` along `path`, substituting the claim/activity indices.

    Missing keys, out-of-range positions and scalar intermediates all yield
    None. A placeholder without an index to substitute yields None too.
    """
    val = document
    for segment in path:
        if isinstance(segment, Placeholder):
            key = claim_index if segment == CLAIM_INDEX else activity_index
            if key is None:
                return None
        else:
            key = segment.key

        if isinstance(val, Mapping):
            if key not in val:
                return None
            val = val[key]
        elif is_list(val):
            val = get_child(val, key)
            if val is None:
                return None
        else:
            return None
    return val


def get_list(document: Any, *keys: str) -> Optional[Sequence[Any]]:
    """Follow literal `keys` and return the value only if it is a list."""
    val = document
    for key in keys:
        val = get_child(val, key)
        if val is None:
            return None
    return val if is_list(val) else None
