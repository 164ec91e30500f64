from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Union


@dataclass(frozen=True)
class Literal:
    """A plain mapping key."""

    key: str


@dataclass(frozen=True)
class Placeholder:
    """A positional slot filled with a claim or activity index at traversal time."""

    name: str


CLAIM_INDEX = Placeholder('claim')
ACTIVITY_INDEX = Placeholder('activity')

PLACEHOLDERS = {
    '{claim}': CLAIM_INDEX,
    '{activity}': ACTIVITY_INDEX,
}

Segment = Union[Literal, Placeholder]
FieldPath = Tuple[Segment, ...]


def parse_field_path(path: str) -> FieldPath:
    """Parse 'Remittance.Claim.{claim}.ID' into tagged segments."""
    segments: List[Segment] = []
    for raw in path.split('.'):
        if not raw:
            raise ValueError(f"Empty segment in field path '{path}'")
        placeholder = PLACEHOLDERS.get(raw)
        if placeholder is None:
            segments.append(Literal(raw))
        elif placeholder in segments:
            raise ValueError(f"Placeholder {raw} used twice in path '{path}'")
        else:
            segments.append(placeholder)
    return tuple(segments)


def is_activity_level(path: FieldPath) -> bool:
    return ACTIVITY_INDEX in path
