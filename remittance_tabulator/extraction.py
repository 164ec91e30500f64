from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from .accessors import get_list, resolve
from .flattening import Row, flatten
from .header_map import ACTIVITIES_KEY, CLAIM_LEVEL_MAP, CLAIMS_PATH, HEADER_MAP
from .paths import FieldPath

logger = logging.getLogger(__name__)


def build_row(
    document: Any,
    header_map: Mapping[str, FieldPath],
    claim_index: int,
    activity_index: Optional[int] = None,
) -> Row:
    return {
        name: resolve(document, path, claim_index, activity_index)
        for name, path in header_map.items()
    }


def extract(document: Any) -> List[Row]:
    """Build one row per claim activity, or one per claim when it has none.

    Documents without a `Remittance.Claim` list are handed to `flatten`.
    """
    claims = get_list(document, *CLAIMS_PATH)
    if claims is None:
        logger.debug("No Remittance.Claim list found; using generic flattening")
        return flatten(document)

    rows: List[Row] = []
    for claim_index, claim in enumerate(claims):
        activities = get_list(claim, ACTIVITIES_KEY)
        if activities:
            for activity_index in range(len(activities)):
                rows.append(build_row(document, HEADER_MAP, claim_index, activity_index))
        else:
            rows.append(build_row(document, CLAIM_LEVEL_MAP, claim_index))

    logger.debug("Extracted %d rows from %d claims", len(rows), len(claims))
    return rows
