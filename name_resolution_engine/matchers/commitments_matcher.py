import logging
from typing import Any, Dict, Iterable, List, Sequence, Union

from name_resolution_engine.matchers.catalog_matcher import (
    CatalogEntry,
    CatalogMatcher,
)

logger = logging.getLogger(__name__)


def extract_commitments(players: Iterable[Dict[str, Any]]) -> List[str]:
    """Distinct non-blank commitment values in first-seen order."""
    seen: Dict[str, None] = {}
    for player in players:
        commitment = player.get("commitment")
        if isinstance(commitment, str) and commitment.strip():
            seen.setdefault(commitment, None)
    return list(seen)


def match_commitments(
    commitments: Sequence[str],
    catalog: Union[CatalogMatcher, Sequence[CatalogEntry]],
) -> Dict[str, Any]:
    matcher = catalog if isinstance(catalog, CatalogMatcher) else CatalogMatcher(catalog)
    matched: List[Dict[str, Any]] = []
    unmatched: List[Dict[str, Any]] = []
    for commitment, match in matcher.resolve_many(commitments):
        if match is None:
            unmatched.append({"commitment": commitment})
            logger.info("No match: %s", commitment)
            continue
        matched.append(
            {
                "commitment": commitment,
                "logo_url": match.entry.payload,
                "matched_name": match.canonical_name,
                "matched_alias": match.matched_alias,
                "strategy": match.strategy,
                "score": match.score,
            }
        )
        logger.info(
            "Matched: %s -> %s (%s)", commitment, match.canonical_name, match.strategy
        )
    logger.info(
        "Matching complete: %s commitments matched, %s without matches",
        len(matched),
        len(unmatched),
    )
    return {
        "matched_commitments": matched,
        "unmatched_commitments": unmatched,
        "summary": {
            "total": len(commitments),
            "matched": len(matched),
            "unmatched": len(unmatched),
        },
    }
