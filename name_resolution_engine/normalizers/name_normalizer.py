import re
from typing import Optional

from rapidfuzz.distance import Levenshtein


NON_ALNUM_PATTERN = re.compile(r"[^a-z0-9\s]")
WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_name(name: Optional[str]) -> str:
    if not name:
        return ""
    text = name.lower().strip()
    text = text.replace("&", "and")
    text = NON_ALNUM_PATTERN.sub("", text)
    # stripping punctuation can leave an edge space, e.g. "Miami (OH) ."
    text = WHITESPACE_PATTERN.sub(" ", text).strip()
    return text


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance with unit cost insertions, deletions and substitutions."""
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    max_length = max(len(a), len(b))
    if max_length == 0:
        return 1.0
    return 1 - edit_distance(a, b) / max_length
