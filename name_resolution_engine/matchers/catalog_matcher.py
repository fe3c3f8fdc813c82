from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import reduce
from typing import (
    Any,
    Callable,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from name_resolution_engine.normalizers.name_normalizer import (
    normalize_name,
    similarity,
)

logger = logging.getLogger(__name__)

EXACT_CANONICAL = "exact-canonical"
EXACT_ALIAS = "exact-alias"
SUBSTRING_CANONICAL = "substring-canonical"
SUBSTRING_ALIAS = "substring-alias"
WORD_OVERLAP_CANONICAL = "word-overlap-canonical"
WORD_OVERLAP_ALIAS = "word-overlap-alias"
FUZZY = "fuzzy"

MIN_SUBSTRING_QUERY_LENGTH = 3
SUBSTRING_LENGTH_MARGIN = 2
MIN_WORD_OVERLAP = 2
FUZZY_MATCH_THRESHOLD = 0.8


@dataclass(frozen=True, eq=False)
class CatalogEntry:
    """A canonical entity. Equality is identity: two entries built from the
    same fields are still different entities."""

    canonical_name: str
    alternate_names: Tuple[str, ...] = ()
    payload: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "alternate_names", tuple(self.alternate_names))


@dataclass(frozen=True)
class CatalogMatch:
    entry: CatalogEntry
    matched_alias: str
    strategy: str
    score: Optional[float] = None

    @property
    def canonical_name(self) -> str:
        return self.entry.canonical_name


@dataclass(frozen=True)
class IndexedName:
    display: str
    normalized: str
    tokens: frozenset


@dataclass(frozen=True)
class IndexedEntry:
    entry: CatalogEntry
    canonical: IndexedName
    alternates: Tuple[IndexedName, ...]


class CatalogIndex:
    """Catalog with every name variant normalized once, in source order."""

    def __init__(self, entries: Iterable[IndexedEntry]) -> None:
        self.entries: Tuple[IndexedEntry, ...] = tuple(entries)

    def __iter__(self) -> Iterator[IndexedEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


def _index_name(name: Optional[str]) -> IndexedName:
    normalized = normalize_name(name)
    return IndexedName(
        display=name or "",
        normalized=normalized,
        tokens=frozenset(normalized.split()),
    )


def build_catalog_index(catalog: Iterable[CatalogEntry]) -> CatalogIndex:
    return CatalogIndex(
        IndexedEntry(
            entry=entry,
            canonical=_index_name(entry.canonical_name),
            alternates=tuple(_index_name(alt) for alt in entry.alternate_names),
        )
        for entry in catalog
    )


NamePredicate = Callable[[IndexedName], bool]


def _first_canonical(
    index: CatalogIndex, strategy: str, predicate: NamePredicate
) -> Optional[CatalogMatch]:
    for item in index:
        if predicate(item.canonical):
            return CatalogMatch(item.entry, item.canonical.display, strategy)
    return None


def _first_alternate(
    index: CatalogIndex, strategy: str, predicate: NamePredicate
) -> Optional[CatalogMatch]:
    for item in index:
        for alt in item.alternates:
            if predicate(alt):
                return CatalogMatch(item.entry, alt.display, strategy)
    return None


def _equals(query: IndexedName) -> NamePredicate:
    return lambda name: name.normalized == query.normalized


def _contains(query: IndexedName) -> NamePredicate:
    # only the catalog name may contain the query, never the reverse
    query_length = len(query.normalized)

    def predicate(name: IndexedName) -> bool:
        return (
            query_length >= MIN_SUBSTRING_QUERY_LENGTH
            and len(name.normalized) > query_length + SUBSTRING_LENGTH_MARGIN
            and query.normalized in name.normalized
        )

    return predicate


def _shares_words(query: IndexedName) -> NamePredicate:
    query_tokens = query.normalized.split()

    def predicate(name: IndexedName) -> bool:
        overlap = sum(1 for token in query_tokens if token in name.tokens)
        return overlap >= MIN_WORD_OVERLAP

    return predicate


def _exact_canonical(query: IndexedName, index: CatalogIndex) -> Optional[CatalogMatch]:
    return _first_canonical(index, EXACT_CANONICAL, _equals(query))


def _exact_alias(query: IndexedName, index: CatalogIndex) -> Optional[CatalogMatch]:
    return _first_alternate(index, EXACT_ALIAS, _equals(query))


def _substring_canonical(
    query: IndexedName, index: CatalogIndex
) -> Optional[CatalogMatch]:
    return _first_canonical(index, SUBSTRING_CANONICAL, _contains(query))


def _substring_alias(query: IndexedName, index: CatalogIndex) -> Optional[CatalogMatch]:
    return _first_alternate(index, SUBSTRING_ALIAS, _contains(query))


def _word_overlap_canonical(
    query: IndexedName, index: CatalogIndex
) -> Optional[CatalogMatch]:
    return _first_canonical(index, WORD_OVERLAP_CANONICAL, _shares_words(query))


def _word_overlap_alias(
    query: IndexedName, index: CatalogIndex
) -> Optional[CatalogMatch]:
    return _first_alternate(index, WORD_OVERLAP_ALIAS, _shares_words(query))


def _fuzzy_candidates(index: CatalogIndex) -> Iterator[Tuple[CatalogEntry, IndexedName]]:
    # canonical pass first, then the alias pass; both feed the same running best
    for item in index:
        yield item.entry, item.canonical
    for item in index:
        for alt in item.alternates:
            yield item.entry, alt


def _fuzzy(query: IndexedName, index: CatalogIndex) -> Optional[CatalogMatch]:
    def keep_better(
        best: Optional[CatalogMatch], candidate: Tuple[CatalogEntry, IndexedName]
    ) -> Optional[CatalogMatch]:
        entry, name = candidate
        score = similarity(query.normalized, name.normalized)
        best_score = best.score if best is not None else 0.0
        if score > best_score and score >= FUZZY_MATCH_THRESHOLD:
            return CatalogMatch(entry, name.display, FUZZY, score)
        return best

    return reduce(keep_better, _fuzzy_candidates(index), None)


Strategy = Callable[[IndexedName, CatalogIndex], Optional[CatalogMatch]]

CASCADE: Tuple[Strategy, ...] = (
    _exact_canonical,
    _exact_alias,
    _substring_canonical,
    _substring_alias,
    _word_overlap_canonical,
    _word_overlap_alias,
    _fuzzy,
)


def resolve(
    query: Optional[str], catalog: Union[CatalogIndex, Sequence[CatalogEntry]]
) -> Optional[CatalogMatch]:
    index = catalog if isinstance(catalog, CatalogIndex) else build_catalog_index(catalog)
    indexed_query = _index_name(query)
    for stage in CASCADE:
        match = stage(indexed_query, index)
        if match is not None:
            logger.debug(
                "Resolved query=%r to %r via %s score=%s",
                indexed_query.display,
                match.canonical_name,
                match.strategy,
                match.score,
            )
            return match
    logger.debug("No catalog match for query=%r", indexed_query.display)
    return None


class CatalogMatcher:
    """Holds a prebuilt index so batch callers normalize the catalog once."""

    def __init__(self, catalog: Iterable[CatalogEntry]) -> None:
        self.index = build_catalog_index(catalog)

    def __len__(self) -> int:
        return len(self.index)

    def resolve(self, query: Optional[str]) -> Optional[CatalogMatch]:
        return resolve(query, self.index)

    def resolve_many(
        self, queries: Iterable[str]
    ) -> List[Tuple[str, Optional[CatalogMatch]]]:
        return [(query, self.resolve(query)) for query in queries]
