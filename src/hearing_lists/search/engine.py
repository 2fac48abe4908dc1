"""Filtering, sorting and pagination over transformed case records.

All functions take the case list as an argument and return new lists; the
postcode meta-groups are passed in explicitly (``POSTCODE_META_GROUPS`` is the
default table built at import time).
"""
from __future__ import annotations
import logging
import unicodedata
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Generic, Iterable, List, Mapping, Optional, Sequence, TypeVar, Union

from hearing_lists.ingest.schemas import PressCase, PublicCase

logger = logging.getLogger(__name__)

LONDON_POSTCODES_TOKEN = 'LONDON_POSTCODES'
LONDON_POSTCODE_AREAS: FrozenSet[str] = frozenset({'E', 'EC', 'N', 'NW', 'SE', 'SW', 'W', 'WC'})

POSTCODE_META_GROUPS: Mapping[str, FrozenSet[str]] = MappingProxyType({
    LONDON_POSTCODES_TOKEN: LONDON_POSTCODE_AREAS,
})

CaseT = TypeVar('CaseT', PressCase, PublicCase)


@dataclass(frozen=True)
class SearchFilters:
    search_query: Optional[str] = None
    postcodes: FrozenSet[str] = field(default_factory=frozenset)
    prosecutors: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def build(cls, search_query: Optional[str] = None, postcodes: Optional[Iterable[str]] = None,
              prosecutors: Optional[Iterable[str]] = None) -> 'SearchFilters':
        """Drop blank selections so an empty form field never filters anything out."""
        query = search_query.strip() if search_query and search_query.strip() else None
        return cls(
            search_query=query,
            postcodes=frozenset(p.strip() for p in (postcodes or []) if p and p.strip()),
            prosecutors=frozenset(p.strip() for p in (prosecutors or []) if p and p.strip()),
        )


@dataclass(frozen=True)
class CasePage(Generic[CaseT]):
    cases: List[CaseT]
    total_cases: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return max(1, -(-self.total_cases // self.page_size))


def in_meta_group(postcode: str, areas: Iterable[str]) -> bool:
    """True when the postcode starts with any prefix in the group ("EX4" is in the "E" group)."""
    upper = postcode.strip().upper()
    return any(upper.startswith(p) for p in areas)


def matches_postcode(postcode: Optional[str], selections: Iterable[str],
                     meta_groups: Mapping[str, FrozenSet[str]] = POSTCODE_META_GROUPS) -> bool:
    if not postcode:
        return False
    for selected in selections:
        if selected in meta_groups:
            if in_meta_group(postcode, meta_groups[selected]):
                return True
        elif postcode.lower().startswith(selected.lower()):
            return True
    return False


def matches_query(case: Union[PressCase, PublicCase], query: str) -> bool:
    needle = query.lower()
    if needle in case.name.lower():
        return True
    reference = getattr(case, 'reference', None)
    return bool(reference) and needle in reference.lower()


def apply_filters(cases: Sequence[CaseT], filters: SearchFilters,
                  meta_groups: Mapping[str, FrozenSet[str]] = POSTCODE_META_GROUPS) -> List[CaseT]:
    """AND-combine the active filters; an empty filter is a no-op."""
    filtered = list(cases)
    if filters.search_query:
        filtered = [c for c in filtered if matches_query(c, filters.search_query)]
    if filters.postcodes:
        filtered = [c for c in filtered if matches_postcode(c.postcode, filters.postcodes, meta_groups)]
    if filters.prosecutors:
        filtered = [c for c in filtered if c.prosecutor and c.prosecutor in filters.prosecutors]
    return filtered


def name_sort_key(name: str):
    """Accent and case insensitive first, lower case before upper case on ties."""
    decomposed = unicodedata.normalize('NFKD', name or '')
    base = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), (name or '').casefold(), (name or '').swapcase()


def sort_by_name(cases: Sequence[CaseT]) -> List[CaseT]:
    return sorted(cases, key=lambda c: name_sort_key(c.name))


def paginate(cases: Sequence[CaseT], page: int, page_size: int) -> List[CaseT]:
    if page_size < 1:
        raise ValueError("page_size must be a positive integer")
    page = max(1, page)
    start = (page - 1) * page_size
    return list(cases[start:start + page_size])


def search_cases(cases: Sequence[CaseT], filters: SearchFilters, page: int, page_size: int,
                 meta_groups: Mapping[str, FrozenSet[str]] = POSTCODE_META_GROUPS) -> CasePage[CaseT]:
    """Filter, sort by name, then slice out ``page`` (1-based)."""
    matched = sort_by_name(apply_filters(cases, filters, meta_groups))
    page = max(1, page)
    logger.debug("Search matched %d of %d cases", len(matched), len(cases))
    return CasePage(cases=paginate(matched, page, page_size), total_cases=len(matched), page=page, page_size=page_size)


def unique_prosecutors(cases: Iterable[Union[PressCase, PublicCase]]) -> List[str]:
    return sorted({c.prosecutor for c in cases if c.prosecutor})


@dataclass(frozen=True)
class PostcodeOptions:
    postcodes: List[str]
    meta_group_postcodes: List[str]

    @property
    def has_meta_group_postcodes(self) -> bool:
        return bool(self.meta_group_postcodes)


def unique_postcodes(cases: Iterable[Union[PressCase, PublicCase]],
                     meta_group: FrozenSet[str] = LONDON_POSTCODE_AREAS) -> PostcodeOptions:
    postcodes = sorted({c.postcode for c in cases if c.postcode})
    return PostcodeOptions(
        postcodes=postcodes,
        meta_group_postcodes=[p for p in postcodes if in_meta_group(p, meta_group)],
    )


__all__ = [
    'LONDON_POSTCODES_TOKEN', 'LONDON_POSTCODE_AREAS', 'POSTCODE_META_GROUPS', 'SearchFilters', 'CasePage',
    'in_meta_group', 'matches_postcode', 'matches_query', 'apply_filters', 'name_sort_key', 'sort_by_name',
    'paginate', 'search_cases', 'unique_prosecutors', 'PostcodeOptions', 'unique_postcodes',
]
