"""Case list queries by artefact id.

Each call loads the stored document, transforms it and runs the search
engine; nothing is cached between calls.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import date
from typing import FrozenSet, List, Mapping, Optional

from hearing_lists.data.artefact_store import ArtefactStore
from hearing_lists.ingest.schemas import ListClassification, PressCase, PublicCase
from hearing_lists.parsing.cases import extract_press_cases, to_public_case
from hearing_lists.parsing.document import determine_list_type, extract_case_count
from hearing_lists.search.engine import (
    POSTCODE_META_GROUPS, CasePage, PostcodeOptions, SearchFilters, apply_filters, search_cases, sort_by_name,
    unique_postcodes, unique_prosecutors,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListSummary:
    artefact_id: str
    list_type: ListClassification
    publication_date: Optional[str]
    case_count: int
    prosecutors: List[str]
    postcodes: PostcodeOptions


def get_list_summary(store: ArtefactStore, artefact_id: str, today: Optional[date] = None) -> ListSummary:
    doc = store.load_hearing_document(artefact_id)
    cases = extract_press_cases(doc, today)
    logger.debug("Summarising %s with %d case(s)", artefact_id, len(cases))
    return ListSummary(
        artefact_id=artefact_id,
        list_type=determine_list_type(doc),
        publication_date=doc.document.publication_date,
        case_count=extract_case_count(doc),
        prosecutors=unique_prosecutors(cases),
        postcodes=unique_postcodes(cases),
    )


def get_press_cases(store: ArtefactStore, artefact_id: str, filters: SearchFilters, page: int, page_size: int,
                    meta_groups: Mapping[str, FrozenSet[str]] = POSTCODE_META_GROUPS,
                    today: Optional[date] = None) -> CasePage[PressCase]:
    cases = extract_press_cases(store.load_hearing_document(artefact_id), today)
    return search_cases(cases, filters, page, page_size, meta_groups)


def get_public_cases(store: ArtefactStore, artefact_id: str, filters: SearchFilters, page: int, page_size: int,
                     meta_groups: Mapping[str, FrozenSet[str]] = POSTCODE_META_GROUPS,
                     today: Optional[date] = None) -> CasePage[PublicCase]:
    """Filter on the press records (reference search needs them), then reduce to public."""
    press = get_press_cases(store, artefact_id, filters, page, page_size, meta_groups, today)
    return CasePage(
        cases=[to_public_case(c) for c in press.cases],
        total_cases=press.total_cases,
        page=press.page,
        page_size=press.page_size,
    )


def get_all_press_cases(store: ArtefactStore, artefact_id: str, filters: SearchFilters,
                        meta_groups: Mapping[str, FrozenSet[str]] = POSTCODE_META_GROUPS,
                        today: Optional[date] = None) -> List[PressCase]:
    """Every matching press case, sorted, unpaginated (used for downloads)."""
    cases = extract_press_cases(store.load_hearing_document(artefact_id), today)
    return sort_by_name(apply_filters(cases, filters, meta_groups))


__all__ = ['ListSummary', 'get_list_summary', 'get_press_cases', 'get_public_cases', 'get_all_press_cases']
