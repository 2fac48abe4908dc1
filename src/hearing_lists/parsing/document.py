"""Flattening and classification of nested hearing list documents."""
from __future__ import annotations
import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from hearing_lists.ingest.schemas import (
    CourtList, CourtRoom, Hearing, HearingDocument, ListClassification, Party, Session, Sitting,
)

logger = logging.getLogger(__name__)

ACCUSED_ROLE = 'ACCUSED'
PROSECUTOR_ROLES = frozenset({'PROSECUTOR', 'PROSECUTER'})


def parse_hearing_document(raw: Union[HearingDocument, Dict[str, Any]]) -> HearingDocument:
    if isinstance(raw, HearingDocument):
        return raw
    return HearingDocument.model_validate(raw)


def iter_sittings(doc: HearingDocument) -> Iterator[Tuple[CourtList, CourtRoom, Session, Sitting]]:
    """Yield every sitting with its ancestors, depth first in document order."""
    for court_list in doc.court_lists:
        for court_room in court_list.court_house.court_room:
            for session in court_room.session:
                for sitting in session.sittings:
                    yield court_list, court_room, session, sitting


def extract_all_hearings(doc: HearingDocument) -> List[Hearing]:
    hearings: List[Hearing] = []
    for _, _, _, sitting in iter_sittings(doc):
        hearings.extend(sitting.hearing)
    return hearings


def extract_case_count(doc: HearingDocument) -> int:
    return len(extract_all_hearings(doc))


def normalize_role(role: Optional[str]) -> str:
    return (role or '').strip().upper()


def find_party(parties: List[Party], roles) -> Optional[Party]:
    for party in parties:
        if normalize_role(party.party_role) in roles:
            return party
    return None


def find_accused(parties: List[Party]) -> Optional[Party]:
    return find_party(parties, {ACCUSED_ROLE})


def first_hearing(doc: HearingDocument) -> Optional[Hearing]:
    for _, _, _, sitting in iter_sittings(doc):
        if sitting.hearing:
            return sitting.hearing[0]
    return None


def determine_list_type(doc: HearingDocument) -> ListClassification:
    """Classify a document as press or public from its first hearing.

    Press lists carry a date of birth for the accused; the first hearing of
    the first non-empty branch is taken as representative of the whole
    document. Empty documents fall back to ``public``.
    """
    hearing = first_hearing(doc)
    if hearing is None:
        return ListClassification.PUBLIC
    accused = find_accused(hearing.party)
    details = accused.individual_details if accused else None
    if details is not None and details.date_of_birth and details.date_of_birth.strip():
        return ListClassification.PRESS
    logger.debug("First hearing has no accused date of birth; classifying as public")
    return ListClassification.PUBLIC


__all__ = [
    'ACCUSED_ROLE', 'PROSECUTOR_ROLES', 'parse_hearing_document', 'iter_sittings', 'extract_all_hearings',
    'extract_case_count', 'normalize_role', 'find_party', 'find_accused', 'first_hearing', 'determine_list_type',
]
