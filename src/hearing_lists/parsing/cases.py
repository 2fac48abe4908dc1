"""Build press and public case records from flattened hearings.

Derived values (outward postcode, date of birth, age) degrade to ``None``
when the source is missing or unparseable; a single bad hearing never stops
the rest of the document from being transformed.
"""
from __future__ import annotations
import hashlib
import logging
import re
from datetime import date
from typing import List, Optional

from dateutil import parser as date_parser

from hearing_lists.ingest.schemas import (
    Address, Hearing, HearingDocument, Offence, OffenceDetails, Party, PressCase, PublicCase,
)
from hearing_lists.parsing.document import PROSECUTOR_ROLES, extract_all_hearings, find_accused, find_party

logger = logging.getLogger(__name__)

OUTWARD_CODE_PATTERN = re.compile(r'^[A-Z]{1,2}[0-9]{0,2}[A-Z]?$')
SLASH_DATE_PATTERN = re.compile(r'^(\d{1,2})/(\d{1,2})/(\d{4})$')

UNKNOWN_NAME = 'Unknown'


def _join(parts, sep: str) -> str:
    return sep.join(p.strip() for p in parts if p and p.strip())


def party_display_name(party: Optional[Party]) -> str:
    """Title, forenames, middle name and surname, or the organisation name."""
    if party is None:
        return ''
    if party.individual_details is not None:
        d = party.individual_details
        return _join([d.title, d.forenames, d.middle_name, d.surname], ' ')
    if party.organisation_details is not None and party.organisation_details.name:
        return party.organisation_details.name.strip()
    return ''


def format_party_name(party: Optional[Party]) -> str:
    return party_display_name(party) or UNKNOWN_NAME


def party_address(party: Optional[Party]) -> Optional[Address]:
    if party is None:
        return None
    if party.individual_details is not None and party.individual_details.address is not None:
        return party.individual_details.address
    if party.organisation_details is not None:
        return party.organisation_details.address
    return None


def format_address(address: Optional[Address]) -> Optional[str]:
    if address is None:
        return None
    joined = _join([*address.line, address.town, address.county, address.post_code], ', ')
    return joined or None


def extract_postcode_outward(postcode: Optional[str]) -> Optional[str]:
    """``"SE23 6FH"`` -> ``"SE23"``; a lone outward code is returned as is."""
    if not postcode:
        return None
    trimmed = postcode.strip()
    if ' ' in trimmed:
        return trimmed.split(' ', 1)[0]
    return trimmed if OUTWARD_CODE_PATTERN.match(trimmed) else None


def parse_date_of_birth(value: Optional[str]) -> Optional[date]:
    if not value or not value.strip():
        return None
    text = value.strip()
    m = SLASH_DATE_PATTERN.match(text)
    try:
        if m:
            day, month, year = (int(g) for g in m.groups())
            return date(year, month, day)
        return date_parser.parse(text).date()
    except (ValueError, OverflowError):
        logger.debug("Unparseable date of birth %r", text)
        return None


def calculate_age(date_of_birth: Optional[date], today: Optional[date] = None) -> Optional[int]:
    if date_of_birth is None:
        return None
    today = today or date.today()
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def find_prosecutor(parties: List[Party]) -> Optional[str]:
    prosecutor = find_party(parties, PROSECUTOR_ROLES)
    if prosecutor is None or prosecutor.organisation_details is None:
        return None
    return prosecutor.organisation_details.name or None


def offence_details(offences: List[Offence]) -> List[OffenceDetails]:
    return [
        OffenceDetails(
            title=o.offence_title or '',
            wording=o.offence_wording or None,
            reporting_restriction=bool(o.reporting_restriction),
        )
        for o in offences
    ]


def case_id_for(position: int, reference: Optional[str], name: str) -> str:
    """Stable id so repeated transformations of one document agree."""
    material = f"{position}|{reference or ''}|{name}"
    return hashlib.sha256(material.encode('utf-8')).hexdigest()[:16]


def transform_hearing_to_case(hearing: Hearing, position: int = 0, today: Optional[date] = None) -> PressCase:
    accused = find_accused(hearing.party)
    name = format_party_name(accused)
    reference = hearing.case[0].case_urn if hearing.case and hearing.case[0].case_urn else None
    address = party_address(accused)
    dob = parse_date_of_birth(accused.individual_details.date_of_birth) if accused and accused.individual_details else None
    return PressCase(
        case_id=case_id_for(position, reference, name),
        name=name,
        postcode=extract_postcode_outward(address.post_code if address else None),
        prosecutor=find_prosecutor(hearing.party),
        date_of_birth=dob,
        age=calculate_age(dob, today),
        reference=reference,
        address=format_address(address),
        offences=offence_details(hearing.offence),
    )


def extract_press_cases(doc: HearingDocument, today: Optional[date] = None) -> List[PressCase]:
    return [transform_hearing_to_case(h, i, today) for i, h in enumerate(extract_all_hearings(doc))]


def offence_summary(case: PressCase) -> Optional[str]:
    if not case.offences:
        return None
    first = case.offences[0]
    return first.title or first.wording or None


def to_public_case(case: PressCase) -> PublicCase:
    return PublicCase(
        case_id=case.case_id,
        name=case.name,
        postcode=case.postcode,
        offence=offence_summary(case),
        prosecutor=case.prosecutor,
    )


def extract_public_cases(doc: HearingDocument, today: Optional[date] = None) -> List[PublicCase]:
    return [to_public_case(c) for c in extract_press_cases(doc, today)]


__all__ = [
    'party_display_name', 'format_party_name', 'party_address', 'format_address', 'extract_postcode_outward', 'parse_date_of_birth',
    'calculate_age', 'find_prosecutor', 'offence_details', 'case_id_for', 'transform_hearing_to_case',
    'extract_press_cases', 'offence_summary', 'to_public_case', 'extract_public_cases',
]
