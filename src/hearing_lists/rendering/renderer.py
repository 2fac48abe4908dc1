"""Build locale specific view models for hearing lists.

Renderers are pure: they read the document or records they are given and
return a fresh ``RenderedView``. Computed values (times, durations, party
groupings, judiciary) live only in the view, never on the source.
"""
from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from functools import partial
from datetime import date
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, Field

from hearing_lists.ingest.errors import UnknownListTypeError
from hearing_lists.ingest.list_types import (
    CARE_STANDARDS_TRIBUNAL, COURT_OF_APPEAL_CIVIL, LONDON_ADMINISTRATIVE_COURT, RCJ_STANDARD_DAILY_CAUSE_LIST,
    RCJ_STANDARD_LIST_TYPES,
)
from hearing_lists.ingest.schemas import CaseReference, Hearing, HearingDocument, Party, Session, Sitting
from hearing_lists.parsing.cases import party_display_name
from hearing_lists.parsing.document import iter_sittings, parse_hearing_document
from hearing_lists.rendering.formatting import (
    calculate_duration, format_dd_mm_yyyy_date, format_display_date, format_duration, format_last_updated,
    format_publication_datetime, format_time, normalize_time,
)
from hearing_lists.rendering.locales import CIVIL_AND_FAMILY_DAILY_CAUSE_LIST, list_title, resolve_locale

logger = logging.getLogger(__name__)

APPLICANT = 'APPLICANT_PETITIONER'
APPLICANT_REPRESENTATIVE = 'APPLICANT_PETITIONER_REPRESENTATIVE'
RESPONDENT = 'RESPONDENT'
RESPONDENT_REPRESENTATIVE = 'RESPONDENT_REPRESENTATIVE'

ROLE_ALIASES = MappingProxyType({
    'APPLICANT': APPLICANT,
    'PETITIONER': APPLICANT,
    'APPLICANT_REPRESENTATIVE': APPLICANT_REPRESENTATIVE,
    'PETITIONER_REPRESENTATIVE': APPLICANT_REPRESENTATIVE,
})

PARTY_FIELDS = MappingProxyType({
    APPLICANT: 'applicant',
    APPLICANT_REPRESENTATIVE: 'applicantRepresentative',
    RESPONDENT: 'respondent',
    RESPONDENT_REPRESENTATIVE: 'respondentRepresentative',
})


@dataclass(frozen=True)
class RenderOptions:
    locale: str = 'en'
    content_date: Optional[date] = None
    last_received: Optional[str] = None
    list_title: Optional[str] = None
    location_name: Optional[str] = None


class RenderedSection(BaseModel):
    name: str
    hearings: List[Dict[str, Any]] = Field(default_factory=list)


class RenderedView(BaseModel):
    locale: str
    header: Dict[str, Any] = Field(default_factory=dict)
    sections: List[RenderedSection] = Field(default_factory=list)
    open_justice: Optional[Dict[str, str]] = None


def convert_party_role(role: Optional[str]) -> str:
    key = re.sub(r'[\s/]+', '_', (role or '').strip().upper())
    return ROLE_ALIASES.get(key, key)


def _trim_list(value: str) -> str:
    return re.sub(r',\s*$', '', value).strip()


def aggregate_parties(parties: Sequence[Party]) -> Dict[str, str]:
    """Group party names under applicant/respondent and their representatives."""
    grouped: Dict[str, List[str]] = {field: [] for field in PARTY_FIELDS.values()}
    for party in parties:
        field = PARTY_FIELDS.get(convert_party_role(party.party_role))
        details = party_display_name(party).strip()
        if field is None or not details:
            continue
        grouped[field].append(details)
    return {field: _trim_list(', '.join(names)) for field, names in grouped.items()}


def format_judiciaries(session: Session) -> str:
    presiding: List[str] = []
    others: List[str] = []
    for judiciary in session.judiciary:
        name = (judiciary.joh_known_as or '').strip()
        if not name:
            continue
        (presiding if judiciary.is_presiding else others).append(name)
    return ', '.join(presiding + others)


def format_hearing_channel(sitting: Sitting, session: Session) -> str:
    if sitting.channel:
        return ', '.join(sitting.channel)
    return ', '.join(session.session_channel)


def format_reporting_restrictions(case: CaseReference) -> str:
    return ', '.join(r for r in case.reporting_restriction_detail if r)


def _sitting_annotations(session: Session, sitting: Sitting, locale: str) -> Dict[str, Any]:
    duration = calculate_duration(sitting.sitting_start, sitting.sitting_end)
    return {
        'time': format_time(sitting.sitting_start),
        'durationAsHours': duration.hours,
        'durationAsMinutes': duration.minutes,
        'duration': format_duration(duration, locale),
        'caseHearingChannel': format_hearing_channel(sitting, session),
        'formattedJudiciaries': format_judiciaries(session),
    }


def _hearing_rows(hearing: Hearing, annotations: Dict[str, Any]) -> List[Dict[str, Any]]:
    cases = hearing.case or [CaseReference()]
    rows = []
    for case in cases:
        parties = case.party or hearing.party
        rows.append({
            **annotations,
            'caseNumber': case.case_number or '',
            'caseName': case.case_name or '',
            'caseUrn': case.case_urn or '',
            'hearingType': hearing.hearing_type or '',
            'formattedReportingRestriction': format_reporting_restrictions(case),
            **aggregate_parties(parties),
        })
    return rows


def _address_lines(doc: HearingDocument) -> List[str]:
    if doc.venue is None:
        return []
    address = doc.venue.venue_address
    return [line for line in [*address.line, address.post_code] if line]


def render_cause_list(document: Union[HearingDocument, Dict[str, Any]], options: RenderOptions,
                      list_type: str = CIVIL_AND_FAMILY_DAILY_CAUSE_LIST) -> RenderedView:
    """Render a nested hearing document grouped by court room."""
    doc = parse_hearing_document(document)
    locale = resolve_locale(options.locale)
    venue_name = doc.venue.venue_name if doc.venue and doc.venue.venue_name else ''
    last_updated_date, last_updated_time = format_last_updated(doc.document.publication_date or '', locale)

    header = {
        'listTitle': options.list_title or list_title(list_type, locale),
        'locationName': options.location_name or venue_name,
        'addressLines': _address_lines(doc),
        'contentDate': format_display_date(options.content_date, locale) if options.content_date else '',
        'lastUpdated': format_publication_datetime(doc.document.publication_date or '', locale),
        'lastUpdatedDate': last_updated_date,
        'lastUpdatedTime': last_updated_time,
    }

    sections: Dict[int, RenderedSection] = {}
    for court_list, court_room, session, sitting in iter_sittings(doc):
        key = id(court_room)
        if key not in sections:
            name = court_room.court_room_name or court_list.court_house.court_house_name or f"Court {len(sections) + 1}"
            sections[key] = RenderedSection(name=name)
        annotations = _sitting_annotations(session, sitting, locale)
        for hearing in sitting.hearing:
            sections[key].hearings.extend(_hearing_rows(hearing, annotations))

    open_justice = None
    if doc.venue is not None:
        contact = doc.venue.venue_contact
        open_justice = {
            'venueName': venue_name,
            'email': (contact.venue_email if contact else None) or '',
            'phone': (contact.venue_telephone if contact else None) or '',
        }
    return RenderedView(locale=locale, header=header, sections=list(sections.values()), open_justice=open_justice)


def _tabular_header(list_type: str, options: RenderOptions, locale: str, date_key: str) -> Dict[str, Any]:
    last_date, last_time = format_last_updated(options.last_received or '', locale)
    return {
        'listTitle': options.list_title or list_title(list_type, locale),
        date_key: format_display_date(options.content_date, locale) if options.content_date else '',
        'lastUpdatedDate': last_date,
        'lastUpdatedTime': last_time,
    }


def _standard_rows(records: Sequence[Mapping[str, str]]) -> List[Dict[str, Any]]:
    return [
        {**record, 'time': normalize_time(record.get('time', '')),
         'additionalInformation': record.get('additionalInformation') or ''}
        for record in records
    ]


def render_care_standards(records: Sequence[Mapping[str, str]], options: RenderOptions) -> RenderedView:
    locale = resolve_locale(options.locale)
    hearings = [{**record, 'date': format_dd_mm_yyyy_date(record.get('date', ''), locale)} for record in records]
    return RenderedView(
        locale=locale,
        header=_tabular_header(CARE_STANDARDS_TRIBUNAL, options, locale, 'weekCommencingDate'),
        sections=[RenderedSection(name='hearings', hearings=hearings)],
    )


def render_daily_hearings(records: Sequence[Mapping[str, str]], options: RenderOptions,
                          list_type: str = RCJ_STANDARD_DAILY_CAUSE_LIST) -> RenderedView:
    locale = resolve_locale(options.locale)
    return RenderedView(
        locale=locale,
        header=_tabular_header(list_type, options, locale, 'listDate'),
        sections=[RenderedSection(name='hearings', hearings=_standard_rows(records))],
    )


def render_london_administrative_court(data: Mapping[str, Sequence[Mapping[str, str]]], options: RenderOptions) -> RenderedView:
    locale = resolve_locale(options.locale)
    return RenderedView(
        locale=locale,
        header=_tabular_header(LONDON_ADMINISTRATIVE_COURT, options, locale, 'listDate'),
        sections=[
            RenderedSection(name='mainHearings', hearings=_standard_rows(data.get('mainHearings', []))),
            RenderedSection(name='planningCourt', hearings=_standard_rows(data.get('planningCourt', []))),
        ],
    )


def render_court_of_appeal_civil(data: Mapping[str, Sequence[Mapping[str, str]]], options: RenderOptions) -> RenderedView:
    locale = resolve_locale(options.locale)
    future = [
        {**row, 'date': format_dd_mm_yyyy_date(row.get('date', ''), locale)}
        for row in _standard_rows(data.get('futureJudgments', []))
    ]
    return RenderedView(
        locale=locale,
        header=_tabular_header(COURT_OF_APPEAL_CIVIL, options, locale, 'listDate'),
        sections=[
            RenderedSection(name='dailyHearings', hearings=_standard_rows(data.get('dailyHearings', []))),
            RenderedSection(name='futureJudgments', hearings=future),
        ],
    )


Renderer = Callable[[Any, RenderOptions], RenderedView]

RENDERERS: Mapping[str, Renderer] = MappingProxyType({
    **{list_type: partial(render_daily_hearings, list_type=list_type) for list_type in RCJ_STANDARD_LIST_TYPES},
    CARE_STANDARDS_TRIBUNAL: render_care_standards,
    LONDON_ADMINISTRATIVE_COURT: render_london_administrative_court,
    COURT_OF_APPEAL_CIVIL: render_court_of_appeal_civil,
    CIVIL_AND_FAMILY_DAILY_CAUSE_LIST: render_cause_list,
})


def render_list(list_type: str, data: Any, options: RenderOptions,
                renderers: Mapping[str, Renderer] = RENDERERS) -> RenderedView:
    try:
        renderer = renderers[list_type]
    except KeyError:
        raise UnknownListTypeError(list_type) from None
    view = renderer(data, options)
    logger.debug("Rendered %s with %d section(s)", list_type, len(view.sections))
    return view


__all__ = [
    'RenderOptions', 'RenderedSection', 'RenderedView', 'convert_party_role', 'aggregate_parties',
    'format_judiciaries', 'format_hearing_channel', 'format_reporting_restrictions', 'render_cause_list',
    'render_care_standards', 'render_daily_hearings', 'render_london_administrative_court',
    'render_court_of_appeal_civil', 'RENDERERS', 'render_list',
]
