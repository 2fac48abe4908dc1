"""Canonical schemas for hearing list documents and the case records built from them.

The hearing document models mirror the published JSON (camelCase keys) and
are frozen: downstream stages read them but never write computed values back.
Every sequence defaults to empty so extraction code only has to ask whether a
particular field is present.
"""
from __future__ import annotations
from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _DocumentModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra='ignore')


class Address(_DocumentModel):
    line: List[str] = Field(default_factory=list)
    town: Optional[str] = None
    county: Optional[str] = None
    post_code: Optional[str] = None


class IndividualDetails(_DocumentModel):
    title: Optional[str] = None
    forenames: Optional[str] = Field(default=None, validation_alias=AliasChoices('individualForenames', 'forenames', 'forename'))
    middle_name: Optional[str] = Field(default=None, validation_alias=AliasChoices('individualMiddleName', 'middleName'))
    surname: Optional[str] = Field(default=None, validation_alias=AliasChoices('individualSurname', 'surname'))
    date_of_birth: Optional[str] = None
    address: Optional[Address] = None


class OrganisationDetails(_DocumentModel):
    name: Optional[str] = Field(default=None, validation_alias=AliasChoices('organisationName', 'name'))
    address: Optional[Address] = None


class Party(_DocumentModel):
    party_role: str = ''
    individual_details: Optional[IndividualDetails] = None
    organisation_details: Optional[OrganisationDetails] = None


class Offence(_DocumentModel):
    offence_title: Optional[str] = None
    offence_wording: Optional[str] = None
    reporting_restriction: Optional[bool] = None


class CaseReference(_DocumentModel):
    case_urn: Optional[str] = None
    case_number: Optional[str] = None
    case_name: Optional[str] = None
    party: List[Party] = Field(default_factory=list)
    reporting_restriction_detail: List[str] = Field(default_factory=list)


class Hearing(_DocumentModel):
    case: List[CaseReference] = Field(default_factory=list)
    party: List[Party] = Field(default_factory=list)
    offence: List[Offence] = Field(default_factory=list)
    hearing_type: Optional[str] = None


class Sitting(_DocumentModel):
    sitting_start: Optional[str] = None
    sitting_end: Optional[str] = None
    channel: List[str] = Field(default_factory=list)
    hearing: List[Hearing] = Field(default_factory=list)


class Judiciary(_DocumentModel):
    joh_known_as: Optional[str] = None
    is_presiding: Optional[bool] = None


class Session(_DocumentModel):
    judiciary: List[Judiciary] = Field(default_factory=list)
    session_channel: List[str] = Field(default_factory=list)
    sittings: List[Sitting] = Field(default_factory=list)


class CourtRoom(_DocumentModel):
    court_room_name: Optional[str] = None
    session: List[Session] = Field(default_factory=list)


class CourtHouse(_DocumentModel):
    court_house_name: Optional[str] = None
    court_room: List[CourtRoom] = Field(default_factory=list)


class CourtList(_DocumentModel):
    court_house: CourtHouse = Field(default_factory=CourtHouse)


class DocumentInfo(_DocumentModel):
    publication_date: Optional[str] = None


class VenueContact(_DocumentModel):
    venue_email: Optional[str] = None
    venue_telephone: Optional[str] = None


class Venue(_DocumentModel):
    venue_name: Optional[str] = None
    venue_address: Address = Field(default_factory=Address)
    venue_contact: Optional[VenueContact] = None


class HearingDocument(_DocumentModel):
    document: DocumentInfo = Field(default_factory=DocumentInfo)
    venue: Optional[Venue] = None
    court_lists: List[CourtList] = Field(default_factory=list)


class ListClassification(str, Enum):
    PUBLIC = 'public'
    PRESS = 'press'


class _CaseModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class OffenceDetails(_CaseModel):
    title: str = ''
    wording: Optional[str] = None
    reporting_restriction: bool = False


class PublicCase(_CaseModel):
    case_id: str
    name: str
    postcode: Optional[str] = None
    offence: Optional[str] = None
    prosecutor: Optional[str] = None


class PressCase(_CaseModel):
    case_id: str
    name: str
    postcode: Optional[str] = None
    prosecutor: Optional[str] = None
    date_of_birth: Optional[date] = None
    age: Optional[int] = None
    reference: Optional[str] = None
    address: Optional[str] = None
    offences: List[OffenceDetails] = Field(default_factory=list)


__all__ = [
    'Address', 'IndividualDetails', 'OrganisationDetails', 'Party', 'Offence', 'CaseReference', 'Hearing',
    'Sitting', 'Judiciary', 'Session', 'CourtRoom', 'CourtHouse', 'CourtList', 'DocumentInfo', 'Venue',
    'VenueContact', 'HearingDocument', 'ListClassification', 'OffenceDetails', 'PublicCase', 'PressCase',
]
