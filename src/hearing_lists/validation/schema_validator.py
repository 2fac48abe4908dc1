"""Exhaustive structural validation against JSON Schema descriptions.

Unlike tabular ingest, which stops at the first bad cell, every violation
found is reported so callers can render the result as a checklist.
"""
from __future__ import annotations
import json
import logging
from functools import lru_cache
from typing import Any, Callable, Dict, List, Optional

from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError as SchemaViolation
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class ValidationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    is_valid: bool = Field(alias='isValid')
    errors: List[str] = Field(default_factory=list)
    schema_version: str = Field(alias='schemaVersion')


def _error_path(error: SchemaViolation) -> str:
    parts = [str(p) for p in error.absolute_path]
    return '.'.join(parts) if parts else 'root'


def _describe(error: SchemaViolation) -> str:
    if error.validator == 'required':
        missing = error.message.split("'")[1] if "'" in error.message else error.message
        return f"{_error_path(error)}: must have required property '{missing}'"
    if error.validator == 'type':
        expected = error.validator_value
        if isinstance(expected, list):
            expected = ','.join(expected)
        return f"{_error_path(error)}: must be {expected}"
    return f"{_error_path(error)}: {error.message}"


def validate_json(data: Any, schema: Dict[str, Any], schema_version: str) -> ValidationResult:
    """Validate ``data`` against ``schema`` collecting every violation.

    ``schema_version`` is echoed back untouched whatever the outcome.
    """
    if data is None:
        return ValidationResult(is_valid=False, errors=["root: must not be null"], schema_version=schema_version)
    validator = Draft7Validator(schema)
    errors = [_describe(e) for e in validator.iter_errors(data)]
    return ValidationResult(is_valid=not errors, errors=errors, schema_version=schema_version)


@lru_cache(maxsize=32)
def _load_schema(schema_path: str) -> str:
    with open(schema_path, 'r', encoding='utf-8') as f:
        raw = f.read()
    schema = json.loads(raw)
    Draft7Validator.check_schema(schema)
    logger.info("Loaded schema %s", schema_path)
    return raw


def create_json_validator(schema_path: str, schema_version: Optional[str] = None) -> Callable[[Any], ValidationResult]:
    """Return a validator bound to the schema stored at ``schema_path``.

    The file is read once per path. Missing files raise ``OSError``; files
    that are not JSON raise ``ValueError`` and invalid schemas raise
    ``jsonschema.SchemaError``.
    """
    schema = json.loads(_load_schema(schema_path))
    version = schema_version or str(schema.get('version', schema.get('$id', '1.0')))

    def _validate(data: Any) -> ValidationResult:
        return validate_json(data, schema, version)
    return _validate


_STRING = {'type': ['string', 'null']}
_BOOLEAN = {'type': ['boolean', 'null']}
_STRING_LIST = {'type': 'array', 'items': {'type': 'string'}}


def _object(properties: Dict[str, Any], required: Optional[List[str]] = None, nullable: bool = False) -> Dict[str, Any]:
    schema: Dict[str, Any] = {'type': ['object', 'null'] if nullable else 'object', 'properties': properties}
    if required:
        schema['required'] = required
    return schema


def _array(items: Dict[str, Any]) -> Dict[str, Any]:
    return {'type': 'array', 'items': items}


_ADDRESS_FIELDS = {
    'line': _STRING_LIST,
    'town': _STRING,
    'county': _STRING,
    'postCode': _STRING,
}

_ADDRESS = _object(_ADDRESS_FIELDS, nullable=True)

# Name keys mirror every alias the document models accept
_INDIVIDUAL = _object({
    'title': _STRING,
    'individualForenames': _STRING,
    'forenames': _STRING,
    'forename': _STRING,
    'individualMiddleName': _STRING,
    'middleName': _STRING,
    'individualSurname': _STRING,
    'surname': _STRING,
    'dateOfBirth': _STRING,
    'address': _ADDRESS,
}, nullable=True)

_ORGANISATION = _object({
    'organisationName': _STRING,
    'name': _STRING,
    'address': _ADDRESS,
}, nullable=True)

_PARTY = _object({
    'partyRole': {'type': 'string'},
    'individualDetails': _INDIVIDUAL,
    'organisationDetails': _ORGANISATION,
}, required=['partyRole'])

_OFFENCE = _object({
    'offenceTitle': _STRING,
    'offenceWording': _STRING,
    'reportingRestriction': _BOOLEAN,
})

_CASE = _object({
    'caseUrn': _STRING,
    'caseNumber': _STRING,
    'caseName': _STRING,
    'party': _array(_PARTY),
    'reportingRestrictionDetail': _STRING_LIST,
})

_HEARING = _object({
    'case': _array(_CASE),
    'party': _array(_PARTY),
    'offence': _array(_OFFENCE),
    'hearingType': _STRING,
})

_SITTING = _object({
    'sittingStart': _STRING,
    'sittingEnd': _STRING,
    'channel': _STRING_LIST,
    'hearing': _array(_HEARING),
}, required=['hearing'])

_SESSION = _object({
    'judiciary': _array(_object({'johKnownAs': _STRING, 'isPresiding': _BOOLEAN})),
    'sessionChannel': _STRING_LIST,
    'sittings': _array(_SITTING),
}, required=['sittings'])

_COURT_ROOM = _object({
    'courtRoomName': _STRING,
    'session': _array(_SESSION),
}, required=['session'])

_COURT_HOUSE = _object({
    'courtHouseName': _STRING,
    'courtRoom': _array(_COURT_ROOM),
}, required=['courtRoom'])

_VENUE = _object({
    'venueName': _STRING,
    'venueAddress': _object(_ADDRESS_FIELDS),
    'venueContact': _object({'venueEmail': _STRING, 'venueTelephone': _STRING}, nullable=True),
}, nullable=True)

HEARING_DOCUMENT_SCHEMA_VERSION = '1.0'

HEARING_DOCUMENT_SCHEMA: Dict[str, Any] = {
    '$schema': 'http://json-schema.org/draft-07/schema#',
    **_object({
        'document': _object({'publicationDate': {'type': 'string'}}, required=['publicationDate']),
        'venue': _VENUE,
        'courtLists': _array(_object({'courtHouse': _COURT_HOUSE}, required=['courtHouse'])),
    }, required=['document']),
}


def validate_hearing_document(data: Any) -> ValidationResult:
    return validate_json(data, HEARING_DOCUMENT_SCHEMA, HEARING_DOCUMENT_SCHEMA_VERSION)


__all__ = [
    'ValidationResult', 'validate_json', 'create_json_validator',
    'HEARING_DOCUMENT_SCHEMA', 'HEARING_DOCUMENT_SCHEMA_VERSION', 'validate_hearing_document',
]
