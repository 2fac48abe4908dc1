"""Static list type configurations and the converter registry.

Configurations are built once at import time and never mutated. The
``DEFAULT_REGISTRY`` maps a list type identifier to its converter; callers
that need different behaviour (tests, alternate deployments) build their own
``ConverterRegistry`` and pass it in explicitly.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Tuple

from hearing_lists.ingest.errors import StructuralIngestError, UnknownListTypeError
from hearing_lists.ingest.tabular import FieldSpec, ListTypeConfig, convert_frame, convert_tabular, pick_sheet, read_tabular_sheets
from hearing_lists.ingest.validators import validate_date_format, validate_time_format, validate_time_format_simple

logger = logging.getLogger(__name__)

CARE_STANDARDS_TRIBUNAL = 'CARE_STANDARDS_TRIBUNAL_WEEKLY_HEARING_LIST'
RCJ_STANDARD_DAILY_CAUSE_LIST = 'RCJ_STANDARD_DAILY_CAUSE_LIST'
LONDON_ADMINISTRATIVE_COURT = 'LONDON_ADMINISTRATIVE_COURT_DAILY_CAUSE_LIST'
COURT_OF_APPEAL_CIVIL = 'COURT_OF_APPEAL_CIVIL_DAILY_CAUSE_LIST'

CIVIL_COURTS_RCJ = 'CIVIL_COURTS_RCJ_DAILY_CAUSE_LIST'
COUNTY_COURT_LONDON_CIVIL = 'COUNTY_COURT_LONDON_CIVIL_DAILY_CAUSE_LIST'
COURT_OF_APPEAL_CRIMINAL = 'COURT_OF_APPEAL_CRIMINAL_DAILY_CAUSE_LIST'
FAMILY_DIVISION_HIGH_COURT = 'FAMILY_DIVISION_HIGH_COURT_DAILY_CAUSE_LIST'
KINGS_BENCH_DIVISION = 'KINGS_BENCH_DIVISION_DAILY_CAUSE_LIST'
KINGS_BENCH_MASTERS = 'KINGS_BENCH_MASTERS_DAILY_CAUSE_LIST'
MAYOR_CITY_CIVIL = 'MAYOR_CITY_CIVIL_DAILY_CAUSE_LIST'
SENIOR_COURTS_COSTS_OFFICE = 'SENIOR_COURTS_COSTS_OFFICE_DAILY_CAUSE_LIST'

BIRMINGHAM_ADMINISTRATIVE_COURT = 'BIRMINGHAM_ADMINISTRATIVE_COURT_DAILY_CAUSE_LIST'
LEEDS_ADMINISTRATIVE_COURT = 'LEEDS_ADMINISTRATIVE_COURT_DAILY_CAUSE_LIST'
BRISTOL_CARDIFF_ADMINISTRATIVE_COURT = 'BRISTOL_CARDIFF_ADMINISTRATIVE_COURT_DAILY_CAUSE_LIST'
MANCHESTER_ADMINISTRATIVE_COURT = 'MANCHESTER_ADMINISTRATIVE_COURT_DAILY_CAUSE_LIST'

# Every list type that shares the single sheet RCJ layout
RCJ_STANDARD_LIST_TYPES = (
    RCJ_STANDARD_DAILY_CAUSE_LIST,
    CIVIL_COURTS_RCJ, COUNTY_COURT_LONDON_CIVIL, COURT_OF_APPEAL_CRIMINAL, FAMILY_DIVISION_HIGH_COURT,
    KINGS_BENCH_DIVISION, KINGS_BENCH_MASTERS, MAYOR_CITY_CIVIL, SENIOR_COURTS_COSTS_OFFICE,
    BIRMINGHAM_ADMINISTRATIVE_COURT, LEEDS_ADMINISTRATIVE_COURT, BRISTOL_CARDIFF_ADMINISTRATIVE_COURT,
    MANCHESTER_ADMINISTRATIVE_COURT,
)

DATE_EXAMPLE = "dd/MM/yyyy (e.g., 02/01/2025)"


def _standard_fields(time_validator) -> Tuple[FieldSpec, ...]:
    return (
        FieldSpec('venue', 'Venue'),
        FieldSpec('judge', 'Judge'),
        FieldSpec('time', 'Time', validators=(time_validator,)),
        FieldSpec('caseNumber', 'Case Number'),
        FieldSpec('caseDetails', 'Case Details'),
        FieldSpec('hearingType', 'Hearing Type'),
        FieldSpec('additionalInformation', 'Additional Information', required=False),
    )


CARE_STANDARDS_CONFIG = ListTypeConfig(
    fields=(
        FieldSpec('date', 'Date', validators=(validate_date_format(expected=DATE_EXAMPLE),)),
        FieldSpec('caseName', 'Case name'),
        FieldSpec('hearingLength', 'Hearing length'),
        FieldSpec('hearingType', 'Hearing type'),
        FieldSpec('venue', 'Venue'),
        FieldSpec('additionalInformation', 'Additional information'),
    ),
    min_rows=1,
)

# Single sheet RCJ lists: hour must be 1-12
RCJ_STANDARD_CONFIG = ListTypeConfig(fields=_standard_fields(validate_time_format), min_rows=1)

# Multi-sheet lists where a tab may legitimately be empty
RCJ_SIMPLE_TIME_CONFIG = ListTypeConfig(fields=_standard_fields(validate_time_format_simple), min_rows=0)

FUTURE_JUDGMENTS_CONFIG = ListTypeConfig(
    fields=(FieldSpec('date', 'Date', validators=(validate_date_format(expected=DATE_EXAMPLE),)),)
    + _standard_fields(validate_time_format_simple),
    min_rows=0,
)


@dataclass(frozen=True)
class ListTypeConverter:
    config: ListTypeConfig
    convert: Callable[[bytes], Any]


def _single_sheet(config: ListTypeConfig) -> Callable[[bytes], List[Dict[str, str]]]:
    def _convert(buffer: bytes) -> List[Dict[str, str]]:
        return convert_tabular(buffer, config)
    return _convert


def _two_sheets(first: Tuple[str, str, ListTypeConfig], second: Tuple[str, str, ListTypeConfig]):
    """Converter for workbooks carrying two named tabs.

    Each tuple is ``(output key, sheet name, config)``; sheets are looked up by
    name and fall back to their position in the workbook.
    """
    def _convert(buffer: bytes) -> Dict[str, List[Dict[str, str]]]:
        sheets = read_tabular_sheets(buffer)
        out: Dict[str, List[Dict[str, str]]] = {}
        for position, (key, sheet_name, config) in enumerate((first, second)):
            frame = pick_sheet(sheets, sheet_name, position)
            if frame is None:
                if position == 0:
                    raise StructuralIngestError("Excel file must contain at least one worksheet")
                out[key] = []
                continue
            out[key] = convert_frame(frame, config)
        return out
    return _convert


class ConverterRegistry:
    """Read-only mapping of list type identifier -> converter."""

    def __init__(self, converters: Mapping[str, ListTypeConverter]):
        self._converters = MappingProxyType(dict(converters))

    def get(self, list_type: str) -> ListTypeConverter:
        try:
            return self._converters[list_type]
        except KeyError:
            raise UnknownListTypeError(list_type) from None

    def has(self, list_type: str) -> bool:
        return list_type in self._converters

    def list_types(self) -> Iterable[str]:
        return sorted(self._converters)

    def convert(self, list_type: str, buffer: bytes) -> Any:
        converter = self.get(list_type)
        result = converter.convert(buffer)
        logger.info("Converted submission for %s", list_type)
        return result


def build_default_registry() -> ConverterRegistry:
    rcj_standard = ListTypeConverter(RCJ_STANDARD_CONFIG, _single_sheet(RCJ_STANDARD_CONFIG))
    converters: Dict[str, ListTypeConverter] = {list_type: rcj_standard for list_type in RCJ_STANDARD_LIST_TYPES}
    converters.update({
        CARE_STANDARDS_TRIBUNAL: ListTypeConverter(CARE_STANDARDS_CONFIG, _single_sheet(CARE_STANDARDS_CONFIG)),
        LONDON_ADMINISTRATIVE_COURT: ListTypeConverter(
            RCJ_SIMPLE_TIME_CONFIG,
            _two_sheets(('mainHearings', 'Main hearings', RCJ_SIMPLE_TIME_CONFIG),
                        ('planningCourt', 'Planning court', RCJ_SIMPLE_TIME_CONFIG)),
        ),
        COURT_OF_APPEAL_CIVIL: ListTypeConverter(
            RCJ_SIMPLE_TIME_CONFIG,
            _two_sheets(('dailyHearings', 'Daily hearings', RCJ_SIMPLE_TIME_CONFIG),
                        ('futureJudgments', 'Notice for future judgments', FUTURE_JUDGMENTS_CONFIG)),
        ),
    })
    return ConverterRegistry(converters)


DEFAULT_REGISTRY = build_default_registry()

__all__ = [
    'CARE_STANDARDS_TRIBUNAL', 'RCJ_STANDARD_DAILY_CAUSE_LIST', 'LONDON_ADMINISTRATIVE_COURT', 'COURT_OF_APPEAL_CIVIL',
    'CIVIL_COURTS_RCJ', 'COUNTY_COURT_LONDON_CIVIL', 'COURT_OF_APPEAL_CRIMINAL', 'FAMILY_DIVISION_HIGH_COURT',
    'KINGS_BENCH_DIVISION', 'KINGS_BENCH_MASTERS', 'MAYOR_CITY_CIVIL', 'SENIOR_COURTS_COSTS_OFFICE',
    'BIRMINGHAM_ADMINISTRATIVE_COURT', 'LEEDS_ADMINISTRATIVE_COURT', 'BRISTOL_CARDIFF_ADMINISTRATIVE_COURT',
    'MANCHESTER_ADMINISTRATIVE_COURT', 'RCJ_STANDARD_LIST_TYPES',
    'CARE_STANDARDS_CONFIG', 'RCJ_STANDARD_CONFIG', 'RCJ_SIMPLE_TIME_CONFIG', 'FUTURE_JUDGMENTS_CONFIG',
    'ListTypeConverter', 'ConverterRegistry', 'build_default_registry', 'DEFAULT_REGISTRY',
]
