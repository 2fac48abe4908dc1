"""English and Welsh strings used in rendered list headers."""
from types import MappingProxyType

from hearing_lists.ingest.list_types import (
    BIRMINGHAM_ADMINISTRATIVE_COURT, BRISTOL_CARDIFF_ADMINISTRATIVE_COURT, CARE_STANDARDS_TRIBUNAL, CIVIL_COURTS_RCJ,
    COUNTY_COURT_LONDON_CIVIL, COURT_OF_APPEAL_CIVIL, COURT_OF_APPEAL_CRIMINAL, FAMILY_DIVISION_HIGH_COURT,
    KINGS_BENCH_DIVISION, KINGS_BENCH_MASTERS, LEEDS_ADMINISTRATIVE_COURT, LONDON_ADMINISTRATIVE_COURT,
    MANCHESTER_ADMINISTRATIVE_COURT, MAYOR_CITY_CIVIL, RCJ_STANDARD_DAILY_CAUSE_LIST, SENIOR_COURTS_COSTS_OFFICE,
)

SUPPORTED_LOCALES = ('en', 'cy')
DEFAULT_LOCALE = 'en'

CIVIL_AND_FAMILY_DAILY_CAUSE_LIST = 'CIVIL_AND_FAMILY_DAILY_CAUSE_LIST'

BABEL_LOCALES = MappingProxyType({'en': 'en_GB', 'cy': 'cy'})

LIST_TITLES = MappingProxyType({
    CARE_STANDARDS_TRIBUNAL: {
        'en': "Care Standards Tribunal Weekly Hearing List",
        'cy': "Rhestr Gwrandawiadau Wythnosol y Tribiwnlys Safonau Gofal",
    },
    RCJ_STANDARD_DAILY_CAUSE_LIST: {
        'en': "Civil Courts at the Royal Courts of Justice Daily Cause List",
        'cy': "Rhestr Achosion Dyddiol Llys Sifil yn y Llysoedd Barn Brenhinol",
    },
    LONDON_ADMINISTRATIVE_COURT: {
        'en': "London Administrative Court Daily Cause List",
        'cy': "Rhestr Achosion Dyddiol Llys Gweinyddol Llundain",
    },
    COURT_OF_APPEAL_CIVIL: {
        'en': "Court of Appeal (Civil Division) Daily Cause List",
        'cy': "Rhestr Achosion Dyddiol y Llys Apêl (Adran Sifil)",
    },
    CIVIL_COURTS_RCJ: {
        'en': "Civil Courts at the Royal Courts of Justice Daily Cause List",
        'cy': "Rhestr Achosion Dyddiol Llys Sifil yn y Llysoedd Barn Brenhinol",
    },
    COUNTY_COURT_LONDON_CIVIL: {
        'en': "County Court at Central London Civil Daily Cause List",
        'cy': "Rhestr Achosion Dyddiol Sifil yn y Llys Sirol yng Nghanol Llundain",
    },
    COURT_OF_APPEAL_CRIMINAL: {
        'en': "Court of Appeal (Criminal Division) Daily Cause List",
        'cy': "Rhestr Achosion Dyddiol y Llys Apêl (Adran Troseddol)",
    },
    FAMILY_DIVISION_HIGH_COURT: {
        'en': "Family Division of the High Court Daily Cause List",
        'cy': "Rhestr Achosion Dyddiol Adran Deulu yr Uchel Lys",
    },
    KINGS_BENCH_DIVISION: {
        'en': "King's Bench Division Daily Cause List",
        'cy': "Rhestr Achosion Dyddiol Adran Mainc y Brenin",
    },
    KINGS_BENCH_MASTERS: {
        'en': "King's Bench Masters Daily Cause List",
        'cy': "Rhestr Achosion Dyddiol Meistri Mainc y Brenin",
    },
    MAYOR_CITY_CIVIL: {
        'en': "Civil Daily Cause List",
        'cy': "Rhestr Achosion Dyddiol y Llys Sifil",
    },
    SENIOR_COURTS_COSTS_OFFICE: {
        'en': "Senior Courts Costs Office Daily Cause List",
        'cy': "Rhestr Achosion Dyddiol Swyddfa Costau’r Uwchlysoedd",
    },
    BIRMINGHAM_ADMINISTRATIVE_COURT: {
        'en': "Birmingham Administrative Court Daily Cause List",
        'cy': "Rhestr Achosion Dyddiol Llys Gweinyddol Birmingham",
    },
    LEEDS_ADMINISTRATIVE_COURT: {
        'en': "Leeds Administrative Court Daily Cause List",
        'cy': "Rhestr Achosion Dyddiol Llys Gweinyddol Leeds",
    },
    BRISTOL_CARDIFF_ADMINISTRATIVE_COURT: {
        'en': "Bristol and Cardiff Administrative Court Daily Cause List",
        'cy': "Rhestr Achosion Dyddiol Llys Gweinyddol Bryste a Chaerdydd",
    },
    MANCHESTER_ADMINISTRATIVE_COURT: {
        'en': "Manchester Administrative Court Daily Cause List",
        'cy': "Rhestr Achosion Dyddiol Llys Gweinyddol Manceinion",
    },
    CIVIL_AND_FAMILY_DAILY_CAUSE_LIST: {
        'en': "Civil and Family Daily Cause List",
        'cy': "Rhestr Achosion Dyddiol Sifil a Theulu",
    },
})

LABELS = MappingProxyType({
    'en': {'at': 'at', 'last_updated': 'Last updated', 'hour': 'hour', 'hours': 'hours', 'min': 'min', 'mins': 'mins'},
    'cy': {'at': 'am', 'last_updated': 'Diweddarwyd ddiwethaf', 'hour': 'awr', 'hours': 'awr', 'min': 'munud', 'mins': 'munud'},
})


def resolve_locale(locale: str) -> str:
    return locale if locale in SUPPORTED_LOCALES else DEFAULT_LOCALE


def list_title(list_type: str, locale: str) -> str:
    titles = LIST_TITLES.get(list_type)
    if not titles:
        return ''
    return titles[resolve_locale(locale)]


def label(key: str, locale: str) -> str:
    return LABELS[resolve_locale(locale)][key]
