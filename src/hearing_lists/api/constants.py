from hearing_lists.ingest.list_types import (
    CARE_STANDARDS_TRIBUNAL, COURT_OF_APPEAL_CIVIL, LONDON_ADMINISTRATIVE_COURT, RCJ_STANDARD_LIST_TYPES,
)

SPREADSHEET_EXTENSIONS = ('.xlsx', '.csv')
UPLOAD_FIELD = 'file'

RCJ_STANDARD_DESCRIPTION = {
    "sheets": ["(first sheet)"],
    "description": "Daily hearings by venue, judge and time; additional information optional",
}

LIST_TYPE_DESCRIPTIONS = {
    **{list_type: RCJ_STANDARD_DESCRIPTION for list_type in RCJ_STANDARD_LIST_TYPES},
    CARE_STANDARDS_TRIBUNAL: {
        "sheets": ["(first sheet)"],
        "description": "Weekly hearings with date, case name, length, type, venue and additional information",
    },
    LONDON_ADMINISTRATIVE_COURT: {
        "sheets": ["Main hearings", "Planning court"],
        "description": "Two tabs of daily hearings; either may be empty",
    },
    COURT_OF_APPEAL_CIVIL: {
        "sheets": ["Daily hearings", "Notice for future judgments"],
        "description": "Daily hearings plus dated notices of future judgments",
    },
}
