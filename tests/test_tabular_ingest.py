import io

import pandas as pd
import pytest

from hearing_lists.ingest.errors import RowValidationError, StructuralIngestError
from hearing_lists.ingest.list_types import CARE_STANDARDS_CONFIG, RCJ_STANDARD_CONFIG
from hearing_lists.ingest.tabular import FieldSpec, ListTypeConfig, convert_tabular, pick_sheet, read_tabular_sheets

CARE_HEADER = ["Date", "Case name", "Hearing length", "Hearing type", "Venue", "Additional information"]
CARE_ROW = ["02/01/2025", "A Vs B", "1 hour", "Substantive hearing", "Remote - Teams", "Listed for 10am"]


def test_valid_row_produces_record(csv_bytes):
    records = convert_tabular(csv_bytes([CARE_HEADER, CARE_ROW]), CARE_STANDARDS_CONFIG)
    assert records == [{
        "date": "02/01/2025",
        "caseName": "A Vs B",
        "hearingLength": "1 hour",
        "hearingType": "Substantive hearing",
        "venue": "Remote - Teams",
        "additionalInformation": "Listed for 10am",
    }]


def test_record_count_matches_data_rows(csv_bytes):
    rows = [CARE_HEADER] + [CARE_ROW] * 5
    assert len(convert_tabular(csv_bytes(rows), CARE_STANDARDS_CONFIG)) == 5


def test_values_are_trimmed(csv_bytes):
    row = ["  02/01/2025 ", " A Vs B  "] + CARE_ROW[2:]
    records = convert_tabular(csv_bytes([CARE_HEADER, row]), CARE_STANDARDS_CONFIG)
    assert records[0]["date"] == "02/01/2025"
    assert records[0]["caseName"] == "A Vs B"


def test_headers_match_case_insensitively(csv_bytes):
    header = [h.upper() for h in CARE_HEADER]
    assert len(convert_tabular(csv_bytes([header, CARE_ROW]), CARE_STANDARDS_CONFIG)) == 1


def test_single_digit_day_rejected(csv_bytes):
    row = ["2/1/2025"] + CARE_ROW[1:]
    with pytest.raises(RowValidationError) as exc:
        convert_tabular(csv_bytes([CARE_HEADER, row]), CARE_STANDARDS_CONFIG)
    assert exc.value.row_number == 1
    assert "Invalid date format '2/1/2025'" in str(exc.value)
    assert str(exc.value).startswith("Error in row 1:")


def test_impossible_calendar_date_rejected(csv_bytes):
    row = ["32/01/2025"] + CARE_ROW[1:]
    with pytest.raises(RowValidationError) as exc:
        convert_tabular(csv_bytes([CARE_HEADER, row]), CARE_STANDARDS_CONFIG)
    assert "Date does not exist in calendar" in str(exc.value)


def test_html_in_case_name_rejected(csv_bytes):
    row = [CARE_ROW[0], "<script>alert(1)</script>"] + CARE_ROW[2:]
    with pytest.raises(RowValidationError) as exc:
        convert_tabular(csv_bytes([CARE_HEADER, row]), CARE_STANDARDS_CONFIG)
    assert "HTML tags are not allowed" in str(exc.value)
    assert exc.value.field == "Case name"


def test_html_wins_over_format_errors(csv_bytes):
    row = ["<b>02/01/2025</b>"] + CARE_ROW[1:]
    with pytest.raises(RowValidationError) as exc:
        convert_tabular(csv_bytes([CARE_HEADER, row]), CARE_STANDARDS_CONFIG)
    assert "HTML tags are not allowed" in str(exc.value)
    assert "Invalid date format" not in str(exc.value)
    assert exc.value.field == "Date"


def test_error_names_offending_row(csv_bytes):
    bad = [CARE_ROW[0], ""] + CARE_ROW[2:]
    with pytest.raises(RowValidationError) as exc:
        convert_tabular(csv_bytes([CARE_HEADER, CARE_ROW, CARE_ROW, bad]), CARE_STANDARDS_CONFIG)
    assert exc.value.row_number == 3
    assert "Missing required field 'Case name'" in str(exc.value)


def test_missing_column_lists_all_expected(csv_bytes):
    header = CARE_HEADER[:-1]
    with pytest.raises(StructuralIngestError) as exc:
        convert_tabular(csv_bytes([header, CARE_ROW[:-1]]), CARE_STANDARDS_CONFIG)
    message = str(exc.value)
    assert message.startswith("Excel file must contain columns: Date, Case name")
    assert "Missing: Additional information" in message


def test_header_only_fails_min_rows(csv_bytes):
    with pytest.raises(StructuralIngestError, match="at least 1 data row"):
        convert_tabular(csv_bytes([CARE_HEADER]), CARE_STANDARDS_CONFIG)


def test_header_checked_before_row_count(csv_bytes):
    with pytest.raises(StructuralIngestError, match="must contain columns"):
        convert_tabular(csv_bytes([["Date", "Venue"]]), CARE_STANDARDS_CONFIG)


def test_optional_column_may_be_absent(csv_bytes):
    header = ["Venue", "Judge", "Time", "Case Number", "Case Details", "Hearing Type"]
    row = ["Court 1", "Mr Justice Smith", "10:30am", "KB-2025-001", "X v Y", "Trial"]
    records = convert_tabular(csv_bytes([header, row]), RCJ_STANDARD_CONFIG)
    assert records[0]["additionalInformation"] == ""
    assert records[0]["time"] == "10:30am"


def test_blank_rows_are_skipped(csv_bytes):
    data = csv_bytes([CARE_HEADER, CARE_ROW]) + b"\n,,,,,\n" + ",".join(CARE_ROW).encode("utf-8")
    assert len(convert_tabular(data, CARE_STANDARDS_CONFIG)) == 2


def test_empty_input_is_structural_error():
    with pytest.raises(StructuralIngestError):
        convert_tabular(b"", CARE_STANDARDS_CONFIG)


def test_zero_min_rows_accepts_header_only(csv_bytes):
    config = ListTypeConfig(fields=(FieldSpec("name", "Name"),), min_rows=0)
    assert convert_tabular(csv_bytes([["Name"]]), config) == []


def test_xlsx_workbook_is_read():
    buf = io.BytesIO()
    pd.DataFrame([CARE_ROW], columns=CARE_HEADER).to_excel(buf, index=False, engine="openpyxl")
    records = convert_tabular(buf.getvalue(), CARE_STANDARDS_CONFIG)
    assert records[0]["caseName"] == "A Vs B"
    assert records[0]["date"] == "02/01/2025"


def test_pick_sheet_by_name_then_position():
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        pd.DataFrame({"a": ["1"]}).to_excel(writer, sheet_name="First", index=False)
        pd.DataFrame({"b": ["2"]}).to_excel(writer, sheet_name="Planning Court", index=False)
    sheets = read_tabular_sheets(buf.getvalue())
    assert list(sheets) == ["First", "Planning Court"]
    assert pick_sheet(sheets, "planning court", 0).iloc[0, 0] == "b"
    assert pick_sheet(sheets, "missing", 0).iloc[0, 0] == "a"
    assert pick_sheet(sheets, "missing", 5) is None
