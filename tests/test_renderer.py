import copy
from datetime import date

import pytest

from hearing_lists.ingest.errors import UnknownListTypeError
from hearing_lists.ingest.list_types import (
    BRISTOL_CARDIFF_ADMINISTRATIVE_COURT, CARE_STANDARDS_TRIBUNAL, COURT_OF_APPEAL_CIVIL, KINGS_BENCH_MASTERS,
    LONDON_ADMINISTRATIVE_COURT, RCJ_STANDARD_DAILY_CAUSE_LIST, RCJ_STANDARD_LIST_TYPES,
)
from hearing_lists.ingest.schemas import Party
from hearing_lists.rendering.locales import CIVIL_AND_FAMILY_DAILY_CAUSE_LIST
from hearing_lists.rendering.renderer import (
    RenderOptions, aggregate_parties, convert_party_role, render_cause_list, render_list,
)

CARE_RECORDS = [{
    "date": "02/01/2025", "caseName": "A Vs B", "hearingLength": "1 hour",
    "hearingType": "Substantive hearing", "venue": "Remote - Teams", "additionalInformation": "None",
}]

STANDARD_RECORD = {
    "venue": "Court 1", "judge": "Mr Justice Smith", "time": "2.30pm", "caseNumber": "KB-1",
    "caseDetails": "X v Y", "hearingType": "Trial", "additionalInformation": "",
}


def test_cause_list_header_and_rows(press_document):
    view = render_cause_list(press_document, RenderOptions(locale="en", content_date=date(2026, 1, 16)))
    assert view.header["listTitle"] == "Civil and Family Daily Cause List"
    assert view.header["locationName"] == "Oxford Combined Court Centre"
    assert view.header["contentDate"] == "16 January 2026"
    assert view.header["lastUpdated"] == "15 January 2026 at 2:30pm"
    assert view.header["addressLines"] == ["St Aldate's", "OX1 1TL"]
    assert [s.name for s in view.sections] == ["Courtroom 1"]
    row = view.sections[0].hearings[0]
    assert row["time"] == "10am"
    assert row["duration"] == "1 hour 30 mins"
    assert row["durationAsHours"] == 1
    assert row["durationAsMinutes"] == 30
    assert row["caseHearingChannel"] == "VIDEO HEARING"
    assert row["formattedJudiciaries"] == "Her Honour Judge Patel, District Judge Jones"
    assert row["caseUrn"] == "URN001"
    assert len(view.sections[0].hearings) == 4
    assert view.open_justice == {
        "venueName": "Oxford Combined Court Centre", "email": "court@example.gov.uk", "phone": "01865 264 200",
    }


def test_cause_list_welsh(press_document):
    view = render_cause_list(press_document, RenderOptions(locale="cy"))
    assert view.locale == "cy"
    assert view.header["listTitle"] == "Rhestr Achosion Dyddiol Sifil a Theulu"
    assert view.header["lastUpdatedDate"] == "15 Ionawr 2026"
    assert view.header["lastUpdated"] == "15 Ionawr 2026 am 2:30pm"


def test_repeated_renders_across_locales_are_stable(press_document):
    first = render_cause_list(press_document, RenderOptions(locale="en"))
    welsh = render_cause_list(press_document, RenderOptions(locale="cy"))
    second = render_cause_list(press_document, RenderOptions(locale="en"))
    assert welsh.header["listTitle"] != first.header["listTitle"]
    assert first == second


def test_render_does_not_mutate_input(press_document):
    snapshot = copy.deepcopy(press_document)
    render_cause_list(press_document, RenderOptions())
    assert press_document == snapshot


def test_sitting_channel_preferred(press_document):
    sitting = press_document["courtLists"][0]["courtHouse"]["courtRoom"][0]["session"][0]["sittings"][0]
    sitting["channel"] = ["In person", "Video"]
    view = render_cause_list(press_document, RenderOptions())
    assert view.sections[0].hearings[0]["caseHearingChannel"] == "In person, Video"


def test_party_roles():
    assert convert_party_role("Applicant/Petitioner") == "APPLICANT_PETITIONER"
    assert convert_party_role("applicant") == "APPLICANT_PETITIONER"
    assert convert_party_role("Respondent Representative") == "RESPONDENT_REPRESENTATIVE"
    parties = [
        Party.model_validate({"partyRole": "APPLICANT_PETITIONER", "individualDetails": {"individualForenames": "Ann", "individualSurname": "Lee"}}),
        Party.model_validate({"partyRole": "applicant", "organisationDetails": {"organisationName": "Lee Holdings"}}),
        Party.model_validate({"partyRole": "RESPONDENT", "organisationDetails": {"organisationName": "Council"}}),
    ]
    grouped = aggregate_parties(parties)
    assert grouped["applicant"] == "Ann Lee, Lee Holdings"
    assert grouped["respondent"] == "Council"
    assert grouped["applicantRepresentative"] == ""


def test_care_standards_dates_by_locale():
    view = render_list(CARE_STANDARDS_TRIBUNAL, CARE_RECORDS, RenderOptions(locale="cy", content_date=date(2025, 1, 2)))
    assert view.sections[0].hearings[0]["date"] == "2 Ionawr 2025"
    assert view.header["weekCommencingDate"] == "2 Ionawr 2025"
    assert CARE_RECORDS[0]["date"] == "02/01/2025"


def test_daily_hearings_normalise_time():
    view = render_list(RCJ_STANDARD_DAILY_CAUSE_LIST, [STANDARD_RECORD], RenderOptions())
    assert view.sections[0].hearings[0]["time"] == "2:30pm"
    assert STANDARD_RECORD["time"] == "2.30pm"


def test_shared_layout_keeps_its_own_title():
    view = render_list(BRISTOL_CARDIFF_ADMINISTRATIVE_COURT, [STANDARD_RECORD], RenderOptions())
    assert view.header["listTitle"] == "Bristol and Cardiff Administrative Court Daily Cause List"
    assert view.sections[0].hearings[0]["time"] == "2:30pm"
    welsh = render_list(KINGS_BENCH_MASTERS, [STANDARD_RECORD], RenderOptions(locale="cy"))
    assert welsh.header["listTitle"] == "Rhestr Achosion Dyddiol Meistri Mainc y Brenin"
    for list_type in RCJ_STANDARD_LIST_TYPES:
        assert render_list(list_type, [STANDARD_RECORD], RenderOptions()).header["listTitle"]


def test_two_sheet_renderers():
    admin = render_list(LONDON_ADMINISTRATIVE_COURT, {"mainHearings": [STANDARD_RECORD], "planningCourt": []}, RenderOptions())
    assert [s.name for s in admin.sections] == ["mainHearings", "planningCourt"]
    assert admin.sections[1].hearings == []
    coa = render_list(COURT_OF_APPEAL_CIVIL, {
        "dailyHearings": [], "futureJudgments": [{**STANDARD_RECORD, "date": "16/01/2026"}],
    }, RenderOptions())
    assert coa.sections[1].hearings[0]["date"] == "16 January 2026"
    assert coa.header["listTitle"] == "Court of Appeal (Civil Division) Daily Cause List"


def test_list_title_override(press_document):
    view = render_list(CIVIL_AND_FAMILY_DAILY_CAUSE_LIST, press_document, RenderOptions(list_title="Custom"))
    assert view.header["listTitle"] == "Custom"


def test_unknown_renderer():
    with pytest.raises(UnknownListTypeError):
        render_list("NOPE", [], RenderOptions())
