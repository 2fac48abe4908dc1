from datetime import date

from hearing_lists.ingest.schemas import Address, PressCase
from hearing_lists.parsing.cases import (
    calculate_age, case_id_for, extract_postcode_outward, extract_press_cases, extract_public_cases,
    format_address, parse_date_of_birth, to_public_case, transform_hearing_to_case,
)
from hearing_lists.parsing.document import parse_hearing_document
from conftest import make_document, make_hearing

TODAY = date(2026, 1, 15)


def test_press_case_fields(press_document):
    cases = extract_press_cases(parse_hearing_document(press_document), TODAY)
    first = cases[0]
    assert first.name == "John Smith"
    assert first.postcode == "SE23"
    assert first.prosecutor == "TV Licensing"
    assert first.date_of_birth == date(1990, 1, 1)
    assert first.age == 36
    assert first.reference == "URN001"
    assert first.address == "1 High Street, London, SE23 6FH"
    assert first.offences[0].title == "Fail to pay TV licence"
    assert first.offences[0].reporting_restriction is False


def test_iso_dob_is_parsed(press_document):
    cases = extract_press_cases(parse_hearing_document(press_document), TODAY)
    assert cases[2].date_of_birth == date(2000, 3, 4)


def test_age_boundary():
    dob = date(2000, 1, 16)
    assert calculate_age(dob, TODAY) == 25
    assert calculate_age(date(2000, 1, 15), TODAY) == 26
    assert calculate_age(None, TODAY) is None


def test_unparseable_dob_degrades():
    assert parse_date_of_birth("not a date") is None
    assert parse_date_of_birth("31/02/1990") is None
    assert parse_date_of_birth("") is None
    hearing = make_hearing("A", "B", "garbage", "M1 1AA", "U", "P", "O")
    case = extract_press_cases(parse_hearing_document(make_document([hearing])), TODAY)[0]
    assert case.date_of_birth is None
    assert case.age is None


def test_postcode_outward():
    assert extract_postcode_outward("SE23 6FH") == "SE23"
    assert extract_postcode_outward("  EC1A 1BB ") == "EC1A"
    assert extract_postcode_outward("M1 2AA") == "M1"
    assert extract_postcode_outward("SW1") == "SW1"
    assert extract_postcode_outward("not-a-postcode") is None
    assert extract_postcode_outward(None) is None


def test_missing_accused_gives_unknown_name():
    hearing = make_hearing("A", "B", None, "M1 1AA", "U", "P", "O")
    hearing["party"] = [p for p in hearing["party"] if p["partyRole"] != "ACCUSED"]
    case = extract_press_cases(parse_hearing_document(make_document([hearing])), TODAY)[0]
    assert case.name == "Unknown"
    assert case.postcode is None
    assert case.prosecutor == "P"


def test_prosecutor_misspelling_accepted():
    hearing = make_hearing("A", "B", None, "M1 1AA", "U", "CPS", "O")
    hearing["party"][1]["partyRole"] = "Prosecuter"
    case = extract_press_cases(parse_hearing_document(make_document([hearing])), TODAY)[0]
    assert case.prosecutor == "CPS"


def test_case_ids_are_stable_and_unique(press_document):
    doc = parse_hearing_document(press_document)
    first = [c.case_id for c in extract_press_cases(doc, TODAY)]
    second = [c.case_id for c in extract_press_cases(doc, TODAY)]
    assert first == second
    assert len(set(first)) == len(first)
    assert case_id_for(0, "URN", "Name") != case_id_for(1, "URN", "Name")


def test_public_case_has_no_personal_fields(press_document):
    doc = parse_hearing_document(press_document)
    public = extract_public_cases(doc, TODAY)[0]
    dumped = public.model_dump()
    assert "date_of_birth" not in dumped
    assert "address" not in dumped
    assert public.offence == "Fail to pay TV licence"
    assert public.case_id == extract_press_cases(doc, TODAY)[0].case_id


def test_to_public_without_offences():
    case = PressCase(case_id="x", name="A B")
    assert to_public_case(case).offence is None


def test_format_address():
    assert format_address(Address(line=["1 Road", " "], town="Town", post_code="AB1 2CD")) == "1 Road, Town, AB1 2CD"
    assert format_address(Address()) is None
    assert format_address(None) is None


def test_organisation_accused():
    hearing = {
        "party": [{"partyRole": "ACCUSED", "organisationDetails": {
            "organisationName": "Acme Ltd", "address": {"postCode": "W1A 1AA"}}}],
    }
    doc = parse_hearing_document(make_document([hearing]))
    case = transform_hearing_to_case(doc.court_lists[0].court_house.court_room[0].session[0].sittings[0].hearing[0])
    assert case.name == "Acme Ltd"
    assert case.postcode == "W1A"
    assert case.reference is None
