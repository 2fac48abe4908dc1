import os
import sys
import copy

import pytest

# Ensure the `src/` directory is on sys.path so we can import `hearing_lists` package
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)


def make_hearing(forenames, surname, dob, postcode, urn, prosecutor, offence_title):
    accused = {
        "partyRole": "ACCUSED",
        "individualDetails": {
            "individualForenames": forenames,
            "individualSurname": surname,
            "address": {"line": ["1 High Street"], "town": "London", "postCode": postcode},
        },
    }
    if dob is not None:
        accused["individualDetails"]["dateOfBirth"] = dob
    return {
        "case": [{"caseUrn": urn}],
        "party": [
            accused,
            {"partyRole": "PROSECUTOR", "organisationDetails": {"organisationName": prosecutor}},
        ],
        "offence": [{"offenceTitle": offence_title, "offenceWording": f"{offence_title} wording",
                     "reportingRestriction": False}],
    }


PRESS_HEARINGS = [
    make_hearing("John", "Smith", "01/01/1990", "SE23 6FH", "URN001", "TV Licensing", "Fail to pay TV licence"),
    make_hearing("Alice", "Brown", "15/06/1985", "M1 1AA", "URN002", "DVLA", "Speeding"),
    make_hearing("Ève", "Adams", "2000-03-04", "EC1A 1BB", "URN003", "TV Licensing", "Fail to pay TV licence"),
    make_hearing("bob", "Clark", "31/12/1970", "N1 9GU", "URN004", "Transport for London", "Fare evasion"),
]


def make_document(hearings, publication_date="2026-01-15T14:30:00Z"):
    return {
        "document": {"publicationDate": publication_date},
        "venue": {
            "venueName": "Oxford Combined Court Centre",
            "venueAddress": {"line": ["St Aldate's"], "town": "Oxford", "postCode": "OX1 1TL"},
            "venueContact": {"venueEmail": "court@example.gov.uk", "venueTelephone": "01865 264 200"},
        },
        "courtLists": [{
            "courtHouse": {
                "courtHouseName": "Oxford",
                "courtRoom": [{
                    "courtRoomName": "Courtroom 1",
                    "session": [{
                        "judiciary": [
                            {"johKnownAs": "District Judge Jones", "isPresiding": False},
                            {"johKnownAs": "Her Honour Judge Patel", "isPresiding": True},
                        ],
                        "sessionChannel": ["VIDEO HEARING"],
                        "sittings": [{
                            "sittingStart": "2026-01-15T10:00:00Z",
                            "sittingEnd": "2026-01-15T11:30:00Z",
                            "hearing": copy.deepcopy(hearings),
                        }],
                    }],
                }],
            },
        }],
    }


@pytest.fixture
def press_document():
    return make_document(PRESS_HEARINGS)


@pytest.fixture
def public_document():
    hearings = [make_hearing("John", "Smith", None, "SE23 6FH", "URN001", "TV Licensing", "Fail to pay TV licence")]
    return make_document(hearings)


@pytest.fixture
def csv_bytes():
    def _build(rows):
        return "\n".join(",".join(r) for r in rows).encode("utf-8")
    return _build
