import io
import json

import pytest

from hearing_lists.api import state
from hearing_lists.api.server import app
from hearing_lists.data.artefact_store import ArtefactStore

CARE_CSV = (
    "Date,Case name,Hearing length,Hearing type,Venue,Additional information\n"
    "02/01/2025,A Vs B,1 hour,Substantive hearing,Remote - Teams,Listed for 10am\n"
)


@pytest.fixture
def client(tmp_path, press_document):
    state.store = ArtefactStore(str(tmp_path))
    state.store.save_json("press-1", press_document)
    with app.test_client() as c:
        yield c
    state.store = None


def test_health(client):
    r = client.get('/api/health')
    assert r.status_code == 200
    assert r.get_json()['status'] == 'ok'


def test_list_types(client):
    r = client.get('/api/list-types')
    ids = [lt['id'] for lt in r.get_json()['listTypes']]
    assert 'CARE_STANDARDS_TRIBUNAL_WEEKLY_HEARING_LIST' in ids


def test_convert_upload(client):
    data = {'file': (io.BytesIO(CARE_CSV.encode('utf-8')), 'list.csv')}
    r = client.post('/api/lists/CARE_STANDARDS_TRIBUNAL_WEEKLY_HEARING_LIST/convert',
                    data=data, content_type='multipart/form-data')
    assert r.status_code == 200
    assert r.get_json()['data'][0]['caseName'] == 'A Vs B'


def test_convert_reports_row_error(client):
    body = CARE_CSV.replace("02/01/2025", "2/1/2025").encode('utf-8')
    r = client.post('/api/lists/CARE_STANDARDS_TRIBUNAL_WEEKLY_HEARING_LIST/convert',
                    data=body, content_type='text/csv')
    assert r.status_code == 400
    j = r.get_json()
    assert j['error'] == 'ingest_failed'
    assert j['row'] == 1
    assert j['details'].startswith('Error in row 1:')


def test_convert_rejects_unsupported_extension(client):
    data = {'file': (io.BytesIO(b'x'), 'list.pdf')}
    r = client.post('/api/lists/CARE_STANDARDS_TRIBUNAL_WEEKLY_HEARING_LIST/convert',
                    data=data, content_type='multipart/form-data')
    assert r.status_code == 400


def test_convert_unknown_list_type(client):
    r = client.post('/api/lists/NOPE/convert', data=b'a,b\n1,2\n', content_type='text/csv')
    assert r.status_code == 404
    assert r.get_json()['error'] == 'unknown_list_type'


def test_validate_document(client):
    r = client.post('/api/documents/validate', data=json.dumps({"document": {}}), content_type='application/json')
    j = r.get_json()
    assert j['isValid'] is False
    assert j['schemaVersion'] == '1.0'
    assert j['errors'] == ["document: must have required property 'publicationDate'"]


def test_store_rejects_traversal(client, press_document):
    r = client.put('/api/artefacts/bad..id', data=json.dumps(press_document), content_type='application/json')
    assert r.status_code == 400
    assert r.get_json()['error'] == 'invalid_artefact_id'


def test_summary_and_public_cases(client):
    r = client.get('/api/artefacts/press-1/summary')
    assert r.status_code == 200
    assert r.get_json()['listType'] == 'press'
    assert r.get_json()['caseCount'] == 4

    r = client.get('/api/artefacts/press-1/cases/public?postcode=LONDON_POSTCODES&prosecutor=TV+Licensing')
    j = r.get_json()
    assert j['totalCases'] == 2
    assert [c['name'] for c in j['cases']] == ['Ève Adams', 'John Smith']
    assert 'dateOfBirth' not in j['cases'][0]


def test_press_cases_camel_case(client):
    r = client.get('/api/artefacts/press-1/cases/press?q=smith')
    case = r.get_json()['cases'][0]
    assert case['dateOfBirth'] == '1990-01-01'
    assert case['caseId']


def test_invalid_page(client):
    r = client.get('/api/artefacts/press-1/cases/public?page=0')
    assert r.status_code == 400
    assert r.get_json()['error'] == 'validation_failed'


def test_missing_artefact(client):
    assert client.get('/api/artefacts/absent/summary').status_code == 404


def test_render_artefact_welsh(client):
    r = client.get('/api/artefacts/press-1/render?locale=cy')
    j = r.get_json()
    assert j['locale'] == 'cy'
    assert j['header']['lastUpdatedDate'] == '15 Ionawr 2026'


def test_render_submitted_records(client):
    records = [{"venue": "Court 1", "judge": "J", "time": "2.30pm", "caseNumber": "1", "caseDetails": "X v Y",
                "hearingType": "Trial", "additionalInformation": ""}]
    r = client.post('/api/lists/RCJ_STANDARD_DAILY_CAUSE_LIST/render', data=json.dumps(records),
                    content_type='application/json')
    assert r.status_code == 200
    assert r.get_json()['sections'][0]['hearings'][0]['time'] == '2:30pm'


def test_metrics_endpoint(client):
    client.get('/api/health')
    r = client.get('/metrics')
    assert r.status_code == 200
    assert 'text/plain' in r.content_type
    assert 'hearing_lists_requests_total' in r.get_data(as_text=True)


def test_version(client):
    j = client.get('/version').get_json()
    assert 'version' in j
    assert len(j['listTypes']) == 16
    assert 'MANCHESTER_ADMINISTRATIVE_COURT_DAILY_CAUSE_LIST' in j['listTypes']


def _mistype_surname(document):
    hearing = document["courtLists"][0]["courtHouse"]["courtRoom"][0]["session"][0]["sittings"][0]["hearing"][0]
    hearing["party"][0]["individualDetails"]["individualSurname"] = 123
    return document


def test_store_rejects_mistyped_field(client, press_document):
    r = client.put('/api/artefacts/mixed', data=json.dumps(_mistype_surname(press_document)),
                   content_type='application/json')
    assert r.status_code == 400
    j = r.get_json()
    assert j['error'] == 'validation_failed'
    assert any('individualSurname' in d for d in j['details'])


def test_mistyped_stored_document_is_unprocessable(client, press_document):
    state.store.save_json('mixed', _mistype_surname(press_document))
    for path in ('/cases/public', '/cases/press', '/summary'):
        r = client.get('/api/artefacts/mixed' + path)
        assert r.status_code == 422
        assert r.get_json()['error'] == 'invalid_document'
