from dataclasses import asdict
from flask import Blueprint, request, jsonify
from flasgger import swag_from
from pydantic import ValidationError

from hearing_lists.api import config, dependencies, models
from hearing_lists.api.extensions import limiter
from hearing_lists.data.artefact_store import (
    ArtefactNotFoundError, DocumentValidationError, InvalidArtefactIdError,
)
from hearing_lists.rendering.locales import CIVIL_AND_FAMILY_DAILY_CAUSE_LIST
from hearing_lists.rendering.renderer import render_cause_list
from hearing_lists.search import service

cases_bp = Blueprint('cases', __name__)

_CASE_QUERY_PARAMS = [
    {'name': 'artefact_id', 'in': 'path', 'type': 'string', 'required': True},
    {'name': 'q', 'in': 'query', 'type': 'string'},
    {'name': 'postcode', 'in': 'query', 'type': 'array', 'items': {'type': 'string'}, 'collectionFormat': 'multi'},
    {'name': 'prosecutor', 'in': 'query', 'type': 'array', 'items': {'type': 'string'}, 'collectionFormat': 'multi'},
    {'name': 'page', 'in': 'query', 'type': 'integer'},
]


@cases_bp.errorhandler(InvalidArtefactIdError)
def _invalid_artefact(e):
    return jsonify({"error": "invalid_artefact_id", "details": str(e)}), 400


@cases_bp.errorhandler(ArtefactNotFoundError)
def _missing_artefact(e):
    return jsonify({"error": "not_found", "details": str(e)}), 404


@cases_bp.errorhandler(DocumentValidationError)
def _invalid_document(e):
    return jsonify({"error": "invalid_document", "details": e.errors}), 422


def _page_payload(page):
    return {
        "cases": [c.model_dump(mode='json', by_alias=True) for c in page.cases],
        "totalCases": page.total_cases,
        "page": page.page,
        "pageSize": page.page_size,
        "totalPages": page.total_pages,
    }


@cases_bp.route("/api/artefacts/<artefact_id>/summary", methods=["GET"])
def list_summary(artefact_id: str):
    summary = service.get_list_summary(dependencies.get_store(), artefact_id)
    return jsonify({
        "artefactId": summary.artefact_id,
        "listType": summary.list_type.value,
        "publicationDate": summary.publication_date,
        "caseCount": summary.case_count,
        "prosecutors": summary.prosecutors,
        "postcodes": {**asdict(summary.postcodes),
                      "has_meta_group_postcodes": summary.postcodes.has_meta_group_postcodes},
    })


@cases_bp.route("/api/artefacts/<artefact_id>/cases/public", methods=["GET"])
@limiter.limit("60/minute")
@swag_from({'tags': ['cases'], 'parameters': _CASE_QUERY_PARAMS, 'responses': {200: {'description': 'Page of public cases'}}})
def public_cases(artefact_id: str):
    try:
        query = models.CaseQuery(**dependencies.query_params(request.args))
    except ValidationError as ve:
        return jsonify({"error": "validation_failed", "details": ve.errors()}), 400
    page = service.get_public_cases(dependencies.get_store(), artefact_id, query.filters(), query.page,
                                    config.PUBLIC_CASES_PER_PAGE)
    return jsonify(_page_payload(page))


@cases_bp.route("/api/artefacts/<artefact_id>/cases/press", methods=["GET"])
@limiter.limit("60/minute")
@swag_from({'tags': ['cases'], 'parameters': _CASE_QUERY_PARAMS, 'responses': {200: {'description': 'Page of press cases'}}})
def press_cases(artefact_id: str):
    auth = dependencies.require_api_key()
    if auth:
        return auth
    try:
        query = models.CaseQuery(**dependencies.query_params(request.args))
    except ValidationError as ve:
        return jsonify({"error": "validation_failed", "details": ve.errors()}), 400
    page = service.get_press_cases(dependencies.get_store(), artefact_id, query.filters(), query.page,
                                   config.PRESS_CASES_PER_PAGE)
    return jsonify(_page_payload(page))


@cases_bp.route("/api/artefacts/<artefact_id>/cases/press/all", methods=["GET"])
def all_press_cases(artefact_id: str):
    auth = dependencies.require_api_key()
    if auth:
        return auth
    try:
        query = models.CaseQuery(**dependencies.query_params(request.args))
    except ValidationError as ve:
        return jsonify({"error": "validation_failed", "details": ve.errors()}), 400
    cases = service.get_all_press_cases(dependencies.get_store(), artefact_id, query.filters())
    return jsonify({"cases": [c.model_dump(mode='json', by_alias=True) for c in cases], "totalCases": len(cases)})


@cases_bp.route("/api/artefacts/<artefact_id>/render", methods=["GET"])
@swag_from({
    'tags': ['render'],
    'parameters': [
        {'name': 'artefact_id', 'in': 'path', 'type': 'string', 'required': True},
        {'name': 'locale', 'in': 'query', 'type': 'string', 'enum': ['en', 'cy']},
        {'name': 'content_date', 'in': 'query', 'type': 'string', 'format': 'date'},
    ],
    'responses': {200: {'description': 'Rendered cause list'}}
})
def render_artefact(artefact_id: str):
    try:
        query = models.RenderQuery(**request.args.to_dict())
    except ValidationError as ve:
        return jsonify({"error": "validation_failed", "details": ve.errors()}), 400
    doc = dependencies.get_store().load_hearing_document(artefact_id)
    view = render_cause_list(doc, query.options(config.DEFAULT_LOCALE), CIVIL_AND_FAMILY_DAILY_CAUSE_LIST)
    return jsonify(view.model_dump())
