import logging
from flask import Blueprint, request, jsonify
from flasgger import swag_from
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from hearing_lists.api import config, constants, dependencies, models, state
from hearing_lists.api.extensions import limiter
from hearing_lists.data.artefact_store import InvalidArtefactIdError
from hearing_lists.ingest.errors import IngestError, RowValidationError, UnknownListTypeError
from hearing_lists.ingest.list_types import DEFAULT_REGISTRY
from hearing_lists.rendering.renderer import render_list
from hearing_lists.validation.schema_validator import validate_hearing_document

logger = logging.getLogger("api")

ingest_bp = Blueprint('ingest', __name__)


@ingest_bp.route("/api/list-types", methods=["GET"])
def list_types():
    return jsonify({"listTypes": [
        {"id": lt, **constants.LIST_TYPE_DESCRIPTIONS.get(lt, {})} for lt in DEFAULT_REGISTRY.list_types()
    ]})


@ingest_bp.route("/api/lists/<list_type>/convert", methods=["POST"])
@limiter.limit("30/minute")
@swag_from({
    'tags': ['ingest'],
    'consumes': ['multipart/form-data', 'application/octet-stream'],
    'parameters': [
        {'name': 'list_type', 'in': 'path', 'type': 'string', 'required': True},
        {'name': 'file', 'in': 'formData', 'type': 'file', 'required': False},
    ],
    'responses': {200: {'description': 'Converted records'}, 400: {'description': 'Invalid spreadsheet'},
                  404: {'description': 'Unknown list type'}}
})
def convert_list(list_type: str):
    auth = dependencies.require_api_key()
    if auth:
        return auth
    if not DEFAULT_REGISTRY.has(list_type):
        return jsonify({"error": "unknown_list_type", "details": str(UnknownListTypeError(list_type))}), 404
    buffer = dependencies.read_upload()
    if not buffer:
        raise BadRequest("Upload is empty")
    try:
        data = DEFAULT_REGISTRY.convert(list_type, buffer)
    except RowValidationError as e:
        state.record_ingest(list_type, accepted=False)
        logger.warning(f"[api] Rejected {list_type} upload: {e}")
        return jsonify({"error": "ingest_failed", "details": str(e), "row": e.row_number, "field": e.field}), 400
    except IngestError as e:
        state.record_ingest(list_type, accepted=False)
        logger.warning(f"[api] Rejected {list_type} upload: {e}")
        return jsonify({"error": "ingest_failed", "details": str(e)}), 400
    state.record_ingest(list_type, accepted=True)
    return jsonify({"listType": list_type, "data": data})


@ingest_bp.route("/api/lists/<list_type>/render", methods=["POST"])
@limiter.limit("60/minute")
@swag_from({
    'tags': ['render'],
    'consumes': ['application/json'],
    'parameters': [
        {'name': 'list_type', 'in': 'path', 'type': 'string', 'required': True},
        {'name': 'locale', 'in': 'query', 'type': 'string', 'enum': ['en', 'cy']},
        {'name': 'body', 'in': 'body', 'required': True, 'schema': {'type': 'object'}},
    ],
    'responses': {200: {'description': 'Rendered view'}}
})
def render_submitted_list(list_type: str):
    """Render already-converted data (the output of /convert, or a hearing document)."""
    try:
        query = models.RenderQuery(**request.args.to_dict())
    except ValidationError as ve:
        return jsonify({"error": "validation_failed", "details": ve.errors()}), 400
    raw = request.get_json(silent=True)
    if raw is None:
        raise BadRequest("Body must be JSON")
    try:
        view = render_list(list_type, raw, query.options(config.DEFAULT_LOCALE))
    except UnknownListTypeError as e:
        return jsonify({"error": "unknown_list_type", "details": str(e)}), 404
    except ValidationError as ve:
        return jsonify({"error": "validation_failed", "details": ve.errors()}), 400
    return jsonify(view.model_dump())


@ingest_bp.route("/api/documents/validate", methods=["POST"])
@swag_from({
    'tags': ['ingest'],
    'consumes': ['application/json'],
    'parameters': [{'name': 'body', 'in': 'body', 'required': True, 'schema': {'type': 'object'}}],
    'responses': {200: {'description': 'Validation result'}}
})
def validate_document():
    raw = request.get_json(silent=True)
    result = validate_hearing_document(raw)
    return jsonify(result.model_dump(by_alias=True))


@ingest_bp.route("/api/artefacts/<artefact_id>", methods=["PUT"])
@limiter.limit("30/minute")
def store_artefact(artefact_id: str):
    auth = dependencies.require_api_key()
    if auth:
        return auth
    raw = request.get_json(silent=True)
    result = validate_hearing_document(raw)
    if not result.is_valid:
        return jsonify({"error": "validation_failed", "details": result.errors}), 400
    try:
        dependencies.get_store().save_json(artefact_id, raw)
    except InvalidArtefactIdError as e:
        return jsonify({"error": "invalid_artefact_id", "details": str(e)}), 400
    return jsonify({"artefactId": artefact_id, "schemaVersion": result.schema_version}), 201
