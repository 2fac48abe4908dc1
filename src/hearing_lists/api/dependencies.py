import logging
from typing import Any, Dict
from flask import request, jsonify
from werkzeug.datastructures import MultiDict
from werkzeug.exceptions import BadRequest

from hearing_lists.api import config, constants, state
from hearing_lists.data.artefact_store import ArtefactStore

logger = logging.getLogger("api")


def get_store() -> ArtefactStore:
    if state.store is None:
        state.store = ArtefactStore(config.ARTEFACT_STORE_DIR)
        logger.info(f"[api] Artefact store at {state.store.base_dir}")
    return state.store


def require_api_key():
    if config.API_KEY:
        key = request.headers.get("X-API-Key", "")
        if key != config.API_KEY:
            return jsonify({"error": "Unauthorized"}), 401
    return None


def query_params(args: MultiDict, multi=('postcode', 'prosecutor')) -> Dict[str, Any]:
    """Flatten query args, keeping repeatable parameters as lists."""
    out: Dict[str, Any] = {}
    for key in args.keys():
        out[key] = args.getlist(key) if key in multi else args.get(key)
    return out


def read_upload() -> bytes:
    """Spreadsheet bytes from a multipart ``file`` field or the raw request body."""
    upload = request.files.get(constants.UPLOAD_FIELD)
    if upload is None:
        return request.get_data()
    filename = (upload.filename or '').lower()
    if filename and not filename.endswith(constants.SPREADSHEET_EXTENSIONS):
        raise BadRequest(f"Unsupported file type; expected one of {', '.join(constants.SPREADSHEET_EXTENSIONS)}")
    return upload.read()
