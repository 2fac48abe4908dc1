"""Blocking, file backed lookup of stored artefacts by id.

Artefacts are JSON files named ``<artefact_id>.json`` under a single base
directory. Ids are checked before any path is built.
"""
from __future__ import annotations
import json
import logging
import os
import re
from typing import Any, List

from pydantic import ValidationError

from hearing_lists.ingest.schemas import HearingDocument
from hearing_lists.parsing.document import parse_hearing_document
from hearing_lists.validation.schema_validator import validate_hearing_document

logger = logging.getLogger(__name__)

SAFE_ARTEFACT_ID = re.compile(r'^[A-Za-z0-9_-]+$')


class InvalidArtefactIdError(ValueError):
    pass


class ArtefactNotFoundError(LookupError):
    def __init__(self, artefact_id: str):
        self.artefact_id = artefact_id
        super().__init__(f"Artefact '{artefact_id}' not found")


class DocumentValidationError(ValueError):
    """Stored document does not have the hearing document shape."""

    def __init__(self, artefact_id: str, errors: List[str]):
        self.artefact_id = artefact_id
        self.errors = errors
        super().__init__(f"Artefact '{artefact_id}' failed validation with {len(errors)} error(s)")


def validate_artefact_id(artefact_id: str) -> None:
    if not artefact_id or not SAFE_ARTEFACT_ID.match(artefact_id):
        raise InvalidArtefactIdError("Invalid artefactId: must contain only alphanumerics, hyphens, and underscores")


class ArtefactStore:
    def __init__(self, base_dir: str):
        self.base_dir = os.path.abspath(base_dir)

    def path_for(self, artefact_id: str) -> str:
        validate_artefact_id(artefact_id)
        path = os.path.abspath(os.path.join(self.base_dir, f"{artefact_id}.json"))
        if not path.startswith(self.base_dir + os.sep):
            raise InvalidArtefactIdError("Invalid artefactId: attempted path traversal")
        return path

    def load_json(self, artefact_id: str) -> Any:
        path = self.path_for(artefact_id)
        if not os.path.exists(path):
            raise ArtefactNotFoundError(artefact_id)
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def save_json(self, artefact_id: str, payload: Any) -> str:
        path = self.path_for(artefact_id)
        os.makedirs(self.base_dir, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
        logger.info("Stored artefact %s", artefact_id)
        return path

    def load_hearing_document(self, artefact_id: str) -> HearingDocument:
        raw = self.load_json(artefact_id)
        result = validate_hearing_document(raw)
        if not result.is_valid:
            logger.warning("Artefact %s failed validation: %s", artefact_id, result.errors)
            raise DocumentValidationError(artefact_id, result.errors)
        try:
            return parse_hearing_document(raw)
        except ValidationError as e:
            errors = [f"{'.'.join(str(p) for p in err['loc']) or 'root'}: {err['msg']}" for err in e.errors()]
            logger.warning("Artefact %s does not match the document model: %s", artefact_id, errors)
            raise DocumentValidationError(artefact_id, errors) from e


__all__ = [
    'SAFE_ARTEFACT_ID', 'InvalidArtefactIdError', 'ArtefactNotFoundError', 'DocumentValidationError',
    'validate_artefact_id', 'ArtefactStore',
]
