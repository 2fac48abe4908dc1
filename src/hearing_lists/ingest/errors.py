"""Exception types raised while converting tabular submissions."""
from __future__ import annotations
from typing import Optional


class IngestError(Exception):
    """Base class for every ingest failure."""


class StructuralIngestError(IngestError):
    """The sheet as a whole is unusable (wrong columns, too few rows, no sheet)."""


class RowValidationError(IngestError):
    """A single row/field broke a rule. Carries the 1-based data row number."""

    def __init__(self, row_number: int, field: Optional[str], detail: str):
        self.row_number = row_number
        self.field = field
        self.detail = detail
        super().__init__(f"Error in row {row_number}: {detail}")


class FieldValidationError(ValueError):
    """Raised by field validators; the ingest loop adds the row number."""


class UnknownListTypeError(IngestError):
    def __init__(self, list_type: str):
        self.list_type = list_type
        super().__init__(f"No converter registered for list type '{list_type}'")
