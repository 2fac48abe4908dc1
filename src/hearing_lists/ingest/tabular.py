"""Config driven spreadsheet -> record conversion.

A submission is materialised in full (XLSX through pandas/openpyxl, anything
else as CSV), the first row is taken as the header and every following row
is checked field by field against a ``ListTypeConfig``. Conversion stops at
the first violation; the raised ``RowValidationError`` names the row (1-based,
header excluded) and the field label.
"""
from __future__ import annotations
import io
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

import pandas as pd

from hearing_lists.ingest.errors import FieldValidationError, RowValidationError, StructuralIngestError
from hearing_lists.ingest.validators import Validator, validate_no_html_tags

logger = logging.getLogger(__name__)

NormalizedRecord = Dict[str, str]

XLSX_MAGIC = b'PK\x03\x04'


@dataclass(frozen=True)
class FieldSpec:
    field_name: str
    header: str
    required: bool = True
    validators: Tuple[Validator, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ListTypeConfig:
    fields: Tuple[FieldSpec, ...]
    min_rows: int = 1

    @property
    def headers(self) -> List[str]:
        return [f.header for f in self.fields]


def _is_xlsx(buffer: bytes) -> bool:
    return buffer[:4] == XLSX_MAGIC


def _clean_frame(frame: pd.DataFrame) -> pd.DataFrame:
    frame = frame.fillna('').astype(str)
    if frame.empty:
        return frame
    blank = frame.apply(lambda row: all(not str(v).strip() for v in row), axis=1)
    return frame[~blank].reset_index(drop=True)


def read_tabular(buffer: bytes, sheet: Union[int, str] = 0) -> pd.DataFrame:
    """Read one sheet as a header-less frame of strings (row 0 is the header)."""
    if not buffer:
        raise StructuralIngestError("Excel file must contain at least one worksheet")
    if _is_xlsx(buffer):
        try:
            frame = pd.read_excel(io.BytesIO(buffer), sheet_name=sheet, header=None, dtype=str, keep_default_na=False, engine='openpyxl')
        except (ValueError, IndexError, KeyError) as e:
            raise StructuralIngestError(f"Unable to read worksheet '{sheet}': {e}") from e
    else:
        try:
            frame = pd.read_csv(io.BytesIO(buffer), header=None, dtype=str, keep_default_na=False,
                                skip_blank_lines=True, encoding='utf-8-sig')
        except pd.errors.EmptyDataError as e:
            raise StructuralIngestError("Excel file must contain at least one worksheet") from e
        except (pd.errors.ParserError, UnicodeDecodeError) as e:
            raise StructuralIngestError(f"Unable to read tabular data: {e}") from e
    return _clean_frame(frame)


def read_tabular_sheets(buffer: bytes) -> Dict[str, pd.DataFrame]:
    """Every worksheet in workbook order. A CSV is a single sheet called ``Sheet1``."""
    if not buffer:
        raise StructuralIngestError("Excel file must contain at least one worksheet")
    if not _is_xlsx(buffer):
        return {'Sheet1': read_tabular(buffer)}
    try:
        sheets = pd.read_excel(io.BytesIO(buffer), sheet_name=None, header=None, dtype=str, keep_default_na=False, engine='openpyxl')
    except ValueError as e:
        raise StructuralIngestError(f"Unable to read workbook: {e}") from e
    if not sheets:
        raise StructuralIngestError("Excel file must contain at least one worksheet")
    return {name: _clean_frame(frame) for name, frame in sheets.items()}


def _header_index(header_row: Sequence[str]) -> Dict[str, int]:
    index: Dict[str, int] = {}
    for pos, cell in enumerate(header_row):
        key = str(cell).strip().lower()
        if key and key not in index:
            index[key] = pos
    return index


def validate_headers(header_row: Sequence[str], config: ListTypeConfig) -> Dict[str, int]:
    """Map each configured field to its column position.

    Raises ``StructuralIngestError`` listing every expected column when a
    required header is absent.
    """
    index = _header_index(header_row)
    missing = [f.header for f in config.fields if f.required and f.header.lower() not in index]
    if missing:
        raise StructuralIngestError(
            f"Excel file must contain columns: {', '.join(config.headers)}. Missing: {', '.join(missing)}"
        )
    return {f.field_name: index[f.header.lower()] for f in config.fields if f.header.lower() in index}


def parse_row(cells: Sequence[str], row_number: int, config: ListTypeConfig,
              positions: Dict[str, int]) -> NormalizedRecord:
    record: NormalizedRecord = {}
    for spec in config.fields:
        pos = positions.get(spec.field_name)
        value = str(cells[pos]).strip() if pos is not None and pos < len(cells) else ''
        if not value:
            if spec.required:
                raise RowValidationError(row_number, spec.header, f"Missing required field '{spec.header}'")
            record[spec.field_name] = ''
            continue
        try:
            validate_no_html_tags(value, spec.header)
            for validator in spec.validators:
                validator(value, spec.header)
        except FieldValidationError as e:
            raise RowValidationError(row_number, spec.header, str(e)) from e
        record[spec.field_name] = value
    return record


def convert_frame(frame: pd.DataFrame, config: ListTypeConfig) -> List[NormalizedRecord]:
    if frame.empty:
        if config.min_rows == 0:
            return []
        raise StructuralIngestError(
            f"Excel file must contain columns: {', '.join(config.headers)}. Missing: {', '.join(f.header for f in config.fields if f.required)}"
        )
    rows = frame.values.tolist()
    positions = validate_headers(rows[0], config)
    data_rows = rows[1:]
    if len(data_rows) < config.min_rows:
        plural = 's' if config.min_rows > 1 else ''
        raise StructuralIngestError(f"Excel file must contain at least {config.min_rows} data row{plural}")
    records = [parse_row(cells, i, config, positions) for i, cells in enumerate(data_rows, start=1)]
    logger.debug("Converted %d rows", len(records))
    return records


def convert_tabular(buffer: bytes, config: ListTypeConfig, sheet: Union[int, str] = 0) -> List[NormalizedRecord]:
    """Parse ``buffer`` and validate every row against ``config``."""
    return convert_frame(read_tabular(buffer, sheet), config)


def pick_sheet(sheets: Dict[str, pd.DataFrame], name: str, position: int) -> Optional[pd.DataFrame]:
    """Sheet by name (case-insensitive), falling back to its position."""
    for sheet_name, frame in sheets.items():
        if str(sheet_name).strip().lower() == name.lower():
            return frame
    frames = list(sheets.values())
    return frames[position] if position < len(frames) else None


__all__ = [
    'NormalizedRecord', 'FieldSpec', 'ListTypeConfig', 'read_tabular', 'read_tabular_sheets',
    'validate_headers', 'parse_row', 'convert_frame', 'convert_tabular', 'pick_sheet',
]
