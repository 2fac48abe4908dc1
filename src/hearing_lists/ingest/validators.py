"""Per-field validators used by the list type configurations.

Each validator takes ``(value, label)`` and raises ``FieldValidationError``
with a human readable detail. Validators only see non-empty, trimmed values.
"""
from __future__ import annotations
import re
from datetime import date
from typing import Callable, Pattern

from hearing_lists.ingest.errors import FieldValidationError

Validator = Callable[[str, str], None]

HTML_TAG_PATTERN = re.compile(r'<[^>]+>')
DD_MM_YYYY_PATTERN = re.compile(r'^\d{2}/\d{2}/\d{4}$')

# h, h:mm or h.mm followed by am/pm; hour restricted to 1-12
STRICT_TIME_PATTERN = re.compile(r'^(1[0-2]|[1-9])([:.][0-5]\d)?\s*[ap]m$', re.IGNORECASE)
# Same shape without the hour range check
SIMPLE_TIME_PATTERN = re.compile(r'^\d{1,2}([:.]\d{2})?\s*[ap]m$', re.IGNORECASE)

TIME_FORMAT_HINT = "h:mma (e.g., 9:30am) or ha (e.g., 2pm)"


def validate_no_html_tags(value: str, label: str) -> None:
    if HTML_TAG_PATTERN.search(value):
        raise FieldValidationError(f"Invalid content in '{label}': HTML tags are not allowed")


def validate_date_format(pattern: Pattern[str] = DD_MM_YYYY_PATTERN,
                         expected: str = "dd/MM/yyyy (e.g., 02/01/2025)") -> Validator:
    """Build a validator for ``dd/MM/yyyy`` style dates.

    The pattern check comes first; a value that matches is then checked
    against the calendar so ``32/01/2025`` or ``29/02/2025`` are rejected.
    """
    def _validate(value: str, label: str) -> None:
        if not pattern.match(value):
            raise FieldValidationError(f"Invalid date format '{value}' in '{label}'. Expected format: {expected}")
        day, month, year = (int(p) for p in value.split('/'))
        try:
            date(year, month, day)
        except ValueError:
            raise FieldValidationError(f"Invalid date '{value}' in '{label}'. Date does not exist in calendar") from None
    return _validate


def _time_validator(pattern: Pattern[str]) -> Validator:
    def _validate(value: str, label: str) -> None:
        if not pattern.match(value):
            raise FieldValidationError(f"Invalid time format '{value}' in '{label}'. Expected format: {TIME_FORMAT_HINT}")
    return _validate


validate_time_format = _time_validator(STRICT_TIME_PATTERN)
validate_time_format_simple = _time_validator(SIMPLE_TIME_PATTERN)

__all__ = [
    'Validator', 'HTML_TAG_PATTERN', 'DD_MM_YYYY_PATTERN', 'STRICT_TIME_PATTERN', 'SIMPLE_TIME_PATTERN',
    'validate_no_html_tags', 'validate_date_format', 'validate_time_format', 'validate_time_format_simple',
]
