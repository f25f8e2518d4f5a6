"""
Validation rules for user records.

The ``User`` model is declared as a tuple of field rules rather than
imperative checks, so adding a field means adding a ``FieldRule``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

# ECMAScript WhiteSpace and LineTerminator code points
_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


class ValidationError(ValueError):
    """Base class for rejected user input."""

    kind = "ValidationError"

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message

    def as_dict(self) -> dict:
        return {"error": self.kind, "field": self.field, "message": self.message}


class MissingRequiredField(ValidationError):
    kind = "MissingRequiredField"

    def __init__(self, field: str):
        super().__init__(field, f"Field '{field}' is required.")


class InvalidFieldType(ValidationError):
    kind = "InvalidFieldType"

    def __init__(self, field: str, expected: str, actual: str):
        super().__init__(
            field, f"Field '{field}' must be of type {expected}, got {actual}."
        )
        self.expected = expected
        self.actual = actual


@dataclass(frozen=True)
class FieldRule:
    name: str
    value_type: type = str
    required: bool = True
    trim: bool = True


USER_SCHEMA: tuple[FieldRule, ...] = (FieldRule("name"),)

_NAME_RULE = USER_SCHEMA[0]


def validate_field(rule: FieldRule, value: Any = MISSING) -> Any:
    """
    Apply a single field rule to a raw value and return the normalized value.

    ``MISSING`` and ``None`` are both treated as absent. A string that is
    empty after trimming counts as absent for required fields.
    """
    if value is MISSING or value is None:
        if rule.required:
            raise MissingRequiredField(rule.name)
        return None

    # bool is an int subclass; never accept it for a non-bool rule
    if not isinstance(value, rule.value_type) or (
        isinstance(value, bool) and rule.value_type is not bool
    ):
        raise InvalidFieldType(
            rule.name, rule.value_type.__name__, type(value).__name__
        )

    if isinstance(value, str):
        if rule.trim:
            value = value.strip(_WHITESPACE)
        if rule.required and not value:
            raise MissingRequiredField(rule.name)
    return value


def validate_user_name(value: Any = MISSING) -> str:
    """Return the trimmed user name or raise a ``ValidationError``."""
    return validate_field(_NAME_RULE, value)


def validate_user_record(data: Mapping[str, Any]) -> dict[str, Any]:
    """
    Validate every field of the ``User`` schema against a raw mapping.

    Keys not declared in the schema are dropped.
    """
    if not isinstance(data, Mapping):
        raise InvalidFieldType("<record>", "mapping", type(data).__name__)
    return {
        rule.name: validate_field(rule, data.get(rule.name, MISSING))
        for rule in USER_SCHEMA
    }
