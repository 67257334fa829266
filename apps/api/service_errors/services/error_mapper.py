"""Translation of internal errors into the wire error document.

All functions are pure. Violation collections map to a set of entries, so two
violations with the same code and description collapse into a single entry
and entry order is unspecified.
"""

from __future__ import annotations

from collections.abc import Iterable

from service_errors.errors import (
    BasicErrorCode,
    ErrorWithParameters,
    FunctionalError,
    InterfaceViolationError,
)
from service_errors.schemas.error import ConstraintViolation, ErrorDocument, ErrorEntry, FieldViolation

_INVALID_FORMAT = BasicErrorCode.INVALID_FORMAT.name


def map_functional_error(error: FunctionalError) -> ErrorDocument:
    """Map an error raised on purpose by business code.

    A functional error always carries a code; one without is a programming
    error and raises ``TypeError``.
    """
    if error.code is None:
        raise TypeError(f"{type(error).__name__} has no error code")

    parameters = None
    if error.parameters is not None:
        parameters = tuple(str(parameter) for parameter in error.parameters)

    entry = ErrorEntry(code=error.code.name, description=error.message, parameters=parameters)
    return ErrorDocument(errors=frozenset({entry}))


def map_field_violations(violations: Iterable[FieldViolation]) -> ErrorDocument:
    """Map interface violations detected inside the request payload."""
    return ErrorDocument(
        errors=frozenset(
            ErrorEntry(code=_INVALID_FORMAT, description=f"{violation.field}: {violation.message}")
            for violation in violations
        )
    )


def map_constraint_violations(violations: Iterable[ConstraintViolation]) -> ErrorDocument:
    """Map interface violations detected outside the payload (query, path, headers)."""
    return ErrorDocument(
        errors=frozenset(
            ErrorEntry(code=_INVALID_FORMAT, description=f"{violation.property_path}: {violation.message}")
            for violation in violations
        )
    )


def map_interface_violation(error: InterfaceViolationError) -> ErrorDocument:
    """Map every payload and non-payload violation of a request into one document."""
    payload = map_field_violations(error.field_violations)
    constraints = map_constraint_violations(error.constraint_violations)
    return ErrorDocument(errors=payload.errors | constraints.errors)


def map_unclassified(failure: BaseException) -> ErrorDocument:
    """Map any other failure to a single entry holding its message.

    The entry reuses the ``INVALID_FORMAT`` code.
    """
    if isinstance(failure, ErrorWithParameters):
        description = failure.message
    else:
        description = str(failure) or None

    entry = ErrorEntry(code=_INVALID_FORMAT, description=description)
    return ErrorDocument(errors=frozenset({entry}))


__all__ = [
    "map_constraint_violations",
    "map_field_violations",
    "map_functional_error",
    "map_interface_violation",
    "map_unclassified",
]
