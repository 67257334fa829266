"""Application exception types.

Every failure raised by business code is either a :class:`FunctionalError`
(an anticipated business-rule violation, safe to describe to the caller) or a
:class:`TechnicalError` (an infrastructural failure that must never leak to the
caller). Interface violations detected before business code runs are carried
by :class:`InterfaceViolationError` subclasses.

Examples::

    raise FunctionalError(BasicErrorCode.UNAUTHORIZED)
    raise FunctionalError("BANK_ACCOUNT_BANNED", "IBAN {} is banned (order {}).", iban, order_id)

    try:
        lines = path.read_text().splitlines()
    except OSError as exc:
        raise TechnicalError(cause=exc) from exc
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from service_errors.core.message_format import render
from service_errors.schemas.error import ConstraintViolation, FieldViolation


class ErrorCode(Protocol):
    """Anything exposing a stable ``name`` can characterize an error."""

    @property
    def name(self) -> str: ...


class BasicErrorCode(Enum):
    """Predefined functional error codes."""

    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    INVALID_FORMAT = "INVALID_FORMAT"


@dataclass(frozen=True)
class FunctionalCode:
    """Caller-defined functional error code, e.g. ``FunctionalCode("BANK_ACCOUNT_BANNED")``."""

    name: str


@dataclass(frozen=True)
class TechnicalCode:
    """Caller-defined technical error code, e.g. ``TechnicalCode("DATABASE_UNREACHABLE")``."""

    name: str


class TechnicalErrorType(str, Enum):
    """Whether replaying the failed operation has any chance to succeed."""

    FATAL = "FATAL"
    RETRIABLE = "RETRIABLE"


def _format_parameters(parameters: Sequence[Any]) -> str:
    return "[" + ", ".join(str(parameter) for parameter in parameters) + "]"


class ErrorWithParameters(Exception):
    """Base for errors carrying a ``{}`` message template and its ordered parameters.

    The message is rendered once, before anything else is stored, and never
    recomputed. Parameters isolate the variable part of a message from its
    static part; any message holding variable data should pass it as
    parameters so error patterns stay easy to identify.

    Only subclasses are instantiated.
    """

    _kind = "ErrorWithParameters"

    def __init__(
        self,
        cause: BaseException | None,
        message_template: str | None,
        parameters: Sequence[Any] | None,
    ) -> None:
        if type(self) is ErrorWithParameters:
            raise TypeError("ErrorWithParameters is abstract, raise FunctionalError or TechnicalError")
        message = render(message_template, parameters)
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self._message = message
        self._message_template = message_template
        self._parameters = tuple(parameters) if parameters else None
        self._cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def message(self) -> str | None:
        return self._message

    @property
    def message_template(self) -> str | None:
        return self._message_template

    @property
    def parameters(self) -> tuple[Any, ...] | None:
        return self._parameters

    @property
    def cause(self) -> BaseException | None:
        return self._cause

    def _diagnostic_fields(self) -> list[str]:
        fields = []
        if self.message_template is not None:
            fields.append(f"message={self.message_template}")
        if self.parameters:
            fields.append(f"parameters={_format_parameters(self.parameters)}")
        return fields

    def __str__(self) -> str:
        return f"{self._kind} [{', '.join(self._diagnostic_fields())}]"

    def __repr__(self) -> str:
        return str(self)


class FunctionalError(ErrorWithParameters):
    """Anticipated business-rule violation, characterized at least by an error code.

    Basic codes are available in :class:`BasicErrorCode`; the factories in
    ``service_errors.domain.basic_errors`` build the matching errors. Any other
    code is given as a :class:`FunctionalCode` or as a plain string.
    """

    _kind = "FunctionalError"

    def __init__(
        self,
        code: ErrorCode | str,
        message: str | None = None,
        *parameters: Any,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(cause, message, parameters)
        if code is None:
            raise TypeError("FunctionalError requires an error code")
        self._code = FunctionalCode(code) if isinstance(code, str) else code

    @property
    def code(self) -> ErrorCode:
        return self._code

    def _diagnostic_fields(self) -> list[str]:
        code = self._code.name if self._code is not None else None
        return [f"code={code}", *super()._diagnostic_fields()]


class TechnicalError(ErrorWithParameters):
    """Failure unrelated to business rules.

    Fatal by default; pass ``error_type=TechnicalErrorType.RETRIABLE`` (or
    ``"RETRIABLE"``) when replaying the operation may succeed. The type is a
    label for callers such as job runners, nothing here retries.
    """

    _kind = "TechnicalError"

    def __init__(
        self,
        message: str | None = None,
        *parameters: Any,
        cause: BaseException | None = None,
        error_type: TechnicalErrorType | str = TechnicalErrorType.FATAL,
        code: ErrorCode | str | None = None,
    ) -> None:
        super().__init__(cause, message, parameters)
        self._code = TechnicalCode(code) if isinstance(code, str) else code
        self._error_type = TechnicalErrorType(error_type)

    @property
    def code(self) -> ErrorCode | None:
        return self._code

    @property
    def error_type(self) -> TechnicalErrorType:
        return self._error_type

    @property
    def is_retriable(self) -> bool:
        return self._error_type is TechnicalErrorType.RETRIABLE

    def _diagnostic_fields(self) -> list[str]:
        fields = [f"code={self._code.name}"] if self._code is not None else []
        return [*fields, *super()._diagnostic_fields(), f"type={self._error_type.value}"]


class InterfaceViolationError(Exception):
    """The caller did not respect the interface contract of the request.

    Carries the payload violations and the violations found outside the
    payload (query, path, headers); a request may have both.
    """

    def __init__(
        self,
        field_violations: Sequence[FieldViolation] = (),
        constraint_violations: Sequence[ConstraintViolation] = (),
    ) -> None:
        self.field_violations = tuple(field_violations)
        self.constraint_violations = tuple(constraint_violations)
        count = len(self.field_violations) + len(self.constraint_violations)
        super().__init__(f"{count} interface violation(s)")

    def __str__(self) -> str:
        fields = []
        if self.field_violations:
            fields.append(f"field_violations={_format_parameters(self.field_violations)}")
        if self.constraint_violations:
            fields.append(f"constraint_violations={_format_parameters(self.constraint_violations)}")
        return f"{type(self).__name__} [{', '.join(fields)}]"


class PayloadValidationError(InterfaceViolationError):
    """One or more constraints were violated inside the request payload."""

    def __init__(self, violations: Sequence[FieldViolation]) -> None:
        super().__init__(field_violations=violations)

    @property
    def violations(self) -> tuple[FieldViolation, ...]:
        return self.field_violations


class ConstraintValidationError(InterfaceViolationError):
    """One or more constraints were violated outside the payload (query, path, headers)."""

    def __init__(self, violations: Sequence[ConstraintViolation]) -> None:
        super().__init__(constraint_violations=violations)

    @property
    def violations(self) -> tuple[ConstraintViolation, ...]:
        return self.constraint_violations


__all__ = [
    "BasicErrorCode",
    "ConstraintValidationError",
    "ErrorCode",
    "ErrorWithParameters",
    "FunctionalCode",
    "FunctionalError",
    "InterfaceViolationError",
    "PayloadValidationError",
    "TechnicalCode",
    "TechnicalError",
    "TechnicalErrorType",
]
