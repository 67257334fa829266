"""Boundary dispatcher: the single place where failures become responses."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from service_errors.core.logging_safety import describe_cause_chain, safe_log_identifier
from service_errors.domain.status_policy import FailureKind, PolicyRule, select_rule
from service_errors.errors import (
    ConstraintValidationError,
    FunctionalError,
    InterfaceViolationError,
    PayloadValidationError,
)
from service_errors.schemas.error import ConstraintViolation, ErrorDocument, FieldViolation
from service_errors.services.error_mapper import map_functional_error, map_interface_violation

logger = logging.getLogger(__name__)


class RequestContext(BaseModel):
    """Transport-agnostic description of the failed request, used for logging only."""

    model_config = ConfigDict(frozen=True)

    method: str | None = None
    path: str | None = None
    correlation_id: str | None = None


@dataclass(frozen=True)
class ErrorReply:
    status_code: int
    body: ErrorDocument | None = None


class ErrorDispatcher:
    """Selects the response status of a failure and builds its body.

    The dispatcher terminates the failure: it never re-raises. Failures that
    are neither functional errors nor interface violations get a 500 without
    body, so nothing about them reaches the caller; they are only logged.
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def dispatch(self, failure: BaseException, context: RequestContext | None = None) -> ErrorReply:
        rule = select_rule(failure)
        self._log_failure(failure, rule, context or RequestContext())
        return ErrorReply(status_code=rule.status_code, body=self._body_for(failure, rule))

    def dispatch_violations(
        self,
        *,
        field_violations: Iterable[FieldViolation] = (),
        constraint_violations: Iterable[ConstraintViolation] = (),
        context: RequestContext | None = None,
    ) -> ErrorReply:
        """Dispatch violations already collected by a validation framework.

        Both collections end up in the same document, one entry per distinct
        violation.
        """
        field_violations = tuple(field_violations)
        constraint_violations = tuple(constraint_violations)
        failure: InterfaceViolationError
        if field_violations and constraint_violations:
            failure = InterfaceViolationError(field_violations, constraint_violations)
        elif field_violations:
            failure = PayloadValidationError(field_violations)
        else:
            failure = ConstraintValidationError(constraint_violations)
        return self.dispatch(failure, context)

    @staticmethod
    def _body_for(failure: BaseException, rule: PolicyRule) -> ErrorDocument | None:
        if rule.kind is FailureKind.FUNCTIONAL and isinstance(failure, FunctionalError):
            return map_functional_error(failure)
        if rule.kind is FailureKind.INTERFACE_VIOLATION and isinstance(failure, InterfaceViolationError):
            return map_interface_violation(failure)
        return None

    def _log_failure(self, failure: BaseException, rule: PolicyRule, context: RequestContext) -> None:
        self._log.error(
            "error.dispatched correlation_id=%s method=%s path=%s status=%s kind=%s error=%s chain=%s",
            safe_log_identifier(context.correlation_id, prefix="cid"),
            context.method,
            context.path,
            rule.status_code,
            rule.kind.value,
            failure,
            describe_cause_chain(failure),
            exc_info=(type(failure), failure, failure.__traceback__),
        )


__all__ = ["ErrorDispatcher", "ErrorReply", "RequestContext"]
