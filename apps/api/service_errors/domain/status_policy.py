"""Response status selection for failures reaching the service boundary."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from service_errors.errors import BasicErrorCode, FunctionalError, InterfaceViolationError


class FailureKind(str, Enum):
    FUNCTIONAL = "functional"
    INTERFACE_VIOLATION = "interface_violation"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class PolicyRule:
    name: str
    matches: Callable[[BaseException], bool]
    status_code: int
    kind: FailureKind


def _functional_with(code: BasicErrorCode) -> Callable[[BaseException], bool]:
    def matches(failure: BaseException) -> bool:
        return isinstance(failure, FunctionalError) and failure.code is code

    return matches


def _is_functional(failure: BaseException) -> bool:
    return isinstance(failure, FunctionalError)


def _is_interface_violation(failure: BaseException) -> bool:
    return isinstance(failure, InterfaceViolationError)


def _always(_: BaseException) -> bool:
    return True


# Evaluated in order, first match wins. Only functional errors and interface
# violations may reveal details to the caller.
POLICY: tuple[PolicyRule, ...] = (
    PolicyRule("functional.not_found", _functional_with(BasicErrorCode.NOT_FOUND), 404, FailureKind.FUNCTIONAL),
    PolicyRule("functional.invalid_format", _functional_with(BasicErrorCode.INVALID_FORMAT), 400, FailureKind.FUNCTIONAL),
    PolicyRule("functional.unauthorized", _functional_with(BasicErrorCode.UNAUTHORIZED), 401, FailureKind.FUNCTIONAL),
    PolicyRule("functional.forbidden", _functional_with(BasicErrorCode.FORBIDDEN), 403, FailureKind.FUNCTIONAL),
    PolicyRule("functional.other", _is_functional, 400, FailureKind.FUNCTIONAL),
    PolicyRule("interface_violation", _is_interface_violation, 400, FailureKind.INTERFACE_VIOLATION),
    PolicyRule("unclassified", _always, 500, FailureKind.UNCLASSIFIED),
)


def select_rule(failure: BaseException) -> PolicyRule:
    """Return the first policy rule matching ``failure``; the last rule matches anything."""
    return next(rule for rule in POLICY if rule.matches(failure))


__all__ = ["POLICY", "FailureKind", "PolicyRule", "select_rule"]
