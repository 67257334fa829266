"""Ready-made functional errors for the basic error codes.

Each factory accepts no argument, a message template with its parameters, or
a ``cause`` keyword plus template and parameters::

    raise data_not_found("Customer {} is unknown.", "007")
"""

from __future__ import annotations

from typing import Any

from service_errors.errors import BasicErrorCode, FunctionalError


def data_not_found(message: str | None = None, *parameters: Any, cause: BaseException | None = None) -> FunctionalError:
    """The requested data does not exist."""
    return FunctionalError(BasicErrorCode.NOT_FOUND, message, *parameters, cause=cause)


def invalid_format(message: str | None = None, *parameters: Any, cause: BaseException | None = None) -> FunctionalError:
    """The data supplied by the caller is malformed."""
    return FunctionalError(BasicErrorCode.INVALID_FORMAT, message, *parameters, cause=cause)


def data_access_forbidden(
    message: str | None = None, *parameters: Any, cause: BaseException | None = None
) -> FunctionalError:
    """The authenticated caller may not access the data."""
    return FunctionalError(BasicErrorCode.FORBIDDEN, message, *parameters, cause=cause)


def data_access_unauthorized(
    message: str | None = None, *parameters: Any, cause: BaseException | None = None
) -> FunctionalError:
    """The caller is not authenticated."""
    return FunctionalError(BasicErrorCode.UNAUTHORIZED, message, *parameters, cause=cause)


__all__ = [
    "data_access_forbidden",
    "data_access_unauthorized",
    "data_not_found",
    "invalid_format",
]
