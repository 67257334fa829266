"""Error taxonomy and service-boundary translation."""

from .domain.basic_errors import data_access_forbidden, data_access_unauthorized, data_not_found, invalid_format
from .errors import (
    BasicErrorCode,
    ConstraintValidationError,
    ErrorCode,
    ErrorWithParameters,
    FunctionalCode,
    FunctionalError,
    InterfaceViolationError,
    PayloadValidationError,
    TechnicalCode,
    TechnicalError,
    TechnicalErrorType,
)
from .schemas.error import ConstraintViolation, ErrorDocument, ErrorEntry, FieldViolation
from .services.dispatcher import ErrorDispatcher, ErrorReply, RequestContext

__all__ = [
    "BasicErrorCode",
    "ConstraintValidationError",
    "ConstraintViolation",
    "ErrorCode",
    "ErrorDispatcher",
    "ErrorDocument",
    "ErrorEntry",
    "ErrorReply",
    "ErrorWithParameters",
    "FieldViolation",
    "FunctionalCode",
    "FunctionalError",
    "InterfaceViolationError",
    "PayloadValidationError",
    "RequestContext",
    "TechnicalCode",
    "TechnicalError",
    "TechnicalErrorType",
    "data_access_forbidden",
    "data_access_unauthorized",
    "data_not_found",
    "invalid_format",
]
