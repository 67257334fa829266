"""FastAPI wiring of the error boundary.

Every failure escaping a route goes through :class:`ErrorDispatcher`; the
handlers only translate between Starlette objects and the dispatcher.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from service_errors.core.config import Settings, get_settings
from service_errors.core.logging_safety import safe_log_identifier
from service_errors.errors import ErrorWithParameters, InterfaceViolationError
from service_errors.schemas.error import ConstraintViolation, ErrorDocument, FieldViolation
from service_errors.services.dispatcher import ErrorDispatcher, ErrorReply, RequestContext
from service_errors.services.error_mapper import map_unclassified

logger = logging.getLogger(__name__)

_PAYLOAD_LOCATION = "body"


def _request_correlation_id(request: Request, header: str) -> str:
    existing = getattr(request.state, "correlation_id", None)
    if isinstance(existing, str) and existing:
        return existing

    correlation_id = request.headers.get(header)
    if correlation_id:
        request.state.correlation_id = correlation_id
        return correlation_id

    generated = f"req-{uuid4()}"
    request.state.correlation_id = generated
    return generated


def request_context(request: Request, settings: Settings) -> RequestContext:
    route = request.scope.get("route")
    return RequestContext(
        method=request.method.upper(),
        path=getattr(route, "path", request.url.path),
        correlation_id=_request_correlation_id(request, settings.correlation_header),
    )


def _format_location(location: Sequence[Any]) -> str:
    path = ""
    for part in location:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


def split_validation_errors(
    errors: Sequence[dict[str, Any]],
) -> tuple[list[FieldViolation], list[ConstraintViolation]]:
    """Sort validation errors into payload violations and other constraint violations."""
    field_violations: list[FieldViolation] = []
    constraint_violations: list[ConstraintViolation] = []
    for error in errors:
        location = tuple(error.get("loc", ()))
        message = str(error.get("msg", ""))
        if location and location[0] == _PAYLOAD_LOCATION:
            field = _format_location(location[1:]) or _PAYLOAD_LOCATION
            field_violations.append(FieldViolation(field=field, message=message))
        else:
            constraint_violations.append(
                ConstraintViolation(property_path=_format_location(location), message=message)
            )
    return field_violations, constraint_violations


def _render(reply: ErrorReply, settings: Settings, headers: dict[str, str] | None = None) -> Response:
    if reply.body is None:
        return Response(status_code=reply.status_code, headers=headers)
    return _problem_response(reply.status_code, reply.body, settings, headers)


def _problem_response(
    status_code: int,
    body: ErrorDocument,
    settings: Settings,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
        headers=headers,
        media_type=settings.problem_media_type,
    )


def register_error_handlers(app: FastAPI, dispatcher: ErrorDispatcher | None = None) -> None:
    """Register the error boundary on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        dispatcher: Dispatcher to use, a default one when omitted.
    """
    dispatcher = dispatcher or ErrorDispatcher()

    @app.exception_handler(ErrorWithParameters)
    async def handle_classified_error(request: Request, exc: ErrorWithParameters) -> Response:
        settings = get_settings()
        return _render(dispatcher.dispatch(exc, request_context(request, settings)), settings)

    @app.exception_handler(InterfaceViolationError)
    async def handle_interface_violation(request: Request, exc: InterfaceViolationError) -> Response:
        settings = get_settings()
        return _render(dispatcher.dispatch(exc, request_context(request, settings)), settings)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> Response:
        settings = get_settings()
        field_violations, constraint_violations = split_validation_errors(exc.errors())
        reply = dispatcher.dispatch_violations(
            field_violations=field_violations,
            constraint_violations=constraint_violations,
            context=request_context(request, settings),
        )
        return _render(reply, settings)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> Response:
        # Raised by the framework itself (unknown route, method not allowed):
        # its status is kept and the body follows the generic mapping.
        settings = get_settings()
        context = request_context(request, settings)
        logger.error(
            "error.http correlation_id=%s method=%s path=%s status=%s detail=%s",
            safe_log_identifier(context.correlation_id, prefix="cid"),
            context.method,
            context.path,
            exc.status_code,
            exc.detail,
        )
        headers = getattr(exc, "headers", None)
        if exc.status_code >= 500:
            return Response(status_code=exc.status_code, headers=headers)
        return _problem_response(exc.status_code, map_unclassified(exc), settings, headers)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> Response:
        settings = get_settings()
        return _render(dispatcher.dispatch(exc, request_context(request, settings)), settings)


__all__ = ["register_error_handlers", "request_context", "split_validation_errors"]
