"""Standardised error responses for the API.

Every error leaving the API has the same shape::

    {
        "type": "validation_error" | "client_error" | "server_error",
        "errors": [{"code": "...", "detail": "...", "attr": "field" | null}]
    }

Views build business-rule and validation errors with ``error_response``;
exceptions raised inside DRF (parse errors, 405, throttling, ...) are
rendered in the same format by ``custom_exception_handler``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

import structlog
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)

VALIDATION_ERROR = "validation_error"
CLIENT_ERROR = "client_error"
SERVER_ERROR = "server_error"


def error_item(code: str, detail: str, attr: Optional[str] = None) -> Dict[str, Any]:
    return {"code": code, "detail": detail, "attr": attr}


def error_response(
    errors: Iterable[Dict[str, Any]],
    status_code: int,
    error_type: Optional[str] = None,
) -> Response:
    """Build a ``Response`` in the standard error format."""
    if error_type is None:
        error_type = SERVER_ERROR if status_code >= 500 else CLIENT_ERROR
    return Response(
        {"type": error_type, "errors": list(errors)},
        status=status_code,
    )


def custom_exception_handler(exc, context):
    """Wrap DRF's default handler and reshape its payload."""
    response = exception_handler(exc, context)
    if response is None:
        # Not a DRF/Django HTTP exception: let it become a 500.
        return None

    if isinstance(exc, APIException):
        codes = exc.get_codes()
        code = codes if isinstance(codes, str) else exc.default_code
        errors = [error_item(code, str(exc.detail))]
    else:
        # Http404 / PermissionDenied raised by Django itself.
        detail = response.data.get("detail", "") if isinstance(response.data, dict) else ""
        code = "not_found" if response.status_code == status.HTTP_404_NOT_FOUND else "error"
        errors = [error_item(code, str(detail))]

    logger.warning(
        "api.exception",
        exception=type(exc).__name__,
        status_code=response.status_code,
    )
    error_type = SERVER_ERROR if response.status_code >= 500 else CLIENT_ERROR
    response.data = {"type": error_type, "errors": errors}
    return response
