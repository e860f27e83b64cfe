"""
API exception handlers.

This module provides custom exception handling for REST API responses.
"""

import logging
from typing import Any, Dict, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import (
    CryptographyError,
    DomainException,
    LicenseNotFoundError,
)

logger = logging.getLogger(__name__)

PROCESSING_ERROR_MESSAGE = "An error occurred while processing the request"


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    trace_id = _get_trace_id(context)

    if isinstance(exc, CryptographyError):
        response = _handle_cryptography_error(exc, trace_id)
    elif isinstance(exc, DomainException):
        response = _handle_domain_exception(exc, trace_id)
    elif isinstance(exc, APIException):
        response = _handle_api_exception(exc, context)
    elif isinstance(exc, Http404):
        response = Response(
            {"error": {"code": "NOT_FOUND", "message": "Resource not found"}},
            status=status.HTTP_404_NOT_FOUND,
        )
    else:
        response = _handle_unexpected_exception(exc, context, trace_id)

    if trace_id:
        response["X-Trace-ID"] = trace_id
    return response


def _get_trace_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract trace ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "trace_id", getattr(request, "correlation_id", None))


def _handle_cryptography_error(exc: CryptographyError, trace_id: Optional[str]) -> Response:
    """Handle license key encryption, decryption and lookup failures."""
    # Only the code is logged; the chained cause may reference record contents
    logger.error("License key processing failed: %s", exc.code, extra={"trace_id": trace_id})
    return Response(
        {"error": {"code": "PROCESSING_ERROR", "message": PROCESSING_ERROR_MESSAGE}},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _handle_domain_exception(exc: DomainException, trace_id: Optional[str]) -> Response:
    """Handle domain-specific exceptions."""
    status_code = status.HTTP_400_BAD_REQUEST
    if isinstance(exc, LicenseNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND

    logger.warning("Domain exception: %s - %s", exc.code, exc.message, extra={"trace_id": trace_id})
    return Response({"error": {"code": exc.code, "message": exc.message}}, status=status_code)


def _handle_api_exception(exc: APIException, context: Dict[str, Any]) -> Response:
    """Wrap DRF exceptions in the common error shape."""
    response = exception_handler(exc, context)
    code = exc.default_code.upper().replace("-", "_") if exc.default_code else "API_ERROR"
    detail = response.data.get("detail", exc.default_detail) if isinstance(response.data, dict) else exc.default_detail
    response.data = {"error": {"code": code, "message": str(detail)}}
    return response


def _handle_unexpected_exception(
    exc: Exception, context: Dict[str, Any], trace_id: Optional[str]
) -> Response:
    """Handle unexpected or untracked exceptions."""
    logger.error("Unexpected error: %s", exc, extra={"trace_id": trace_id}, exc_info=True)
    return Response(
        {"error": {"code": "INTERNAL_ERROR", "message": "An internal error occurred"}},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
