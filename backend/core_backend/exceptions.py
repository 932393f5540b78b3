"""
Storefront error taxonomy and the DRF exception handler that renders it.

Every error leaving the API has the shape ``{"error": str, "details": ...}``
where ``details`` is optional. Service code raises the exceptions below and
never builds HTTP responses itself.
"""
import logging

from django.conf import settings
from django.http import Http404
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class StorefrontError(Exception):
    """
    Base exception for storefront operations.

    Args:
        message: Human readable error, rendered as the ``error`` key.
        field: Name of the offending request field, if any.
        details: Extra structured context for the client.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message, field=None, details=None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.details = details

    def get_details(self):
        details = dict(self.details) if isinstance(self.details, dict) else {}
        if self.field:
            details.setdefault("field", self.field)
        if self.details and not isinstance(self.details, dict):
            details.setdefault("info", self.details)
        return details or None


class ValidationError(StorefrontError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(StorefrontError):
    """Missing or invalid caller identity."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(StorefrontError):
    """Referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(StorefrontError):
    """Uniqueness violation at the store layer."""

    status_code = status.HTTP_409_CONFLICT


class InternalError(StorefrontError):
    """Store inconsistency or unexpected failure."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(message, details=None):
    body = {"error": message}
    if details:
        body["details"] = details
    return body


def _flatten_drf_detail(detail):
    """Pick a single readable message out of a DRF error detail structure."""
    if isinstance(detail, list):
        return _flatten_drf_detail(detail[0]) if detail else "Invalid request"
    if isinstance(detail, dict):
        for key, value in detail.items():
            message = _flatten_drf_detail(value)
            if key == "non_field_errors":
                return message
            return f"{key}: {message}"
        return "Invalid request"
    return str(detail)


def storefront_exception_handler(exc, context):
    """
    Render storefront, DRF and unexpected exceptions as ``{error, details?}``.

    - StorefrontError subclasses map to their own status codes.
    - DRF exceptions (auth, parse, 404, 405, validation) keep DRF's status
      code but are reshaped into the storefront body.
    - Anything else is logged with its traceback and rendered as a generic
      500. The exception message is only exposed when DEBUG is on.
    """
    # Imported here: rest_framework.views loads the authentication classes,
    # which import this module (circular import at module load).
    from rest_framework.views import exception_handler

    request = context.get("request")
    view = context.get("view")
    where = f"{request.method} {request.path}" if request is not None else "unknown request"

    if isinstance(exc, StorefrontError):
        if exc.status_code >= 500:
            logger.error(f"[{view.__class__.__name__ if view else 'api'}] {where}: {exc.message}")
        else:
            logger.info(f"[{view.__class__.__name__ if view else 'api'}] {where}: {exc.message}")
        return Response(
            error_body(exc.message, exc.get_details()),
            status=exc.status_code,
        )

    if isinstance(exc, Http404):
        exc = drf_exceptions.NotFound()

    response = exception_handler(exc, context)

    if response is not None:
        if isinstance(exc, drf_exceptions.ValidationError):
            message = _flatten_drf_detail(exc.detail)
            details = exc.detail if isinstance(exc.detail, dict) else None
        elif isinstance(exc, (drf_exceptions.NotAuthenticated, drf_exceptions.AuthenticationFailed)):
            message = "Unauthorized - you must be logged in"
            details = None
        else:
            message = _flatten_drf_detail(getattr(exc, "detail", str(exc)))
            details = None
        response.data = error_body(message, details)
        return response

    logger.exception(f"Unhandled error while processing {where}")
    return Response(
        error_body(
            "Internal server error",
            str(exc) if settings.DEBUG else None,
        ),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
