"""JSON error contract for the HikeBook API.

Every API failure is rendered as ``{"error": <kind>, "message": <localized
text>}``. Token problems are split in two: a request without a bearer token
gets 401, a request whose token is malformed, tampered with or expired gets
403. Unexpected exceptions are logged and answered with a generic 500 so
internals never reach the client.
"""

from __future__ import annotations

from typing import Any

import structlog
from django.core.exceptions import PermissionDenied as DjangoPermissionDenied  # type: ignore
from django.http import Http404  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore
from rest_framework import exceptions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import set_rollback  # type: ignore

logger = structlog.get_logger(__name__)


class ApiError(exceptions.APIException):
    """Domain error carrying an explicit error kind for the JSON body."""

    status_code = status.HTTP_400_BAD_REQUEST
    error = "Bad request"
    default_detail = _("Permintaan tidak valid")

    def __init__(self, message: Any = None, *, error: str | None = None, status_code: int | None = None):
        super().__init__(detail=message)
        if error is not None:
            self.error = error
        if status_code is not None:
            self.status_code = status_code


class ApiValidationError(ApiError):
    error = "Validation error"


class InvalidCredentials(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error = "Invalid credentials"
    default_detail = _("Email atau password salah")


class EmailAlreadyExists(ApiError):
    status_code = status.HTTP_409_CONFLICT
    error = "Email already exists"
    default_detail = _("Email sudah terdaftar")


class ResourceNotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    error = "Not found"
    default_detail = _("Data tidak ditemukan")


def _first_message(detail: Any) -> str:
    """Pull the first human readable message out of a DRF error detail."""
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return ""
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def error_payload(error: str, message: Any, **extra: Any) -> dict[str, Any]:
    payload = {"error": error, "message": str(message)}
    payload.update(extra)
    return payload


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    set_rollback()
    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else None

    if isinstance(exc, Http404):
        exc = ResourceNotFound()
    elif isinstance(exc, DjangoPermissionDenied):
        exc = exceptions.PermissionDenied()

    if isinstance(exc, exceptions.NotAuthenticated):
        headers = {}
        auth_header = getattr(exc, "auth_header", None)
        if auth_header:
            headers["WWW-Authenticate"] = auth_header
        return Response(
            error_payload("Access denied. No token provided.", _("Anda harus login terlebih dahulu")),
            status=status.HTTP_401_UNAUTHORIZED,
            headers=headers,
        )

    if isinstance(exc, exceptions.AuthenticationFailed):
        logger.info("api.token_rejected", view=view_name, reason=_first_message(exc.detail))
        return Response(
            error_payload("Invalid token", _("Token tidak valid atau sudah expired")),
            status=status.HTTP_403_FORBIDDEN,
        )

    if isinstance(exc, ApiError):
        return Response(error_payload(exc.error, exc.detail), status=exc.status_code)

    if isinstance(exc, exceptions.ValidationError):
        return Response(
            error_payload("Validation error", _first_message(exc.detail), details=exc.detail),
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, exceptions.APIException):
        headers = {}
        if getattr(exc, "wait", None):
            headers["Retry-After"] = str(int(exc.wait))
        return Response(
            error_payload(str(exc.default_code).replace("_", " ").capitalize(), _first_message(exc.detail)),
            status=exc.status_code,
            headers=headers,
        )

    logger.exception("api.unhandled_error", view=view_name)
    return Response(
        error_payload("Internal server error", _("Terjadi kesalahan pada server")),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
