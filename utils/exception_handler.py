"""DRF exception handler producing the ``{error, timestamp, details?}`` envelope."""

import logging

from django.conf import settings
from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.views import set_rollback

from utils.responses import error_response


logger = logging.getLogger(__name__)


def _flatten_errors(detail, prefix: str = "") -> list:
    """Turn nested serializer errors into ``(field, message)`` pairs."""
    if isinstance(detail, dict):
        pairs = []
        for field, value in detail.items():
            name = field if field != "non_field_errors" else ""
            pairs.extend(_flatten_errors(value, f"{prefix}{name}." if name else prefix))
        return pairs
    if isinstance(detail, list):
        pairs = []
        for value in detail:
            pairs.extend(_flatten_errors(value, prefix))
        return pairs
    return [(prefix.rstrip("."), str(detail))]


def api_exception_handler(exc, context):
    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown"

    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, DjangoPermissionDenied):
        exc = exceptions.PermissionDenied(str(exc) or None)

    if isinstance(exc, exceptions.ValidationError):
        pairs = _flatten_errors(exc.detail)
        set_rollback()
        details = "; ".join(f"{field}: {message}" if field else message for field, message in pairs)
        return error_response(
            pairs[0][1] if pairs else "Invalid request",
            status.HTTP_400_BAD_REQUEST,
            details=details or None,
        )

    if isinstance(exc, exceptions.APIException):
        set_rollback()
        detail = exc.detail
        if isinstance(detail, dict):
            # simplejwt wraps token errors as {"detail", "code", "messages"}
            detail = detail.get("detail", detail)
        response = error_response(str(detail), exc.status_code)
        if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
            authenticate_header = getattr(exc, "auth_header", None)
            if authenticate_header:
                response["WWW-Authenticate"] = authenticate_header
        if getattr(exc, "wait", None):
            response["Retry-After"] = "%d" % exc.wait
        return response

    logger.exception("Unhandled exception in %s", view_name)
    set_rollback()
    return error_response(
        "An unexpected error occurred",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        details=str(exc) if settings.DEBUG else None,
    )
