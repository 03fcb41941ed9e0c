"""
Uniform JSON envelopes for every API response.

Success: ``{success, message, data, timestamp}``
Failure: ``{error, timestamp, details?}``
"""

import uuid
from typing import Any, Mapping, Optional

from django.utils import timezone
from rest_framework import status
from rest_framework.response import Response

from utils.service_base import ServiceResult


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with a trailing ``Z``."""
    return timezone.now().isoformat().replace("+00:00", "Z")


def success_response(
    data: Any = None,
    message: str = "",
    status_code: int = status.HTTP_200_OK,
    **extra: Any,
) -> Response:
    body = {"success": True, "message": message, "data": data}
    body.update(extra)
    body["timestamp"] = utc_timestamp()
    return Response(body, status=status_code)


def error_response(
    error: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
    details: Optional[str] = None,
) -> Response:
    body = {"error": error, "timestamp": utc_timestamp()}
    if details:
        body["details"] = details
    return Response(body, status=status_code)


def result_error_response(result: ServiceResult, status_map: Mapping[str, int]) -> Response:
    """Translate a failed ServiceResult using a per-view error-code table.

    Unmapped codes are treated as validation failures.
    """
    status_code = status_map.get(result.error, status.HTTP_400_BAD_REQUEST)
    return error_response(result.error_detail, status_code)


def parse_uuid(value) -> Optional[uuid.UUID]:
    """Parse a GUID path/body value, returning None when it is malformed."""
    if isinstance(value, uuid.UUID):
        return value
    if not isinstance(value, str):
        return None
    try:
        return uuid.UUID(value.strip())
    except ValueError:
        return None


def invalid_id_response(resource: str) -> Response:
    return error_response(f"Invalid {resource} ID format", status.HTTP_400_BAD_REQUEST)
