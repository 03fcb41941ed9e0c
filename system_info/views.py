import logging
import platform

import django
from django.conf import settings
from django.db import DatabaseError, connection
from django.http import HttpResponse
from drf_spectacular.utils import OpenApiResponse, extend_schema
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from utils.responses import error_response, success_response, utc_timestamp
from utils.schema import ErrorResponseSerializer, SuccessResponseSerializer

logger = logging.getLogger(__name__)


def service_metadata():
    config = settings.B2B_MARKETPLACE
    return {"name": config["SERVICE_NAME"], "version": config["SERVICE_VERSION"]}


def database_is_up() -> bool:
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except DatabaseError:
        logger.exception("Database health check failed")
        return False
    return True


@extend_schema(
    operation_id="system_health",
    summary="Liveness and database check",
    responses={
        200: OpenApiResponse(response=SuccessResponseSerializer, description="Healthy"),
        503: OpenApiResponse(response=ErrorResponseSerializer, description="Database unavailable"),
    },
    tags=["System"],
)
@api_view(["GET"])
@permission_classes([AllowAny])
def health(request):
    if not database_is_up():
        return error_response("Database unavailable", status.HTTP_503_SERVICE_UNAVAILABLE)
    return success_response(
        {"status": "healthy", "database": "up", "checkedAt": utc_timestamp()}, "Service is healthy"
    )


@extend_schema(
    operation_id="system_info",
    summary="Service metadata",
    responses={200: OpenApiResponse(response=SuccessResponseSerializer, description="Service metadata")},
    tags=["System"],
)
@api_view(["GET"])
@permission_classes([AllowAny])
def info(request):
    data = service_metadata()
    data.update(
        {
            "description": settings.SPECTACULAR_SETTINGS["DESCRIPTION"],
            "environment": "development" if settings.DEBUG else "production",
            "python": platform.python_version(),
            "django": django.get_version(),
            "docs": "/api/docs/",
        }
    )
    return success_response(data, "Service information retrieved successfully")


@extend_schema(
    operation_id="system_version",
    summary="Service version",
    responses={200: OpenApiResponse(response=SuccessResponseSerializer, description="Version")},
    tags=["System"],
)
@api_view(["GET"])
@permission_classes([AllowAny])
def version(request):
    return success_response(service_metadata(), "Version retrieved successfully")


@extend_schema(exclude=True)
@api_view(["GET"])
@permission_classes([AllowAny])
def metrics(request):
    """Prometheus exposition of the process metrics registry."""
    return HttpResponse(generate_latest(), content_type=CONTENT_TYPE_LATEST)
