from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action

from authentication.api.serializers import (
    CertificationCreateSerializer,
    CertificationSerializer,
    CertificationStatusSerializer,
    CertificationUpdateSerializer,
)
from authentication.permissions import IsAdmin, IsSeller
from infrastructure.container import container
from utils.pagination import page_request_from_query, paginate
from utils.rbac import is_admin
from utils.responses import invalid_id_response, parse_uuid, result_error_response, success_response
from utils.schema import ErrorResponseSerializer, PagedResponseSerializer, SuccessResponseSerializer
from utils.service_base import ErrorCodes


CERTIFICATION_ERRORS = {
    ErrorCodes.CERTIFICATION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.SELLER_PROFILE_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorCodes.INVALID_CERTIFICATION_STATE: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
}


class CertificationViewSet(viewsets.ViewSet):
    """Seller certifications: submission by sellers, review by admins, public listing of approved ones."""

    def get_permissions(self):
        if self.action in ("retrieve", "for_seller"):
            return [permissions.AllowAny()]
        if self.action in ("pending", "set_status"):
            return [IsAdmin()]
        return [IsSeller()]

    def get_service(self):
        return container.certification_service()

    def _paged_list(self, request, items, message):
        page = paginate(items, page_request_from_query(request.query_params))
        return success_response(page.to_dict(CertificationSerializer(page.items, many=True).data), message)

    @extend_schema(
        operation_id="certifications_create",
        summary="Submit a certification for review",
        request=CertificationCreateSerializer,
        responses={
            201: OpenApiResponse(response=SuccessResponseSerializer, description="Certification submitted"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error or no seller profile"),
        },
        tags=["Certifications"],
    )
    def create(self, request):
        serializer = CertificationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        result = self.get_service().submit(request.user, data["name"], data["document_path"])
        if not result.ok:
            return result_error_response(result, CERTIFICATION_ERRORS)
        return success_response(
            CertificationSerializer(result.value).data,
            "Certification submitted successfully",
            status.HTTP_201_CREATED,
        )

    @extend_schema(
        operation_id="certifications_list",
        summary="The caller's own certifications",
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="Certifications")},
        tags=["Certifications"],
    )
    def list(self, request):
        result = self.get_service().list_mine(request.user)
        if not result.ok:
            return result_error_response(result, CERTIFICATION_ERRORS)
        return self._paged_list(request, result.value, "Certifications retrieved successfully")

    @extend_schema(
        operation_id="certifications_mine",
        summary="The caller's own certifications",
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="Certifications")},
        tags=["Certifications"],
    )
    @action(detail=False, methods=["get"])
    def mine(self, request):
        return self.list(request)

    @extend_schema(
        operation_id="certifications_pending",
        summary="Certifications awaiting review (admin)",
        parameters=[
            OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
            OpenApiParameter(name="pageSize", type=int, description="Items per page (default: 10, max: 50)"),
        ],
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="Pending certifications")},
        tags=["Certifications"],
    )
    @action(detail=False, methods=["get"])
    def pending(self, request):
        page = self.get_service().list_by_status(page_request_from_query(request.query_params), "Pending").value
        return success_response(
            page.to_dict(CertificationSerializer(page.items, many=True).data),
            "Pending certifications retrieved successfully",
        )

    @extend_schema(
        operation_id="certifications_for_seller",
        summary="Approved certifications of a seller",
        responses={
            200: OpenApiResponse(response=PagedResponseSerializer, description="Approved certifications"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid seller profile ID"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Seller profile not found"),
        },
        tags=["Certifications"],
    )
    @action(detail=False, methods=["get"], url_path=r"seller/(?P<seller_profile_id>[^/.]+)", url_name="seller")
    def for_seller(self, request, seller_profile_id=None):
        seller_uuid = parse_uuid(seller_profile_id)
        if seller_uuid is None:
            return invalid_id_response("seller profile")

        result = self.get_service().list_for_seller(seller_uuid)
        if not result.ok:
            return result_error_response(result, {ErrorCodes.SELLER_PROFILE_NOT_FOUND: status.HTTP_404_NOT_FOUND})
        return self._paged_list(request, result.value, "Certifications retrieved successfully")

    @extend_schema(
        operation_id="certifications_retrieve",
        summary="Certification detail",
        description="Approved certifications are public; others are visible to their owner and admins only.",
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Certification"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid certification ID"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Certification not found"),
        },
        tags=["Certifications"],
    )
    def retrieve(self, request, pk=None):
        certification_id = parse_uuid(pk)
        if certification_id is None:
            return invalid_id_response("certification")

        user = request.user if request.user.is_authenticated else None
        result = self.get_service().get(certification_id, user=user, is_admin=is_admin(request.user))
        if not result.ok:
            return result_error_response(result, CERTIFICATION_ERRORS)
        return success_response(CertificationSerializer(result.value).data, "Certification retrieved successfully")

    @extend_schema(
        operation_id="certifications_update",
        summary="Edit a pending certification",
        request=CertificationUpdateSerializer,
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Certification updated"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Not pending or invalid ID"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Not the owner"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Certification not found"),
        },
        tags=["Certifications"],
    )
    def update(self, request, pk=None):
        certification_id = parse_uuid(pk)
        if certification_id is None:
            return invalid_id_response("certification")

        serializer = CertificationUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().update(certification_id, request.user, serializer.validated_data)
        if not result.ok:
            return result_error_response(result, CERTIFICATION_ERRORS)
        return success_response(CertificationSerializer(result.value).data, "Certification updated successfully")

    @extend_schema(
        operation_id="certifications_set_status",
        summary="Approve or reject a certification (admin)",
        request=CertificationStatusSerializer,
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Status updated"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid status or ID"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Certification not found"),
        },
        tags=["Certifications"],
    )
    @action(detail=True, methods=["put"], url_path="status", url_name="status")
    def set_status(self, request, pk=None):
        certification_id = parse_uuid(pk)
        if certification_id is None:
            return invalid_id_response("certification")

        serializer = CertificationStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        result = self.get_service().review(
            certification_id, request.user, data["status"].strip().capitalize(), admin_notes=data.get("admin_notes")
        )
        if not result.ok:
            return result_error_response(result, CERTIFICATION_ERRORS)
        return success_response(
            CertificationSerializer(result.value).data, "Certification status updated successfully"
        )
