from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action

from authentication.api.serializers import (
    CertificationDetailSerializer,
    CertificationRejectSerializer,
    CertificationSerializer,
    ManualVerifySerializer,
    SellerProfileSerializer,
)
from authentication.permissions import IsAdmin
from infrastructure.container import container
from utils.pagination import page_request_from_query
from utils.responses import invalid_id_response, parse_uuid, result_error_response, success_response
from utils.schema import ErrorResponseSerializer, PagedResponseSerializer, SuccessResponseSerializer
from utils.service_base import ErrorCodes


VERIFICATION_ERRORS = {
    ErrorCodes.CERTIFICATION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.SELLER_PROFILE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.INVALID_CERTIFICATION_STATE: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
}


class VerificationViewSet(viewsets.ViewSet):
    """Admin review queue for seller certifications."""

    permission_classes = [IsAdmin]

    def get_service(self):
        return container.certification_service()

    def _page(self, request, status_filter):
        page = self.get_service().list_by_status(page_request_from_query(request.query_params), status_filter).value
        return page.to_dict(CertificationSerializer(page.items, many=True).data)

    @extend_schema(
        operation_id="verification_list",
        summary="Certifications, optionally filtered by status",
        parameters=[
            OpenApiParameter(name="status", type=str, description="Pending, Approved or Rejected"),
            OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
            OpenApiParameter(name="pageSize", type=int, description="Items per page (default: 10, max: 50)"),
        ],
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="Certifications")},
        tags=["Verification"],
    )
    def list(self, request):
        return success_response(
            self._page(request, request.query_params.get("status")), "Certifications retrieved successfully"
        )

    @extend_schema(
        operation_id="verification_pending",
        summary="Certifications awaiting review",
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="Pending certifications")},
        tags=["Verification"],
    )
    @action(detail=False, methods=["get"])
    def pending(self, request):
        return success_response(self._page(request, "Pending"), "Pending certifications retrieved successfully")

    @extend_schema(
        operation_id="verification_retrieve",
        summary="Certification detail with seller information",
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Certification"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid certification ID"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Certification not found"),
        },
        tags=["Verification"],
    )
    def retrieve(self, request, pk=None):
        certification_id = parse_uuid(pk)
        if certification_id is None:
            return invalid_id_response("certification")

        result = self.get_service().get(certification_id, is_admin=True)
        if not result.ok:
            return result_error_response(result, VERIFICATION_ERRORS)
        return success_response(
            CertificationDetailSerializer(result.value).data, "Certification retrieved successfully"
        )

    @extend_schema(
        operation_id="verification_approve",
        summary="Approve a pending certification",
        request=None,
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Certification approved"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Not pending"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Certification not found"),
        },
        tags=["Verification"],
    )
    @action(detail=True, methods=["post"])
    def approve(self, request, pk=None):
        certification_id = parse_uuid(pk)
        if certification_id is None:
            return invalid_id_response("certification")

        result = self.get_service().approve(certification_id, request.user)
        if not result.ok:
            return result_error_response(result, VERIFICATION_ERRORS)
        return success_response(CertificationSerializer(result.value).data, "Certification approved successfully")

    @extend_schema(
        operation_id="verification_reject",
        summary="Reject a pending certification",
        request=CertificationRejectSerializer,
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Certification rejected"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Missing notes or not pending"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Certification not found"),
        },
        tags=["Verification"],
    )
    @action(detail=True, methods=["post"])
    def reject(self, request, pk=None):
        certification_id = parse_uuid(pk)
        if certification_id is None:
            return invalid_id_response("certification")

        serializer = CertificationRejectSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().reject(certification_id, request.user, serializer.validated_data["admin_notes"])
        if not result.ok:
            return result_error_response(result, VERIFICATION_ERRORS)
        return success_response(CertificationSerializer(result.value).data, "Certification rejected successfully")

    @extend_schema(
        operation_id="verification_manual_verify",
        summary="Force a seller's verified flag",
        request=ManualVerifySerializer,
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Seller updated"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid seller profile ID"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Seller profile not found"),
        },
        tags=["Verification"],
    )
    @action(detail=True, methods=["post"], url_path="manual-verify", url_name="manual-verify")
    def manual_verify(self, request, pk=None):
        seller_profile_id = parse_uuid(pk)
        if seller_profile_id is None:
            return invalid_id_response("seller profile")

        serializer = ManualVerifySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().manual_verify(seller_profile_id, serializer.validated_data["is_verified"])
        if not result.ok:
            return result_error_response(result, VERIFICATION_ERRORS)
        return success_response(SellerProfileSerializer(result.value).data, "Seller verification updated successfully")
