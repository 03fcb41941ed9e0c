from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.views import APIView

from authentication.api.serializers import (
    BuyerProfileRequestSerializer,
    BuyerProfileSerializer,
    PublicSellerSerializer,
    SellerProfileRequestSerializer,
    SellerProfileSerializer,
    UserSummarySerializer,
)
from authentication.domain.models import BuyerProfile, SellerProfile
from authentication.permissions import IsBuyer, IsSeller
from infrastructure.container import container
from utils.pagination import page_request_from_query
from utils.responses import invalid_id_response, parse_uuid, result_error_response, success_response
from utils.schema import ErrorResponseSerializer, PagedResponseSerializer, SuccessResponseSerializer
from utils.service_base import ErrorCodes


PROFILE_ERRORS = {
    ErrorCodes.BUYER_PROFILE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.SELLER_PROFILE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
}


def _serialize_profile(profile):
    if isinstance(profile, SellerProfile):
        return SellerProfileSerializer(profile).data
    if isinstance(profile, BuyerProfile):
        return BuyerProfileSerializer(profile).data
    return None


class ProfileView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        operation_id="profile_me",
        summary="Current user with the profile matching their role",
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Profile retrieved"),
            401: OpenApiResponse(response=ErrorResponseSerializer, description="Not authenticated"),
        },
        tags=["Profiles"],
    )
    def get(self, request):
        profile = container.profile_service().get_profile_for_user(request.user)
        return success_response(
            {"user": UserSummarySerializer(request.user).data, "profile": _serialize_profile(profile)},
            "Profile retrieved successfully",
        )


class BuyerProfileView(APIView):
    permission_classes = [IsBuyer]

    @extend_schema(
        operation_id="profile_buyer_get",
        summary="Get the caller's buyer profile",
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Buyer profile"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="No buyer profile yet"),
        },
        tags=["Profiles"],
    )
    def get(self, request):
        result = container.profile_service().get_buyer_profile(request.user)
        if not result.ok:
            return result_error_response(result, PROFILE_ERRORS)
        return success_response(BuyerProfileSerializer(result.value).data, "Buyer profile retrieved successfully")

    @extend_schema(
        operation_id="profile_buyer_save",
        summary="Create or update the caller's buyer profile",
        description="`name` is required when the profile does not exist yet.",
        request=BuyerProfileRequestSerializer,
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Buyer profile saved"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error"),
        },
        tags=["Profiles"],
    )
    def post(self, request):
        serializer = BuyerProfileRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = container.profile_service().upsert_buyer_profile(request.user, serializer.validated_data)
        if not result.ok:
            return result_error_response(result, PROFILE_ERRORS)
        return success_response(BuyerProfileSerializer(result.value).data, "Buyer profile saved successfully")

    @extend_schema(
        operation_id="profile_buyer_update",
        summary="Update the caller's buyer profile",
        request=BuyerProfileRequestSerializer,
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Buyer profile updated"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="No buyer profile yet"),
        },
        tags=["Profiles"],
    )
    def put(self, request):
        serializer = BuyerProfileRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = container.profile_service().update_buyer_profile(request.user, serializer.validated_data)
        if not result.ok:
            return result_error_response(result, PROFILE_ERRORS)
        return success_response(BuyerProfileSerializer(result.value).data, "Buyer profile updated successfully")


class SellerProfileView(APIView):
    permission_classes = [IsSeller]

    @extend_schema(
        operation_id="profile_seller_get",
        summary="Get the caller's seller profile",
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Seller profile"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="No seller profile yet"),
        },
        tags=["Profiles"],
    )
    def get(self, request):
        result = container.profile_service().get_seller_profile(request.user)
        if not result.ok:
            return result_error_response(result, PROFILE_ERRORS)
        return success_response(SellerProfileSerializer(result.value).data, "Seller profile retrieved successfully")

    @extend_schema(
        operation_id="profile_seller_save",
        summary="Create or update the caller's seller profile",
        description="`companyName` is required when the profile does not exist yet.",
        request=SellerProfileRequestSerializer,
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Seller profile saved"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error"),
        },
        tags=["Profiles"],
    )
    def post(self, request):
        serializer = SellerProfileRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = container.profile_service().upsert_seller_profile(request.user, serializer.validated_data)
        if not result.ok:
            return result_error_response(result, PROFILE_ERRORS)
        return success_response(SellerProfileSerializer(result.value).data, "Seller profile saved successfully")

    @extend_schema(
        operation_id="profile_seller_update",
        summary="Update the caller's seller profile",
        request=SellerProfileRequestSerializer,
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Seller profile updated"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="No seller profile yet"),
        },
        tags=["Profiles"],
    )
    def put(self, request):
        serializer = SellerProfileRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = container.profile_service().update_seller_profile(request.user, serializer.validated_data)
        if not result.ok:
            return result_error_response(result, PROFILE_ERRORS)
        return success_response(SellerProfileSerializer(result.value).data, "Seller profile updated successfully")


class VerificationStatusView(APIView):
    permission_classes = [IsSeller]

    @extend_schema(
        operation_id="profile_verification_status",
        summary="Verification state of the caller's seller profile",
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Verification status"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="No seller profile yet"),
        },
        tags=["Profiles"],
    )
    def get(self, request):
        result = container.profile_service().verification_status(request.user)
        if not result.ok:
            return result_error_response(result, PROFILE_ERRORS)
        return success_response(result.value, "Verification status retrieved successfully")


class PublicSellerListView(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        operation_id="public_sellers_list",
        summary="Directory of verified sellers",
        parameters=[
            OpenApiParameter(name="industry", type=str, description="Filter by industry"),
            OpenApiParameter(name="country", type=str, description="Filter by country"),
            OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
            OpenApiParameter(name="pageSize", type=int, description="Items per page (default: 10, max: 50)"),
        ],
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="Verified sellers")},
        tags=["Public"],
    )
    def get(self, request):
        page_request = page_request_from_query(request.query_params)
        result = container.profile_service().list_public_sellers(
            page_request,
            industry=request.query_params.get("industry"),
            country=request.query_params.get("country"),
        )
        page = result.value
        return success_response(
            page.to_dict(PublicSellerSerializer(page.items, many=True).data), "Sellers retrieved successfully"
        )


class PublicSellerDetailView(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        operation_id="public_sellers_retrieve",
        summary="Public profile of a verified seller",
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Seller profile"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid seller ID"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Seller not found or not verified"),
        },
        tags=["Public"],
    )
    def get(self, request, seller_id):
        seller_uuid = parse_uuid(seller_id)
        if seller_uuid is None:
            return invalid_id_response("seller")

        result = container.profile_service().get_public_seller(seller_uuid)
        if not result.ok:
            return result_error_response(result, PROFILE_ERRORS)
        return success_response(PublicSellerSerializer(result.value).data, "Seller retrieved successfully")
