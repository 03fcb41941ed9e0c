from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action

from authentication.permissions import IsBuyer, IsSeller
from infrastructure.container import container
from marketplace.reviews.api.serializers import (
    ProductReviewCreateSerializer,
    ReviewCreateSerializer,
    ReviewReplyCreateSerializer,
    ReviewReplySerializer,
    ReviewReportSerializer,
    ReviewSerializer,
    ReviewUpdateSerializer,
)
from utils.pagination import page_request_from_query
from utils.responses import invalid_id_response, parse_uuid, result_error_response, success_response
from utils.schema import ErrorResponseSerializer, PagedResponseSerializer, SuccessResponseSerializer
from utils.service_base import ErrorCodes


REVIEW_ERRORS = {
    ErrorCodes.REVIEW_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.NOT_REVIEW_OWNER: status.HTTP_403_FORBIDDEN,
    ErrorCodes.PRODUCT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.SELLER_PROFILE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.BUYER_PROFILE_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
}

PAGE_PARAMETERS = [
    OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
    OpenApiParameter(name="pageSize", type=int, description="Items per page (default: 10, max: 50)"),
]

REVIEW_RESPONSES = {
    200: OpenApiResponse(response=SuccessResponseSerializer, description="Review"),
    400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error or invalid ID"),
    403: OpenApiResponse(response=ErrorResponseSerializer, description="Not allowed for this review"),
    404: OpenApiResponse(response=ErrorResponseSerializer, description="Review, seller or product not found"),
}


class ReviewViewSet(viewsets.ViewSet):
    """
    Seller reviews.

    Buyers write and edit reviews, reviewed sellers reply, and approved
    reviews with their summary are public.
    """

    def get_permissions(self):
        if self.action in ("for_seller", "summary"):
            return [permissions.AllowAny()]
        if self.action in ("received", "reply"):
            return [IsSeller()]
        if self.action == "report":
            return [permissions.IsAuthenticated()]
        return [IsBuyer()]

    def get_service(self):
        return container.review_service()

    def _paged(self, result, message):
        if not result.ok:
            return result_error_response(result, REVIEW_ERRORS)
        page = result.value
        return success_response(page.to_dict(ReviewSerializer(page.items, many=True).data), message)

    def _created(self, result):
        if not result.ok:
            return result_error_response(result, REVIEW_ERRORS)
        return success_response(
            ReviewSerializer(result.value).data, "Review created successfully", status.HTTP_201_CREATED
        )

    @extend_schema(
        operation_id="reviews_create",
        summary="Review a seller (buyer)",
        request=ReviewCreateSerializer,
        responses={**REVIEW_RESPONSES, 201: REVIEW_RESPONSES[200]},
        tags=["Reviews"],
    )
    def create(self, request):
        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self._created(self.get_service().create_review(request.user, serializer.validated_data))

    @extend_schema(
        operation_id="reviews_create_for_product",
        summary="Review a product's seller (buyer)",
        request=ProductReviewCreateSerializer,
        responses={**REVIEW_RESPONSES, 201: REVIEW_RESPONSES[200]},
        tags=["Reviews"],
    )
    @action(detail=False, methods=["post"], url_path=r"product/(?P<product_id>[^/.]+)", url_name="product")
    def for_product(self, request, product_id=None):
        product_uuid = parse_uuid(product_id)
        if product_uuid is None:
            return invalid_id_response("product")

        serializer = ProductReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self._created(
            self.get_service().create_product_review(request.user, product_uuid, serializer.validated_data)
        )

    @extend_schema(
        operation_id="reviews_mine",
        summary="Reviews written by the caller (buyer)",
        parameters=PAGE_PARAMETERS,
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="Reviews")},
        tags=["Reviews"],
    )
    @action(detail=False, methods=["get"], url_path="my-reviews", url_name="my-reviews")
    def my_reviews(self, request):
        result = self.get_service().my_reviews(request.user, page_request_from_query(request.query_params))
        return self._paged(result, "Reviews retrieved successfully")

    @extend_schema(
        operation_id="reviews_received",
        summary="Reviews received by the caller (seller)",
        parameters=PAGE_PARAMETERS,
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="Reviews")},
        tags=["Reviews"],
    )
    @action(detail=False, methods=["get"], url_path="seller", url_name="received")
    def received(self, request):
        result = self.get_service().received_reviews(request.user, page_request_from_query(request.query_params))
        return self._paged(result, "Reviews retrieved successfully")

    @extend_schema(
        operation_id="reviews_for_seller",
        summary="Approved reviews of a seller",
        parameters=PAGE_PARAMETERS,
        responses={
            200: OpenApiResponse(response=PagedResponseSerializer, description="Reviews"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid seller profile ID"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Seller not found"),
        },
        tags=["Reviews"],
    )
    @action(
        detail=False,
        methods=["get"],
        url_path=r"seller/(?P<seller_profile_id>[^/.]+)",
        url_name="seller",
    )
    def for_seller(self, request, seller_profile_id=None):
        seller_uuid = parse_uuid(seller_profile_id)
        if seller_uuid is None:
            return invalid_id_response("seller profile")

        result = self.get_service().seller_reviews(seller_uuid, page_request_from_query(request.query_params))
        return self._paged(result, "Reviews retrieved successfully")

    @extend_schema(
        operation_id="reviews_seller_summary",
        summary="Rating summary of a seller",
        responses={
            200: OpenApiResponse(
                response=SuccessResponseSerializer, description="averageRating, totalReviews, ratingDistribution"
            ),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid seller profile ID"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Seller not found"),
        },
        tags=["Reviews"],
    )
    @action(
        detail=False,
        methods=["get"],
        url_path=r"seller/(?P<seller_profile_id>[^/.]+)/summary",
        url_name="seller-summary",
    )
    def summary(self, request, seller_profile_id=None):
        seller_uuid = parse_uuid(seller_profile_id)
        if seller_uuid is None:
            return invalid_id_response("seller profile")

        result = self.get_service().seller_summary(seller_uuid)
        if not result.ok:
            return result_error_response(result, REVIEW_ERRORS)
        return success_response(result.value, "Review summary retrieved successfully")

    @extend_schema(
        operation_id="reviews_report",
        summary="Report a review",
        request=ReviewReportSerializer,
        responses=REVIEW_RESPONSES,
        tags=["Reviews"],
    )
    @action(detail=True, methods=["post"])
    def report(self, request, pk=None):
        review_id = parse_uuid(pk)
        if review_id is None:
            return invalid_id_response("review")

        serializer = ReviewReportSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().report_review(review_id, request.user, serializer.validated_data["reason"])
        if not result.ok:
            return result_error_response(result, REVIEW_ERRORS)
        return success_response(ReviewSerializer(result.value).data, "Review reported successfully")

    @extend_schema(
        operation_id="reviews_update",
        summary="Edit one of the caller's reviews",
        request=ReviewUpdateSerializer,
        responses=REVIEW_RESPONSES,
        tags=["Reviews"],
    )
    def update(self, request, pk=None):
        review_id = parse_uuid(pk)
        if review_id is None:
            return invalid_id_response("review")

        serializer = ReviewUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().update_review(review_id, request.user, serializer.validated_data)
        if not result.ok:
            return result_error_response(result, REVIEW_ERRORS)
        return success_response(ReviewSerializer(result.value).data, "Review updated successfully")

    @extend_schema(
        operation_id="reviews_reply",
        summary="Reply to a review of the caller (seller)",
        request=ReviewReplyCreateSerializer,
        responses={**REVIEW_RESPONSES, 201: OpenApiResponse(response=SuccessResponseSerializer, description="Reply")},
        tags=["Reviews"],
    )
    @action(detail=True, methods=["post"])
    def reply(self, request, pk=None):
        review_id = parse_uuid(pk)
        if review_id is None:
            return invalid_id_response("review")

        serializer = ReviewReplyCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().reply_to_review(review_id, request.user, serializer.validated_data["reply_content"])
        if not result.ok:
            return result_error_response(result, REVIEW_ERRORS)
        return success_response(
            ReviewReplySerializer(result.value).data, "Reply added successfully", status.HTTP_201_CREATED
        )
