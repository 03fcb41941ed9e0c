from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action

from authentication.api.serializers import AdminUserSerializer, LockUserSerializer
from authentication.permissions import IsAdmin
from infrastructure.container import container
from utils.pagination import page_request_from_query
from utils.responses import invalid_id_response, parse_uuid, result_error_response, success_response
from utils.schema import ErrorResponseSerializer, PagedResponseSerializer, SuccessResponseSerializer
from utils.service_base import ErrorCodes


ADMIN_USER_ERRORS = {
    ErrorCodes.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
}

# Admin user listings default to 50 rows and cap at 100
USER_PAGE_SIZE = 50
USER_PAGE_MAX = 100

PAGE_PARAMETERS = [
    OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
    OpenApiParameter(name="pageSize", type=int, description="Items per page (default: 50, max: 100)"),
]


class AdminUserViewSet(viewsets.ViewSet):
    permission_classes = [IsAdmin]

    def get_service(self):
        return container.admin_user_service()

    def _page_request(self, request):
        return page_request_from_query(request.query_params, USER_PAGE_SIZE, USER_PAGE_MAX)

    @extend_schema(
        operation_id="admin_users_list",
        summary="All users, newest first",
        parameters=PAGE_PARAMETERS,
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="Users")},
        tags=["Admin"],
    )
    def list(self, request):
        page = self.get_service().list_users(self._page_request(request)).value
        return success_response(
            page.to_dict(AdminUserSerializer(page.items, many=True).data), "Users retrieved successfully"
        )

    @extend_schema(
        operation_id="admin_users_search",
        summary="Search users by email fragment and role",
        parameters=[
            OpenApiParameter(name="query", type=str, description="Part of the email address"),
            OpenApiParameter(name="role", type=str, description="Buyer, Seller or Admin"),
            *PAGE_PARAMETERS,
        ],
        responses={
            200: OpenApiResponse(response=PagedResponseSerializer, description="Matching users"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Unknown role"),
        },
        tags=["Admin"],
    )
    @action(detail=False, methods=["get"])
    def search(self, request):
        result = self.get_service().search_users(
            self._page_request(request),
            query=request.query_params.get("query"),
            role=request.query_params.get("role"),
        )
        if not result.ok:
            return result_error_response(result, ADMIN_USER_ERRORS)
        page = result.value
        return success_response(
            page.to_dict(AdminUserSerializer(page.items, many=True).data), "Users retrieved successfully"
        )

    @extend_schema(
        operation_id="admin_users_retrieve",
        summary="User detail",
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="User"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid user ID"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="User not found"),
        },
        tags=["Admin"],
    )
    def retrieve(self, request, pk=None):
        user_id = parse_uuid(pk)
        if user_id is None:
            return invalid_id_response("user")

        result = self.get_service().get_user(user_id)
        if not result.ok:
            return result_error_response(result, ADMIN_USER_ERRORS)
        return success_response(AdminUserSerializer(result.value).data, "User retrieved successfully")

    @extend_schema(
        operation_id="admin_users_lock",
        summary="Lock a user account",
        request=LockUserSerializer,
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="User locked"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid ID or self-lock"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="User not found"),
        },
        tags=["Admin"],
    )
    @action(detail=True, methods=["post"])
    def lock(self, request, pk=None):
        user_id = parse_uuid(pk)
        if user_id is None:
            return invalid_id_response("user")

        serializer = LockUserSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().lock_user(request.user, user_id, serializer.validated_data.get("reason"))
        if not result.ok:
            return result_error_response(result, ADMIN_USER_ERRORS)
        return success_response(AdminUserSerializer(result.value).data, "User locked successfully")

    @extend_schema(
        operation_id="admin_users_unlock",
        summary="Unlock a user account",
        request=None,
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="User unlocked"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid user ID"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="User not found"),
        },
        tags=["Admin"],
    )
    @action(detail=True, methods=["post"])
    def unlock(self, request, pk=None):
        user_id = parse_uuid(pk)
        if user_id is None:
            return invalid_id_response("user")

        result = self.get_service().unlock_user(request.user, user_id)
        if not result.ok:
            return result_error_response(result, ADMIN_USER_ERRORS)
        return success_response(AdminUserSerializer(result.value).data, "User unlocked successfully")
