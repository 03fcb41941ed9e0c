from drf_spectacular.utils import OpenApiExample, OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.views import APIView
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError
from rest_framework_simplejwt.serializers import TokenRefreshSerializer

from authentication.api.serializers import (
    ChangePasswordRequestSerializer,
    ForgotPasswordRequestSerializer,
    LoginRequestSerializer,
    RegisterRequestSerializer,
    ResetPasswordRequestSerializer,
    UserSummarySerializer,
)
from authentication.domain.services.auth_service import access_token_minutes
from infrastructure.container import container
from utils.responses import result_error_response, success_response
from utils.schema import ErrorResponseSerializer, SuccessResponseSerializer
from utils.service_base import ErrorCodes


class RegisterAPIView(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        operation_id="auth_register",
        summary="Register new user account",
        description="""
        Create a new account. `role` is optional and defaults to `Buyer`;
        accepted values are `Buyer` and `Seller` (case-insensitive).
        """,
        request=RegisterRequestSerializer,
        responses={
            201: OpenApiResponse(
                response=SuccessResponseSerializer,
                description="Registration successful",
                examples=[
                    OpenApiExample(
                        "Successful Registration",
                        value={
                            "success": True,
                            "message": "User registered successfully",
                            "data": {
                                "userId": "123e4567-e89b-12d3-a456-426614174000",
                                "user": {
                                    "id": "123e4567-e89b-12d3-a456-426614174000",
                                    "email": "buyer@example.com",
                                    "role": "Buyer",
                                    "createdAt": "2025-01-01T10:00:00Z",
                                },
                            },
                            "timestamp": "2025-01-01T10:00:00Z",
                        },
                    )
                ],
            ),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error"),
            409: OpenApiResponse(response=ErrorResponseSerializer, description="Email already registered"),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = RegisterRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        result = container.auth_service().register(data["email"], data["password"], data.get("role") or "Buyer")
        if not result.ok:
            return result_error_response(
                result,
                {
                    ErrorCodes.USER_EXISTS: status.HTTP_409_CONFLICT,
                    ErrorCodes.ROLE_NOT_ALLOWED: status.HTTP_400_BAD_REQUEST,
                },
            )

        user = result.value.user
        return success_response(
            {"userId": str(user.id), "user": UserSummarySerializer(user).data},
            "User registered successfully",
            status.HTTP_201_CREATED,
        )


class LoginAPIView(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        operation_id="auth_login",
        summary="Login with email and password",
        description="Returns a bearer token (with `user_id` and `role` claims) and a refresh token.",
        request=LoginRequestSerializer,
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Login successful"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Missing email or password"),
            401: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid credentials or locked account"),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = LoginRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = container.auth_service().login(
            serializer.validated_data["email"], serializer.validated_data["password"]
        )
        if not result.ok:
            return result_error_response(
                result,
                {
                    ErrorCodes.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
                    ErrorCodes.ACCOUNT_LOCKED: status.HTTP_401_UNAUTHORIZED,
                },
            )

        login = result.value
        return success_response(
            {
                "token": login.access_token,
                "refreshToken": login.refresh_token,
                "user": UserSummarySerializer(login.user).data,
                "userId": str(login.user.id),
                "expiresIn": login.expires_in,
            },
            "Login successful",
        )


class RefreshTokenAPIView(APIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    @extend_schema(
        operation_id="auth_refresh",
        summary="Exchange a refresh token for a new access token",
        request={"application/json": {"type": "object", "properties": {"refreshToken": {"type": "string"}}}},
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Token refreshed"),
            401: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid or expired refresh token"),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        raw_token = request.data.get("refreshToken") or request.data.get("refresh")
        serializer = TokenRefreshSerializer(data={"refresh": raw_token})
        try:
            serializer.is_valid(raise_exception=True)
        except TokenError as e:
            raise InvalidToken(e.args[0])

        data = serializer.validated_data
        return success_response(
            {
                "token": data["access"],
                "refreshToken": data.get("refresh", raw_token),
                "expiresIn": access_token_minutes(),
            },
            "Token refreshed successfully",
        )


class ForgotPasswordAPIView(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        operation_id="auth_forgot_password",
        summary="Request a password reset email",
        description="Always answers 200 so the response does not reveal whether the email is registered.",
        request=ForgotPasswordRequestSerializer,
        responses={200: OpenApiResponse(response=SuccessResponseSerializer, description="Request accepted")},
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = ForgotPasswordRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        container.auth_service().request_password_reset(serializer.validated_data["email"])
        return success_response(None, "If the email exists, a password reset link has been sent.")


class ResetPasswordAPIView(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        operation_id="auth_reset_password",
        summary="Reset password with an emailed token",
        request=ResetPasswordRequestSerializer,
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Password reset"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid token or weak password"),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = ResetPasswordRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = container.auth_service().reset_password(
            serializer.validated_data["token"], serializer.validated_data["newPassword"]
        )
        if not result.ok:
            return result_error_response(result, {})
        return success_response(None, "Password has been reset successfully.")


class ChangePasswordAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        operation_id="auth_change_password",
        summary="Change the current user's password",
        request=ChangePasswordRequestSerializer,
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Password changed"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error"),
            401: OpenApiResponse(response=ErrorResponseSerializer, description="Not authenticated"),
        },
        tags=["Authentication"],
    )
    def put(self, request):
        serializer = ChangePasswordRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        result = container.auth_service().change_password(
            request.user, data["currentPassword"], data["newPassword"], data["confirmPassword"]
        )
        if not result.ok:
            return result_error_response(result, {})
        return success_response(None, "Password changed successfully")
