from rest_framework import serializers

from utils.rbac import ROLE_BUYER, ROLE_SELLER, normalize_role


SELF_SERVICE_ROLES = (ROLE_BUYER, ROLE_SELLER)


class UserSummarySerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    email = serializers.EmailField(read_only=True)
    role = serializers.CharField(read_only=True)
    createdAt = serializers.DateTimeField(source="date_joined", read_only=True)


class RegisterRequestSerializer(serializers.Serializer):
    email = serializers.EmailField(
        error_messages={
            "required": "Email and password are required",
            "blank": "Email and password are required",
            "invalid": "Invalid email format",
        }
    )
    password = serializers.CharField(
        trim_whitespace=False,
        error_messages={
            "required": "Email and password are required",
            "blank": "Email and password are required",
        },
    )
    role = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate_password(self, value):
        if len(value) < 6:
            raise serializers.ValidationError("Password must be at least 6 characters")
        return value

    def validate_role(self, value):
        if not value:
            return ROLE_BUYER
        role = normalize_role(value)
        if role is None:
            allowed = ", ".join(SELF_SERVICE_ROLES)
            raise serializers.ValidationError(f"Invalid role specified. Must be one of: {allowed}")
        return role


class LoginRequestSerializer(serializers.Serializer):
    email = serializers.CharField(
        error_messages={
            "required": "Email and password are required",
            "blank": "Email and password are required",
        }
    )
    password = serializers.CharField(
        trim_whitespace=False,
        error_messages={
            "required": "Email and password are required",
            "blank": "Email and password are required",
        },
    )


class ForgotPasswordRequestSerializer(serializers.Serializer):
    email = serializers.CharField(error_messages={"required": "Email is required", "blank": "Email is required"})


RESET_REQUIRED_ERRORS = {
    "required": "Token and new password are required",
    "blank": "Token and new password are required",
}


class ResetPasswordRequestSerializer(serializers.Serializer):
    token = serializers.CharField(error_messages=RESET_REQUIRED_ERRORS)
    newPassword = serializers.CharField(
        trim_whitespace=False,
        error_messages=RESET_REQUIRED_ERRORS,
    )


class ChangePasswordRequestSerializer(serializers.Serializer):
    currentPassword = serializers.CharField(trim_whitespace=False, required=False, allow_blank=True, default="")
    newPassword = serializers.CharField(trim_whitespace=False, required=False, allow_blank=True, default="")
    confirmPassword = serializers.CharField(trim_whitespace=False, required=False, allow_blank=True, default="")
