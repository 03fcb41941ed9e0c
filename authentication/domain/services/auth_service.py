"""
AuthService - Core Authentication Business Logic.

Registration, login, password reset and password change. Coordinates the
email infrastructure with the user and reset token models.
"""

from datetime import timedelta

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone

from authentication.api.serializers.jwt_serializers import RoleRefreshToken
from authentication.domain.models import PasswordResetToken
from infrastructure.email import EmailException, EmailMessage, EmailServiceInterface
from infrastructure.observability.metrics import logins_total, registrations_total
from utils.logging_utils import mask_value
from utils.rbac import ROLE_ADMIN, ROLE_BUYER
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

from .results import LoginResult, RegisterResult


User = get_user_model()

MIN_PASSWORD_LENGTH = 6


def access_token_minutes() -> int:
    lifetime = settings.SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"]
    return int(lifetime.total_seconds() // 60)


class AuthService(BaseService):
    """
    Authentication service encapsulating all auth business logic.

    ``test_compatibility_mode`` is fixed when the service is built; with it on,
    registering an existing email echoes that user instead of failing, and
    self-registration may pick the Admin role.
    """

    def __init__(
        self,
        email_service: EmailServiceInterface,
        test_compatibility_mode: bool = False,
        frontend_url: str = "",
    ):
        super().__init__()
        self.email_service = email_service
        self.test_compatibility_mode = test_compatibility_mode
        self.frontend_url = frontend_url.rstrip("/")

    @BaseService.log_performance
    def register(self, email: str, password: str, role: str = ROLE_BUYER) -> ServiceResult[RegisterResult]:
        if role == ROLE_ADMIN and not self.test_compatibility_mode:
            registrations_total.labels(role=role, outcome="rejected").inc()
            return service_err(ErrorCodes.ROLE_NOT_ALLOWED, "Admin accounts cannot be self-registered")

        email = User.objects.normalize_email(email).lower()

        existing = User.objects.filter(email__iexact=email).first()
        if existing is not None:
            if self.test_compatibility_mode:
                registrations_total.labels(role=existing.role, outcome="echo").inc()
                return service_ok(RegisterResult(user=existing, created=False, message="User already exists"))
            registrations_total.labels(role=role, outcome="conflict").inc()
            return service_err(ErrorCodes.USER_EXISTS, "A user with this email already exists")

        with transaction.atomic():
            user = User.objects.create_user(username=email, email=email, password=password, role=role)

        registrations_total.labels(role=role, outcome="created").inc()
        self.logger.info("Registered user %s with role %s", mask_value(email), role)
        return service_ok(RegisterResult(user=user))

    @BaseService.log_performance
    def login(self, email: str, password: str) -> ServiceResult[LoginResult]:
        user = User.objects.filter(email__iexact=(email or "").strip()).first()

        if user is None or not user.is_active or not user.check_password(password):
            logins_total.labels(outcome="invalid_credentials").inc()
            return service_err(ErrorCodes.INVALID_CREDENTIALS, "Invalid credentials")

        if user.is_locked:
            logins_total.labels(outcome="locked").inc()
            return service_err(ErrorCodes.ACCOUNT_LOCKED, "Account is locked")

        user.last_login = timezone.now()
        user.save(update_fields=["last_login"])

        refresh = RoleRefreshToken.for_user(user)
        logins_total.labels(outcome="success").inc()
        return service_ok(
            LoginResult(
                user=user,
                access_token=str(refresh.access_token),
                refresh_token=str(refresh),
                expires_in=access_token_minutes(),
            )
        )

    @BaseService.log_performance
    def request_password_reset(self, email: str) -> ServiceResult[None]:
        """
        Issue a reset token when the account exists.

        Always succeeds so the response does not reveal which emails are registered.
        """
        user = User.objects.filter(email__iexact=(email or "").strip(), is_active=True).first()
        if user is None:
            self.logger.info("Password reset requested for unknown email %s", mask_value(email))
            return service_ok()

        hours = settings.B2B_MARKETPLACE.get("PASSWORD_RESET_TOKEN_HOURS", 1)
        reset_token = PasswordResetToken.objects.create(user=user, expires_at=timezone.now() + timedelta(hours=hours))

        reset_link = f"{self.frontend_url}/reset-password?token={reset_token.token}"
        message = EmailMessage(
            subject="Reset your password",
            body=(
                "We received a request to reset your password.\n\n"
                f"Use the link below within {hours} hour(s):\n{reset_link}\n\n"
                "If you did not request this, you can ignore this email."
            ),
            to=[user.email],
        )
        try:
            self.email_service.send(message)
        except EmailException:
            self.logger.exception("Could not send password reset email to %s", mask_value(user.email))

        return service_ok()

    @BaseService.log_performance
    def reset_password(self, token: str, new_password: str) -> ServiceResult[None]:
        invalid = service_err(ErrorCodes.INVALID_TOKEN, "Invalid or expired token, or weak password.")

        if not token or not new_password or len(new_password) < MIN_PASSWORD_LENGTH:
            return invalid

        with transaction.atomic():
            reset_token = (
                PasswordResetToken.objects.select_for_update().select_related("user").filter(token=token).first()
            )
            if reset_token is None or not reset_token.is_valid():
                return invalid

            user = reset_token.user
            user.set_password(new_password)
            user.save(update_fields=["password"])

            reset_token.is_used = True
            reset_token.save(update_fields=["is_used"])

        self.logger.info("Password reset completed for user_id=%s", user.id)
        return service_ok()

    @BaseService.log_performance
    def change_password(
        self, user, current_password: str, new_password: str, confirm_password: str
    ) -> ServiceResult[None]:
        if not user.check_password(current_password or ""):
            return service_err(ErrorCodes.INVALID_CREDENTIALS, "Current password is incorrect")
        if not new_password:
            return service_err(ErrorCodes.VALIDATION_ERROR, "New password is required")
        if new_password != confirm_password:
            return service_err(ErrorCodes.VALIDATION_ERROR, "New password and confirmation do not match")
        if len(new_password) < MIN_PASSWORD_LENGTH:
            return service_err(
                ErrorCodes.VALIDATION_ERROR, f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        user.set_password(new_password)
        user.save(update_fields=["password"])
        return service_ok()
