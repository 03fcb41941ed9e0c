"""AdminUserService - user administration (listing, search, lock/unlock)."""

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone

from utils.pagination import Page, PageRequest, paginate
from utils.rbac import normalize_role
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


User = get_user_model()


class AdminUserService(BaseService):
    def list_users(self, page_request: PageRequest) -> ServiceResult[Page]:
        return service_ok(paginate(User.objects.order_by("-date_joined"), page_request))

    def search_users(self, page_request: PageRequest, query: str = None, role: str = None) -> ServiceResult[Page]:
        queryset = User.objects.order_by("-date_joined")
        if query:
            queryset = queryset.filter(email__icontains=query.strip())
        if role:
            canonical = normalize_role(role)
            if canonical is None:
                return service_err(ErrorCodes.VALIDATION_ERROR, f"Unknown role: {role}")
            queryset = queryset.filter(role=canonical)
        return service_ok(paginate(queryset, page_request))

    def get_user(self, user_id) -> ServiceResult:
        user = User.objects.filter(id=user_id).first()
        if user is None:
            return service_err(ErrorCodes.USER_NOT_FOUND, "User not found")
        return service_ok(user)

    @BaseService.log_performance
    def lock_user(self, admin, user_id, reason: str = None) -> ServiceResult:
        if str(admin.id) == str(user_id):
            return service_err(ErrorCodes.VALIDATION_ERROR, "You cannot lock your own account")

        with transaction.atomic():
            user = User.objects.select_for_update().filter(id=user_id).first()
            if user is None:
                return service_err(ErrorCodes.USER_NOT_FOUND, "User not found")
            user.is_locked = True
            user.lock_reason = reason or None
            user.lock_date = timezone.now()
            user.save(update_fields=["is_locked", "lock_reason", "lock_date", "updated_at"])

        self.logger.info("User %s locked by admin %s", user.id, admin.id)
        return service_ok(user)

    @BaseService.log_performance
    def unlock_user(self, admin, user_id) -> ServiceResult:
        with transaction.atomic():
            user = User.objects.select_for_update().filter(id=user_id).first()
            if user is None:
                return service_err(ErrorCodes.USER_NOT_FOUND, "User not found")
            user.is_locked = False
            user.lock_reason = None
            user.lock_date = None
            user.save(update_fields=["is_locked", "lock_reason", "lock_date", "updated_at"])

        self.logger.info("User %s unlocked by admin %s", user.id, admin.id)
        return service_ok(user)
