from typing import Iterable

from rest_framework.permissions import BasePermission

from utils.rbac import ROLE_ADMIN, ROLE_BUYER, ROLE_SELLER, has_any_role


class RoleRequired(BasePermission):
    """Base permission that enforces required roles after DB re-validation."""

    required_roles: Iterable[str] = ()
    message = "You do not have permission to perform this action."

    def has_permission(self, request, view) -> bool:
        user = getattr(request, "user", None)
        if user is None or not getattr(user, "is_authenticated", False):
            return False

        required = tuple(self.required_roles)
        if not required:
            return True
        return has_any_role(user, required)

    def has_object_permission(self, request, view, obj) -> bool:
        return self.has_permission(request, view)


class IsBuyer(RoleRequired):
    required_roles = (ROLE_BUYER,)
    message = "Buyer role required."


class IsSeller(RoleRequired):
    required_roles = (ROLE_SELLER,)
    message = "Seller role required."


class IsAdmin(RoleRequired):
    required_roles = (ROLE_ADMIN,)
    message = "Admin role required."


class IsBuyerOrSeller(RoleRequired):
    required_roles = (ROLE_BUYER, ROLE_SELLER)
