from typing import Iterable

from django.contrib.auth import get_user_model

# Canonical role names, also carried in the token "role" claim
ROLE_BUYER = "Buyer"
ROLE_SELLER = "Seller"
ROLE_ADMIN = "Admin"

ROLES = (ROLE_BUYER, ROLE_SELLER, ROLE_ADMIN)


def normalize_role(value) -> str | None:
    """Map a client-supplied role ("seller", "SELLER") onto its canonical name."""
    if not isinstance(value, str):
        return None
    for role in ROLES:
        if role.lower() == value.strip().lower():
            return role
    return None


def _fetch_user_from_db(user):
    """Fetch a fresh copy of the user with only the fields RBAC needs.

    Returns None for anonymous users.
    """
    if not getattr(user, "is_authenticated", False):
        return None
    User = get_user_model()
    return User.objects.only("id", "role", "is_superuser").filter(pk=getattr(user, "pk", None)).first()


def _role_matches(db_user, role: str) -> bool:
    if role == ROLE_ADMIN and db_user.is_superuser:
        return True
    return db_user.role == role


def has_role(user, role: str) -> bool:
    db_user = _fetch_user_from_db(user)
    if not db_user:
        return False
    return _role_matches(db_user, role)


def is_admin(user) -> bool:
    return has_role(user, ROLE_ADMIN)


def is_seller(user) -> bool:
    return has_role(user, ROLE_SELLER)


def is_buyer(user) -> bool:
    return has_role(user, ROLE_BUYER)


def has_any_role(user, roles: Iterable[str]) -> bool:
    db_user = _fetch_user_from_db(user)
    if not db_user:
        return False
    return any(_role_matches(db_user, r) for r in roles)
