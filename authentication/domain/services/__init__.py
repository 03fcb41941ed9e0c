"""
Business logic services for authentication.

Services encapsulate business rules and coordinate between
infrastructure (email) and domain models.
"""

from .admin_user_service import AdminUserService
from .auth_service import AuthService
from .certification_service import CertificationService
from .profile_service import ProfileService
from .results import LoginResult, RegisterResult


__all__ = [
    "AuthService",
    "ProfileService",
    "CertificationService",
    "AdminUserService",
    "LoginResult",
    "RegisterResult",
]
