from .admin_views import AdminUserViewSet
from .auth_views import (
    ChangePasswordAPIView,
    ForgotPasswordAPIView,
    LoginAPIView,
    RefreshTokenAPIView,
    RegisterAPIView,
    ResetPasswordAPIView,
)
from .certification_views import CertificationViewSet
from .profile_views import (
    BuyerProfileView,
    ProfileView,
    PublicSellerDetailView,
    PublicSellerListView,
    SellerProfileView,
    VerificationStatusView,
)
from .verification_views import VerificationViewSet


__all__ = [
    "RegisterAPIView",
    "LoginAPIView",
    "RefreshTokenAPIView",
    "ForgotPasswordAPIView",
    "ResetPasswordAPIView",
    "ChangePasswordAPIView",
    "ProfileView",
    "BuyerProfileView",
    "SellerProfileView",
    "VerificationStatusView",
    "PublicSellerListView",
    "PublicSellerDetailView",
    "CertificationViewSet",
    "VerificationViewSet",
    "AdminUserViewSet",
]
