from .admin_serializers import AdminUserSerializer, LockUserSerializer
from .auth_serializers import (
    ChangePasswordRequestSerializer,
    ForgotPasswordRequestSerializer,
    LoginRequestSerializer,
    RegisterRequestSerializer,
    ResetPasswordRequestSerializer,
    UserSummarySerializer,
)
from .certification_serializers import (
    CertificationCreateSerializer,
    CertificationDetailSerializer,
    CertificationRejectSerializer,
    CertificationSerializer,
    CertificationStatusSerializer,
    CertificationUpdateSerializer,
    ManualVerifySerializer,
)
from .profile_serializers import (
    BuyerProfileRequestSerializer,
    BuyerProfileSerializer,
    PublicSellerSerializer,
    SellerProfileRequestSerializer,
    SellerProfileSerializer,
)


__all__ = [
    "UserSummarySerializer",
    "RegisterRequestSerializer",
    "LoginRequestSerializer",
    "ForgotPasswordRequestSerializer",
    "ResetPasswordRequestSerializer",
    "ChangePasswordRequestSerializer",
    "BuyerProfileSerializer",
    "SellerProfileSerializer",
    "PublicSellerSerializer",
    "BuyerProfileRequestSerializer",
    "SellerProfileRequestSerializer",
    "CertificationSerializer",
    "CertificationDetailSerializer",
    "CertificationCreateSerializer",
    "CertificationUpdateSerializer",
    "CertificationStatusSerializer",
    "CertificationRejectSerializer",
    "ManualVerifySerializer",
    "AdminUserSerializer",
    "LockUserSerializer",
]
