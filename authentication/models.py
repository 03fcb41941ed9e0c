from authentication.domain.models import BuyerProfile, Certification, CustomUser, PasswordResetToken, SellerProfile

__all__ = [
    "CustomUser",
    "BuyerProfile",
    "SellerProfile",
    "Certification",
    "PasswordResetToken",
]
