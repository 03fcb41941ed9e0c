from .certification import Certification
from .profiles import BuyerProfile, SellerProfile
from .tokens import PasswordResetToken
from .user import CustomUser

__all__ = [
    "CustomUser",
    "BuyerProfile",
    "SellerProfile",
    "Certification",
    "PasswordResetToken",
]
