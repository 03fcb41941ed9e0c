"""
ProfileService - buyer and seller profile management.

Also answers the public seller directory, which only ever exposes verified
sellers.
"""

from typing import Any, Dict, Optional

from django.db.models import Count, Q

from authentication.domain.models import BuyerProfile, Certification, SellerProfile
from utils.pagination import Page, PageRequest, paginate
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


BUYER_FIELDS = ("name", "company_name", "country", "phone")
SELLER_FIELDS = ("company_name", "legal_representative", "tax_id", "industry", "country", "description")


def _apply(instance, data: Dict[str, Any], fields) -> list:
    changed = []
    for field in fields:
        if field in data:
            setattr(instance, field, data[field])
            changed.append(field)
    return changed


class ProfileService(BaseService):
    def get_buyer_profile(self, user) -> ServiceResult[BuyerProfile]:
        profile = BuyerProfile.objects.filter(user=user).first()
        if profile is None:
            return service_err(ErrorCodes.BUYER_PROFILE_NOT_FOUND, "Buyer profile not found")
        return service_ok(profile)

    def get_seller_profile(self, user) -> ServiceResult[SellerProfile]:
        profile = SellerProfile.objects.filter(user=user).first()
        if profile is None:
            return service_err(ErrorCodes.SELLER_PROFILE_NOT_FOUND, "Seller profile not found")
        return service_ok(profile)

    @BaseService.log_performance
    def upsert_buyer_profile(self, user, data: Dict[str, Any]) -> ServiceResult[BuyerProfile]:
        """Create the caller's buyer profile, or update it if one exists."""
        profile = BuyerProfile.objects.filter(user=user).first()
        if profile is None:
            if not data.get("name"):
                return service_err(ErrorCodes.VALIDATION_ERROR, "Name is required")
            profile = BuyerProfile(user=user)
        _apply(profile, data, BUYER_FIELDS)
        profile.save()
        return service_ok(profile)

    @BaseService.log_performance
    def update_buyer_profile(self, user, data: Dict[str, Any]) -> ServiceResult[BuyerProfile]:
        profile = BuyerProfile.objects.filter(user=user).first()
        if profile is None:
            return service_err(ErrorCodes.BUYER_PROFILE_NOT_FOUND, "Buyer profile not found")
        if "name" in data and not data["name"]:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Name cannot be empty")
        _apply(profile, data, BUYER_FIELDS)
        profile.save()
        return service_ok(profile)

    @BaseService.log_performance
    def upsert_seller_profile(self, user, data: Dict[str, Any]) -> ServiceResult[SellerProfile]:
        profile = SellerProfile.objects.filter(user=user).first()
        if profile is None:
            if not data.get("company_name"):
                return service_err(ErrorCodes.VALIDATION_ERROR, "Company name is required")
            profile = SellerProfile(user=user)
        _apply(profile, data, SELLER_FIELDS)
        profile.save()
        return service_ok(profile)

    @BaseService.log_performance
    def update_seller_profile(self, user, data: Dict[str, Any]) -> ServiceResult[SellerProfile]:
        profile = SellerProfile.objects.filter(user=user).first()
        if profile is None:
            return service_err(ErrorCodes.SELLER_PROFILE_NOT_FOUND, "Seller profile not found")
        if "company_name" in data and not data["company_name"]:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Company name cannot be empty")
        _apply(profile, data, SELLER_FIELDS)
        profile.save()
        return service_ok(profile)

    def get_profile_for_user(self, user) -> Optional[Any]:
        """The profile matching the user's role, or None."""
        if user.is_seller():
            return SellerProfile.objects.filter(user=user).first()
        if user.is_buyer():
            return BuyerProfile.objects.filter(user=user).first()
        return None

    def verification_status(self, user) -> ServiceResult[Dict[str, Any]]:
        profile_result = self.get_seller_profile(user)
        if not profile_result.ok:
            return profile_result
        profile = profile_result.value

        counts = profile.certifications.aggregate(
            total=Count("id"),
            pending=Count("id", filter=Q(status=Certification.STATUS_PENDING)),
            approved=Count("id", filter=Q(status=Certification.STATUS_APPROVED)),
            rejected=Count("id", filter=Q(status=Certification.STATUS_REJECTED)),
        )
        return service_ok(
            {
                "sellerProfileId": str(profile.id),
                "isVerified": profile.is_verified,
                "isPremium": profile.is_premium,
                "hasVerifiedBadge": profile.has_verified_badge,
                "certifications": {
                    "total": counts["total"],
                    "pending": counts["pending"],
                    "approved": counts["approved"],
                    "rejected": counts["rejected"],
                },
            }
        )

    def list_public_sellers(
        self, page_request: PageRequest, industry: str = None, country: str = None
    ) -> ServiceResult[Page]:
        queryset = SellerProfile.objects.filter(is_verified=True).order_by("company_name")
        if industry:
            queryset = queryset.filter(industry__iexact=industry)
        if country:
            queryset = queryset.filter(country__iexact=country)
        return service_ok(paginate(queryset, page_request))

    def get_public_seller(self, seller_profile_id) -> ServiceResult[SellerProfile]:
        profile = SellerProfile.objects.filter(id=seller_profile_id, is_verified=True).first()
        if profile is None:
            return service_err(ErrorCodes.SELLER_PROFILE_NOT_FOUND, "Seller not found")
        return service_ok(profile)
