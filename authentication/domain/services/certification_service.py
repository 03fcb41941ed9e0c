"""
CertificationService - seller certifications and the verification workflow.

A seller is verified while it holds at least one approved certification or
a premium membership. Every status change recomputes the flag.
"""

from typing import Any, Dict

from django.db import transaction
from django.utils import timezone

from authentication.domain.models import Certification, SellerProfile
from utils.pagination import Page, PageRequest, paginate
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


class CertificationService(BaseService):
    @staticmethod
    def recompute_verification(seller_profile: SellerProfile) -> bool:
        has_approved = seller_profile.certifications.filter(status=Certification.STATUS_APPROVED).exists()
        is_verified = has_approved or seller_profile.is_premium
        if seller_profile.is_verified != is_verified or seller_profile.has_verified_badge != is_verified:
            seller_profile.is_verified = is_verified
            seller_profile.has_verified_badge = is_verified
            seller_profile.save(update_fields=["is_verified", "has_verified_badge", "updated_at"])
        return is_verified

    def _seller_profile(self, user):
        profile = SellerProfile.objects.filter(user=user).first()
        if profile is None:
            return service_err(ErrorCodes.SELLER_PROFILE_NOT_FOUND, "Seller profile not found")
        return service_ok(profile)

    @BaseService.log_performance
    def submit(self, user, name: str, document_path: str) -> ServiceResult[Certification]:
        profile_result = self._seller_profile(user)
        if not profile_result.ok:
            return profile_result
        if not name or not document_path:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Name and document path are required")

        certification = Certification.objects.create(
            seller_profile=profile_result.value, name=name, document_path=document_path
        )
        return service_ok(certification)

    def list_mine(self, user) -> ServiceResult[list]:
        profile_result = self._seller_profile(user)
        if not profile_result.ok:
            return profile_result
        return service_ok(list(profile_result.value.certifications.all()))

    def list_for_seller(self, seller_profile_id) -> ServiceResult[list]:
        """Approved certifications of a seller, for the public profile page."""
        if not SellerProfile.objects.filter(id=seller_profile_id).exists():
            return service_err(ErrorCodes.SELLER_PROFILE_NOT_FOUND, "Seller profile not found")
        certifications = Certification.objects.filter(
            seller_profile_id=seller_profile_id, status=Certification.STATUS_APPROVED
        )
        return service_ok(list(certifications))

    def list_by_status(self, page_request: PageRequest, status: str = None) -> ServiceResult[Page]:
        queryset = Certification.objects.select_related("seller_profile", "seller_profile__user")
        if status:
            queryset = queryset.filter(status__iexact=status)
        return service_ok(paginate(queryset.order_by("submitted_at"), page_request))

    def get(self, certification_id, user=None, is_admin: bool = False) -> ServiceResult[Certification]:
        """
        Fetch a certification.

        Approved certifications are public. Anything else is visible to its
        owner and to admins only, and reads as missing to everyone else.
        """
        certification = (
            Certification.objects.select_related("seller_profile", "seller_profile__user")
            .filter(id=certification_id)
            .first()
        )
        not_found = service_err(ErrorCodes.CERTIFICATION_NOT_FOUND, "Certification not found")
        if certification is None:
            return not_found
        if certification.status == Certification.STATUS_APPROVED or is_admin:
            return service_ok(certification)
        if user is not None and certification.seller_profile.user_id == getattr(user, "id", None):
            return service_ok(certification)
        return not_found

    @BaseService.log_performance
    def update(self, certification_id, user, data: Dict[str, Any]) -> ServiceResult[Certification]:
        certification = Certification.objects.select_related("seller_profile").filter(id=certification_id).first()
        if certification is None:
            return service_err(ErrorCodes.CERTIFICATION_NOT_FOUND, "Certification not found")
        if certification.seller_profile.user_id != user.id:
            return service_err(ErrorCodes.PERMISSION_DENIED, "You can only update your own certifications")
        if certification.status != Certification.STATUS_PENDING:
            return service_err(ErrorCodes.INVALID_CERTIFICATION_STATE, "Only pending certifications can be updated")

        for field in ("name", "document_path"):
            if data.get(field):
                setattr(certification, field, data[field])
        certification.save()
        return service_ok(certification)

    @BaseService.log_performance
    def review(
        self, certification_id, reviewer, status: str, admin_notes: str = None, require_pending: bool = False
    ) -> ServiceResult[Certification]:
        """Approve or reject a certification and recompute the seller's verification."""
        if status not in (Certification.STATUS_APPROVED, Certification.STATUS_REJECTED):
            return service_err(ErrorCodes.VALIDATION_ERROR, "Status must be Approved or Rejected")

        with transaction.atomic():
            certification = (
                Certification.objects.select_for_update()
                .select_related("seller_profile")
                .filter(id=certification_id)
                .first()
            )
            if certification is None:
                return service_err(ErrorCodes.CERTIFICATION_NOT_FOUND, "Certification not found")
            if require_pending and certification.status != Certification.STATUS_PENDING:
                return service_err(
                    ErrorCodes.INVALID_CERTIFICATION_STATE, "Only pending certifications can be reviewed"
                )

            certification.status = status
            if admin_notes is not None:
                certification.admin_notes = admin_notes
            certification.reviewed_at = timezone.now()
            certification.reviewed_by = reviewer
            certification.save()

            self.recompute_verification(certification.seller_profile)

        self.logger.info("Certification %s set to %s by %s", certification.id, status, reviewer.id)
        return service_ok(certification)

    def approve(self, certification_id, reviewer) -> ServiceResult[Certification]:
        return self.review(certification_id, reviewer, Certification.STATUS_APPROVED, require_pending=True)

    def reject(self, certification_id, reviewer, admin_notes: str) -> ServiceResult[Certification]:
        if not admin_notes or not admin_notes.strip():
            return service_err(ErrorCodes.VALIDATION_ERROR, "Admin notes are required when rejecting")
        return self.review(
            certification_id, reviewer, Certification.STATUS_REJECTED, admin_notes=admin_notes, require_pending=True
        )

    @BaseService.log_performance
    def manual_verify(self, seller_profile_id, is_verified: bool) -> ServiceResult[SellerProfile]:
        profile = SellerProfile.objects.filter(id=seller_profile_id).first()
        if profile is None:
            return service_err(ErrorCodes.SELLER_PROFILE_NOT_FOUND, "Seller profile not found")
        profile.is_verified = is_verified
        profile.has_verified_badge = is_verified
        profile.save(update_fields=["is_verified", "has_verified_badge", "updated_at"])
        return service_ok(profile)
