"""
RFQService - Request-for-quotation lifecycle

Buyers raise RFQs, optionally addressed to specific sellers. An RFQ with no
recipients is open to every seller. Status moves Open -> Responded (first
quote) -> Closed (owner action).
"""

from typing import Any, Dict, List

from django.db import transaction
from django.db.models import Q
from django.utils import timezone

from authentication.models import BuyerProfile, SellerProfile
from infrastructure.observability.metrics import rfqs_created_total
from infrastructure.observability.tracing import tracer
from marketplace.sourcing.domain.models import RFQ, Quote, RFQItem, RFQRecipient
from utils.pagination import Page, PageRequest, paginate
from utils.rbac import is_admin, is_seller
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


RFQ_STATUSES = {choice[0].lower(): choice[0] for choice in RFQ.STATUS_CHOICES}


def normalize_rfq_status(value) -> str | None:
    if not isinstance(value, str):
        return None
    return RFQ_STATUSES.get(value.strip().lower())


class RFQService(BaseService):
    def _base_queryset(self):
        return RFQ.objects.select_related("buyer_profile").prefetch_related("items", "recipients")

    def list_rfqs(self, page_request: PageRequest, status: str = None) -> ServiceResult[Page]:
        queryset = self._base_queryset()
        if status:
            canonical = normalize_rfq_status(status)
            if canonical is None:
                return service_err(ErrorCodes.VALIDATION_ERROR, f"Invalid RFQ status: {status}")
            queryset = queryset.filter(status=canonical)
        return service_ok(paginate(queryset.order_by("-created_at"), page_request))

    def get_rfq(self, rfq_id) -> ServiceResult[RFQ]:
        rfq = self._base_queryset().filter(id=rfq_id).first()
        if rfq is None:
            return service_err(ErrorCodes.RFQ_NOT_FOUND, "RFQ not found")
        return service_ok(rfq)

    def list_buyer_rfqs(self, user, page_request: PageRequest) -> ServiceResult[Page]:
        queryset = self._base_queryset().filter(buyer_profile__user=user).order_by("-created_at")
        return service_ok(paginate(queryset, page_request))

    def list_seller_rfqs(self, user, page_request: PageRequest) -> ServiceResult[Page]:
        """RFQs addressed to the seller plus open RFQs that have no recipients at all."""
        queryset = (
            self._base_queryset()
            .filter(Q(recipients__seller_profile__user=user) | Q(recipients__isnull=True, status=RFQ.STATUS_OPEN))
            .distinct()
            .order_by("-created_at")
        )
        return service_ok(paginate(queryset, page_request))

    @BaseService.log_performance
    def create_rfq(self, user, data: Dict[str, Any]) -> ServiceResult[RFQ]:
        """
        Create an RFQ with its items and recipients.

        Args:
            user: Buyer creating the RFQ
            data: ``title``, ``description``, optional ``items`` and ``recipient_ids``

        Returns:
            ServiceResult with the created RFQ
        """
        with tracer.start_as_current_span("rfq_create") as span:
            span.set_attribute("user.id", str(user.id))

            buyer_profile = BuyerProfile.objects.filter(user=user).first()
            if buyer_profile is None:
                return service_err(ErrorCodes.BUYER_PROFILE_NOT_FOUND, "Buyer profile not found")

            recipient_ids = list(dict.fromkeys(data.get("recipient_ids") or []))
            sellers: List[SellerProfile] = []
            if recipient_ids:
                sellers = list(SellerProfile.objects.filter(id__in=recipient_ids))
                if len(sellers) != len(recipient_ids):
                    return service_err(ErrorCodes.VALIDATION_ERROR, "One or more seller profiles not found")

            items = data.get("items") or []
            span.set_attribute("rfq.items", len(items))
            span.set_attribute("rfq.recipients", len(sellers))

            with transaction.atomic():
                rfq = RFQ.objects.create(
                    buyer_profile=buyer_profile, title=data["title"], description=data["description"]
                )
                RFQItem.objects.bulk_create(
                    [
                        RFQItem(
                            rfq=rfq,
                            product_name=item["product_name"],
                            description=item.get("description") or "",
                            quantity=item["quantity"],
                            unit=item.get("unit") or "",
                        )
                        for item in items
                    ]
                )
                RFQRecipient.objects.bulk_create([RFQRecipient(rfq=rfq, seller_profile=s) for s in sellers])

            rfqs_created_total.inc()
            self.logger.info("RFQ %s created by buyer profile %s", rfq.id, buyer_profile.id)
            return self.get_rfq(rfq.id)

    def _owned_rfq(self, rfq_id, user) -> ServiceResult[RFQ]:
        rfq = RFQ.objects.select_related("buyer_profile").filter(id=rfq_id).first()
        if rfq is None:
            return service_err(ErrorCodes.RFQ_NOT_FOUND, "RFQ not found")
        if rfq.buyer_profile.user_id != user.id:
            return service_err(ErrorCodes.NOT_RFQ_OWNER, "You can only manage your own RFQs")
        return service_ok(rfq)

    @BaseService.log_performance
    def update_status(self, rfq_id, user, status: str) -> ServiceResult[RFQ]:
        canonical = normalize_rfq_status(status)
        if canonical is None:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Invalid RFQ status. Must be Open, Responded or Closed")

        result = self._owned_rfq(rfq_id, user)
        if not result.ok:
            return result
        rfq = result.value

        rfq.status = canonical
        rfq.closed_at = timezone.now() if canonical == RFQ.STATUS_CLOSED else None
        rfq.save(update_fields=["status", "closed_at", "updated_at"])
        return service_ok(rfq)

    @BaseService.log_performance
    def close_rfq(self, rfq_id, user) -> ServiceResult[RFQ]:
        result = self._owned_rfq(rfq_id, user)
        if not result.ok:
            return result
        if result.value.is_closed:
            return service_err(ErrorCodes.RFQ_CLOSED, "RFQ is already closed")
        return self.update_status(rfq_id, user, RFQ.STATUS_CLOSED)

    @BaseService.log_performance
    def delete_rfq(self, rfq_id, user) -> ServiceResult[None]:
        result = self._owned_rfq(rfq_id, user)
        if not result.ok:
            return result
        result.value.delete()
        return service_ok()

    def list_quotes_for_rfq(self, rfq_id, user) -> ServiceResult[List[Quote]]:
        """
        Quotes visible to the caller.

        The RFQ owner and admins see every quote; a seller sees only their own.
        """
        rfq = RFQ.objects.select_related("buyer_profile").filter(id=rfq_id).first()
        if rfq is None:
            return service_err(ErrorCodes.RFQ_NOT_FOUND, "RFQ not found")

        quotes = Quote.objects.filter(rfq=rfq).select_related("seller_profile").order_by("-submitted_at")
        if rfq.buyer_profile.user_id == user.id or is_admin(user):
            return service_ok(list(quotes))
        if is_seller(user):
            return service_ok(list(quotes.filter(seller_profile__user=user)))
        return service_err(ErrorCodes.NOT_RFQ_OWNER, "You do not have access to quotes for this RFQ")
