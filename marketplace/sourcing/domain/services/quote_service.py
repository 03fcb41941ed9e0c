"""
QuoteService - Seller quotes on RFQs

Sellers answer RFQs with quotes; the buyer who owns the RFQ accepts or
rejects them and may ask for clarification before deciding.
"""

from decimal import Decimal
from typing import Any, Dict

from django.db import transaction
from django.utils import timezone

from authentication.models import SellerProfile
from infrastructure.observability.metrics import quotes_submitted_total
from infrastructure.observability.tracing import tracer
from marketplace.sourcing.domain.models import RFQ, Quote
from utils.pagination import Page, PageRequest, paginate
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


QUOTE_FIELDS = ("price", "delivery_time", "description", "valid_until", "conditions", "notes")
DECISION_STATUSES = {
    Quote.STATUS_ACCEPTED.lower(): Quote.STATUS_ACCEPTED,
    Quote.STATUS_REJECTED.lower(): Quote.STATUS_REJECTED,
}


def resolve_price(data: Dict[str, Any]):
    """``price`` if positive, else ``total_price`` if positive, else None."""
    for key in ("price", "total_price"):
        value = data.get(key)
        if value is not None and Decimal(value) > 0:
            return Decimal(value)
    return None


class QuoteService(BaseService):
    @BaseService.log_performance
    def submit_quote(self, user, rfq_id, data: Dict[str, Any]) -> ServiceResult[Quote]:
        """
        Submit a quote for an RFQ.

        Validates:
        - The caller has a seller profile
        - The RFQ exists and is not closed
        - The seller is a recipient when the RFQ has recipients
        - A positive price (``price`` or ``total_price``)
        """
        with tracer.start_as_current_span("quote_submit") as span:
            span.set_attribute("rfq.id", str(rfq_id))

            seller_profile = SellerProfile.objects.filter(user=user).first()
            if seller_profile is None:
                return service_err(ErrorCodes.SELLER_PROFILE_NOT_FOUND, "Seller profile not found")

            price = resolve_price(data)
            if price is None:
                return service_err(ErrorCodes.VALIDATION_ERROR, "Price must be greater than zero")

            with transaction.atomic():
                rfq = RFQ.objects.select_for_update().filter(id=rfq_id).first()
                if rfq is None:
                    return service_err(ErrorCodes.RFQ_NOT_FOUND, "RFQ not found")
                if rfq.is_closed:
                    return service_err(ErrorCodes.RFQ_CLOSED, "Cannot submit a quote for a closed RFQ")

                recipients = rfq.recipients.all()
                if recipients.exists() and not recipients.filter(seller_profile=seller_profile).exists():
                    return service_err(ErrorCodes.NOT_RFQ_RECIPIENT, "Seller is not a recipient of this RFQ")

                quote = Quote(rfq=rfq, seller_profile=seller_profile, price=price)
                for field in QUOTE_FIELDS:
                    if field != "price" and data.get(field) is not None:
                        setattr(quote, field, data[field])
                quote.save()

                if rfq.status == RFQ.STATUS_OPEN:
                    rfq.status = RFQ.STATUS_RESPONDED
                    rfq.save(update_fields=["status", "updated_at"])

            quotes_submitted_total.inc()
            return service_ok(quote)

    def my_quotes(self, user, page_request: PageRequest) -> ServiceResult[Page]:
        queryset = Quote.objects.filter(seller_profile__user=user).select_related("rfq").order_by("-submitted_at")
        return service_ok(paginate(queryset, page_request))

    def _get(self, quote_id):
        return Quote.objects.select_related("rfq", "rfq__buyer_profile", "seller_profile").filter(id=quote_id).first()

    @BaseService.log_performance
    def update_quote(self, quote_id, user, data: Dict[str, Any]) -> ServiceResult[Quote]:
        """Partial update by the quoting seller while the quote is still pending."""
        quote = self._get(quote_id)
        if quote is None:
            return service_err(ErrorCodes.QUOTE_NOT_FOUND, "Quote not found")
        if quote.seller_profile.user_id != user.id:
            return service_err(ErrorCodes.NOT_QUOTE_OWNER, "You can only update your own quotes")
        if quote.status != Quote.STATUS_PENDING:
            return service_err(ErrorCodes.INVALID_QUOTE_STATE, "Only pending quotes can be updated")

        if data.get("price") is not None or data.get("total_price") is not None:
            price = resolve_price(data)
            if price is None:
                return service_err(ErrorCodes.VALIDATION_ERROR, "Price must be greater than zero")
            quote.price = price
        for field in QUOTE_FIELDS:
            if field != "price" and data.get(field) is not None:
                setattr(quote, field, data[field])
        quote.save()
        return service_ok(quote)

    @BaseService.log_performance
    def set_status(self, quote_id, user, status: str) -> ServiceResult[Quote]:
        """Accept or reject a pending quote; only the buyer who owns the RFQ may decide."""
        canonical = DECISION_STATUSES.get((status or "").strip().lower())
        if canonical is None:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Status must be Accepted or Rejected")

        with transaction.atomic():
            quote = self._get(quote_id)
            if quote is None:
                return service_err(ErrorCodes.QUOTE_NOT_FOUND, "Quote not found")
            if quote.rfq.buyer_profile.user_id != user.id:
                return service_err(ErrorCodes.NOT_RFQ_OWNER, "Only the RFQ owner can accept or reject quotes")
            if quote.status != Quote.STATUS_PENDING:
                return service_err(ErrorCodes.INVALID_QUOTE_STATE, "Only pending quotes can be accepted or rejected")

            quote.status = canonical
            quote.save(update_fields=["status", "updated_at"])

        self.logger.info("Quote %s %s by user %s", quote.id, canonical.lower(), user.id)
        return service_ok(quote)

    @BaseService.log_performance
    def request_clarification(self, quote_id, user, question: str) -> ServiceResult[Quote]:
        if not question or not question.strip():
            return service_err(ErrorCodes.VALIDATION_ERROR, "Question is required")

        quote = self._get(quote_id)
        if quote is None:
            return service_err(ErrorCodes.QUOTE_NOT_FOUND, "Quote not found")
        if quote.rfq.buyer_profile.user_id != user.id:
            return service_err(ErrorCodes.NOT_RFQ_OWNER, "Only the RFQ owner can request clarification")

        quote.clarification_question = question.strip()
        quote.clarification_requested_at = timezone.now()
        quote.clarification_response = None
        quote.clarification_responded_at = None
        quote.save()
        return service_ok(quote)

    @BaseService.log_performance
    def respond_clarification(self, quote_id, user, response: str) -> ServiceResult[Quote]:
        if not response or not response.strip():
            return service_err(ErrorCodes.VALIDATION_ERROR, "Response is required")

        quote = self._get(quote_id)
        if quote is None:
            return service_err(ErrorCodes.QUOTE_NOT_FOUND, "Quote not found")
        if quote.seller_profile.user_id != user.id:
            return service_err(ErrorCodes.NOT_QUOTE_OWNER, "Only the quoting seller can respond")
        if not quote.has_pending_clarification:
            return service_err(ErrorCodes.INVALID_QUOTE_STATE, "There is no pending clarification request")

        quote.clarification_response = response.strip()
        quote.clarification_responded_at = timezone.now()
        quote.save()
        return service_ok(quote)
