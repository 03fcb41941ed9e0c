"""
ContractTemplateService - Seller contract templates

Sellers keep reusable templates whose body contains ``{{placeholder}}``
fields. Buyers generate a draft contract from a template; placeholders are
filled from both parties' profiles, the template's custom fields and the
related quote.
"""

import re
import secrets
from typing import Any, Dict

from django.utils import timezone

from authentication.models import BuyerProfile, SellerProfile
from marketplace.contracts.domain.models import ContractInstance, ContractTemplate
from marketplace.sourcing.domain.models import RFQ, Quote
from utils.pagination import Page, PageRequest, paginate
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


PLACEHOLDER_RE = re.compile(r"\{\{\s*(\w+)\s*\}\}")
TEMPLATE_FIELDS = ("name", "title", "content", "template_type", "custom_fields")


def render_placeholders(content: str, context: Dict[str, Any]) -> str:
    """Replace ``{{key}}`` with ``context[key]``; unknown keys are left untouched."""

    def _replace(match):
        key = match.group(1)
        if key in context and context[key] is not None:
            return str(context[key])
        return match.group(0)

    return PLACEHOLDER_RE.sub(_replace, content or "")


def generate_contract_number() -> str:
    return f"CT-{timezone.now():%Y%m%d}-{secrets.token_hex(4).upper()}"


class ContractTemplateService(BaseService):
    def list_templates(self, page_request: PageRequest) -> ServiceResult[Page]:
        queryset = ContractTemplate.objects.filter(is_active=True).select_related("created_by")
        return service_ok(paginate(queryset, page_request))

    def my_templates(self, user, page_request: PageRequest) -> ServiceResult[Page]:
        queryset = ContractTemplate.objects.filter(created_by__user=user, is_active=True)
        return service_ok(paginate(queryset, page_request))

    def get_template(self, template_id) -> ServiceResult[ContractTemplate]:
        template = ContractTemplate.objects.filter(id=template_id, is_active=True).select_related("created_by").first()
        if template is None:
            return service_err(ErrorCodes.TEMPLATE_NOT_FOUND, "Contract template not found")
        return service_ok(template)

    @BaseService.log_performance
    def create_template(self, user, data: Dict[str, Any]) -> ServiceResult[ContractTemplate]:
        seller_profile = SellerProfile.objects.filter(user=user).first()
        if seller_profile is None:
            return service_err(ErrorCodes.SELLER_PROFILE_NOT_FOUND, "Seller profile not found")

        template = ContractTemplate.objects.create(
            created_by=seller_profile, **{field: data[field] for field in TEMPLATE_FIELDS if field in data}
        )
        return service_ok(template)

    def _owned(self, template_id, user) -> ServiceResult[ContractTemplate]:
        result = self.get_template(template_id)
        if not result.ok:
            return result
        if result.value.created_by.user_id != user.id:
            return service_err(ErrorCodes.NOT_TEMPLATE_OWNER, "You can only modify your own templates")
        return result

    @BaseService.log_performance
    def update_template(self, template_id, user, data: Dict[str, Any]) -> ServiceResult[ContractTemplate]:
        result = self._owned(template_id, user)
        if not result.ok:
            return result
        template = result.value
        for field in TEMPLATE_FIELDS:
            if field in data:
                setattr(template, field, data[field])
        template.save()
        return service_ok(template)

    @BaseService.log_performance
    def delete_template(self, template_id, user) -> ServiceResult[None]:
        result = self._owned(template_id, user)
        if not result.ok:
            return result
        template = result.value
        template.is_active = False
        template.save(update_fields=["is_active", "updated_at"])
        return service_ok()

    @BaseService.log_performance
    def generate_contract(self, user, data: Dict[str, Any]) -> ServiceResult[ContractInstance]:
        """
        Create a draft contract from a template.

        Args:
            user: Buyer requesting the contract
            data: ``template_id``, ``seller_profile_id``, optional ``rfq_id``,
                ``quote_id`` and ``custom_fields`` overrides
        """
        buyer_profile = BuyerProfile.objects.filter(user=user).first()
        if buyer_profile is None:
            return service_err(ErrorCodes.BUYER_PROFILE_NOT_FOUND, "Buyer profile not found")

        result = self.get_template(data["template_id"])
        if not result.ok:
            return result
        template = result.value

        seller_profile = SellerProfile.objects.filter(id=data["seller_profile_id"]).first()
        if seller_profile is None:
            return service_err(ErrorCodes.SELLER_PROFILE_NOT_FOUND, "Seller profile not found")

        rfq = None
        if data.get("rfq_id"):
            rfq = RFQ.objects.filter(id=data["rfq_id"]).first()
            if rfq is None:
                return service_err(ErrorCodes.RFQ_NOT_FOUND, "RFQ not found")

        quote = None
        if data.get("quote_id"):
            quote = Quote.objects.filter(id=data["quote_id"]).first()
            if quote is None:
                return service_err(ErrorCodes.QUOTE_NOT_FOUND, "Quote not found")

        contract_number = generate_contract_number()
        context = {
            "contractNumber": contract_number,
            "date": timezone.now().date().isoformat(),
            "buyerName": buyer_profile.name,
            "buyerCompany": buyer_profile.company_name,
            "buyerCountry": buyer_profile.country,
            "sellerCompany": seller_profile.company_name,
            "sellerRepresentative": seller_profile.legal_representative,
            "sellerCountry": seller_profile.country,
            "sellerTaxId": seller_profile.tax_id,
        }
        if rfq is not None:
            context["rfqTitle"] = rfq.title
        if quote is not None:
            context["quotePrice"] = quote.price
            context["deliveryTime"] = quote.delivery_time
        context.update(template.custom_fields or {})
        context.update(data.get("custom_fields") or {})

        contract = ContractInstance.objects.create(
            template=template,
            buyer_profile=buyer_profile,
            seller_profile=seller_profile,
            rfq=rfq,
            quote=quote,
            contract_number=contract_number,
            content=render_placeholders(template.content, context),
        )
        self.logger.info("Contract %s generated from template %s", contract.contract_number, template.id)
        return service_ok(contract)
