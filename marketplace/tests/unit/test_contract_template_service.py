import re

import pytest

from marketplace.contracts.domain.services.contract_template_service import (
    ContractTemplateService,
    generate_contract_number,
    render_placeholders,
)
from marketplace.tests.factories import BuyerProfileFactory, ContractTemplateFactory, SellerProfileFactory
from utils.service_base import ErrorCodes


@pytest.mark.unit
class TestRenderPlaceholders:
    def test_replaces_known_keys(self):
        assert render_placeholders("Hello {{name}}", {"name": "Acme"}) == "Hello Acme"

    def test_tolerates_inner_whitespace(self):
        assert render_placeholders("{{ name }}!", {"name": "Acme"}) == "Acme!"

    def test_leaves_unknown_and_null_keys(self):
        content = "{{known}} {{missing}} {{empty}}"
        assert render_placeholders(content, {"known": 1, "empty": None}) == "1 {{missing}} {{empty}}"

    def test_handles_empty_content(self):
        assert render_placeholders(None, {"a": 1}) == ""


@pytest.mark.unit
def test_contract_number_format():
    assert re.fullmatch(r"CT-\d{8}-[0-9A-F]{8}", generate_contract_number())


@pytest.mark.unit
@pytest.mark.django_db
class TestContractTemplateService:
    def test_generate_requires_buyer_profile(self):
        template = ContractTemplateFactory()
        seller = SellerProfileFactory()
        result = ContractTemplateService().generate_contract(
            seller.user, {"template_id": template.id, "seller_profile_id": seller.id}
        )
        assert not result.ok
        assert result.error == ErrorCodes.BUYER_PROFILE_NOT_FOUND

    def test_generate_rejects_inactive_template(self):
        template = ContractTemplateFactory(is_active=False)
        buyer = BuyerProfileFactory()
        result = ContractTemplateService().generate_contract(
            buyer.user, {"template_id": template.id, "seller_profile_id": template.created_by_id}
        )
        assert result.error == ErrorCodes.TEMPLATE_NOT_FOUND

    def test_contract_numbers_are_unique(self):
        template = ContractTemplateFactory()
        buyer = BuyerProfileFactory()
        service = ContractTemplateService()
        data = {"template_id": template.id, "seller_profile_id": template.created_by_id}

        first = service.generate_contract(buyer.user, data).value
        second = service.generate_contract(buyer.user, data).value
        assert first.contract_number != second.contract_number
        assert first.status == "draft"
