from .contract_template_service import ContractTemplateService

__all__ = ["ContractTemplateService"]
