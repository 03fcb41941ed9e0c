from .contract_views import ContractTemplateViewSet

__all__ = ["ContractTemplateViewSet"]
