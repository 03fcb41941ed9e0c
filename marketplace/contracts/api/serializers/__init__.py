from .contract_serializers import (
    ContractInstanceSerializer,
    ContractTemplateCreateSerializer,
    ContractTemplateSerializer,
    ContractTemplateUpdateSerializer,
    GenerateContractSerializer,
)

__all__ = [
    "ContractTemplateSerializer",
    "ContractTemplateCreateSerializer",
    "ContractTemplateUpdateSerializer",
    "ContractInstanceSerializer",
    "GenerateContractSerializer",
]
