from .contract import ContractInstance, ContractTemplate

__all__ = ["ContractTemplate", "ContractInstance"]
