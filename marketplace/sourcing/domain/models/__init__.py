from .quote import Quote
from .rfq import RFQ, RFQItem, RFQRecipient

__all__ = ["RFQ", "RFQItem", "RFQRecipient", "Quote"]
