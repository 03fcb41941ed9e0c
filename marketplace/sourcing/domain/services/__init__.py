from .quote_service import QuoteService
from .rfq_service import RFQService

__all__ = ["RFQService", "QuoteService"]
