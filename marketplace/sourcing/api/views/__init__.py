from .quote_views import QuoteViewSet
from .rfq_views import PublicRFQViewSet, RFQViewSet

__all__ = ["PublicRFQViewSet", "RFQViewSet", "QuoteViewSet"]
