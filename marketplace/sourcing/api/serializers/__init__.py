from .quote_serializers import (
    ClarificationRequestSerializer,
    ClarificationResponseSerializer,
    QuoteSerializer,
    QuoteStatusSerializer,
    QuoteSubmitSerializer,
    QuoteWriteSerializer,
)
from .rfq_serializers import RFQCreateSerializer, RFQItemSerializer, RFQSerializer, RFQStatusSerializer

__all__ = [
    "RFQSerializer",
    "RFQItemSerializer",
    "RFQCreateSerializer",
    "RFQStatusSerializer",
    "QuoteSerializer",
    "QuoteWriteSerializer",
    "QuoteSubmitSerializer",
    "QuoteStatusSerializer",
    "ClarificationRequestSerializer",
    "ClarificationResponseSerializer",
]
