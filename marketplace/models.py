from marketplace.catalog.domain.models import CategoryConfiguration, Product, ProductCategory
from marketplace.contracts.domain.models import ContractInstance, ContractTemplate
from marketplace.ordering.domain.models import Order, OrderItem, OrderStatusHistory
from marketplace.reviews.domain.models import Review, ReviewReply
from marketplace.sourcing.domain.models import RFQ, RFQItem, RFQRecipient, Quote


__all__ = [
    "Product",
    "ProductCategory",
    "CategoryConfiguration",
    "RFQ",
    "RFQItem",
    "RFQRecipient",
    "Quote",
    "Order",
    "OrderItem",
    "OrderStatusHistory",
    "Review",
    "ReviewReply",
    "ContractTemplate",
    "ContractInstance",
]
