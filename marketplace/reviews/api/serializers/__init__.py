from .review_serializers import (
    ProductReviewCreateSerializer,
    ReviewCreateSerializer,
    ReviewReplyCreateSerializer,
    ReviewReplySerializer,
    ReviewReportSerializer,
    ReviewSerializer,
    ReviewUpdateSerializer,
)

__all__ = [
    "ReviewSerializer",
    "ReviewReplySerializer",
    "ReviewCreateSerializer",
    "ProductReviewCreateSerializer",
    "ReviewUpdateSerializer",
    "ReviewReportSerializer",
    "ReviewReplyCreateSerializer",
]
