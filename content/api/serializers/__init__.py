from .content_serializers import (
    ContentCategorySerializer,
    ContentCategoryWriteSerializer,
    ContentItemCreateSerializer,
    ContentItemSerializer,
    ContentItemUpdateSerializer,
    ContentTagSerializer,
    ContentTagWriteSerializer,
)

__all__ = [
    "ContentCategorySerializer",
    "ContentCategoryWriteSerializer",
    "ContentItemCreateSerializer",
    "ContentItemSerializer",
    "ContentItemUpdateSerializer",
    "ContentTagSerializer",
    "ContentTagWriteSerializer",
]
