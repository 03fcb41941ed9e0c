from .category_serializers import (
    CategoryConfigurationCreateSerializer,
    CategoryConfigurationSerializer,
    CategoryConfigurationWriteSerializer,
    ProductCategorySerializer,
    ProductCategoryWriteSerializer,
)
from .product_serializers import InventoryUpdateSerializer, ProductSerializer, ProductWriteSerializer

__all__ = [
    "ProductSerializer",
    "ProductWriteSerializer",
    "InventoryUpdateSerializer",
    "ProductCategorySerializer",
    "ProductCategoryWriteSerializer",
    "CategoryConfigurationSerializer",
    "CategoryConfigurationWriteSerializer",
    "CategoryConfigurationCreateSerializer",
]
