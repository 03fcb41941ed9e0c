from .category import CategoryConfiguration, ProductCategory
from .product import Product

__all__ = ["Product", "ProductCategory", "CategoryConfiguration"]
