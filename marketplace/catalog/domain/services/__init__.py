from .category_service import CategoryConfigurationService, ProductCategoryService
from .product_service import ProductService
from .search_service import SearchService

__all__ = ["ProductService", "SearchService", "ProductCategoryService", "CategoryConfigurationService"]
