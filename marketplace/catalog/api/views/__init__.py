from .category_views import AdminCategoryViewSet, CategoryViewSet
from .product_views import ProductViewSet
from .search_views import SearchViewSet

__all__ = ["ProductViewSet", "SearchViewSet", "CategoryViewSet", "AdminCategoryViewSet"]
