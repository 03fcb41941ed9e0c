from .admin_content_views import ContentCategoryAdminViewSet, ContentItemAdminViewSet, ContentTagAdminViewSet
from .public_content_views import (
    PublicCategoryContentView,
    PublicCategoryListView,
    PublicContentDetailView,
    PublicTagListView,
    PublishedContentListView,
)

__all__ = [
    "ContentCategoryAdminViewSet",
    "ContentItemAdminViewSet",
    "ContentTagAdminViewSet",
    "PublicCategoryContentView",
    "PublicCategoryListView",
    "PublicContentDetailView",
    "PublicTagListView",
    "PublishedContentListView",
]
