from django.urls import re_path

from content.api.views import (
    PublicCategoryContentView,
    PublicCategoryListView,
    PublicContentDetailView,
    PublicTagListView,
    PublishedContentListView,
)


app_name = "content"

urlpatterns = [
    re_path(r"^$", PublishedContentListView.as_view(), name="list"),
    re_path(r"^categories/?$", PublicCategoryListView.as_view(), name="categories"),
    re_path(r"^tags/?$", PublicTagListView.as_view(), name="tags"),
    re_path(r"^category/(?P<slug>[-\w]+)/?$", PublicCategoryContentView.as_view(), name="category"),
    re_path(r"^(?P<slug>[-\w]+)/?$", PublicContentDetailView.as_view(), name="detail"),
]
