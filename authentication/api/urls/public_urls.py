from django.urls import re_path

from authentication.api.views import PublicSellerDetailView, PublicSellerListView


app_name = "public"

urlpatterns = [
    re_path(r"^sellers/?$", PublicSellerListView.as_view(), name="seller_list"),
    re_path(r"^sellers/(?P<seller_id>[^/]+)/?$", PublicSellerDetailView.as_view(), name="seller_detail"),
]
