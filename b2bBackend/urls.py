"""
URL configuration for the b2bBackend project.

Every API route lives under ``/api/`` and accepts an optional trailing slash.
"""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path, re_path
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView, SpectacularSwaggerView

urlpatterns = [
    path("admin/", admin.site.urls),
    # API Documentation
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    # Identity
    path("api/Auth/", include("authentication.api.urls.auth_urls", namespace="auth")),
    re_path(r"^api/profile/?", include("authentication.api.urls.profile_urls", namespace="profiles")),
    path("api/public/", include("authentication.api.urls.public_urls", namespace="public")),
    path("api/", include("authentication.api.urls.certification_urls", namespace="certifications")),
    # Admin
    path("api/admin/", include("authentication.api.urls.admin_urls", namespace="admin_users")),
    path("api/admin/", include("marketplace.api.urls.admin_urls", namespace="admin_marketplace")),
    path("api/admin/", include("payment_system.urls", namespace="admin_payments")),
    path("api/admin/content/", include("content.api.urls.admin_urls", namespace="admin_content")),
    # Content
    re_path(r"^api/content/?", include("content.api.urls.public_urls", namespace="content")),
    # System
    path("api/", include("system_info.urls", namespace="system_info")),
    # Marketplace
    path("api/", include("marketplace.api.urls.marketplace_urls", namespace="marketplace")),
]

urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
