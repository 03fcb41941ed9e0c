from django.urls import include, path, re_path

from marketplace.catalog.api.views import AdminCategoryViewSet
from marketplace.ordering.api.views import AdminDashboardView, AdminOrderViewSet
from utils.routers import OptionalSlashRouter


router = OptionalSlashRouter()
router.register(r"orders", AdminOrderViewSet, basename="order")
router.register(r"categories", AdminCategoryViewSet, basename="category")

app_name = "admin_marketplace"

urlpatterns = [
    path("", include(router.urls)),
    re_path(r"^dashboard/?$", AdminDashboardView.as_view(), name="dashboard"),
]
