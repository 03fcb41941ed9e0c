from django.urls import include, path

from content.api.views import ContentCategoryAdminViewSet, ContentItemAdminViewSet, ContentTagAdminViewSet
from utils.routers import OptionalSlashRouter


app_name = "admin_content"

router = OptionalSlashRouter()
router.register(r"categories", ContentCategoryAdminViewSet, basename="category")
router.register(r"tags", ContentTagAdminViewSet, basename="tag")
router.register(r"items", ContentItemAdminViewSet, basename="item")

urlpatterns = [
    path("", include(router.urls)),
]
