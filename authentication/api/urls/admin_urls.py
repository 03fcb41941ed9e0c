from django.urls import include, path

from authentication.api.views import AdminUserViewSet
from utils.routers import OptionalSlashRouter


router = OptionalSlashRouter()
router.register(r"users", AdminUserViewSet, basename="user")

app_name = "admin_users"

urlpatterns = [
    path("", include(router.urls)),
]
