from django.urls import include, path

from authentication.api.views import CertificationViewSet, VerificationViewSet
from utils.routers import OptionalSlashRouter


router = OptionalSlashRouter()
router.register(r"certifications", CertificationViewSet, basename="certification")
router.register(r"verification", VerificationViewSet, basename="verification")

app_name = "certifications"

urlpatterns = [
    path("", include(router.urls)),
]
