from django.urls import include, path

from payment_system.api.views import AdminPaymentViewSet
from utils.routers import OptionalSlashRouter


app_name = "admin_payments"

router = OptionalSlashRouter()
router.register(r"payments", AdminPaymentViewSet, basename="payment")

urlpatterns = [
    path("", include(router.urls)),
]
