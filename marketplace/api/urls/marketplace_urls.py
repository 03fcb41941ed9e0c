from django.urls import include, path, re_path

from marketplace.catalog.api.views import CategoryViewSet, ProductViewSet, SearchViewSet
from marketplace.contracts.api.views import ContractTemplateViewSet
from marketplace.ordering.api.views import BusinessPurchasesView, OrderViewSet, SupplierPerformanceView
from marketplace.reviews.api.views import ReviewViewSet
from marketplace.sourcing.api.views import PublicRFQViewSet, QuoteViewSet, RFQViewSet
from utils.routers import OptionalSlashRouter


router = OptionalSlashRouter()
router.register(r"products", ProductViewSet, basename="product")
router.register(r"categories", CategoryViewSet, basename="category")
router.register(r"rfqs", PublicRFQViewSet, basename="rfqs")
router.register(r"rfq", RFQViewSet, basename="rfq")
router.register(r"quotes", QuoteViewSet, basename="quote")
router.register(r"orders", OrderViewSet, basename="order")
router.register(r"reviews", ReviewViewSet, basename="review")
router.register(r"contract-templates", ContractTemplateViewSet, basename="contract-template")
router.register(r"search", SearchViewSet, basename="search")

app_name = "marketplace"

urlpatterns = [
    path("", include(router.urls)),
    re_path(r"^analytics/business-purchases/?$", BusinessPurchasesView.as_view(), name="business-purchases"),
    re_path(r"^analytics/supplier-performance/?$", SupplierPerformanceView.as_view(), name="supplier-performance"),
]
