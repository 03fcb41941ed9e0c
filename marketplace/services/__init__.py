"""
Marketplace Service Layer

This package gathers the business logic of the marketplace app. Each domain
keeps its services next to its models; this module re-exports them so views
and the service container have a single import point.

Services:
- ProductService: Product listing, CRUD and inventory
- SearchService: Seller, product and RFQ search
- ProductCategoryService / CategoryConfigurationService: Category tree and badge rules
- RFQService / QuoteService: Sourcing workflow
- OrderService: Order lifecycle management
- AnalyticsService: Buyer purchase analytics
- ReviewService / SellerRatingService: Reviews and seller rating aggregates
- ContractTemplateService: Contract templates and generated contracts
- DashboardService: Admin overview

Usage:
    from marketplace.services import OrderService

    result = OrderService().get_order(order_id, request.user)

    if result.ok:
        order = result.value
    else:
        error = result.error
"""

from marketplace.catalog.domain.services import (
    CategoryConfigurationService,
    ProductCategoryService,
    ProductService,
    SearchService,
)
from marketplace.contracts.domain.services import ContractTemplateService
from marketplace.ordering.domain.services import AnalyticsService, OrderService
from marketplace.reviews.domain.services import ReviewService, SellerRatingService
from marketplace.sourcing.domain.services import QuoteService, RFQService
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

from .dashboard_service import DashboardService

__all__ = [
    # Base classes
    "BaseService",
    "ServiceResult",
    "ErrorCodes",
    "service_ok",
    "service_err",
    # Services
    "ProductService",
    "SearchService",
    "ProductCategoryService",
    "CategoryConfigurationService",
    "RFQService",
    "QuoteService",
    "OrderService",
    "AnalyticsService",
    "ReviewService",
    "SellerRatingService",
    "ContractTemplateService",
    "DashboardService",
]
