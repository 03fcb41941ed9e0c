"""
SearchService - Cross-entity search

Searches verified sellers, active products and open RFQs. Every result is a
plain dict tagged with its ``type`` so mixed result lists can be rendered
uniformly.
"""

from typing import Any, Dict, List, Optional

from django.contrib.postgres.search import SearchQuery, SearchRank, SearchVector
from django.db import connection
from django.db.models import Q

from authentication.models import SellerProfile
from marketplace.catalog.domain.models import Product
from marketplace.sourcing.domain.models import RFQ
from utils.pagination import Page, PageRequest, paginate
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


SEARCH_TYPES = ("sellers", "products", "rfqs")


def seller_result(profile: SellerProfile) -> Dict[str, Any]:
    return {
        "type": "seller",
        "id": str(profile.id),
        "companyName": profile.company_name,
        "industry": profile.industry,
        "country": profile.country,
        "description": profile.description,
        "isVerified": profile.is_verified,
        "averageRating": float(profile.average_rating) if profile.average_rating is not None else None,
    }


def product_result(product: Product) -> Dict[str, Any]:
    return {
        "type": "product",
        "id": str(product.id),
        "sellerId": str(product.seller_profile_id),
        "name": product.name,
        "description": product.description,
        "price": str(product.price),
        "category": product.category,
        "image": product.image,
    }


def rfq_result(rfq: RFQ) -> Dict[str, Any]:
    return {
        "type": "rfq",
        "id": str(rfq.id),
        "title": rfq.title,
        "description": rfq.description,
        "status": rfq.status,
        "createdAt": rfq.created_at.isoformat().replace("+00:00", "Z"),
    }


class SearchService(BaseService):
    """
    Service for marketplace search.

    Features:
    - PostgreSQL full-text ranking for products (when available)
    - Fallback to ILIKE search for non-Postgres databases
    """

    def __init__(self):
        super().__init__()
        self.use_postgres_search = connection.vendor == "postgresql"

    def _sellers(self, query: Optional[str] = None, industry: Optional[str] = None):
        queryset = SellerProfile.objects.filter(is_verified=True)
        if query:
            queryset = queryset.filter(
                Q(company_name__icontains=query) | Q(description__icontains=query) | Q(industry__icontains=query)
            )
        if industry:
            queryset = queryset.filter(industry__iexact=industry)
        return queryset.order_by("company_name")

    def _products(self, query: Optional[str] = None, seller_profile_id=None):
        queryset = Product.objects.filter(is_active=True)
        if seller_profile_id:
            queryset = queryset.filter(seller_profile_id=seller_profile_id)
        if not query:
            return queryset.order_by("-created_at")

        if self.use_postgres_search:
            vector = SearchVector("name", weight="A") + SearchVector("description", weight="B")
            search_query = SearchQuery(query)
            return (
                queryset.annotate(rank=SearchRank(vector, search_query))
                .filter(Q(rank__gt=0) | Q(name__icontains=query))
                .order_by("-rank", "-created_at")
            )
        return queryset.filter(
            Q(name__icontains=query) | Q(description__icontains=query) | Q(category__icontains=query)
        ).order_by("-created_at")

    def _rfqs(self, query: Optional[str] = None):
        queryset = RFQ.objects.exclude(status=RFQ.STATUS_CLOSED)
        if query:
            queryset = queryset.filter(Q(title__icontains=query) | Q(description__icontains=query))
        return queryset.order_by("-created_at")

    @BaseService.log_performance
    def search(
        self, page_request: PageRequest, query: Optional[str] = None, search_type: Optional[str] = None
    ) -> ServiceResult[Page]:
        """
        Search one entity type or all of them.

        With no ``search_type`` the result lists sellers, then products, then RFQs.
        """
        query = (query or "").strip()
        search_type = (search_type or "").strip().lower()
        if not query and not search_type:
            return service_err(ErrorCodes.VALIDATION_ERROR, "A search query or type is required")
        if search_type and search_type not in SEARCH_TYPES:
            return service_err(
                ErrorCodes.VALIDATION_ERROR, f"Invalid search type. Must be one of: {', '.join(SEARCH_TYPES)}"
            )

        results: List[Dict[str, Any]] = []
        if search_type in ("", "sellers"):
            results.extend(seller_result(p) for p in self._sellers(query))
        if search_type in ("", "products"):
            results.extend(product_result(p) for p in self._products(query))
        if search_type in ("", "rfqs"):
            results.extend(rfq_result(r) for r in self._rfqs(query))

        return service_ok(paginate(results, page_request))

    def search_sellers(
        self, page_request: PageRequest, query: Optional[str] = None, industry: Optional[str] = None
    ) -> ServiceResult[Page]:
        page = paginate(self._sellers((query or "").strip(), industry), page_request)
        page.items = [seller_result(p) for p in page.items]
        return service_ok(page)

    def search_products(
        self, page_request: PageRequest, query: Optional[str] = None, seller_profile_id=None
    ) -> ServiceResult[Page]:
        page = paginate(self._products((query or "").strip(), seller_profile_id), page_request)
        page.items = [product_result(p) for p in page.items]
        return service_ok(page)

    def search_rfqs(self, page_request: PageRequest, query: Optional[str] = None) -> ServiceResult[Page]:
        page = paginate(self._rfqs((query or "").strip()), page_request)
        page.items = [rfq_result(r) for r in page.items]
        return service_ok(page)
