"""
DashboardService - Admin marketplace overview
"""

from decimal import Decimal
from typing import Dict

from django.contrib.auth import get_user_model
from django.db.models import Count, Sum

from marketplace.catalog.domain.models import Product
from marketplace.ordering.domain.models import Order
from marketplace.sourcing.domain.models import RFQ
from utils.rbac import ROLES
from utils.service_base import BaseService, ServiceResult, service_ok


User = get_user_model()

REVENUE_EXCLUDED = (Order.STATUS_CANCELLED, Order.STATUS_REFUNDED)


class DashboardService(BaseService):
    @BaseService.log_performance
    def overview(self) -> ServiceResult[Dict]:
        users_by_role = {role: 0 for role in ROLES}
        for row in User.objects.values("role").annotate(total=Count("id")):
            users_by_role[row["role"]] = row["total"]

        orders_by_status = {choice[0]: 0 for choice in Order.STATUS_CHOICES}
        for row in Order.objects.values("status").annotate(total=Count("id")):
            orders_by_status[row["status"]] = row["total"]

        revenue = Order.objects.exclude(status__in=REVENUE_EXCLUDED).aggregate(total=Sum("total_amount"))["total"]

        return service_ok(
            {
                "users": {"total": sum(users_by_role.values()), "byRole": users_by_role},
                "products": {
                    "total": Product.objects.count(),
                    "active": Product.objects.filter(is_active=True).count(),
                },
                "rfqs": {
                    "total": RFQ.objects.count(),
                    "open": RFQ.objects.filter(status=RFQ.STATUS_OPEN).count(),
                },
                "orders": {"total": sum(orders_by_status.values()), "byStatus": orders_by_status},
                "revenue": (revenue or Decimal("0")).quantize(Decimal("0.01")),
            }
        )
