from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.views import APIView

from authentication.permissions import IsAdmin
from infrastructure.container import container
from utils.responses import success_response
from utils.schema import SuccessResponseSerializer


class AdminDashboardView(APIView):
    permission_classes = [IsAdmin]

    @extend_schema(
        operation_id="admin_dashboard",
        summary="Marketplace overview (admin)",
        description="User counts by role, product and RFQ counts, orders by status and revenue.",
        responses={200: OpenApiResponse(response=SuccessResponseSerializer, description="Dashboard figures")},
        tags=["Admin"],
    )
    def get(self, request):
        result = container.dashboard_service().overview()
        return success_response(result.value, "Dashboard retrieved successfully")
