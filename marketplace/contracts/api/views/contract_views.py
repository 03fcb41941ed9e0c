from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from authentication.permissions import IsBuyer, IsSeller
from infrastructure.container import container
from marketplace.contracts.api.serializers import (
    ContractInstanceSerializer,
    ContractTemplateCreateSerializer,
    ContractTemplateSerializer,
    ContractTemplateUpdateSerializer,
    GenerateContractSerializer,
)
from utils.pagination import page_request_from_query
from utils.responses import invalid_id_response, parse_uuid, result_error_response, success_response
from utils.schema import ErrorResponseSerializer, PagedResponseSerializer, SuccessResponseSerializer
from utils.service_base import ErrorCodes


TEMPLATE_ERRORS = {
    ErrorCodes.TEMPLATE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.NOT_TEMPLATE_OWNER: status.HTTP_403_FORBIDDEN,
    ErrorCodes.SELLER_PROFILE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.BUYER_PROFILE_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.RFQ_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.QUOTE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

PAGE_PARAMETERS = [
    OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
    OpenApiParameter(name="pageSize", type=int, description="Items per page (default: 10, max: 50)"),
]

TEMPLATE_RESPONSES = {
    200: OpenApiResponse(response=SuccessResponseSerializer, description="Contract template"),
    400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error or invalid ID"),
    403: OpenApiResponse(response=ErrorResponseSerializer, description="Not the owner"),
    404: OpenApiResponse(response=ErrorResponseSerializer, description="Template not found"),
}


class ContractTemplateViewSet(viewsets.ViewSet):
    """Contract templates kept by sellers and contracts generated from them by buyers."""

    def get_permissions(self):
        if self.action in ("list", "retrieve"):
            return [permissions.IsAuthenticated()]
        if self.action == "generate_contract":
            return [IsBuyer()]
        return [IsSeller()]

    def get_service(self):
        return container.contract_template_service()

    def _paged(self, result, message):
        page = result.value
        return success_response(page.to_dict(ContractTemplateSerializer(page.items, many=True).data), message)

    @extend_schema(
        operation_id="contract_templates_list",
        summary="Active contract templates",
        parameters=PAGE_PARAMETERS,
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="Templates")},
        tags=["Contract Templates"],
    )
    def list(self, request):
        result = self.get_service().list_templates(page_request_from_query(request.query_params))
        return self._paged(result, "Contract templates retrieved successfully")

    @extend_schema(
        operation_id="contract_templates_mine",
        summary="The caller's contract templates (seller)",
        parameters=PAGE_PARAMETERS,
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="Templates")},
        tags=["Contract Templates"],
    )
    @action(detail=False, methods=["get"], url_path="my-templates", url_name="my-templates")
    def my_templates(self, request):
        result = self.get_service().my_templates(request.user, page_request_from_query(request.query_params))
        return self._paged(result, "Contract templates retrieved successfully")

    @extend_schema(
        operation_id="contract_templates_retrieve",
        summary="Contract template detail",
        responses=TEMPLATE_RESPONSES,
        tags=["Contract Templates"],
    )
    def retrieve(self, request, pk=None):
        template_id = parse_uuid(pk)
        if template_id is None:
            return invalid_id_response("template")

        result = self.get_service().get_template(template_id)
        if not result.ok:
            return result_error_response(result, TEMPLATE_ERRORS)
        return success_response(
            ContractTemplateSerializer(result.value).data, "Contract template retrieved successfully"
        )

    @extend_schema(
        operation_id="contract_templates_create",
        summary="Create a contract template (seller)",
        request=ContractTemplateCreateSerializer,
        responses={**TEMPLATE_RESPONSES, 201: TEMPLATE_RESPONSES[200]},
        tags=["Contract Templates"],
    )
    def create(self, request):
        serializer = ContractTemplateCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().create_template(request.user, serializer.validated_data)
        if not result.ok:
            return result_error_response(result, {ErrorCodes.SELLER_PROFILE_NOT_FOUND: status.HTTP_400_BAD_REQUEST})
        return success_response(
            ContractTemplateSerializer(result.value).data,
            "Contract template created successfully",
            status.HTTP_201_CREATED,
        )

    @extend_schema(
        operation_id="contract_templates_update",
        summary="Edit one of the caller's templates",
        request=ContractTemplateUpdateSerializer,
        responses=TEMPLATE_RESPONSES,
        tags=["Contract Templates"],
    )
    def update(self, request, pk=None):
        template_id = parse_uuid(pk)
        if template_id is None:
            return invalid_id_response("template")

        serializer = ContractTemplateUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().update_template(template_id, request.user, serializer.validated_data)
        if not result.ok:
            return result_error_response(result, TEMPLATE_ERRORS)
        return success_response(ContractTemplateSerializer(result.value).data, "Contract template updated successfully")

    @extend_schema(
        operation_id="contract_templates_delete",
        summary="Deactivate one of the caller's templates",
        responses={204: OpenApiResponse(description="Template deactivated"), **TEMPLATE_RESPONSES},
        tags=["Contract Templates"],
    )
    def destroy(self, request, pk=None):
        template_id = parse_uuid(pk)
        if template_id is None:
            return invalid_id_response("template")

        result = self.get_service().delete_template(template_id, request.user)
        if not result.ok:
            return result_error_response(result, TEMPLATE_ERRORS)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        operation_id="contract_templates_generate",
        summary="Generate a draft contract from a template (buyer)",
        description="Fills {{placeholder}} fields such as buyerName, sellerCompany, quotePrice and any customFields.",
        request=GenerateContractSerializer,
        responses={
            201: OpenApiResponse(response=SuccessResponseSerializer, description="Contract generated"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error or no buyer profile"),
            404: OpenApiResponse(
                response=ErrorResponseSerializer, description="Template, seller, RFQ or quote not found"
            ),
        },
        tags=["Contract Templates"],
    )
    @action(detail=False, methods=["post"], url_path="generate-contract", url_name="generate-contract")
    def generate_contract(self, request):
        serializer = GenerateContractSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().generate_contract(request.user, serializer.validated_data)
        if not result.ok:
            return result_error_response(result, TEMPLATE_ERRORS)
        return success_response(
            ContractInstanceSerializer(result.value).data, "Contract generated successfully", status.HTTP_201_CREATED
        )
