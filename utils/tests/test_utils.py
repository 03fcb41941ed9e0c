import uuid

import pytest
from rest_framework import exceptions, status

from utils.exception_handler import api_exception_handler
from utils.pagination import Page, clamp_page, paginate, page_request_from_query
from utils.rbac import normalize_role
from utils.responses import invalid_id_response, parse_uuid, result_error_response, success_response
from utils.service_base import ErrorCodes, service_err, service_ok


pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "page, page_size, expected",
    [
        (None, None, (1, 10)),
        ("0", "5", (1, 5)),
        ("-3", "0", (1, 10)),
        ("2", "500", (2, 50)),
        ("abc", "xyz", (1, 10)),
    ],
)
def test_clamp_page(page, page_size, expected):
    request = clamp_page(page, page_size)
    assert (request.page, request.page_size) == expected


def test_page_request_accepts_snake_case_size():
    request = page_request_from_query({"page": "3", "page_size": "20"}, default_size=50, max_size=100)
    assert (request.page, request.page_size, request.offset) == (3, 20, 40)


def test_paginate_beyond_last_page_is_empty():
    page = paginate(list(range(12)), clamp_page(5, 10))

    assert page.items == []
    assert page.total_pages == 2
    assert page.pagination()["hasPreviousPage"] is True
    assert page.pagination()["hasNextPage"] is False


def test_page_to_dict_replaces_items():
    page = Page(items=[1, 2], page=1, page_size=2, total_items=3)
    body = page.to_dict(["a", "b"])

    assert body["items"] == ["a", "b"]
    assert body["pagination"]["totalPages"] == 2
    assert body["pagination"]["hasNextPage"] is True


@pytest.mark.parametrize("value, expected", [("seller", "Seller"), (" ADMIN ", "Admin"), ("owner", None), (3, None)])
def test_normalize_role(value, expected):
    assert normalize_role(value) == expected


def test_parse_uuid():
    value = uuid.uuid4()
    assert parse_uuid(str(value)) == value
    assert parse_uuid(value) is value
    assert parse_uuid("not-a-guid") is None
    assert parse_uuid(None) is None


def test_success_envelope():
    response = success_response({"id": 1}, "Done", status.HTTP_201_CREATED)

    assert response.status_code == 201
    assert response.data["success"] is True
    assert response.data["message"] == "Done"
    assert response.data["timestamp"].endswith("Z")


def test_result_error_response_uses_status_map():
    result = service_err(ErrorCodes.ORDER_NOT_FOUND, "Order not found")

    assert result_error_response(result, {ErrorCodes.ORDER_NOT_FOUND: 404}).status_code == 404
    assert result_error_response(result, {}).status_code == 400
    assert result_error_response(result, {}).data["error"] == "Order not found"


def test_service_ok_has_no_error():
    result = service_ok(5)
    assert result.ok and result.value == 5 and result.error is None


def test_invalid_id_response():
    response = invalid_id_response("quote")
    assert response.status_code == 400
    assert response.data["error"] == "Invalid quote ID format"


def test_validation_error_uses_first_message():
    exc = exceptions.ValidationError({"name": ["Name is required"], "items": {"0": {"quantity": ["Too small"]}}})
    response = api_exception_handler(exc, {})

    assert response.status_code == 400
    assert response.data["error"] == "Name is required"
    assert "items.0.quantity: Too small" in response.data["details"]


def test_api_exception_keeps_status():
    response = api_exception_handler(exceptions.PermissionDenied("Nope"), {})
    assert response.status_code == 403
    assert response.data["error"] == "Nope"
