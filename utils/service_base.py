"""
Base classes and utilities for the service layer.

Services return a ServiceResult for every expected outcome and reserve
exceptions for conditions the caller cannot handle. Views translate the
error codes below into HTTP status codes.
"""

import logging
import time
from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    A result type that encapsulates success or failure from service operations.

    Attributes:
        ok: True if operation succeeded, False otherwise
        value: The success value (present if ok=True)
        error: Error code (present if ok=False)
        error_detail: Human-readable error message (present if ok=False)

    Examples:
        >>> result = service_ok(product)
        >>> result.ok
        True

        >>> result = service_err("product_not_found", "Product not found")
        >>> result.error_detail
        'Product not found'
    """

    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_detail: Optional[str] = None

    def map(self, func: Callable[[T], Any]) -> "ServiceResult":
        """Transform the success value if ok=True, otherwise pass the error through."""
        if self.ok:
            return service_ok(func(self.value))
        return self


def service_ok(value: T = None) -> ServiceResult[T]:
    """Create a successful ServiceResult."""
    return ServiceResult(ok=True, value=value)


def service_err(error: str, error_detail: str = "") -> ServiceResult:
    """
    Create a failed ServiceResult.

    Args:
        error: Error code (e.g., "product_not_found", "invalid_input")
        error_detail: Human-readable error message

    Returns:
        ServiceResult with ok=False and error information
    """
    return ServiceResult(ok=False, error=error, error_detail=error_detail or error)


class BaseService:
    """
    Base class for all services providing common functionality.

    Provides:
    - Logging with class name
    - Performance timing decorator

    Usage:
        class OrderService(BaseService):
            @BaseService.log_performance
            def create_orders(self, user, items):
                self.logger.info("Creating orders for %s", user.id)
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__module__ + "." + self.__class__.__name__)

    @staticmethod
    def log_performance(func: Callable) -> Callable:
        """
        Decorator to log execution time and outcome of service methods.

        Failed ServiceResults are logged at WARNING, raised exceptions at ERROR
        and re-raised unchanged.
        """

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            start_time = time.time()
            method_name = f"{self.__class__.__name__}.{func.__name__}"

            try:
                self.logger.debug(f"{method_name} started")
                result = func(self, *args, **kwargs)
                elapsed_time = (time.time() - start_time) * 1000

                if isinstance(result, ServiceResult):
                    if result.ok:
                        self.logger.info(f"{method_name} completed successfully in {elapsed_time:.2f}ms")
                    else:
                        self.logger.warning(
                            f"{method_name} failed with error '{result.error}' in {elapsed_time:.2f}ms"
                        )
                else:
                    self.logger.info(f"{method_name} completed in {elapsed_time:.2f}ms")

                return result

            except Exception as e:
                elapsed_time = (time.time() - start_time) * 1000
                self.logger.error(
                    f"{method_name} raised exception after {elapsed_time:.2f}ms: {str(e)}",
                    exc_info=True,
                )
                raise

        return wrapper


class ErrorCodes:
    """Standard error codes used across marketplace services."""

    # Generic
    NOT_FOUND = "not_found"
    VALIDATION_ERROR = "validation_error"
    INVALID_INPUT = "invalid_input"
    INVALID_ID = "invalid_id"
    CONFLICT = "conflict"
    PERMISSION_DENIED = "permission_denied"
    INTERNAL_ERROR = "internal_error"

    # Auth
    INVALID_CREDENTIALS = "invalid_credentials"
    ACCOUNT_LOCKED = "account_locked"
    USER_EXISTS = "user_exists"
    USER_NOT_FOUND = "user_not_found"
    INVALID_TOKEN = "invalid_token"
    ROLE_NOT_ALLOWED = "role_not_allowed"

    # Profiles
    PROFILE_NOT_FOUND = "profile_not_found"
    BUYER_PROFILE_NOT_FOUND = "buyer_profile_not_found"
    SELLER_PROFILE_NOT_FOUND = "seller_profile_not_found"

    # Products
    PRODUCT_NOT_FOUND = "product_not_found"
    PRODUCT_INACTIVE = "product_inactive"
    INSUFFICIENT_STOCK = "insufficient_stock"
    NOT_PRODUCT_OWNER = "not_product_owner"

    # Categories
    CATEGORY_NOT_FOUND = "category_not_found"
    CATEGORY_CONFLICT = "category_conflict"
    CATEGORY_IN_USE = "category_in_use"
    CATEGORY_CONFIGURATION_NOT_FOUND = "category_configuration_not_found"
    CATEGORY_CONFIGURATION_EXISTS = "category_configuration_exists"

    # RFQ / quotes
    RFQ_NOT_FOUND = "rfq_not_found"
    RFQ_CLOSED = "rfq_closed"
    NOT_RFQ_OWNER = "not_rfq_owner"
    NOT_RFQ_RECIPIENT = "not_rfq_recipient"
    QUOTE_NOT_FOUND = "quote_not_found"
    NOT_QUOTE_OWNER = "not_quote_owner"
    INVALID_QUOTE_STATE = "invalid_quote_state"

    # Orders
    ORDER_NOT_FOUND = "order_not_found"
    NOT_ORDER_OWNER = "not_order_owner"
    INVALID_ORDER_STATE = "invalid_order_state"

    # Reviews
    REVIEW_NOT_FOUND = "review_not_found"
    NOT_REVIEW_OWNER = "not_review_owner"

    # Certifications
    CERTIFICATION_NOT_FOUND = "certification_not_found"
    INVALID_CERTIFICATION_STATE = "invalid_certification_state"

    # Content / templates / payments
    CONTENT_NOT_FOUND = "content_not_found"
    SLUG_CONFLICT = "slug_conflict"
    TEMPLATE_NOT_FOUND = "template_not_found"
    NOT_TEMPLATE_OWNER = "not_template_owner"
    PAYMENT_NOT_FOUND = "payment_not_found"
