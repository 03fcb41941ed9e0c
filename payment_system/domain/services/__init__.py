from .payment_reporting_service import PaymentReportingService


__all__ = ["PaymentReportingService"]
