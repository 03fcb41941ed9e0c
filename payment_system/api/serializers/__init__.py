from .payment_serializers import PaymentSerializer, PaymentStatisticsSerializer


__all__ = ["PaymentSerializer", "PaymentStatisticsSerializer"]
