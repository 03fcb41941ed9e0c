from rest_framework import serializers


class PaymentSerializer(serializers.Serializer):
    """Admin payment row; ``sellerName``/``buyerName`` come from PaymentReportingService."""

    id = serializers.UUIDField(read_only=True)
    orderId = serializers.UUIDField(source="order_id", read_only=True)
    sellerProfileId = serializers.UUIDField(source="seller_profile_id", read_only=True)
    buyerProfileId = serializers.UUIDField(source="buyer_profile_id", read_only=True, allow_null=True)
    sellerName = serializers.CharField(source="seller_name", read_only=True)
    buyerName = serializers.CharField(source="buyer_name", read_only=True)
    amount = serializers.DecimalField(max_digits=18, decimal_places=2, read_only=True)
    currency = serializers.CharField(read_only=True)
    paymentProvider = serializers.CharField(source="payment_provider", read_only=True)
    providerTransactionId = serializers.CharField(source="provider_transaction_id", read_only=True)
    status = serializers.CharField(read_only=True)
    paymentMethod = serializers.CharField(source="payment_method", read_only=True)
    description = serializers.CharField(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    completedAt = serializers.DateTimeField(source="completed_at", read_only=True, allow_null=True)


class PaymentStatisticsSerializer(serializers.Serializer):
    totalPayments = serializers.IntegerField()
    totalAmount = serializers.DecimalField(max_digits=18, decimal_places=2)
    completedCount = serializers.IntegerField()
    pendingCount = serializers.IntegerField()
    failedCount = serializers.IntegerField()
