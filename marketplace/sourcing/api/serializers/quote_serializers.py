from rest_framework import serializers


class QuoteSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    rfqId = serializers.UUIDField(source="rfq_id", read_only=True)
    sellerProfileId = serializers.UUIDField(source="seller_profile_id", read_only=True)
    sellerName = serializers.CharField(source="seller_profile.company_name", read_only=True)
    price = serializers.DecimalField(max_digits=18, decimal_places=2, read_only=True)
    deliveryTime = serializers.CharField(source="delivery_time", read_only=True)
    description = serializers.CharField(read_only=True)
    validUntil = serializers.DateTimeField(source="valid_until", read_only=True)
    conditions = serializers.CharField(read_only=True)
    notes = serializers.CharField(read_only=True)
    status = serializers.CharField(read_only=True)
    clarificationQuestion = serializers.CharField(source="clarification_question", read_only=True)
    clarificationRequestedAt = serializers.DateTimeField(source="clarification_requested_at", read_only=True)
    clarificationResponse = serializers.CharField(source="clarification_response", read_only=True)
    clarificationRespondedAt = serializers.DateTimeField(source="clarification_responded_at", read_only=True)
    submittedAt = serializers.DateTimeField(source="submitted_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)


class QuoteWriteSerializer(serializers.Serializer):
    """Quote fields shared by submission and update; price checks happen in the service."""

    price = serializers.DecimalField(max_digits=18, decimal_places=2, required=False, allow_null=True)
    totalPrice = serializers.DecimalField(
        source="total_price", max_digits=18, decimal_places=2, required=False, allow_null=True
    )
    deliveryTime = serializers.CharField(source="delivery_time", max_length=100, required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    validUntil = serializers.DateTimeField(source="valid_until", required=False, allow_null=True)
    conditions = serializers.CharField(required=False, allow_blank=True)
    notes = serializers.CharField(required=False, allow_blank=True)


class QuoteSubmitSerializer(QuoteWriteSerializer):
    rfqId = serializers.UUIDField(
        source="rfq_id",
        error_messages={"required": "RFQ ID is required", "invalid": "Invalid RFQ ID format"},
    )


class QuoteStatusSerializer(serializers.Serializer):
    status = serializers.CharField(error_messages={"required": "Status is required", "blank": "Status is required"})


class ClarificationRequestSerializer(serializers.Serializer):
    question = serializers.CharField(
        max_length=2000, error_messages={"required": "Question is required", "blank": "Question is required"}
    )


class ClarificationResponseSerializer(serializers.Serializer):
    response = serializers.CharField(
        max_length=2000, error_messages={"required": "Response is required", "blank": "Response is required"}
    )
