from rest_framework import serializers


class RFQItemSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    productName = serializers.CharField(
        source="product_name",
        max_length=200,
        error_messages={"max_length": "Product name cannot exceed 200 characters"},
    )
    description = serializers.CharField(required=False, allow_blank=True, default="")
    quantity = serializers.IntegerField(min_value=1, error_messages={"min_value": "Quantity must be at least 1"})
    unit = serializers.CharField(max_length=50, required=False, allow_blank=True, default="")


class RFQSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    buyerProfileId = serializers.UUIDField(source="buyer_profile_id", read_only=True)
    buyerName = serializers.CharField(source="buyer_profile.name", read_only=True)
    title = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    status = serializers.CharField(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    closedAt = serializers.DateTimeField(source="closed_at", read_only=True)
    items = RFQItemSerializer(many=True, read_only=True)
    recipientIds = serializers.SerializerMethodField()

    def get_recipientIds(self, obj):
        return [str(recipient.seller_profile_id) for recipient in obj.recipients.all()]


class RFQCreateSerializer(serializers.Serializer):
    title = serializers.CharField(
        max_length=200,
        error_messages={
            "required": "Title is required",
            "blank": "Title is required",
            "max_length": "Title cannot exceed 200 characters",
        },
    )
    description = serializers.CharField(
        error_messages={"required": "Description is required", "blank": "Description is required"}
    )
    items = RFQItemSerializer(many=True, required=False)
    recipientIds = serializers.ListField(
        source="recipient_ids", child=serializers.UUIDField(), required=False, allow_empty=True
    )


class RFQStatusSerializer(serializers.Serializer):
    status = serializers.CharField(error_messages={"required": "Status is required", "blank": "Status is required"})
