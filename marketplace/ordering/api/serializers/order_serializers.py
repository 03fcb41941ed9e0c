from rest_framework import serializers


class OrderItemSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    productId = serializers.UUIDField(source="product_id", read_only=True)
    productName = serializers.CharField(source="product_name", read_only=True)
    productImage = serializers.CharField(source="product_image", read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    unitPrice = serializers.DecimalField(source="unit_price", max_digits=18, decimal_places=2, read_only=True)
    totalPrice = serializers.DecimalField(source="total_price", max_digits=18, decimal_places=2, read_only=True)


class OrderStatusHistorySerializer(serializers.Serializer):
    status = serializers.CharField(read_only=True)
    notes = serializers.CharField(read_only=True)
    changedBy = serializers.UUIDField(source="changed_by_id", read_only=True)
    changedAt = serializers.DateTimeField(source="changed_at", read_only=True)


class OrderSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    buyerId = serializers.UUIDField(source="buyer_id", read_only=True)
    buyerEmail = serializers.EmailField(source="buyer.email", read_only=True)
    sellerProfileId = serializers.UUIDField(source="seller_profile_id", read_only=True)
    sellerName = serializers.CharField(source="seller_profile.company_name", read_only=True)
    status = serializers.CharField(read_only=True)
    totalAmount = serializers.DecimalField(source="total_amount", max_digits=18, decimal_places=2, read_only=True)
    shippingCost = serializers.DecimalField(source="shipping_cost", max_digits=18, decimal_places=2, read_only=True)
    totalCost = serializers.DecimalField(source="total_cost", max_digits=18, decimal_places=2, read_only=True)
    currency = serializers.CharField(read_only=True)
    shippedWith = serializers.CharField(source="shipped_with", read_only=True)
    trackingNumber = serializers.CharField(source="tracking_number", read_only=True)
    specialInstructions = serializers.CharField(source="special_instructions", read_only=True)
    message = serializers.CharField(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    shippedAt = serializers.DateTimeField(source="shipped_at", read_only=True)
    deliveredAt = serializers.DateTimeField(source="delivered_at", read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)


class OrderDetailSerializer(OrderSerializer):
    statusHistory = OrderStatusHistorySerializer(source="status_history", many=True, read_only=True)


class OrderLineSerializer(serializers.Serializer):
    productId = serializers.UUIDField(
        source="product_id",
        error_messages={"required": "Product ID is required", "invalid": "Invalid product ID format"},
    )
    quantity = serializers.IntegerField(min_value=1, error_messages={"min_value": "Quantity must be at least 1"})


class OrderCreateSerializer(serializers.Serializer):
    items = OrderLineSerializer(
        many=True,
        allow_empty=False,
        error_messages={"required": "At least one item is required", "empty": "At least one item is required"},
    )
    specialInstructions = serializers.CharField(source="special_instructions", required=False, allow_blank=True)
    currency = serializers.CharField(max_length=3, required=False, default="USD")


class OrderStatusUpdateSerializer(serializers.Serializer):
    status = serializers.CharField(error_messages={"required": "Status is required", "blank": "Status is required"})
    notes = serializers.CharField(required=False, allow_blank=True, default="")


class OrderConfirmSerializer(serializers.Serializer):
    message = serializers.CharField(required=False, allow_blank=True)
    shippedWith = serializers.CharField(source="shipped_with", max_length=100, required=False, allow_blank=True)
    trackingNumber = serializers.CharField(source="tracking_number", max_length=100, required=False, allow_blank=True)
    shippingCost = serializers.DecimalField(
        source="shipping_cost", max_digits=18, decimal_places=2, min_value=0, required=False, allow_null=True
    )
    totalCost = serializers.DecimalField(
        source="total_cost", max_digits=18, decimal_places=2, min_value=0, required=False, allow_null=True
    )
