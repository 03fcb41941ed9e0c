from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    sellerId = serializers.UUIDField(source="seller_profile_id", read_only=True)
    name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    price = serializers.DecimalField(max_digits=18, decimal_places=2, read_only=True)
    category = serializers.CharField(read_only=True, allow_null=True)
    categoryId = serializers.UUIDField(source="product_category_id", read_only=True, allow_null=True)
    image = serializers.CharField(read_only=True, allow_null=True)
    stockQuantity = serializers.IntegerField(source="stock_quantity", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    isActive = serializers.BooleanField(source="is_active", read_only=True)


class ProductWriteSerializer(serializers.Serializer):
    """Create/update payload; every field is optional on update."""

    name = serializers.CharField(
        max_length=255,
        error_messages={"required": "Product name is required", "blank": "Product name is required"},
    )
    description = serializers.CharField(max_length=2000, required=False, allow_blank=True)
    price = serializers.DecimalField(
        max_digits=18,
        decimal_places=2,
        required=False,
        min_value=0,
        error_messages={"min_value": "Price must be zero or greater"},
    )
    category = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    categoryId = serializers.UUIDField(
        source="product_category_id",
        required=False,
        allow_null=True,
        error_messages={"invalid": "Invalid category ID format"},
    )
    image = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)
    stockQuantity = serializers.IntegerField(
        source="stock_quantity",
        required=False,
        min_value=0,
        error_messages={"min_value": "Stock quantity must be zero or greater"},
    )
    isActive = serializers.BooleanField(source="is_active", required=False)


class InventoryUpdateSerializer(serializers.Serializer):
    quantity = serializers.IntegerField(
        min_value=0,
        error_messages={
            "required": "Quantity is required",
            "null": "Quantity is required",
            "min_value": "Quantity must be zero or greater",
        },
    )
