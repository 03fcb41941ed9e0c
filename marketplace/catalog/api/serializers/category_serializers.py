from rest_framework import serializers


class ProductCategorySerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    parentCategoryId = serializers.UUIDField(source="parent_id", read_only=True, allow_null=True)
    parentCategoryName = serializers.SerializerMethodField()
    displayOrder = serializers.IntegerField(source="display_order", read_only=True)
    isActive = serializers.BooleanField(source="is_active", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    def get_parentCategoryName(self, obj):
        return obj.parent.name if obj.parent_id else None


class ProductCategoryWriteSerializer(serializers.Serializer):
    name = serializers.CharField(
        max_length=100,
        error_messages={
            "required": "Name is required",
            "blank": "Name is required",
            "max_length": "Name cannot exceed 100 characters",
        },
    )
    description = serializers.CharField(
        max_length=500,
        required=False,
        allow_blank=True,
        error_messages={"max_length": "Description cannot exceed 500 characters"},
    )
    parentCategoryId = serializers.UUIDField(source="parent_id", required=False, allow_null=True)
    displayOrder = serializers.IntegerField(source="display_order", required=False)
    isActive = serializers.BooleanField(source="is_active", required=False)


class CategoryConfigurationSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    categoryId = serializers.UUIDField(source="category_id", read_only=True)
    requiredCertifications = serializers.CharField(source="required_certifications", read_only=True)
    additionalFields = serializers.JSONField(source="additional_fields", read_only=True)
    allowsVerifiedBadge = serializers.BooleanField(source="allows_verified_badge", read_only=True)
    minCertificationsForBadge = serializers.IntegerField(source="min_certifications_for_badge", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)


class CategoryConfigurationWriteSerializer(serializers.Serializer):
    requiredCertifications = serializers.CharField(
        source="required_certifications", required=False, allow_blank=True
    )
    additionalFields = serializers.JSONField(source="additional_fields", required=False)
    allowsVerifiedBadge = serializers.BooleanField(source="allows_verified_badge", required=False)
    minCertificationsForBadge = serializers.IntegerField(
        source="min_certifications_for_badge",
        required=False,
        min_value=0,
        error_messages={"min_value": "Minimum certifications must be zero or greater"},
    )

    def validate_additionalFields(self, value):
        if value is not None and not isinstance(value, dict):
            raise serializers.ValidationError("Additional fields must be a JSON object")
        return value


class CategoryConfigurationCreateSerializer(CategoryConfigurationWriteSerializer):
    categoryId = serializers.UUIDField(
        source="category_id",
        error_messages={"required": "Category ID is required", "invalid": "Invalid category ID format"},
    )
