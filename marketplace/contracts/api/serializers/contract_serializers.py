from rest_framework import serializers


class ContractTemplateSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    sellerProfileId = serializers.UUIDField(source="created_by_id", read_only=True)
    name = serializers.CharField(read_only=True)
    title = serializers.CharField(read_only=True)
    content = serializers.CharField(read_only=True)
    templateType = serializers.CharField(source="template_type", read_only=True)
    customFields = serializers.JSONField(source="custom_fields", read_only=True)
    isActive = serializers.BooleanField(source="is_active", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)


class ContractTemplateCreateSerializer(serializers.Serializer):
    name = serializers.CharField(
        max_length=255, error_messages={"required": "Name is required", "blank": "Name is required"}
    )
    title = serializers.CharField(
        max_length=255, error_messages={"required": "Title is required", "blank": "Title is required"}
    )
    content = serializers.CharField(error_messages={"required": "Content is required", "blank": "Content is required"})
    templateType = serializers.CharField(
        source="template_type",
        max_length=50,
        error_messages={"required": "Template type is required", "blank": "Template type is required"},
    )
    customFields = serializers.DictField(source="custom_fields", required=False, allow_null=True)


class ContractTemplateUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, required=False)
    title = serializers.CharField(max_length=255, required=False)
    content = serializers.CharField(required=False)
    templateType = serializers.CharField(source="template_type", max_length=50, required=False)
    customFields = serializers.DictField(source="custom_fields", required=False, allow_null=True)


class ContractInstanceSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    templateId = serializers.UUIDField(source="template_id", read_only=True)
    buyerProfileId = serializers.UUIDField(source="buyer_profile_id", read_only=True)
    sellerProfileId = serializers.UUIDField(source="seller_profile_id", read_only=True)
    rfqId = serializers.UUIDField(source="rfq_id", read_only=True, allow_null=True)
    quoteId = serializers.UUIDField(source="quote_id", read_only=True, allow_null=True)
    contractNumber = serializers.CharField(source="contract_number", read_only=True)
    content = serializers.CharField(read_only=True)
    status = serializers.CharField(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)


class GenerateContractSerializer(serializers.Serializer):
    templateId = serializers.UUIDField(
        source="template_id",
        error_messages={"required": "Template ID is required", "invalid": "Invalid template ID format"},
    )
    sellerProfileId = serializers.UUIDField(
        source="seller_profile_id",
        error_messages={"required": "Seller profile ID is required", "invalid": "Invalid seller profile ID format"},
    )
    rfqId = serializers.UUIDField(source="rfq_id", required=False, allow_null=True)
    quoteId = serializers.UUIDField(source="quote_id", required=False, allow_null=True)
    customFields = serializers.DictField(source="custom_fields", required=False, allow_null=True)
