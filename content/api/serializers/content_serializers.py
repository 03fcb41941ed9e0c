from rest_framework import serializers

from content.domain.models import ContentItem


class ContentCategorySerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    slug = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True, allow_null=True)
    displayOrder = serializers.IntegerField(source="display_order", read_only=True)
    isActive = serializers.BooleanField(source="is_active", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)


class ContentCategoryWriteSerializer(serializers.Serializer):
    name = serializers.CharField(
        max_length=100, error_messages={"required": "Name is required", "blank": "Name is required"}
    )
    slug = serializers.CharField(max_length=100, required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    displayOrder = serializers.IntegerField(source="display_order", required=False)
    isActive = serializers.BooleanField(source="is_active", required=False)


class ContentTagSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    slug = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True, allow_null=True)
    isActive = serializers.BooleanField(source="is_active", read_only=True)


class ContentTagWriteSerializer(serializers.Serializer):
    name = serializers.CharField(
        max_length=50, error_messages={"required": "Name is required", "blank": "Name is required"}
    )
    slug = serializers.CharField(max_length=50, required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    isActive = serializers.BooleanField(source="is_active", required=False)


class ContentItemSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    title = serializers.CharField(read_only=True)
    slug = serializers.CharField(read_only=True)
    content = serializers.CharField(read_only=True)
    excerpt = serializers.CharField(read_only=True, allow_null=True)
    metaTitle = serializers.CharField(source="meta_title", read_only=True, allow_null=True)
    metaDescription = serializers.CharField(source="meta_description", read_only=True, allow_null=True)
    type = serializers.CharField(source="content_type", read_only=True)
    category = ContentCategorySerializer(read_only=True, allow_null=True)
    tags = ContentTagSerializer(many=True, read_only=True)
    isActive = serializers.BooleanField(source="is_active", read_only=True)
    isPublished = serializers.BooleanField(source="is_published", read_only=True)
    publishedAt = serializers.DateTimeField(source="published_at", read_only=True, allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)


class ContentItemCreateSerializer(serializers.Serializer):
    title = serializers.CharField(
        max_length=200, error_messages={"required": "Title is required", "blank": "Title is required"}
    )
    slug = serializers.CharField(max_length=200, required=False, allow_blank=True)
    content = serializers.CharField(error_messages={"required": "Content is required", "blank": "Content is required"})
    excerpt = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)
    metaTitle = serializers.CharField(
        source="meta_title", max_length=200, required=False, allow_blank=True, allow_null=True
    )
    metaDescription = serializers.CharField(
        source="meta_description", max_length=500, required=False, allow_blank=True, allow_null=True
    )
    type = serializers.ChoiceField(
        source="content_type",
        choices=[choice for choice, _ in ContentItem.TYPE_CHOICES],
        required=False,
        error_messages={"invalid_choice": "Invalid content type"},
    )
    categoryId = serializers.UUIDField(
        source="category_id", required=False, allow_null=True, error_messages={"invalid": "Invalid category ID format"}
    )
    tagIds = serializers.ListField(child=serializers.UUIDField(), source="tag_ids", required=False)
    isActive = serializers.BooleanField(source="is_active", required=False)
    isPublished = serializers.BooleanField(source="is_published", required=False)


class ContentItemUpdateSerializer(ContentItemCreateSerializer):
    title = serializers.CharField(max_length=200, required=False)
    content = serializers.CharField(required=False)
    isPublished = None
