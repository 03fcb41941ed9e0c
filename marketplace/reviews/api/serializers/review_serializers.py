from rest_framework import serializers


RATING_ERRORS = {
    "min_value": "Rating must be between 1 and 5",
    "max_value": "Rating must be between 1 and 5",
    "invalid": "Rating must be between 1 and 5",
}


class ReviewReplySerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    sellerProfileId = serializers.UUIDField(source="seller_profile_id", read_only=True)
    replyContent = serializers.CharField(source="reply_content", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)


class ReviewSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    buyerProfileId = serializers.UUIDField(source="buyer_profile_id", read_only=True)
    buyerName = serializers.CharField(source="buyer_profile.name", read_only=True)
    sellerProfileId = serializers.UUIDField(source="seller_profile_id", read_only=True)
    productId = serializers.UUIDField(source="product_id", read_only=True, allow_null=True)
    rating = serializers.IntegerField(read_only=True)
    comment = serializers.CharField(read_only=True)
    isReported = serializers.BooleanField(source="is_reported", read_only=True)
    isApproved = serializers.BooleanField(source="is_approved", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    replies = ReviewReplySerializer(many=True, read_only=True)


class ProductReviewCreateSerializer(serializers.Serializer):
    rating = serializers.IntegerField(
        min_value=1, max_value=5, error_messages={"required": "Rating is required", **RATING_ERRORS}
    )
    comment = serializers.CharField(
        max_length=1000,
        required=False,
        allow_blank=True,
        default="",
        error_messages={"max_length": "Comment cannot exceed 1000 characters"},
    )


class ReviewCreateSerializer(ProductReviewCreateSerializer):
    sellerProfileId = serializers.UUIDField(
        source="seller_profile_id",
        error_messages={"required": "Seller profile ID is required", "invalid": "Invalid seller profile ID format"},
    )
    productId = serializers.UUIDField(
        source="product_id",
        required=False,
        allow_null=True,
        error_messages={"invalid": "Invalid product ID format"},
    )


class ReviewUpdateSerializer(serializers.Serializer):
    rating = serializers.IntegerField(min_value=1, max_value=5, required=False, error_messages=RATING_ERRORS)
    comment = serializers.CharField(
        max_length=1000,
        required=False,
        allow_blank=True,
        error_messages={"max_length": "Comment cannot exceed 1000 characters"},
    )


class ReviewReportSerializer(serializers.Serializer):
    reason = serializers.CharField(
        max_length=1000, error_messages={"required": "Reason is required", "blank": "Reason is required"}
    )


class ReviewReplyCreateSerializer(serializers.Serializer):
    replyContent = serializers.CharField(
        source="reply_content",
        max_length=1000,
        error_messages={
            "required": "Reply content is required",
            "blank": "Reply content is required",
            "max_length": "Reply cannot exceed 1000 characters",
        },
    )
