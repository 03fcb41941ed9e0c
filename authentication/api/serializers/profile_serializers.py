from rest_framework import serializers


class BuyerProfileSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    userId = serializers.UUIDField(source="user_id", read_only=True)
    name = serializers.CharField(read_only=True)
    companyName = serializers.CharField(source="company_name", read_only=True)
    country = serializers.CharField(read_only=True)
    phone = serializers.CharField(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)


class SellerProfileSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    userId = serializers.UUIDField(source="user_id", read_only=True)
    companyName = serializers.CharField(source="company_name", read_only=True)
    legalRepresentative = serializers.CharField(source="legal_representative", read_only=True)
    taxId = serializers.CharField(source="tax_id", read_only=True)
    industry = serializers.CharField(read_only=True)
    country = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    isVerified = serializers.BooleanField(source="is_verified", read_only=True)
    isPremium = serializers.BooleanField(source="is_premium", read_only=True)
    hasVerifiedBadge = serializers.BooleanField(source="has_verified_badge", read_only=True)
    averageRating = serializers.DecimalField(
        source="average_rating", max_digits=3, decimal_places=2, read_only=True, coerce_to_string=False
    )
    numberOfRatings = serializers.IntegerField(source="number_of_ratings", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)


class PublicSellerSerializer(serializers.Serializer):
    """Seller fields safe to show on the public directory (no tax id)."""

    id = serializers.UUIDField(read_only=True)
    companyName = serializers.CharField(source="company_name", read_only=True)
    industry = serializers.CharField(read_only=True)
    country = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    isVerified = serializers.BooleanField(source="is_verified", read_only=True)
    isPremium = serializers.BooleanField(source="is_premium", read_only=True)
    averageRating = serializers.DecimalField(
        source="average_rating", max_digits=3, decimal_places=2, read_only=True, coerce_to_string=False
    )
    numberOfRatings = serializers.IntegerField(source="number_of_ratings", read_only=True)


class BuyerProfileRequestSerializer(serializers.Serializer):
    """Incoming camelCase payload, exposed to services as model field names."""

    name = serializers.CharField(max_length=255, required=False, allow_blank=True)
    companyName = serializers.CharField(
        source="company_name", max_length=255, required=False, allow_blank=True, allow_null=True
    )
    country = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)


class SellerProfileRequestSerializer(serializers.Serializer):
    companyName = serializers.CharField(source="company_name", max_length=255, required=False, allow_blank=True)
    legalRepresentative = serializers.CharField(
        source="legal_representative", max_length=255, required=False, allow_blank=True
    )
    taxId = serializers.CharField(source="tax_id", max_length=50, required=False, allow_blank=True)
    industry = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    country = serializers.CharField(max_length=100, required=False, allow_blank=True)
    description = serializers.CharField(max_length=1000, required=False, allow_blank=True, allow_null=True)
