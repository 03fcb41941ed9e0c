from rest_framework import serializers


class CertificationSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    sellerProfileId = serializers.UUIDField(source="seller_profile_id", read_only=True)
    name = serializers.CharField(read_only=True)
    documentPath = serializers.CharField(source="document_path", read_only=True)
    status = serializers.CharField(read_only=True)
    adminNotes = serializers.CharField(source="admin_notes", read_only=True)
    submittedAt = serializers.DateTimeField(source="submitted_at", read_only=True)
    reviewedAt = serializers.DateTimeField(source="reviewed_at", read_only=True)


class CertificationDetailSerializer(CertificationSerializer):
    """Admin view of a certification, with the seller it belongs to."""

    seller = serializers.SerializerMethodField()

    def get_seller(self, obj):
        profile = obj.seller_profile
        return {
            "id": str(profile.id),
            "companyName": profile.company_name,
            "email": profile.user.email,
            "country": profile.country,
            "isVerified": profile.is_verified,
        }


class CertificationCreateSerializer(serializers.Serializer):
    name = serializers.CharField(
        max_length=255, error_messages={"required": "Name is required", "blank": "Name is required"}
    )
    documentPath = serializers.CharField(
        source="document_path",
        max_length=500,
        error_messages={"required": "Document path is required", "blank": "Document path is required"},
    )


class CertificationUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, required=False, allow_blank=True)
    documentPath = serializers.CharField(source="document_path", max_length=500, required=False, allow_blank=True)


class CertificationStatusSerializer(serializers.Serializer):
    status = serializers.CharField()
    adminNotes = serializers.CharField(source="admin_notes", required=False, allow_blank=True, allow_null=True)


class CertificationRejectSerializer(serializers.Serializer):
    adminNotes = serializers.CharField(source="admin_notes", required=False, allow_blank=True, default="")


class ManualVerifySerializer(serializers.Serializer):
    isVerified = serializers.BooleanField(source="is_verified")
