from rest_framework import serializers


class AdminUserSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    email = serializers.EmailField(read_only=True)
    role = serializers.CharField(read_only=True)
    registrationDate = serializers.DateTimeField(source="date_joined", read_only=True)
    lastLoginDate = serializers.DateTimeField(source="last_login", read_only=True)
    isActive = serializers.BooleanField(source="is_active", read_only=True)
    isLocked = serializers.BooleanField(source="is_locked", read_only=True)
    lockReason = serializers.CharField(source="lock_reason", read_only=True)
    lockDate = serializers.DateTimeField(source="lock_date", read_only=True)


class LockUserSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=500)
