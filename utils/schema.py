"""Response envelopes referenced by ``extend_schema`` declarations."""

from rest_framework import serializers


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
    timestamp = serializers.DateTimeField()
    details = serializers.CharField(required=False)


class SuccessResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    message = serializers.CharField()
    data = serializers.JSONField(allow_null=True)
    timestamp = serializers.DateTimeField()


class PaginationSerializer(serializers.Serializer):
    currentPage = serializers.IntegerField()
    pageSize = serializers.IntegerField()
    totalItems = serializers.IntegerField()
    totalPages = serializers.IntegerField()
    hasPreviousPage = serializers.BooleanField()
    hasNextPage = serializers.BooleanField()


class PagedDataSerializer(serializers.Serializer):
    items = serializers.ListField(child=serializers.JSONField())
    pagination = PaginationSerializer()


class PagedResponseSerializer(SuccessResponseSerializer):
    data = PagedDataSerializer()
