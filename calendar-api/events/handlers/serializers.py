"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.IntegerField(source="id.value")
    title = serializers.CharField()
    start = serializers.DateTimeField()
    end = serializers.DateTimeField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class ErrorDetailSerializer(serializers.Serializer):
    """Serializer for a DomainError's code and message."""

    code = serializers.CharField(source="code.value")
    message = serializers.CharField()
