"""Serializers for user-related API responses."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Public user projection: id, name, email, phone."""

    class Meta:
        model = User
        fields = ["id", "name", "email", "phone"]
        read_only_fields = fields


class ProfileSerializer(serializers.ModelSerializer):
    """User profile with a summary of the user's bookings, newest first."""

    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    bookings = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ["id", "name", "email", "phone", "createdAt", "bookings"]
        read_only_fields = fields

    def get_bookings(self, obj):  # type: ignore
        from apps.bookings.serializers import BookingSummarySerializer

        return BookingSummarySerializer(obj.bookings.order_by("-created_at"), many=True).data
