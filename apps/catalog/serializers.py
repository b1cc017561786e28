"""Read-only serializers for catalog items embedded in booking responses."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Basecamp, Package


class PackageSerializer(serializers.ModelSerializer):
    mapUrl = serializers.CharField(source="map_url", read_only=True)
    imageUrl = serializers.CharField(source="image_url", read_only=True)

    class Meta:
        model = Package
        fields = ["id", "name", "price", "duration", "difficulty", "distance", "description", "mapUrl", "imageUrl"]
        read_only_fields = fields


class BasecampSerializer(serializers.ModelSerializer):
    class Meta:
        model = Basecamp
        fields = ["id", "name", "price", "capacity", "facilities", "location", "description"]
        read_only_fields = fields
