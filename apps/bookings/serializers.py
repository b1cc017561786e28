"""Serializers for the bookings API.

Field names are camelCase on the wire; the model keeps snake_case.
"""

from __future__ import annotations

from typing import Any

from django.utils.translation import gettext_lazy as _  # type: ignore
from rest_framework import serializers  # type: ignore

from apps.catalog.models import Basecamp, Package
from apps.catalog.serializers import BasecampSerializer, PackageSerializer
from shared.api.exceptions import ApiValidationError

from .models import Booking
from .services import create_api_booking
from .wizard import DraftInputError, parse_participants


class ParticipantsField(serializers.Field):
    """List of participants given as a list or as a JSON-encoded string."""

    def to_internal_value(self, data):  # type: ignore
        try:
            return parse_participants(data)
        except DraftInputError as exc:
            raise serializers.ValidationError(str(exc))

    def to_representation(self, value):  # type: ignore
        return list(value or [])


class BookingSummarySerializer(serializers.ModelSerializer):
    bookingNumber = serializers.CharField(source="booking_number")
    bookingStatus = serializers.CharField(source="booking_status")
    hikingDate = serializers.DateField(source="hiking_date")
    totalPrice = serializers.IntegerField(source="total_price")
    createdAt = serializers.DateTimeField(source="created_at")

    class Meta:
        model = Booking
        fields = ["id", "bookingNumber", "bookingStatus", "hikingDate", "totalPrice", "createdAt"]
        read_only_fields = fields


class BookingSerializer(serializers.ModelSerializer):
    """Full booking projection with the embedded package and basecamp."""

    bookingNumber = serializers.CharField(source="booking_number")
    customerName = serializers.CharField(source="customer_name")
    customerEmail = serializers.EmailField(source="customer_email")
    customerPhone = serializers.CharField(source="customer_phone")
    hikingPackageId = serializers.CharField(source="package_id", allow_null=True)
    basecampId = serializers.CharField(source="basecamp_id", allow_null=True)
    hikingPackage = PackageSerializer(source="package", allow_null=True)
    basecamp = BasecampSerializer(allow_null=True)
    hikingDate = serializers.DateField(source="hiking_date")
    numberOfPeople = serializers.IntegerField(source="number_of_people")
    participants = ParticipantsField()
    totalPrice = serializers.IntegerField(source="total_price")
    paymentMethod = serializers.CharField(source="payment_method")
    paymentStatus = serializers.CharField(source="payment_status")
    bookingStatus = serializers.CharField(source="booking_status")
    userId = serializers.IntegerField(source="user_id", allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")

    class Meta:
        model = Booking
        fields = [
            "id",
            "bookingNumber",
            "customerName",
            "customerEmail",
            "customerPhone",
            "hikingPackageId",
            "basecampId",
            "hikingPackage",
            "basecamp",
            "hikingDate",
            "numberOfPeople",
            "participants",
            "totalPrice",
            "paymentMethod",
            "paymentStatus",
            "bookingStatus",
            "notes",
            "userId",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields


class BookingCreateSerializer(serializers.Serializer):
    hikingPackageId = serializers.PrimaryKeyRelatedField(
        queryset=Package.objects.all(), source="package", required=False, allow_null=True
    )
    basecampId = serializers.PrimaryKeyRelatedField(
        queryset=Basecamp.objects.all(), source="basecamp", required=False, allow_null=True
    )
    hikingDate = serializers.DateField(source="hiking_date", required=False, allow_null=True)
    numberOfPeople = serializers.IntegerField(source="number_of_people", required=False, allow_null=True, min_value=1)
    participants = ParticipantsField(required=False)
    paymentMethod = serializers.CharField(
        source="payment_method", required=False, allow_blank=True, allow_null=True, max_length=50
    )
    customerPhone = serializers.CharField(
        source="customer_phone", required=False, allow_blank=True, allow_null=True, max_length=30
    )
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        if not attrs.get("hiking_date") or not attrs.get("number_of_people"):
            raise ApiValidationError(_("Tanggal hiking dan jumlah peserta harus diisi"))
        if attrs.get("package") is None and attrs.get("basecamp") is None:
            raise ApiValidationError(_("Pilih paket pendakian atau basecamp"))
        return attrs

    def create(self, validated_data: dict[str, Any]) -> Booking:  # type: ignore
        return create_api_booking(self.context["request"].user, **validated_data)


class BookingUpdateSerializer(serializers.ModelSerializer):
    """Partial update; the stored total price is never recomputed."""

    hikingDate = serializers.DateField(source="hiking_date", required=False)
    numberOfPeople = serializers.IntegerField(source="number_of_people", required=False, min_value=1)
    participants = ParticipantsField(required=False)
    paymentMethod = serializers.CharField(source="payment_method", required=False, allow_blank=True, max_length=50)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    class Meta:
        model = Booking
        fields = ["hikingDate", "numberOfPeople", "participants", "paymentMethod", "notes"]
