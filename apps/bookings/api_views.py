"""Token-guarded bookings API."""

from __future__ import annotations

from django.utils.translation import gettext_lazy as _  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.api.exceptions import ResourceNotFound

from .filters import BookingFilterSet
from .models import Booking
from .serializers import BookingCreateSerializer, BookingSerializer, BookingUpdateSerializer
from .services import delete_booking


class BookingViewSet(viewsets.ModelViewSet):
    """List, read, create, update and cancel the token holder's own bookings."""

    queryset = Booking.objects.select_related("package", "basecamp").all()
    permission_classes = [permissions.IsAuthenticated]
    filterset_class = BookingFilterSet
    http_method_names = ["get", "post", "put", "delete", "head", "options"]

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return BookingCreateSerializer
        if self.action in ("update", "partial_update"):
            return BookingUpdateSerializer
        return BookingSerializer

    def get_queryset(self):  # type: ignore
        return super().get_queryset().filter(user_id=self.request.user.id).order_by("-created_at")

    def get_object(self):  # type: ignore
        booking = self.get_queryset().filter(pk=self.kwargs[self.lookup_field]).first()
        if booking is None:
            raise ResourceNotFound(_("Booking tidak ditemukan"), error="Booking not found")
        return booking

    def list(self, request, *args, **kwargs):  # type: ignore
        queryset = self.filter_queryset(self.get_queryset())
        data = BookingSerializer(queryset, many=True).data
        return Response({"message": "Bookings retrieved successfully", "count": len(data), "bookings": data})

    def retrieve(self, request, *args, **kwargs):  # type: ignore
        booking = self.get_object()
        return Response({"message": "Booking retrieved successfully", "booking": BookingSerializer(booking).data})

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = serializer.save()
        return Response(
            {"message": "Booking created successfully", "booking": BookingSerializer(booking).data},
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):  # type: ignore
        booking = self.get_object()
        serializer = BookingUpdateSerializer(booking, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        booking = serializer.save()
        return Response({"message": "Booking updated successfully", "booking": BookingSerializer(booking).data})

    def destroy(self, request, *args, **kwargs):  # type: ignore
        booking = self.get_object()
        booking_number = delete_booking(booking)
        return Response({"message": "Booking cancelled successfully", "bookingNumber": booking_number})
