"""FilterSet for the bookings API list."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Booking


class BookingFilterSet(django_filters.FilterSet):
    bookingStatus = django_filters.ChoiceFilter(field_name="booking_status", choices=Booking.BookingStatus.choices)
    paymentStatus = django_filters.ChoiceFilter(field_name="payment_status", choices=Booking.PaymentStatus.choices)
    hikingDateFrom = django_filters.DateFilter(field_name="hiking_date", lookup_expr="gte")
    hikingDateTo = django_filters.DateFilter(field_name="hiking_date", lookup_expr="lte")

    class Meta:
        model = Booking
        fields = ["bookingStatus", "paymentStatus", "hikingDateFrom", "hikingDateTo"]
