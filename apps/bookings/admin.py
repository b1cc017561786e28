"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "booking_number",
        "customer_name",
        "customer_email",
        "package",
        "basecamp",
        "hiking_date",
        "number_of_people",
        "total_price",
        "booking_status",
        "payment_status",
        "created_at",
    )
    list_filter = ("booking_status", "payment_status", "hiking_date")
    search_fields = ("booking_number", "customer_name", "customer_email")
    readonly_fields = ("id", "booking_number", "total_price", "created_at", "updated_at")
    raw_id_fields = ("user",)
