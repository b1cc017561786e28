"""Booking domain models for HikeBook."""

from __future__ import annotations

import secrets
import time

from django.conf import settings  # type: ignore
from django.db import models, transaction  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.formatting import format_date_id, format_rupiah
from shared.infrastructure.fields import JSONListField, generate_key


class Booking(models.Model):
    """Reservation of a hiking package and/or a basecamp stay."""

    class BookingStatus(models.TextChoices):
        PENDING = "pending", _("Menunggu konfirmasi")
        CONFIRMED = "confirmed", _("Dikonfirmasi")
        COMPLETED = "completed", _("Selesai")
        CANCELLED = "cancelled", _("Dibatalkan")

    class PaymentStatus(models.TextChoices):
        PENDING = "pending", _("Menunggu pembayaran")
        PAID = "paid", _("Lunas")
        FAILED = "failed", _("Gagal")
        REFUNDED = "refunded", _("Dikembalikan")

    id = models.CharField(primary_key=True, max_length=40, default=generate_key, editable=False)
    booking_number = models.CharField(max_length=32, unique=True, editable=False)
    customer_name = models.CharField(_("Nama pemesan"), max_length=150)
    customer_email = models.EmailField(_("Email pemesan"))
    customer_phone = models.CharField(_("Telepon pemesan"), max_length=30, blank=True)
    package = models.ForeignKey(
        "catalog.Package",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="bookings",
    )
    basecamp = models.ForeignKey(
        "catalog.Basecamp",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="bookings",
    )
    hiking_date = models.DateField(_("Tanggal pendakian"))
    number_of_people = models.PositiveIntegerField(_("Jumlah peserta"))
    participants = JSONListField(_("Peserta"))
    total_price = models.PositiveIntegerField(
        _("Total harga"),
        help_text=_("Dihitung sekali saat booking dibuat."),
    )
    payment_method = models.CharField(_("Metode pembayaran"), max_length=50, blank=True)
    payment_status = models.CharField(
        max_length=20,
        choices=PaymentStatus.choices,
        default=PaymentStatus.PENDING,
    )
    booking_status = models.CharField(
        max_length=20,
        choices=BookingStatus.choices,
        default=BookingStatus.PENDING,
    )
    notes = models.TextField(_("Catatan"), blank=True, null=True)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="bookings",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Booking")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "-created_at"], name="booking_user_created_idx"),
            models.Index(fields=["customer_email"], name="booking_customer_email_idx"),
            models.Index(fields=["booking_status"], name="booking_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking {self.booking_number}"

    def save(self, *args, **kwargs):  # type: ignore
        with transaction.atomic():
            if self._state.adding and not self.booking_number:
                self.booking_number = self.generate_booking_number()
            super().save(*args, **kwargs)

    @staticmethod
    def generate_booking_number() -> str:
        """``BK`` + epoch milliseconds + three random digits."""
        return f"BK{int(time.time() * 1000)}{secrets.randbelow(1000):03d}"

    @property
    def total_price_display(self) -> str:
        return format_rupiah(self.total_price)

    @property
    def hiking_date_display(self) -> str:
        return format_date_id(self.hiking_date, weekday=True)

    @property
    def created_at_display(self) -> str:
        return format_date_id(self.created_at)
