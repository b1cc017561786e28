"""Catalog models for HikeBook.

Packages and basecamps are seeded once and only read at runtime. Prices are
whole rupiah per person.
"""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import Money
from shared.formatting import format_rupiah
from shared.infrastructure.fields import JSONListField, generate_key


class Package(models.Model):
    """Guided hiking itinerary."""

    id = models.CharField(primary_key=True, max_length=40, default=generate_key, editable=False)
    name = models.CharField(_("Nama paket"), max_length=150)
    price = models.PositiveIntegerField(_("Harga per orang"))
    duration = models.CharField(_("Durasi"), max_length=50)
    difficulty = models.CharField(_("Tingkat kesulitan"), max_length=30)
    distance = models.CharField(_("Jarak"), max_length=30)
    description = models.TextField(_("Deskripsi"), blank=True)
    map_url = models.URLField(_("Tautan peta"), blank=True)
    image_url = models.URLField(_("Gambar"), blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Paket pendakian")
        verbose_name_plural = _("Paket pendakian")
        ordering = ["created_at"]

    def __str__(self) -> str:
        return self.name

    @property
    def unit_price(self) -> Money:
        return Money(self.price)

    @property
    def price_display(self) -> str:
        return format_rupiah(self.price)


class Basecamp(models.Model):
    """Staging area where hikers can stay, priced per person."""

    id = models.CharField(primary_key=True, max_length=40, default=generate_key, editable=False)
    name = models.CharField(_("Nama basecamp"), max_length=150)
    price = models.PositiveIntegerField(_("Harga per orang"))
    capacity = models.PositiveIntegerField(_("Kapasitas"))
    facilities = JSONListField(_("Fasilitas"))
    location = models.CharField(_("Lokasi"), max_length=150)
    description = models.TextField(_("Deskripsi"), blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Basecamp")
        verbose_name_plural = _("Basecamp")
        ordering = ["created_at"]

    def __str__(self) -> str:
        return self.name

    @property
    def unit_price(self) -> Money:
        return Money(self.price)

    @property
    def price_display(self) -> str:
        return format_rupiah(self.price)
