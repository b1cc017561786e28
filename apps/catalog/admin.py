"""Admin registrations for the catalog."""

from __future__ import annotations

from django.contrib import admin

from .models import Basecamp, Package


@admin.register(Package)
class PackageAdmin(admin.ModelAdmin):
    list_display = ("name", "price", "duration", "difficulty", "distance", "created_at")
    list_filter = ("difficulty",)
    search_fields = ("name", "description")
    readonly_fields = ("id", "created_at")


@admin.register(Basecamp)
class BasecampAdmin(admin.ModelAdmin):
    list_display = ("name", "price", "capacity", "location", "created_at")
    search_fields = ("name", "location")
    readonly_fields = ("id", "created_at")
