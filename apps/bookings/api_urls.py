"""URL routing for the bookings API (mounted under /api/)."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .api_views import BookingViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r"bookings", BookingViewSet, basename="booking")

urlpatterns = [
    path("", include(router.urls)),
]
