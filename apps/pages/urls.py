"""URL routing for catalog pages, debug routes and the health check (namespace: pages)."""

from __future__ import annotations

from django.urls import path

from . import views

app_name = "pages"

urlpatterns = [
    path("", views.home, name="home"),
    path("about", views.about, name="about"),
    path("info-jalur", views.trail_info, name="trail_info"),
    path("basecamps", views.basecamps, name="basecamps"),
    path("package/<str:package_id>", views.package_detail, name="package_detail"),
    path("healthz", views.healthz, name="healthz"),
    path("debug/session", views.debug_session, name="debug_session"),
    path("debug/check-auth", views.debug_check_auth, name="debug_check_auth"),
    path("test/protected", views.test_protected, name="test_protected"),
    path("test/public", views.test_public, name="test_public"),
]
