"""URL routing for the token API authentication endpoints (namespace: auth)."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .auth_views import LoginView, MeView, RegisterView

app_name = "auth"

urlpatterns = [
    path("register", RegisterView.as_view(), name="register"),
    path("login", LoginView.as_view(), name="login"),
    path("me", MeView.as_view(), name="me"),
]
