"""URL routing for the HTML account pages (namespace: users)."""

from __future__ import annotations

from django.urls import path  # type: ignore

from . import views

app_name = "users"

urlpatterns = [
    path("login", views.login_view, name="login"),
    path("register", views.register_view, name="register"),
    path("logout", views.logout_view, name="logout"),
]
