"""Signed bearer tokens for the JSON API."""

from __future__ import annotations

from rest_framework_simplejwt.tokens import AccessToken  # type: ignore


def issue_token(user) -> str:
    """Return a signed access token embedding the user projection as claims.

    Lifetime and signing key come from ``SIMPLE_JWT`` (24 hours and
    ``JWT_SECRET`` by default).
    """
    token = AccessToken.for_user(user)
    token["name"] = user.name
    token["email"] = user.email
    token["phone"] = user.phone
    return str(token)
