"""Stateless bearer-token authentication for the API.

The token is verified against its signature and expiry only; the user is
rebuilt from the claims without touching the database or the session.
"""

from __future__ import annotations

from django.utils.functional import cached_property  # type: ignore
from rest_framework_simplejwt.authentication import JWTStatelessUserAuthentication  # type: ignore
from rest_framework_simplejwt.models import TokenUser  # type: ignore
from rest_framework_simplejwt.settings import api_settings  # type: ignore


class TokenClaimsUser(TokenUser):
    """Request user backed by the token claims."""

    @cached_property
    def id(self) -> int:
        # Newer simplejwt releases write the user id claim as a string.
        return int(self.token[api_settings.USER_ID_CLAIM])

    @cached_property
    def name(self) -> str:
        return self.token.get("name", "")

    @cached_property
    def email(self) -> str:
        return self.token.get("email", "")

    @cached_property
    def phone(self) -> str | None:
        return self.token.get("phone")

    def to_projection(self) -> dict:
        return {"id": self.id, "name": self.name, "email": self.email, "phone": self.phone}


class BearerTokenAuthentication(JWTStatelessUserAuthentication):
    """``Authorization: Bearer <token>``; missing header leaves the request anonymous."""
