"""Serializers for the token API register and login endpoints."""

from __future__ import annotations

from typing import Any

from django.utils.translation import gettext_lazy as _  # type: ignore
from rest_framework import serializers  # type: ignore

from shared.api.exceptions import ApiValidationError, EmailAlreadyExists, InvalidCredentials

from .services import RegistrationData, RegistrationError, register_user, validate_registration, verify_credentials


class RegisterSerializer(serializers.Serializer):
    # Presence and length are checked by the registration service so the
    # first violated rule is the one reported.
    name = serializers.CharField(required=False, allow_blank=True, default="")
    email = serializers.CharField(required=False, allow_blank=True, default="")
    phone = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    password = serializers.CharField(required=False, allow_blank=True, default="", write_only=True, trim_whitespace=False)
    passwordConfirm = serializers.CharField(
        required=False, allow_null=True, default=None, write_only=True, trim_whitespace=False
    )

    def _registration_data(self, attrs: dict[str, Any]) -> RegistrationData:
        return RegistrationData(
            name=attrs["name"],
            email=attrs["email"],
            password=attrs["password"],
            phone=attrs.get("phone"),
            password_confirm=attrs.get("passwordConfirm"),
        )

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        try:
            validate_registration(self._registration_data(attrs), require_confirmation=False)
        except RegistrationError as exc:
            raise _api_error(exc)
        return attrs

    def create(self, validated_data: dict[str, Any]):  # type: ignore
        try:
            return register_user(self._registration_data(validated_data), require_confirmation=False)
        except RegistrationError as exc:
            raise _api_error(exc)


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField(required=False, allow_blank=True, default="")
    password = serializers.CharField(
        required=False, allow_blank=True, default="", write_only=True, trim_whitespace=False
    )

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        if not attrs["email"].strip() or not attrs["password"]:
            raise ApiValidationError(_("Email dan password harus diisi"))
        user = verify_credentials(attrs["email"], attrs["password"])
        if user is None:
            raise InvalidCredentials()
        attrs["user"] = user
        return attrs


def _api_error(exc: RegistrationError):
    if exc.code == "duplicate":
        return EmailAlreadyExists(exc.message)
    return ApiValidationError(exc.message)
