"""Credential verification and registration shared by the HTML site and the API.

Both transports call into this module so the rules stay in one place: the
cookie-session views and the token API views differ only in how they wrap
the resulting identity.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog
from django.conf import settings  # type: ignore
from django.core.exceptions import ValidationError  # type: ignore
from django.core.validators import validate_email  # type: ignore
from django.db import IntegrityError, transaction  # type: ignore
from django.utils.text import capfirst  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from .models import User, UserManager

logger = structlog.get_logger(__name__)


class RegistrationError(Exception):
    """A registration rule was violated.

    ``code`` is one of ``required``, ``invalid_email``, ``too_long``,
    ``mismatch``, ``too_short`` or ``duplicate``; transports map it onto
    their own status codes.
    """

    def __init__(self, code: str, message):
        super().__init__(str(message))
        self.code = code
        self.message = message


@dataclass(frozen=True)
class RegistrationData:
    name: str
    email: str
    password: str
    phone: str | None = None
    password_confirm: str | None = None


def _clean(value) -> str:
    return "" if value is None else str(value).strip()


def validate_registration(data: RegistrationData, *, require_confirmation: bool = True) -> None:
    """Check registration rules in order; the first violation wins."""
    required = [data.name, data.email, data.password]
    if require_confirmation:
        required.append(data.password_confirm)
    if not all(_clean(value) for value in required):
        if require_confirmation:
            raise RegistrationError("required", _("Semua field wajib diisi kecuali telepon"))
        raise RegistrationError("required", _("Nama, email, dan password harus diisi"))

    try:
        validate_email(_clean(data.email))
    except ValidationError:
        raise RegistrationError("invalid_email", _("Format email tidak valid"))

    stored = {"name": _clean(data.name), "phone": UserManager.normalize_phone(_clean(data.phone))}
    for field_name, value in stored.items():
        model_field = User._meta.get_field(field_name)
        if len(value) > model_field.max_length:
            raise RegistrationError(
                "too_long",
                _("%(field)s maksimal %(length)d karakter")
                % {"field": capfirst(model_field.verbose_name), "length": model_field.max_length},
            )

    if data.password_confirm is not None and data.password != data.password_confirm:
        raise RegistrationError("mismatch", _("Password dan konfirmasi password tidak sama"))

    if len(data.password) < settings.PASSWORD_MIN_LENGTH:
        raise RegistrationError(
            "too_short",
            _("Password minimal %(length)d karakter") % {"length": settings.PASSWORD_MIN_LENGTH},
        )

    if User.objects.filter(email__iexact=_clean(data.email)).exists():
        raise RegistrationError("duplicate", _("Email sudah terdaftar"))


def register_user(data: RegistrationData, *, require_confirmation: bool = True) -> User:
    validate_registration(data, require_confirmation=require_confirmation)
    try:
        with transaction.atomic():
            user = User.objects.create_user(
                email=_clean(data.email),
                password=data.password,
                name=_clean(data.name),
                phone=_clean(data.phone) or None,
            )
    except IntegrityError:
        # Lost a race against a concurrent registration with the same email.
        raise RegistrationError("duplicate", _("Email sudah terdaftar"))
    logger.info("user.registered", user_id=user.pk)
    return user


def verify_credentials(email: str | None, password: str | None) -> User | None:
    """Return the active user matching ``email``/``password`` or ``None``."""
    if not email or not password:
        return None
    try:
        user = User.objects.get(email__iexact=UserManager.normalize_login(email))
    except User.DoesNotExist:
        # Spend the same hashing time as a real check.
        User().set_password(password)
        logger.info("auth.login_failed", reason="unknown_email")
        return None

    if not user.is_active or not user.check_password(password):
        logger.info("auth.login_failed", reason="bad_password", user_id=user.pk)
        return None
    return user
