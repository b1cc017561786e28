"""User domain models for HikeBook.

Customers sign up with a name, an email address (the login) and an optional
phone number. Passwords are stored through Django's password hashers; the
email is kept lower-case so uniqueness is effectively case-insensitive.
"""

from __future__ import annotations

from typing import Any

from django.contrib.auth.models import AbstractUser, BaseUserManager  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class UserManager(BaseUserManager):
    """Manager that uses the email address as the login."""

    use_in_migrations = True

    def _create_user(self, email: str, password: str | None, **extra_fields: Any):
        if not email:
            raise ValueError("Email wajib diisi untuk membuat user.")
        email = self.normalize_login(email)

        phone = extra_fields.get("phone")
        if phone:
            extra_fields["phone"] = self.normalize_phone(phone)
        else:
            extra_fields["phone"] = None

        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_user(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser harus memiliki is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser harus memiliki is_superuser=True.")

        return self._create_user(email, password, **extra_fields)

    def get_by_natural_key(self, username: str):
        return self.get(**{f"{self.model.USERNAME_FIELD}__iexact": username})

    @staticmethod
    def normalize_login(email: str) -> str:
        return email.strip().lower()

    @staticmethod
    def normalize_phone(phone: str) -> str:
        """Strip spaces and dashes so phone numbers are stored uniformly."""
        return phone.strip().replace(" ", "").replace("-", "")


class User(AbstractUser):
    """HikeBook customer account."""

    username = None
    first_name = None
    last_name = None

    name = models.CharField(_("Nama"), max_length=150)
    email = models.EmailField(_("Email"), unique=True)
    phone = models.CharField(_("Telepon"), max_length=20, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    class Meta:
        verbose_name = _("Pengguna")
        verbose_name_plural = _("Pengguna")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"

    def get_full_name(self) -> str:
        return self.name

    def get_short_name(self) -> str:
        return self.name

    def to_projection(self) -> dict[str, Any]:
        """Minimal identity shared by the session and the token claims."""
        return {
            "id": self.pk,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
        }
