"""API tests for the token authentication endpoints."""

from __future__ import annotations

from datetime import date, timedelta

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase
from rest_framework_simplejwt.tokens import AccessToken

from apps.bookings.models import Booking
from apps.users.authentication import TokenClaimsUser
from apps.users.models import User
from apps.users.tokens import issue_token


class RegisterAPITests(APITestCase):
    url = "/api/auth/register"

    def test_register_returns_user_and_token(self) -> None:
        payload = {"name": "Rina", "email": "Rina@Example.com", "phone": "0812", "password": "rahasia1"}

        response = self.client.post(self.url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["message"], "User registered successfully")
        self.assertEqual(response.data["user"]["email"], "rina@example.com")
        self.assertIn("token", response.data)
        self.assertTrue(User.objects.filter(email="rina@example.com").exists())

    def test_duplicate_email_is_rejected_case_insensitively(self) -> None:
        User.objects.create_user(email="rina@example.com", password="rahasia1", name="Rina")

        response = self.client.post(
            self.url,
            {"name": "Other", "email": "RINA@example.com", "password": "rahasia2"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["error"], "Email already exists")
        self.assertEqual(User.objects.count(), 1)

    def test_missing_fields_win_over_short_password(self) -> None:
        response = self.client.post(self.url, {"email": "a@x.com", "password": "123"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Validation error")
        self.assertEqual(response.data["message"], "Nama, email, dan password harus diisi")

    def test_malformed_email_is_rejected(self) -> None:
        for email in ("rina@", "rina.example.com", "rina@example"):
            response = self.client.post(self.url, {"name": "Rina", "email": email, "password": "rahasia1"}, format="json")

            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, email)
            self.assertEqual(response.data["message"], "Format email tidak valid")
        self.assertFalse(User.objects.exists())

    def test_confirmation_mismatch_is_checked_when_given(self) -> None:
        response = self.client.post(
            self.url,
            {"name": "A", "email": "a@x.com", "password": "rahasia1", "passwordConfirm": "rahasia2"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Password dan konfirmasi password tidak sama")

    def test_short_password_is_rejected(self) -> None:
        response = self.client.post(self.url, {"name": "A", "email": "a@x.com", "password": "12345"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Password minimal 6 karakter")
        self.assertFalse(User.objects.exists())


class LoginAPITests(APITestCase):
    url = "/api/auth/login"

    def setUp(self) -> None:
        self.user = User.objects.create_user(email="budi@example.com", password="rahasia1", name="Budi")

    def test_login_returns_token_with_user_claims(self) -> None:
        response = self.client.post(self.url, {"email": "BUDI@example.com", "password": "rahasia1"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["message"], "Login successful")
        token = AccessToken(response.data["token"])
        self.assertEqual(str(token["id"]), str(self.user.pk))
        self.assertEqual(token["email"], "budi@example.com")
        self.assertEqual(token["name"], "Budi")

    def test_token_user_projection_matches_session_projection(self) -> None:
        token_user = TokenClaimsUser(AccessToken(issue_token(self.user)))

        self.assertEqual(token_user.id, self.user.pk)
        self.assertEqual(token_user.to_projection(), self.user.to_projection())

    def test_wrong_password_is_unauthorized(self) -> None:
        response = self.client.post(self.url, {"email": "budi@example.com", "password": "salah123"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["error"], "Invalid credentials")

    def test_missing_fields_are_a_validation_error(self) -> None:
        response = self.client.post(self.url, {"email": "budi@example.com"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Email dan password harus diisi")


class MeAPITests(APITestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(email="sari@example.com", password="rahasia1", name="Sari")
        self.url = reverse("auth:me")

    def test_profile_includes_booking_summary(self) -> None:
        Booking.objects.create(
            customer_name="Sari",
            customer_email="sari@example.com",
            hiking_date=date(2025, 8, 1),
            number_of_people=2,
            total_price=300000,
            user=self.user,
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(self.user)}")

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["user"]["email"], "sari@example.com")
        self.assertEqual(len(response.data["user"]["bookings"]), 1)
        self.assertEqual(response.data["user"]["bookings"][0]["totalPrice"], 300000)

    def test_missing_token_is_401(self) -> None:
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["error"], "Access denied. No token provided.")

    def test_tampered_token_is_403(self) -> None:
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(self.user)}x")

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["error"], "Invalid token")

    def test_expired_token_is_403(self) -> None:
        token = AccessToken.for_user(self.user)
        token.set_exp(lifetime=-timedelta(hours=1))
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_session_login_does_not_authenticate_the_api(self) -> None:
        self.client.post("/login", {"email": "sari@example.com", "password": "rahasia1"})

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_deleted_user_is_404(self) -> None:
        token = issue_token(self.user)
        self.user.delete()
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "User not found")
