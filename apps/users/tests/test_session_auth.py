"""HTML login, registration and logout backed by the cookie session."""

from __future__ import annotations

from django.conf import settings
from django.test import TestCase

from apps.users.models import User


class SessionLoginTests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(
            email="demo@hikebook.com", password="demo123", name="Demo User", phone="081234567890"
        )

    def test_login_stores_user_projection(self) -> None:
        response = self.client.post("/login", {"email": "Demo@HikeBook.com", "password": "demo123"})

        self.assertRedirects(response, "/", fetch_redirect_response=False)
        self.assertEqual(
            self.client.session["user"],
            {"id": self.user.pk, "name": "Demo User", "email": "demo@hikebook.com", "phone": "081234567890"},
        )
        self.assertEqual(self.client.session.get_expiry_age(), settings.SESSION_COOKIE_AGE)

    def test_remember_me_extends_session(self) -> None:
        self.client.post("/login", {"email": "demo@hikebook.com", "password": "demo123", "remember": "on"})

        self.assertEqual(self.client.session.get_expiry_age(), settings.REMEMBER_ME_AGE)

    def test_bad_credentials_redirect_with_error(self) -> None:
        response = self.client.post("/login", {"email": "demo@hikebook.com", "password": "nope"})

        self.assertEqual(response.status_code, 302)
        self.assertTrue(response["Location"].startswith("/login?error="))
        self.assertNotIn("user", self.client.session)

    def test_protected_page_redirects_and_login_returns_there(self) -> None:
        response = self.client.get("/my-bookings?page=2")

        self.assertRedirects(response, "/login", fetch_redirect_response=False)
        self.assertEqual(self.client.session["redirect_to"], "/my-bookings?page=2")

        response = self.client.post("/login", {"email": "demo@hikebook.com", "password": "demo123"})

        self.assertRedirects(response, "/my-bookings?page=2", fetch_redirect_response=False)
        self.assertNotIn("redirect_to", self.client.session)

    def test_offsite_redirect_target_falls_back_to_home(self) -> None:
        session = self.client.session
        session["redirect_to"] = "https://evil.example.com/"
        session.save()

        response = self.client.post("/login", {"email": "demo@hikebook.com", "password": "demo123"})

        self.assertRedirects(response, "/", fetch_redirect_response=False)

    def test_logged_in_user_is_sent_home_from_guest_pages(self) -> None:
        self.client.post("/login", {"email": "demo@hikebook.com", "password": "demo123"})

        self.assertRedirects(self.client.get("/login"), "/", fetch_redirect_response=False)
        self.assertRedirects(self.client.get("/register"), "/", fetch_redirect_response=False)

    def test_logout_flushes_session(self) -> None:
        self.client.post("/login", {"email": "demo@hikebook.com", "password": "demo123"})

        response = self.client.post("/logout")

        self.assertEqual(response.status_code, 302)
        self.assertTrue(response["Location"].startswith("/login?success="))
        self.assertNotIn("user", self.client.session)

    def test_login_page_renders(self) -> None:
        response = self.client.get("/login?error=Oops")

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Oops")


class SessionRegisterTests(TestCase):
    def _post(self, **overrides):
        data = {
            "name": "Rina",
            "email": "rina@example.com",
            "phone": "",
            "password": "rahasia1",
            "confirmPassword": "rahasia1",
        }
        data.update(overrides)
        return self.client.post("/register", data)

    def test_register_logs_in_and_redirects_home(self) -> None:
        response = self._post()

        self.assertEqual(response.status_code, 302)
        self.assertTrue(response["Location"].startswith("/?success="))
        user = User.objects.get(email="rina@example.com")
        self.assertIsNone(user.phone)
        self.assertEqual(self.client.session["user"]["id"], user.pk)

    def test_mismatched_confirmation_redirects_with_error(self) -> None:
        response = self._post(confirmPassword="rahasia2")

        self.assertTrue(response["Location"].startswith("/register?error="))
        self.assertFalse(User.objects.exists())

    def test_duplicate_email_redirects_with_error(self) -> None:
        User.objects.create_user(email="rina@example.com", password="rahasia1", name="Rina")

        response = self._post(email="RINA@example.com")

        self.assertTrue(response["Location"].startswith("/register?error="))
        self.assertEqual(User.objects.count(), 1)

    def test_malformed_email_redirects_with_error(self) -> None:
        response = self._post(email="rina.example.com")

        self.assertTrue(response["Location"].startswith("/register?error="))
        self.assertFalse(User.objects.exists())
