"""Integration tests for the token-guarded bookings API."""

from __future__ import annotations

from datetime import date, timedelta

from rest_framework import status
from rest_framework.test import APITestCase
from rest_framework_simplejwt.tokens import AccessToken

from apps.bookings.models import Booking
from apps.catalog.models import Basecamp, Package
from apps.users.models import User
from apps.users.tokens import issue_token


class BookingAPITests(APITestCase):
    list_url = "/api/bookings"

    def setUp(self) -> None:
        self.user = User.objects.create_user(
            email="hiker@example.com", password="rahasia1", name="Hiker", phone="0812"
        )
        self.other = User.objects.create_user(email="other@example.com", password="rahasia1", name="Other")
        self.package = Package.objects.create(
            id="p1", name="Jalur B", price=150000, duration="3 Hari 2 Malam", difficulty="Sedang", distance="8 km"
        )
        self.basecamp = Basecamp.objects.create(
            id="b1", name="Basecamp Pos 1", price=20000, capacity=50, location="1.500 mdpl", facilities=["Toilet"]
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(self.user)}")

    def _booking(self, owner, **kwargs) -> Booking:
        values = {
            "customer_name": owner.name,
            "customer_email": owner.email,
            "package": self.package,
            "hiking_date": date(2025, 8, 1),
            "number_of_people": 1,
            "total_price": 150000,
            "user": owner,
        }
        values.update(kwargs)
        return Booking.objects.create(**values)

    def test_create_prices_package_and_basecamp(self) -> None:
        payload = {
            "hikingPackageId": "p1",
            "basecampId": "b1",
            "hikingDate": "2025-08-01",
            "numberOfPeople": 2,
            "participants": [{"name": "A"}, {"name": "B"}],
            "paymentMethod": "qris",
        }

        response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        booking = response.data["booking"]
        self.assertEqual(response.data["message"], "Booking created successfully")
        self.assertEqual(booking["totalPrice"], 340000)
        self.assertEqual(booking["customerName"], "Hiker")
        self.assertEqual(booking["customerEmail"], "hiker@example.com")
        self.assertEqual(booking["bookingStatus"], "pending")
        self.assertEqual(booking["userId"], self.user.pk)
        self.assertEqual(booking["hikingPackage"]["name"], "Jalur B")
        self.assertEqual(booking["participants"], [{"name": "A"}, {"name": "B"}])

    def test_create_accepts_participants_as_json_string(self) -> None:
        response = self.client.post(
            self.list_url,
            {"hikingPackageId": "p1", "hikingDate": "2025-08-01", "numberOfPeople": 1, "participants": '[{"name": "A"}]'},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(Booking.objects.get().participants, [{"name": "A"}])

    def test_create_requires_date_and_people(self) -> None:
        response = self.client.post(self.list_url, {"hikingPackageId": "p1"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Validation error")
        self.assertEqual(response.data["message"], "Tanggal hiking dan jumlah peserta harus diisi")
        self.assertFalse(Booking.objects.exists())

    def test_create_rejects_unknown_package(self) -> None:
        response = self.client.post(
            self.list_url,
            {"hikingPackageId": "nope", "hikingDate": "2025-08-01", "numberOfPeople": 1},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_list_is_scoped_to_token_user_newest_first(self) -> None:
        older = self._booking(self.user)
        newer = self._booking(self.user)
        self._booking(self.other)

        response = self.client.get(self.list_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["count"], 2)
        self.assertEqual([b["id"] for b in response.data["bookings"]], [newer.pk, older.pk])

    def test_list_filters(self) -> None:
        self._booking(self.user, hiking_date=date(2025, 8, 1))
        confirmed = self._booking(
            self.user, hiking_date=date(2025, 9, 1), booking_status=Booking.BookingStatus.CONFIRMED
        )

        by_status = self.client.get(self.list_url, {"bookingStatus": "confirmed"})
        by_date = self.client.get(self.list_url, {"hikingDateFrom": "2025-08-15", "hikingDateTo": "2025-12-31"})

        self.assertEqual([b["id"] for b in by_status.data["bookings"]], [confirmed.pk])
        self.assertEqual([b["id"] for b in by_date.data["bookings"]], [confirmed.pk])

    def test_retrieve_own_and_foreign(self) -> None:
        own = self._booking(self.user)
        foreign = self._booking(self.other)

        response = self.client.get(f"{self.list_url}/{own.pk}")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["booking"]["bookingNumber"], own.booking_number)

        response = self.client.get(f"{self.list_url}/{foreign.pk}")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "Booking not found")

    def test_update_is_partial_and_keeps_total(self) -> None:
        booking = self._booking(self.user, notes="lama")

        response = self.client.put(
            f"{self.list_url}/{booking.pk}", {"numberOfPeople": 5, "notes": "baru"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        booking.refresh_from_db()
        self.assertEqual(booking.number_of_people, 5)
        self.assertEqual(booking.notes, "baru")
        self.assertEqual(booking.hiking_date, date(2025, 8, 1))
        self.assertEqual(booking.total_price, 150000)

    def test_update_foreign_booking_is_404(self) -> None:
        foreign = self._booking(self.other)

        response = self.client.put(f"{self.list_url}/{foreign.pk}", {"notes": "x"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_returns_booking_number(self) -> None:
        booking = self._booking(self.user)

        response = self.client.delete(f"{self.list_url}/{booking.pk}")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["bookingNumber"], booking.booking_number)
        self.assertFalse(Booking.objects.filter(pk=booking.pk).exists())

    def test_missing_token_is_401_on_every_endpoint(self) -> None:
        booking = self._booking(self.user)
        self.client.credentials()

        for method, url in (
            ("get", self.list_url),
            ("post", self.list_url),
            ("get", f"{self.list_url}/{booking.pk}"),
            ("put", f"{self.list_url}/{booking.pk}"),
            ("delete", f"{self.list_url}/{booking.pk}"),
        ):
            response = getattr(self.client, method)(url, {}, format="json")
            self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED, (method, url))
            self.assertEqual(response.data["error"], "Access denied. No token provided.")

    def test_expired_token_is_403_on_every_endpoint(self) -> None:
        booking = self._booking(self.user)
        token = AccessToken.for_user(self.user)
        token.set_exp(lifetime=-timedelta(seconds=1))
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

        for method, url in (
            ("get", self.list_url),
            ("post", self.list_url),
            ("get", f"{self.list_url}/{booking.pk}"),
            ("put", f"{self.list_url}/{booking.pk}"),
            ("delete", f"{self.list_url}/{booking.pk}"),
            ("get", "/api/auth/me"),
        ):
            response = getattr(self.client, method)(url, {}, format="json")
            self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN, (method, url))
            self.assertEqual(response.data["error"], "Invalid token")
        self.assertTrue(Booking.objects.filter(pk=booking.pk).exists())
