"""Booking pricing and persistence used by the wizard, the account pages and the API."""

from __future__ import annotations

from datetime import date
from typing import Any

import structlog
from django.contrib.auth import get_user_model  # type: ignore
from django.db import transaction  # type: ignore
from django.db.models import Q  # type: ignore

from apps.catalog.models import Basecamp, Package
from shared.domain.value_objects import Money

from .models import Booking

logger = structlog.get_logger(__name__)


class DraftPackageMissing(LookupError):
    """The package selected in the draft no longer exists."""


def calculate_total(number_of_people: int, *, package: Package | None = None, basecamp: Basecamp | None = None) -> Money:
    """Sum of unit price x people for every selected offering."""
    total = Money.zero()
    for offering in (package, basecamp):
        if offering is not None:
            total += offering.unit_price * number_of_people
    return total


def package_for_draft(draft: dict[str, Any]) -> Package:
    package = Package.objects.filter(pk=draft.get("packageId")).first()
    if package is None:
        raise DraftPackageMissing(draft.get("packageId"))
    return package


def _resolve_owner(user_id):
    if user_id is None:
        return None
    return get_user_model().objects.filter(pk=user_id).first()


def create_booking_from_draft(draft: dict[str, Any], *, owner_id=None) -> Booking:
    """Persist a checked-out wizard draft as one atomic create.

    The total is priced from the package as stored at this moment and is
    not recomputed afterwards.
    """
    package = package_for_draft(draft)
    number_of_people = int(draft["numberOfPeople"])
    total = calculate_total(number_of_people, package=package)

    with transaction.atomic():
        booking = Booking.objects.create(
            customer_name=draft["customerName"],
            customer_email=draft["customerEmail"],
            customer_phone=draft["customerPhone"],
            package=package,
            hiking_date=date.fromisoformat(draft["hikingDate"]),
            number_of_people=number_of_people,
            participants=draft.get("participants") or [],
            total_price=int(total),
            payment_method=draft.get("paymentMethod", ""),
            payment_status=Booking.PaymentStatus.PENDING,
            booking_status=Booking.BookingStatus.PENDING,
            user=_resolve_owner(owner_id),
        )
    logger.info(
        "booking.created",
        booking_number=booking.booking_number,
        package_id=package.pk,
        number_of_people=number_of_people,
        total_price=booking.total_price,
        channel="web",
    )
    return booking


def create_api_booking(
    owner,
    *,
    hiking_date: date,
    number_of_people: int,
    package: Package | None = None,
    basecamp: Basecamp | None = None,
    participants: list | None = None,
    payment_method: str | None = None,
    customer_phone: str | None = None,
    notes: str | None = None,
) -> Booking:
    """Create a booking for a token-authenticated user.

    Customer name and email come from the token claims.
    """
    total = calculate_total(number_of_people, package=package, basecamp=basecamp)
    with transaction.atomic():
        booking = Booking.objects.create(
            customer_name=owner.name,
            customer_email=owner.email,
            customer_phone=customer_phone or owner.phone or "",
            package=package,
            basecamp=basecamp,
            hiking_date=hiking_date,
            number_of_people=number_of_people,
            participants=participants or [],
            total_price=int(total),
            payment_method=payment_method or "",
            notes=notes or None,
            user=_resolve_owner(owner.id),
        )
    logger.info(
        "booking.created",
        booking_number=booking.booking_number,
        package_id=booking.package_id,
        basecamp_id=booking.basecamp_id,
        number_of_people=number_of_people,
        total_price=booking.total_price,
        channel="api",
    )
    return booking


def bookings_visible_to(session_user: dict[str, Any]):
    """Bookings owned by the session user or placed with their email, newest first."""
    return (
        Booking.objects.select_related("package", "basecamp")
        .filter(Q(user_id=session_user.get("id")) | Q(customer_email__iexact=session_user.get("email") or ""))
        .order_by("-created_at")
    )


def update_booking(booking: Booking, *, hiking_date: date, number_of_people: int, notes: str | None) -> Booking:
    """Change date, head count and notes; the stored total is kept as is."""
    booking.hiking_date = hiking_date
    booking.number_of_people = number_of_people
    booking.notes = notes or None
    booking.save(update_fields=["hiking_date", "number_of_people", "notes", "updated_at"])
    logger.info("booking.updated", booking_number=booking.booking_number)
    return booking


def delete_booking(booking: Booking) -> str:
    booking_number = booking.booking_number
    booking.delete()
    logger.info("booking.deleted", booking_number=booking_number)
    return booking_number
