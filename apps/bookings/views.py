"""HTML views: the booking wizard and the account booking pages."""

from __future__ import annotations

import json
from functools import wraps

import structlog
from django.db import DatabaseError  # type: ignore
from django.http import HttpResponseNotFound, QueryDict  # type: ignore
from django.shortcuts import redirect, render  # type: ignore
from django.urls import reverse  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext as _  # type: ignore
from django.views.decorators.http import require_GET, require_http_methods, require_POST  # type: ignore

from apps.catalog.models import Package
from apps.users.session_auth import get_session_user, session_login_required
from shared.formatting import format_rupiah

from . import wizard
from .models import Booking
from .services import (
    DraftPackageMissing,
    bookings_visible_to,
    calculate_total,
    create_booking_from_draft,
    delete_booking,
    package_for_draft,
    update_booking,
)

logger = structlog.get_logger(__name__)

PAYMENT_METHODS = [
    ("transfer_bank", "Transfer Bank"),
    ("e_wallet", "E-Wallet (OVO, GoPay, DANA)"),
    ("qris", "QRIS"),
    ("cash", "Bayar di Basecamp"),
]


def _form_data(request):
    """Form fields, or the decoded body for JSON submissions."""
    if request.content_type == "application/json":
        try:
            body = json.loads(request.body or b"{}")
        except ValueError:
            return QueryDict()
        return body if isinstance(body, dict) else QueryDict()
    return request.POST


def draft_requires(stage: str):
    """Redirect to the catalog unless the session draft has reached ``stage``."""

    def decorator(view_func):
        @wraps(view_func)
        def _wrapped(request, *args, **kwargs):
            draft = wizard.get_draft(request.session)
            if not wizard.has_reached(draft, stage):
                logger.info("wizard.restart", required_stage=stage, stage=draft.get("stage"))
                return redirect("/")
            return view_func(request, draft, *args, **kwargs)

        return _wrapped

    return decorator


def _booking_not_found():
    return HttpResponseNotFound(_("Booking tidak ditemukan"))


def _restart(request):
    wizard.clear_draft(request.session)
    return redirect("/")


@require_http_methods(["GET", "POST"])
def step1(request, package_id):
    package = Package.objects.filter(pk=package_id).first()
    if package is None:
        return HttpResponseNotFound(_("Paket tidak ditemukan"))

    context = {
        "title": "Booking - Data Diri",
        "package": package,
        "min_date": timezone.localdate().isoformat(),
    }
    if request.method == "GET":
        wizard.start_draft(request.session, package)
        return render(request, "bookings/step1_personal_info.html", context)

    data = _form_data(request)
    try:
        wizard.record_personal_info(request.session, package, data)
    except wizard.DraftInputError as exc:
        context.update(error=str(exc), values=data)
        return render(request, "bookings/step1_personal_info.html", context, status=400)
    return redirect("bookings:step2")


@require_http_methods(["GET", "POST"])
@draft_requires(wizard.STAGE_PERSONAL_INFO)
def step2(request, draft):
    context = {"title": "Booking - Data Kelompok", "draft": draft}
    if request.method == "GET":
        return render(request, "bookings/step2_group_info.html", context)

    data = _form_data(request)
    try:
        wizard.record_group_info(request.session, data)
    except wizard.DraftInputError as exc:
        context.update(error=str(exc), values=data)
        return render(request, "bookings/step2_group_info.html", context, status=400)
    return redirect("bookings:review")


def _review_context(draft, package, total_price: int) -> dict:
    return {
        "title": "Review Booking",
        "draft": draft,
        "package": package,
        "total_price": total_price,
        "total_price_display": format_rupiah(total_price),
        "payment_methods": PAYMENT_METHODS,
    }


@require_GET
@draft_requires(wizard.STAGE_WITH_GROUP)
def review(request, draft):
    try:
        package = package_for_draft(draft)
    except DraftPackageMissing:
        return _restart(request)

    total = calculate_total(draft["numberOfPeople"], package=package)
    draft = wizard.record_review(request.session, int(total))
    return render(request, "bookings/step3_review.html", _review_context(draft, package, int(total)))


@require_POST
@draft_requires(wizard.STAGE_REVIEWED)
def checkout(request, draft):
    data = _form_data(request)
    try:
        wizard.record_payment_method(request.session, data.get("paymentMethod"))
    except wizard.DraftInputError as exc:
        try:
            package = package_for_draft(draft)
        except DraftPackageMissing:
            return _restart(request)
        context = _review_context(draft, package, draft.get("totalPrice", 0))
        context["error"] = str(exc)
        return render(request, "bookings/step3_review.html", context, status=400)
    return redirect("bookings:payment")


@require_GET
@draft_requires(wizard.STAGE_CHECKOUT)
def payment(request, draft):
    try:
        package = package_for_draft(draft)
    except DraftPackageMissing:
        return _restart(request)

    total = int(calculate_total(draft["numberOfPeople"], package=package))
    return render(
        request,
        "bookings/step4_payment.html",
        {
            "title": "Payment",
            "draft": draft,
            "package": package,
            "total_price": total,
            "total_price_display": format_rupiah(total),
            "payment_method_label": dict(PAYMENT_METHODS).get(draft.get("paymentMethod"), draft.get("paymentMethod")),
        },
    )


@require_POST
@draft_requires(wizard.STAGE_CHECKOUT)
def process_payment(request, draft):
    session_user = get_session_user(request)
    try:
        booking = create_booking_from_draft(draft, owner_id=session_user["id"] if session_user else None)
    except DraftPackageMissing:
        return _restart(request)
    except DatabaseError:
        logger.exception("booking.create_failed", package_id=draft.get("packageId"))
        return render(
            request,
            "bookings/error.html",
            {"title": "Terjadi kesalahan", "message": _("Terjadi kesalahan saat memproses booking")},
            status=500,
        )

    wizard.clear_draft(request.session)
    return redirect("bookings:success", booking_id=booking.pk)


@require_GET
def success(request, booking_id):
    booking = Booking.objects.select_related("package", "basecamp").filter(pk=booking_id).first()
    if booking is None:
        return _booking_not_found()
    return render(
        request,
        "bookings/success.html",
        {
            "title": "Booking Berhasil",
            "booking": booking,
            "participants": booking.participants,
            "updated": request.GET.get("updated") == "true",
        },
    )


@require_GET
@session_login_required
def my_bookings(request):
    bookings = bookings_visible_to(get_session_user(request))
    return render(
        request,
        "bookings/my_bookings.html",
        {
            "title": "My Bookings - HikeBook",
            "bookings": bookings,
            "deleted": request.GET.get("deleted") == "true",
        },
    )


def _visible_booking(request, booking_id) -> Booking | None:
    return bookings_visible_to(get_session_user(request)).filter(pk=booking_id).first()


@require_GET
@session_login_required
def edit(request, booking_id):
    booking = _visible_booking(request, booking_id)
    if booking is None:
        return _booking_not_found()
    return render(request, "bookings/edit_booking.html", {"title": "Edit Booking - HikeBook", "booking": booking})


@require_POST
@session_login_required
def update(request, booking_id):
    booking = _visible_booking(request, booking_id)
    if booking is None:
        return _booking_not_found()

    data = request.POST
    try:
        hiking_date = wizard.parse_hiking_date(data.get("hikingDate"))
        number_of_people = wizard.parse_number_of_people(data.get("numberOfPeople"))
    except wizard.DraftInputError as exc:
        return render(
            request,
            "bookings/edit_booking.html",
            {"title": "Edit Booking - HikeBook", "booking": booking, "error": str(exc), "values": data},
            status=400,
        )

    update_booking(
        booking,
        hiking_date=hiking_date,
        number_of_people=number_of_people,
        notes=(data.get("notes") or "").strip(),
    )
    return redirect(f"{reverse('bookings:success', args=[booking.pk])}?updated=true")


@require_POST
@session_login_required
def delete(request, booking_id):
    booking = _visible_booking(request, booking_id)
    if booking is None:
        return _booking_not_found()
    delete_booking(booking)
    return redirect(f"{reverse('bookings:my_bookings')}?deleted=true")
