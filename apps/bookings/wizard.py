"""Session-carried booking draft.

The draft lives in the Django session under ``booking_draft`` and is tagged
with the furthest stage the customer has completed::

    empty -> personal_info -> with_group -> reviewed -> checkout

Each wizard route names the stage it requires; a draft that has not reached
it sends the customer back to the catalog.
"""

from __future__ import annotations

import json
from datetime import date
from typing import Any

from django.core.exceptions import ValidationError  # type: ignore
from django.core.validators import validate_email  # type: ignore
from django.utils.dateparse import parse_date  # type: ignore
from django.utils.text import capfirst  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import ParticipantCount

from .models import Booking

DRAFT_SESSION_KEY = "booking_draft"

STAGE_EMPTY = "empty"
STAGE_PERSONAL_INFO = "personal_info"
STAGE_WITH_GROUP = "with_group"
STAGE_REVIEWED = "reviewed"
STAGE_CHECKOUT = "checkout"

STAGE_ORDER = [STAGE_EMPTY, STAGE_PERSONAL_INFO, STAGE_WITH_GROUP, STAGE_REVIEWED, STAGE_CHECKOUT]

PERSONAL_FIELDS = ("customerName", "customerEmail", "customerPhone", "hikingDate")

# Personal fields copied verbatim into length-limited booking columns.
BOOKING_COLUMNS = {
    "customerName": "customer_name",
    "customerEmail": "customer_email",
    "customerPhone": "customer_phone",
}


class DraftInputError(ValueError):
    """Submitted wizard input is missing or malformed; the draft is left untouched."""


def get_draft(session) -> dict[str, Any]:
    return session.get(DRAFT_SESSION_KEY) or {}


def _save_draft(session, draft: dict[str, Any]) -> dict[str, Any]:
    session[DRAFT_SESSION_KEY] = draft
    return draft


def _update_draft(session, stage: str, **changes: Any) -> dict[str, Any]:
    draft = dict(get_draft(session))
    draft.update(changes)
    draft["stage"] = stage
    return _save_draft(session, draft)


def clear_draft(session) -> None:
    session.pop(DRAFT_SESSION_KEY, None)


def has_reached(draft: dict[str, Any], stage: str) -> bool:
    current = draft.get("stage")
    if current not in STAGE_ORDER:
        return False
    return STAGE_ORDER.index(current) >= STAGE_ORDER.index(stage)


def start_draft(session, package) -> dict[str, Any]:
    """Reset the draft to ``empty`` carrying the package selection."""
    return _save_draft(
        session,
        {
            "stage": STAGE_EMPTY,
            "packageId": package.pk,
            "packageName": package.name,
            "packagePrice": package.price,
        },
    )


def record_personal_info(session, package, data) -> dict[str, Any]:
    """Validate step 1 fields and merge them into the draft for ``package``."""
    fields = clean_personal_info(data)
    draft = get_draft(session)
    if draft.get("packageId") != package.pk:
        start_draft(session, package)
    return _update_draft(session, STAGE_PERSONAL_INFO, **fields)


def record_group_info(session, data) -> dict[str, Any]:
    number_of_people = parse_number_of_people(data.get("numberOfPeople"))
    participants = participants_from_form(data)
    return _update_draft(
        session,
        STAGE_WITH_GROUP,
        numberOfPeople=number_of_people,
        participants=participants,
    )


def record_review(session, total_price: int) -> dict[str, Any]:
    return _update_draft(session, STAGE_REVIEWED, totalPrice=total_price)


def record_payment_method(session, payment_method) -> dict[str, Any]:
    method = (payment_method or "").strip()
    if not method:
        raise DraftInputError(_("Pilih metode pembayaran"))
    if len(method) > 50:
        raise DraftInputError(_("Metode pembayaran tidak valid"))
    return _update_draft(session, STAGE_CHECKOUT, paymentMethod=method)


def clean_personal_info(data) -> dict[str, str]:
    fields = {name: (data.get(name) or "").strip() for name in PERSONAL_FIELDS}
    if not all(fields.values()):
        raise DraftInputError(_("Semua field harus diisi"))
    for key, column in BOOKING_COLUMNS.items():
        model_field = Booking._meta.get_field(column)
        if len(fields[key]) > model_field.max_length:
            raise DraftInputError(
                _("%(field)s maksimal %(length)d karakter")
                % {"field": capfirst(model_field.verbose_name), "length": model_field.max_length}
            )
    try:
        validate_email(fields["customerEmail"])
    except ValidationError:
        raise DraftInputError(_("Format email tidak valid"))
    fields["hikingDate"] = parse_hiking_date(fields["hikingDate"]).isoformat()
    return fields


def parse_hiking_date(raw) -> date:
    try:
        parsed = parse_date(str(raw or "").strip())
    except ValueError:
        parsed = None
    if parsed is None:
        raise DraftInputError(_("Tanggal pendakian tidak valid"))
    return parsed


def parse_number_of_people(raw) -> int:
    try:
        return int(ParticipantCount.parse(raw))
    except (TypeError, ValueError):
        raise DraftInputError(_("Jumlah peserta minimal 1"))


def parse_participants(raw) -> list:
    """Accept a JSON-encoded string or an already structured list.

    Absent or blank input means no named participants. Anything else that
    does not decode to a list is rejected.
    """
    if raw is None:
        return []
    if isinstance(raw, list):
        return raw
    if isinstance(raw, str):
        if not raw.strip():
            return []
        try:
            decoded = json.loads(raw)
        except ValueError:
            raise DraftInputError(_("Data peserta tidak valid"))
        if isinstance(decoded, list):
            return decoded
    raise DraftInputError(_("Data peserta tidak valid"))


def participants_from_form(data) -> list:
    if "participants" in data:
        return parse_participants(data.get("participants"))
    # Plain HTML form: one ``participantName`` input per person.
    getlist = getattr(data, "getlist", None)
    names = getlist("participantName") if getlist else data.get("participantName") or []
    if isinstance(names, str):
        names = [names]
    return [{"name": name.strip()} for name in names if isinstance(name, str) and name.strip()]
