"""Display formatting for the Indonesian locale.

Pages show prices as ``Rp 300.000`` and dates as ``Jumat, 1 Agustus 2025``
regardless of the server locale, so the tables live here instead of relying
on ``locale.setlocale``.
"""

from __future__ import annotations

from datetime import date, datetime

MONTHS_ID = [
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
]

WEEKDAYS_ID = ["Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu"]


def format_rupiah(amount: int | None) -> str:
    """Format a whole-rupiah amount with dot thousands separators."""
    value = int(amount or 0)
    sign = "-" if value < 0 else ""
    return f"Rp {sign}{abs(value):,}".replace(",", ".")


def format_date_id(value: date | datetime | None, weekday: bool = False) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        value = value.date()
    text = f"{value.day} {MONTHS_ID[value.month - 1]} {value.year}"
    if weekday:
        return f"{WEEKDAYS_ID[value.weekday()]}, {text}"
    return text
