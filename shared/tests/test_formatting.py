from __future__ import annotations

from datetime import date, datetime

import pytest

from shared.formatting import format_date_id, format_rupiah


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (0, "Rp 0"),
        (None, "Rp 0"),
        (999, "Rp 999"),
        (300000, "Rp 300.000"),
        (1250000, "Rp 1.250.000"),
    ],
)
def test_format_rupiah(amount, expected):
    assert format_rupiah(amount) == expected


def test_format_date_id_with_and_without_weekday():
    assert format_date_id(date(2025, 8, 1)) == "1 Agustus 2025"
    assert format_date_id(date(2025, 8, 1), weekday=True) == "Jumat, 1 Agustus 2025"
    assert format_date_id(datetime(2025, 12, 28, 9, 30), weekday=True) == "Minggu, 28 Desember 2025"
    assert format_date_id(None) == ""
