"""Sidebar fragments shown next to the home and trail-info pages."""

from __future__ import annotations

SIDEBAR_SLOT = "sidebar"

SIDEBAR_INFO = {
    "title": "Info Pendakian",
    "tips": [
        "Bawa kartu identitas asli untuk registrasi di basecamp.",
        "Siapkan jaket hangat, suhu di puncak bisa di bawah 10°C.",
        "Bawa turun kembali semua sampah Anda.",
        "Pendakian ditutup saat cuaca buruk, pantau info dari pengelola.",
    ],
    "contact": "0812-3456-7890",
}


def register(registry) -> None:
    registry.register(SIDEBAR_SLOT, "pages/partials/sidebar_info.html", SIDEBAR_INFO)
