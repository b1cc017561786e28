"""Seed the hiking packages, basecamps and the demo account."""

from __future__ import annotations

from django.apps import apps
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from apps.catalog.models import Basecamp, Package

User = get_user_model()

PACKAGES = [
    {
        "name": "Jalur A - Rute Klasik",
        "price": 120000,
        "duration": "2 Hari 1 Malam",
        "difficulty": "Mudah",
        "distance": "5 km",
        "description": "Rute pendakian klasik yang cocok untuk pemula dengan pemandangan yang menakjubkan",
    },
    {
        "name": "Jalur B - Petualangan Menantang",
        "price": 150000,
        "duration": "3 Hari 2 Malam",
        "difficulty": "Sedang",
        "distance": "8 km",
        "description": "Jalur menantang dengan medan yang beragam dan pemandangan spektakuler",
    },
    {
        "name": "Jalur C - Ekspedisi Puncak",
        "price": 200000,
        "duration": "4 Hari 3 Malam",
        "difficulty": "Sulit",
        "distance": "12 km",
        "description": "Ekspedisi menuju puncak tertinggi dengan pemandangan luar biasa",
    },
    {
        "name": "Jalur D - Sunrise Track",
        "price": 100000,
        "duration": "1 Hari",
        "difficulty": "Mudah",
        "distance": "3 km",
        "description": "Jalur cepat menuju spot sunrise terbaik, cocok untuk pendakian sehari",
    },
]

BASECAMPS = [
    {
        "name": "Basecamp Pos 1",
        "price": 20000,
        "capacity": 50,
        "location": "Ketinggian 1.500 mdpl",
        "facilities": ["Toilet", "Mushola", "Area Camping", "Warung Makan", "Air Bersih"],
        "description": (
            "Basecamp pertama yang cocok untuk aklimatisasi. "
            "Memiliki fasilitas lengkap dan pemandangan yang indah."
        ),
    },
    {
        "name": "Basecamp Pos 2",
        "price": 25000,
        "capacity": 30,
        "location": "Ketinggian 2.000 mdpl",
        "facilities": ["Toilet", "Area Camping", "Shelter", "Air Bersih"],
        "description": (
            "Basecamp menengah dengan fasilitas memadai. "
            "Spot yang bagus untuk istirahat sebelum melanjutkan pendakian."
        ),
    },
    {
        "name": "Basecamp Pos 3",
        "price": 30000,
        "capacity": 20,
        "location": "Ketinggian 2.500 mdpl",
        "facilities": ["Shelter", "Area Camping", "Air Terbatas"],
        "description": (
            "Basecamp terakhir sebelum puncak. "
            "Fasilitas terbatas namun pemandangan bintang sangat menakjubkan."
        ),
    },
    {
        "name": "Basecamp Alternatif",
        "price": 22000,
        "capacity": 40,
        "location": "Ketinggian 1.800 mdpl",
        "facilities": ["Toilet", "Mushola", "Area Camping", "Air Bersih", "Tempat Parkir"],
        "description": (
            "Basecamp alternatif dengan akses yang lebih mudah. "
            "Cocok untuk pendaki yang membutuhkan jalur berbeda."
        ),
    },
]

DEMO_USER = {
    "email": "demo@hikebook.com",
    "name": "Demo User",
    "phone": "081234567890",
    "password": "demo123",
}


class Command(BaseCommand):
    help = "Mengisi paket pendakian, basecamp dan akun demo"

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush",
            action="store_true",
            help="Hapus semua booking, paket dan basecamp sebelum mengisi ulang",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["flush"]:
            Booking = apps.get_model("bookings", "Booking")
            deleted_bookings, _ = Booking.objects.all().delete()
            Package.objects.all().delete()
            Basecamp.objects.all().delete()
            self.stdout.write(self.style.WARNING(f"Data lama dihapus ({deleted_bookings} booking)"))

        created = 0
        for data in PACKAGES:
            _, was_created = Package.objects.get_or_create(name=data["name"], defaults=data)
            created += was_created
        self.stdout.write(f"Paket pendakian: {created} baru, {len(PACKAGES) - created} sudah ada")

        created = 0
        for data in BASECAMPS:
            _, was_created = Basecamp.objects.get_or_create(name=data["name"], defaults=data)
            created += was_created
        self.stdout.write(f"Basecamp: {created} baru, {len(BASECAMPS) - created} sudah ada")

        if User.objects.filter(email__iexact=DEMO_USER["email"]).exists():
            self.stdout.write(f"User demo sudah ada: {DEMO_USER['email']}")
        else:
            User.objects.create_user(**DEMO_USER)
            self.stdout.write(f"User demo dibuat: {DEMO_USER['email']}")

        self.stdout.write(self.style.SUCCESS("Seeding selesai"))
