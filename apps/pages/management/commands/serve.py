"""Run the development server on all interfaces at ``$PORT``."""

from __future__ import annotations

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = "Menjalankan server di 0.0.0.0:$PORT (default 3000)"

    def add_arguments(self, parser):
        parser.add_argument("--port", type=int, default=None, help="Override PORT dari environment")
        parser.add_argument("--noreload", action="store_true", help="Matikan auto-reloader")

    def handle(self, *args, **options):
        port = options["port"] or settings.PORT
        address = f"0.0.0.0:{port}"
        self.stdout.write(f"Server berjalan di http://localhost:{port}")
        call_command("runserver", address, use_reloader=not options["noreload"])
