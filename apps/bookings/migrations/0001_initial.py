import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import shared.infrastructure.fields


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("catalog", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Booking",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=shared.infrastructure.fields.generate_key,
                        editable=False,
                        max_length=40,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("booking_number", models.CharField(editable=False, max_length=32, unique=True)),
                ("customer_name", models.CharField(max_length=150, verbose_name="Nama pemesan")),
                ("customer_email", models.EmailField(max_length=254, verbose_name="Email pemesan")),
                ("customer_phone", models.CharField(blank=True, max_length=30, verbose_name="Telepon pemesan")),
                ("hiking_date", models.DateField(verbose_name="Tanggal pendakian")),
                ("number_of_people", models.PositiveIntegerField(verbose_name="Jumlah peserta")),
                ("participants", shared.infrastructure.fields.JSONListField(blank=True, default=list, verbose_name="Peserta")),
                (
                    "total_price",
                    models.PositiveIntegerField(
                        help_text="Dihitung sekali saat booking dibuat.", verbose_name="Total harga"
                    ),
                ),
                ("payment_method", models.CharField(blank=True, max_length=50, verbose_name="Metode pembayaran")),
                (
                    "payment_status",
                    models.CharField(
                        choices=[
                            ("pending", "Menunggu pembayaran"),
                            ("paid", "Lunas"),
                            ("failed", "Gagal"),
                            ("refunded", "Dikembalikan"),
                        ],
                        default="pending",
                        max_length=20,
                    ),
                ),
                (
                    "booking_status",
                    models.CharField(
                        choices=[
                            ("pending", "Menunggu konfirmasi"),
                            ("confirmed", "Dikonfirmasi"),
                            ("completed", "Selesai"),
                            ("cancelled", "Dibatalkan"),
                        ],
                        default="pending",
                        max_length=20,
                    ),
                ),
                ("notes", models.TextField(blank=True, null=True, verbose_name="Catatan")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "basecamp",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="bookings",
                        to="catalog.basecamp",
                    ),
                ),
                (
                    "package",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="bookings",
                        to="catalog.package",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="bookings",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Booking",
                "verbose_name_plural": "Booking",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["user", "-created_at"], name="booking_user_created_idx"),
                    models.Index(fields=["customer_email"], name="booking_customer_email_idx"),
                    models.Index(fields=["booking_status"], name="booking_status_idx"),
                ],
            },
        ),
    ]
