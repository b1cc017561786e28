from django.db import migrations, models

import shared.infrastructure.fields


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Package",
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
                ("name", models.CharField(max_length=150, verbose_name="Nama paket")),
                ("price", models.PositiveIntegerField(verbose_name="Harga per orang")),
                ("duration", models.CharField(max_length=50, verbose_name="Durasi")),
                ("difficulty", models.CharField(max_length=30, verbose_name="Tingkat kesulitan")),
                ("distance", models.CharField(max_length=30, verbose_name="Jarak")),
                ("description", models.TextField(blank=True, verbose_name="Deskripsi")),
                ("map_url", models.URLField(blank=True, verbose_name="Tautan peta")),
                ("image_url", models.URLField(blank=True, verbose_name="Gambar")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Paket pendakian",
                "verbose_name_plural": "Paket pendakian",
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="Basecamp",
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
                ("name", models.CharField(max_length=150, verbose_name="Nama basecamp")),
                ("price", models.PositiveIntegerField(verbose_name="Harga per orang")),
                ("capacity", models.PositiveIntegerField(verbose_name="Kapasitas")),
                ("facilities", shared.infrastructure.fields.JSONListField(blank=True, default=list, verbose_name="Fasilitas")),
                ("location", models.CharField(max_length=150, verbose_name="Lokasi")),
                ("description", models.TextField(blank=True, verbose_name="Deskripsi")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Basecamp",
                "verbose_name_plural": "Basecamp",
                "ordering": ["created_at"],
            },
        ),
    ]
