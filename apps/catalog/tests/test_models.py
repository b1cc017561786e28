from __future__ import annotations

import pytest

from apps.catalog.models import Basecamp, Package
from shared.domain.value_objects import Money


@pytest.mark.django_db
def test_package_gets_generated_string_key_and_money_price():
    package = Package.objects.create(
        name="Jalur B", price=150000, duration="3 Hari 2 Malam", difficulty="Sedang", distance="8 km"
    )

    assert isinstance(package.pk, str) and package.pk
    assert package.unit_price == Money(150000)
    assert package.price_display == "Rp 150.000"


@pytest.mark.django_db
def test_packages_are_listed_in_creation_order():
    first = Package.objects.create(id="p1", name="A", price=1, duration="1", difficulty="x", distance="1")
    second = Package.objects.create(id="p2", name="B", price=1, duration="1", difficulty="x", distance="1")

    assert list(Package.objects.all()) == [first, second]


@pytest.mark.django_db
def test_basecamp_facilities_round_trip_as_list():
    Basecamp.objects.create(
        id="b1", name="Pos 1", price=20000, capacity=50, location="1.500 mdpl", facilities=["Toilet", "Mushola"]
    )

    assert Basecamp.objects.get(pk="b1").facilities == ["Toilet", "Mushola"]
