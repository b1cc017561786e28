from __future__ import annotations

from asgiref.sync import async_to_sync
from django.apps import apps
from django.test import SimpleTestCase, override_settings

from apps.pages.slots import SlotHandle, SlotRegistry

LOCMEM_TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "OPTIONS": {
            "loaders": [
                (
                    "django.template.loaders.locmem.Loader",
                    {
                        "first.html": "<p>first {{ label }}</p>",
                        "second.html": "<p>second {{ label }}</p>",
                    },
                )
            ]
        },
    }
]


@override_settings(TEMPLATES=LOCMEM_TEMPLATES)
class SlotRegistryTests(SimpleTestCase):
    def setUp(self) -> None:
        self.registry = SlotRegistry()

    def test_register_returns_handle(self) -> None:
        first = self.registry.register("sidebar", "first.html", {"label": "a"})
        second = self.registry.register("sidebar", "second.html")

        self.assertEqual(first, SlotHandle("sidebar", 0))
        self.assertEqual(second, SlotHandle("sidebar", 1))

    def test_render_joins_entries_in_registration_order(self) -> None:
        self.registry.register("sidebar", "second.html", {"label": "x"})
        self.registry.register("sidebar", "first.html", {"label": "y"})

        self.assertEqual(self.registry.render("sidebar"), "<p>second x</p>\n<p>first y</p>")

    def test_each_entry_renders_against_its_own_data(self) -> None:
        self.registry.register("sidebar", "first.html", {"label": "one"})
        self.registry.register("sidebar", "first.html")

        self.assertEqual(self.registry.render("sidebar"), "<p>first one</p>\n<p>first </p>")

    def test_unknown_slot_renders_empty(self) -> None:
        self.assertEqual(self.registry.render("footer"), "")
        self.assertEqual(async_to_sync(self.registry.arender)("footer"), "")

    def test_arender_keeps_registration_order(self) -> None:
        for index in range(5):
            self.registry.register("sidebar", "first.html" if index % 2 else "second.html", {"label": index})

        rendered = async_to_sync(self.registry.arender)("sidebar")

        self.assertEqual(rendered, self.registry.render("sidebar"))
        self.assertTrue(rendered.startswith("<p>second 0</p>\n<p>first 1</p>"))

    def test_registered_data_is_copied(self) -> None:
        data = {"label": "before"}
        self.registry.register("sidebar", "first.html", data)
        data["label"] = "after"

        self.assertEqual(self.registry.render("sidebar"), "<p>first before</p>")


class AppRegistryTests(SimpleTestCase):
    def test_pages_app_registers_sidebar_at_startup(self) -> None:
        registry = apps.get_app_config("pages").slots

        templates = [entry.template for entry in registry.entries("sidebar")]
        self.assertIn("pages/partials/sidebar_info.html", templates)
