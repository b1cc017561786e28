from django.apps import AppConfig, apps  # type: ignore


class PagesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.pages"
    verbose_name = "Halaman"

    def ready(self) -> None:
        from . import sidebar
        from .slots import SlotRegistry

        self.slots = SlotRegistry()
        sidebar.register(self.slots)


def get_slot_registry():
    return apps.get_app_config("pages").slots
