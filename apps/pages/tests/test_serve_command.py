from __future__ import annotations

from io import StringIO
from unittest import mock

from django.core.management import call_command
from django.test import SimpleTestCase, override_settings


class ServeCommandTests(SimpleTestCase):
    @override_settings(PORT=4321)
    def test_runs_server_on_all_interfaces_at_configured_port(self) -> None:
        with mock.patch("apps.pages.management.commands.serve.call_command") as runserver:
            call_command("serve", "--noreload", stdout=StringIO())

        runserver.assert_called_once_with("runserver", "0.0.0.0:4321", use_reloader=False)
