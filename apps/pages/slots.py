"""Named template slots that feature modules plug fragments into.

A registry maps a slot name to an ordered list of ``(template, data)``
entries. Entries are registered once at startup; rendering a slot renders
every entry against its own data and joins the output in registration
order. A slot with no entries renders as an empty string.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

from asgiref.sync import sync_to_async
from django.template.loader import render_to_string
from django.utils.safestring import SafeString, mark_safe

SEPARATOR = "\n"


@dataclass(frozen=True)
class SlotEntry:
    template: str
    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SlotHandle:
    """Identifies one registration: the slot and the entry's position in it."""

    slot: str
    index: int


class SlotRegistry:
    def __init__(self) -> None:
        self._slots: dict[str, list[SlotEntry]] = {}

    def register(self, slot: str, template: str, data: dict[str, Any] | None = None) -> SlotHandle:
        entries = self._slots.setdefault(slot, [])
        entries.append(SlotEntry(template, dict(data or {})))
        return SlotHandle(slot, len(entries) - 1)

    def entries(self, slot: str) -> tuple[SlotEntry, ...]:
        return tuple(self._slots.get(slot, ()))

    def render(self, slot: str) -> SafeString:
        return mark_safe(SEPARATOR.join(render_to_string(e.template, e.data) for e in self.entries(slot)))

    async def arender(self, slot: str) -> SafeString:
        """Render all entries concurrently; output keeps registration order."""
        entries = self.entries(slot)
        if not entries:
            return mark_safe("")
        parts = await asyncio.gather(
            *(sync_to_async(render_to_string, thread_sensitive=False)(e.template, e.data) for e in entries)
        )
        return mark_safe(SEPARATOR.join(parts))
