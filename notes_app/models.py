"""Pydantic models for notes and their serialized snapshot."""

from __future__ import annotations

import secrets
import time
from collections.abc import Container
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, RootModel

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_id(existing: Container[str] = ()) -> str:
    """Return a short opaque id: base-36 milliseconds plus a random suffix.

    Regenerates until the id is not in ``existing``.
    """
    while True:
        note_id = _to_base36(int(time.time() * 1000)) + _to_base36(
            secrets.randbits(52)
        )
        if note_id not in existing:
            return note_id


def format_display_date(dt: datetime) -> str:
    """Format a timestamp like ``Oct 5, 2026, 02:30 PM`` in local time."""
    local = dt.astimezone()
    return f"{local:%b} {local.day}, {local:%Y, %I:%M %p}"


class Note(BaseModel):
    """A single immutable note."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1, description="Opaque unique identifier")
    content: str = Field(..., min_length=1, description="Note text, stored verbatim")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Creation time",
    )
    date_created: str = Field(
        ...,
        alias="dateCreated",
        description="Display string cached at creation time",
    )

    @classmethod
    def new(cls, content: str, note_id: str, now: datetime | None = None) -> Note:
        """Build a note stamped with ``now`` and its formatted display date."""
        now = now or datetime.now(UTC)
        return cls(
            id=note_id,
            content=content,
            timestamp=now,
            date_created=format_display_date(now),
        )

    @property
    def display_date(self) -> str:
        """Display date re-derived from ``timestamp``."""
        return format_display_date(self.timestamp)


class NoteList(RootModel[list[Note]]):
    """The persisted snapshot: every note, newest first."""

    root: list[Note] = Field(default_factory=list)

    def dump(self) -> str:
        """Serialize to the JSON text stored under the notes key."""
        return self.model_dump_json(by_alias=True)
