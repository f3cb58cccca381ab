"""The note store and renderer.

Holds the in-memory list of notes (newest first), mirrors it to a key-value
storage slot after every mutation, and rebuilds the list view on demand.
The visual surface reads ``view`` and ``notifier.current`` and forwards user
commands to :meth:`NotesApp.create`, :meth:`NotesApp.delete` and
:meth:`NotesApp.search`.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from datetime import UTC, datetime

from pydantic import ValidationError

from notes_app.config import Settings, settings as default_settings
from notes_app.models import Note, NoteList, generate_id
from notes_app.notices import Notifier
from notes_app.render import (
    EMPTY_MESSAGE,
    NO_MATCHES_MESSAGE,
    ListView,
    build_view,
)
from notes_app.scheduler import Scheduler
from notes_app.storage import KeyValueStorage, StorageError

logger = logging.getLogger(__name__)

CONFIRM_DELETE_PROMPT = "Are you sure you want to delete this note?"

MSG_EMPTY_INPUT = "Please enter a note before adding!"
MSG_ADDED = "Note added successfully!"
MSG_DELETED = "Note deleted successfully!"
MSG_SAVE_FAILED = "Error saving notes. Storage might be full."


def _decline(prompt: str) -> bool:
    return False


class NotesApp:
    """Owns all note state for one user session."""

    def __init__(
        self,
        storage: KeyValueStorage,
        settings: Settings | None = None,
        scheduler: Scheduler | None = None,
        confirm: Callable[[str], bool] = _decline,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        self._storage = storage
        self._settings = settings or default_settings
        self.scheduler = scheduler or Scheduler()
        self.notifier = Notifier(
            self.scheduler,
            duration=self._settings.notice_duration,
            exit_duration=self._settings.notice_exit_duration,
        )
        self._confirm = confirm
        self._clock = clock
        self.notes: list[Note] = []
        self.view = ListView(empty_message=EMPTY_MESSAGE)
        self.query = ""
        self._removing: set[str] = set()

    def start(self) -> None:
        """Load persisted notes and draw the full list."""
        self.load()
        self.render()
        logger.info("Notes app started with %d existing notes", self.count)

    @property
    def count(self) -> int:
        """Number of notes in memory."""
        return len(self.notes)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, content: str) -> Note | None:
        """Add a note from raw input. Returns None if the input is blank.

        On success the caller should clear its input field.
        """
        text = content.strip()
        if not text:
            self.notifier.show(MSG_EMPTY_INPUT, "error")
            return None

        note = Note.new(
            text,
            note_id=generate_id({n.id for n in self.notes}),
            now=self._clock(),
        )
        self.notes.insert(0, note)
        logger.info("Created note %s (%d chars)", note.id, len(text))

        self.persist()
        self.render()
        self.notifier.show(MSG_ADDED, "success")
        return note

    def delete(
        self, note_id: str, confirm: Callable[[str], bool] | None = None
    ) -> None:
        """Delete a note after the user confirms.

        The card is flagged as removing right away; the note itself is removed
        ``delete_animation_delay`` seconds later. Unknown ids are ignored.
        """
        ask = confirm or self._confirm
        if not ask(CONFIRM_DELETE_PROMPT):
            logger.debug("Delete of %s declined", note_id)
            return
        if not any(n.id == note_id for n in self.notes):
            return

        self._removing.add(note_id)
        self.view = dataclasses.replace(
            self.view,
            cards=tuple(
                dataclasses.replace(card, removing=True)
                if card.note_id == note_id
                else card
                for card in self.view.cards
            ),
        )
        self.scheduler.call_later(
            self._settings.delete_animation_delay, self._remove, note_id
        )

    def _remove(self, note_id: str) -> None:
        self._removing.discard(note_id)
        remaining = [n for n in self.notes if n.id != note_id]
        if len(remaining) == len(self.notes):
            return
        self.notes = remaining
        logger.info("Deleted note %s", note_id)

        self.persist()
        self.render()
        self.notifier.show(MSG_DELETED, "success")

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def _display_date(self, note: Note) -> str:
        if self._settings.rederive_display_date:
            return note.display_date
        return note.date_created

    def render(self) -> None:
        """Replace the view with the full, unfiltered list."""
        self.query = ""
        self.view = build_view(
            self.notes,
            empty_message=EMPTY_MESSAGE,
            display_date=self._display_date,
            removing=frozenset(self._removing),
        )

    def search(self, query: str) -> None:
        """Show only notes containing ``query`` (case-insensitive).

        A blank query shows the full list. Otherwise the query is matched as
        typed, surrounding spaces included. Never touches the note list or
        storage.
        """
        if not query.strip():
            self.render()
            return

        needle = query.lower()
        matches = [n for n in self.notes if needle in n.content.lower()]
        self.query = query
        self.view = build_view(
            matches,
            empty_message=NO_MATCHES_MESSAGE,
            display_date=self._display_date,
            removing=frozenset(self._removing),
        )

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def export(self) -> str:
        """The notes as the JSON text written to storage."""
        return NoteList(self.notes).dump()

    def persist(self) -> bool:
        """Overwrite the storage slot with every note. Returns False on failure.

        A failed write leaves the in-memory notes as they are.
        """
        try:
            self._storage.set_item(self._settings.storage_key, self.export())
        except StorageError as e:
            logger.error("Error saving notes to storage: %s", e)
            self.notifier.show(MSG_SAVE_FAILED, "error")
            return False
        return True

    def load(self) -> None:
        """Replace the in-memory notes with the stored ones, or empty on failure."""
        try:
            raw = self._storage.get_item(self._settings.storage_key)
            if raw is None:
                logger.info("No stored notes under %r", self._settings.storage_key)
                self.notes = []
                return
            notes = NoteList.model_validate_json(raw).root
        except (StorageError, ValidationError) as e:
            logger.error("Error loading notes from storage: %s", e)
            self.notes = []
            return

        seen: set[str] = set()
        self.notes = []
        for note in notes:
            if note.id in seen:
                logger.warning("Dropping stored note with duplicate id %s", note.id)
                continue
            seen.add(note.id)
            self.notes.append(note)
        logger.info("Loaded %d notes", len(self.notes))
