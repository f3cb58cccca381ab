"""View model and HTML markup for the note list region.

Note content is always escaped here; nothing downstream may treat it as markup.
"""

from __future__ import annotations

import html
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from notes_app.models import Note

EMPTY_MESSAGE = "No notes yet. Add your first note above!"
NO_MATCHES_MESSAGE = "No notes found matching your search."


def escape_html(text: str) -> str:
    """Neutralise ``& < > " '`` so text renders literally."""
    return html.escape(text, quote=True)


@dataclass(frozen=True)
class NoteCard:
    """One rendered note."""

    note_id: str
    content_html: str
    display_date: str
    removing: bool = False


@dataclass(frozen=True)
class ListView:
    """The whole list region: either cards or an empty-state message."""

    cards: tuple[NoteCard, ...] = ()
    empty_message: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.cards


def build_view(
    notes: Iterable[Note],
    empty_message: str = EMPTY_MESSAGE,
    display_date: Callable[[Note], str] = lambda n: n.display_date,
    removing: frozenset[str] = frozenset(),
) -> ListView:
    """Build a fresh view of ``notes`` in the given order."""
    cards = tuple(
        NoteCard(
            note_id=note.id,
            content_html=escape_html(note.content),
            display_date=escape_html(display_date(note)),
            removing=note.id in removing,
        )
        for note in notes
    )
    if not cards:
        return ListView(empty_message=empty_message)
    return ListView(cards=cards)


def card_to_html(card: NoteCard) -> str:
    """Markup for one card, without its delete control."""
    classes = "note removing" if card.removing else "note"
    return (
        f'<div class="{classes}" data-note-id="{escape_html(card.note_id)}">'
        f'<div class="note-content">{card.content_html}</div>'
        f'<div class="note-footer"><span class="note-date">{card.display_date}</span></div>'
        "</div>"
    )


def view_to_html(view: ListView) -> str:
    """Markup for the whole list region."""
    if view.is_empty:
        return (
            '<div class="empty-state">'
            f"<p>{escape_html(view.empty_message or EMPTY_MESSAGE)}</p>"
            "</div>"
        )
    return "\n".join(card_to_html(card) for card in view.cards)
