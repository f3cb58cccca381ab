"""Notes board: input form, search box, note cards and the notice slot."""

from __future__ import annotations

import streamlit as st

from notes_app.app import CONFIRM_DELETE_PROMPT, NotesApp
from notes_app.render import card_to_html, escape_html, view_to_html

_POLL_INTERVAL = 0.1  # seconds between timer checks while timers are pending

_CSS = """
<style>
.note {
    padding: 4px 2px;
    transition: opacity 0.3s ease-out, transform 0.3s ease-out;
}
.note.removing {
    opacity: 0;
    transform: scale(0.95);
}
.note-content {
    white-space: pre-wrap;
    word-wrap: break-word;
    line-height: 1.5;
    margin-bottom: 8px;
}
.note-date {
    color: #888;
    font-size: 0.85em;
}
.empty-state {
    text-align: center;
    color: #888;
    padding: 32px 0;
}
.message {
    position: fixed;
    top: 20px;
    right: 20px;
    padding: 12px 20px;
    border-radius: 8px;
    color: white;
    font-weight: 600;
    z-index: 1000;
    animation: slideInRight 0.3s ease-out;
    box-shadow: 0 4px 12px rgba(0,0,0,0.15);
}
.message.leaving {
    animation: slideOutRight 0.3s ease-out forwards;
}
.message-success { background: #2ed573; }
.message-error { background: #ff4757; }
.message-info { background: #5352ed; }
@keyframes slideInRight {
    from { opacity: 0; transform: translateX(100px); }
    to { opacity: 1; transform: translateX(0); }
}
@keyframes slideOutRight {
    from { opacity: 1; transform: translateX(0); }
    to { opacity: 0; transform: translateX(100px); }
}
</style>
"""


# ---------------------------------------------------------------------------
# Widget callbacks (run before the script reruns)
# ---------------------------------------------------------------------------


def _on_add(app: NotesApp) -> None:
    if app.create(st.session_state.note_input) is not None:
        st.session_state.note_input = ""
        # create() shows the full list again
        st.session_state.search_query = ""


def _on_search(app: NotesApp) -> None:
    app.search(st.session_state.search_query)


def _request_delete(note_id: str) -> None:
    st.session_state.pending_delete = note_id


def _resolve_delete(app: NotesApp, note_id: str, confirmed: bool) -> None:
    app.delete(note_id, confirm=lambda _prompt: confirmed)
    st.session_state.delete_resolved = True


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


@st.dialog("Delete note")
def _confirm_delete(app: NotesApp, note_id: str) -> None:
    """Modal yes/no gate in front of NotesApp.delete."""
    st.write(CONFIRM_DELETE_PROMPT)
    col_yes, col_no = st.columns(2)
    with col_yes:
        st.button(
            "Yes, delete",
            key="confirm_delete_yes",
            type="primary",
            use_container_width=True,
            on_click=_resolve_delete,
            args=(app, note_id, True),
        )
    with col_no:
        st.button(
            "Cancel",
            key="confirm_delete_no",
            use_container_width=True,
            on_click=_resolve_delete,
            args=(app, note_id, False),
        )
    # Close the dialog once either button has been handled
    if st.session_state.pop("delete_resolved", False):
        st.rerun()


def _render_input(app: NotesApp) -> None:
    """Text area plus Add button. Ctrl/Cmd+Enter submits the form too."""
    with st.form("add_note", border=False):
        st.text_area(
            "New note",
            key="note_input",
            placeholder="Write your note here... (Ctrl+Enter to add)",
            height=120,
        )
        st.form_submit_button(
            "➕ Add Note", type="primary", on_click=_on_add, args=(app,)
        )


def _render_notes(app: NotesApp) -> None:
    view = app.view
    if view.is_empty:
        st.html(view_to_html(view))
        return

    for card in view.cards:
        with st.container(border=True):
            st.html(card_to_html(card))
            st.button(
                "🗑️ Delete",
                key=f"delete_{card.note_id}",
                on_click=_request_delete,
                args=(card.note_id,),
                disabled=card.removing,
            )


def _render_notice(app: NotesApp) -> None:
    notice = app.notifier.current
    if notice is None:
        return
    classes = f"message message-{notice.kind}"
    if notice.leaving:
        classes += " leaving"
    st.html(f'<div class="{classes}">{escape_html(notice.message)}</div>')


@st.fragment(run_every=_POLL_INTERVAL)
def _poll_timers(app: NotesApp) -> None:
    """Rerun the page once the next timer is due."""
    wait = app.scheduler.next_due_in()
    if wait is not None and wait <= 0:
        st.rerun()


def render(app: NotesApp) -> None:
    """Render the notes board."""
    app.scheduler.run_due()

    # The search box follows the view: a full render clears the active query
    if not app.query and st.session_state.get("search_query"):
        st.session_state.search_query = ""
    st.session_state.pop("delete_resolved", None)

    st.html(_CSS)
    st.title("📝 Notes")

    _render_input(app)

    col_search, col_export = st.columns([3, 1], vertical_alignment="bottom")
    with col_search:
        st.text_input(
            "Search notes",
            key="search_query",
            placeholder="Type and press Enter to filter",
            on_change=_on_search,
            args=(app,),
        )
    with col_export:
        st.download_button(
            "⬇️ Export",
            data=app.export(),
            file_name="notes.json",
            mime="application/json",
            use_container_width=True,
        )

    st.caption(f"{app.count} notes")
    _render_notes(app)
    _render_notice(app)

    note_id = st.session_state.pop("pending_delete", None)
    if note_id is not None:
        _confirm_delete(app, note_id)

    if app.scheduler.pending:
        _poll_timers(app)
