"""Notes — Streamlit interface.

Run with:
    streamlit run ui/app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure the project root is on sys.path so `ui.*` and `notes_app.*` imports
# resolve regardless of the working directory Streamlit uses.
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import streamlit as st  # noqa: E402

st.set_page_config(
    page_title="Notes",
    page_icon="📝",
    layout="centered",
)

from notes_app.app import NotesApp  # noqa: E402
from notes_app.config import settings  # noqa: E402
from notes_app.storage import JsonFileStorage  # noqa: E402
from ui.components import board  # noqa: E402

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)
logger = logging.getLogger("notes_ui")


def _ensure_session() -> NotesApp:
    """Build the session's NotesApp once and keep it in session state."""
    if "notes_app" not in st.session_state:
        storage = JsonFileStorage(
            settings.storage_path, quota_bytes=settings.storage_quota_bytes
        )
        app = NotesApp(storage, settings)
        app.start()
        logger.info("Session started, storage at %s", storage.path)
        st.session_state.notes_app = app
    return st.session_state.notes_app


board.render(_ensure_session())
