"""Seed a notes storage file with realistic notes for screenshots.

Notes are added through NotesApp.create, oldest first, so the stored list
ends up newest first like a real session.

Usage:
    python scripts/seed_data.py [--storage-path notes_storage.json] [--reset]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from notes_app.app import NotesApp  # noqa: E402
from notes_app.config import settings  # noqa: E402
from notes_app.storage import JsonFileStorage  # noqa: E402

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)
logger = logging.getLogger("seed_data")

NOTES: list[str] = [
    "Buy milk, eggs and bread on the way home",
    "Call mom about the weekend plans",
    "Project ideas:\n- offline notes app\n- habit tracker with streaks",
    "Dentist appointment moved to Thursday 10:30",
    "Book recommendations: The Pragmatic Programmer, Designing Data-Intensive Applications",
    "Remember: <script> tags in notes must show up as plain text",
]


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the notes storage file")
    parser.add_argument(
        "--storage-path",
        type=Path,
        default=settings.storage_path,
        help=f"Storage file (default: {settings.storage_path})",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop existing notes before seeding",
    )
    args = parser.parse_args()

    storage = JsonFileStorage(args.storage_path, quota_bytes=settings.storage_quota_bytes)
    if args.reset:
        storage.remove_item(settings.storage_key)

    app = NotesApp(storage, settings)
    app.start()

    print()
    print(f"  Seeding {len(NOTES)} notes into {args.storage_path}")
    print("  " + "=" * 58)
    for i, content in enumerate(NOTES, 1):
        note = app.create(content)
        preview = content[:60].replace("\n", " ")
        print(f"  [{i}/{len(NOTES)}] {note.id if note else 'REJECTED':<20} {preview}")

    print("  " + "=" * 58)
    print(f"  Done! Storage now holds {app.count} notes.")
    print("  Start the UI with: streamlit run ui/app.py")
    print()


if __name__ == "__main__":
    main()
