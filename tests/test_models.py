"""Unit tests for notes_app.models — notes, ids and the stored format."""

from __future__ import annotations

import json
from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from notes_app.models import Note, NoteList, format_display_date, generate_id


class TestGenerateId:
    def test_short_lowercase_base36(self) -> None:
        note_id = generate_id()
        assert note_id
        assert set(note_id) <= set("0123456789abcdefghijklmnopqrstuvwxyz")

    def test_unique_across_many_calls(self) -> None:
        ids = {generate_id() for _ in range(1000)}
        assert len(ids) == 1000

    def test_avoids_existing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        values = iter([5, 5, 6])
        monkeypatch.setattr("notes_app.models.secrets.randbits", lambda _: next(values))
        monkeypatch.setattr("notes_app.models.time.time", lambda: 0.0)
        assert generate_id() == "05"
        assert generate_id(existing={"05"}) == "06"


class TestFormatDisplayDate:
    def test_en_us_style(self) -> None:
        dt = datetime(2026, 10, 5, 14, 7).astimezone()
        assert format_display_date(dt) == "Oct 5, 2026, 02:07 PM"


class TestNoteModel:
    def test_new_note(self) -> None:
        now = datetime(2026, 10, 19, 9, 0, tzinfo=UTC)
        note = Note.new("Hello", note_id="abc", now=now)
        assert note.id == "abc"
        assert note.content == "Hello"
        assert note.timestamp == now
        assert note.date_created == format_display_date(now)
        assert note.display_date == note.date_created

    def test_empty_content_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Note.new("", note_id="abc")

    def test_frozen(self) -> None:
        note = Note.new("Hello", note_id="abc")
        with pytest.raises(ValidationError):
            note.content = "changed"

    def test_content_kept_verbatim(self) -> None:
        note = Note.new("<b>5 > 3 & 'quoted'</b>", note_id="abc")
        assert note.content == "<b>5 > 3 & 'quoted'</b>"


class TestNoteList:
    def test_dump_field_names(self) -> None:
        now = datetime(2026, 10, 19, 9, 0, tzinfo=UTC)
        raw = NoteList([Note.new("Hello", note_id="abc", now=now)]).dump()
        data = json.loads(raw)
        assert isinstance(data, list)
        assert set(data[0]) == {"id", "content", "timestamp", "dateCreated"}
        assert data[0]["timestamp"].startswith("2026-10-19T09:00:00")

    def test_loads_browser_snapshot(self) -> None:
        raw = json.dumps(
            [
                {
                    "id": "lq2k9x0abc",
                    "content": "World",
                    "timestamp": "2026-10-19T09:01:00.000Z",
                    "dateCreated": "Oct 19, 2026, 09:01 AM",
                },
                {
                    "id": "lq2k8z1def",
                    "content": "Hello",
                    "timestamp": "2026-10-19T09:00:00.000Z",
                    "dateCreated": "Oct 19, 2026, 09:00 AM",
                },
            ]
        )
        notes = NoteList.model_validate_json(raw).root
        assert [n.content for n in notes] == ["World", "Hello"]
        assert notes[0].timestamp == datetime(2026, 10, 19, 9, 1, tzinfo=UTC)
        assert notes[1].date_created == "Oct 19, 2026, 09:00 AM"

    def test_malformed_snapshot(self) -> None:
        with pytest.raises(ValidationError):
            NoteList.model_validate_json("{not json")
        with pytest.raises(ValidationError):
            NoteList.model_validate_json('[{"id": "x"}]')
