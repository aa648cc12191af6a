"""
Noteful Backend — Request DTO Tests
=====================================

What we test:
    ✅ First missing field is reported in declaration order, by wire name
    ✅ Whitespace-only strings count as missing
    ✅ supplied_fields() keeps only non-blank fields, keyed by storage name
    ✅ Unknown fields are dropped
    ✅ Response DTOs sanitize text and use camelCase on the wire
"""

import uuid
from datetime import datetime, timezone

from noteful.exceptions import ValidationError
from noteful.models.folder import Folder
from noteful.models.note import Note
from noteful.schemas.folder import FolderCreate, FolderResponse, FolderUpdate
from noteful.schemas.note import NoteCreate, NoteResponse, NoteUpdate


class TestCreateValidation:

    def test_folder_missing_name(self):
        assert FolderCreate().first_missing_field() == "name"
        assert FolderCreate(name="   ").first_missing_field() == "name"
        assert FolderCreate(name="Work").first_missing_field() is None

    def test_note_reports_first_missing_in_order(self):
        body = NoteCreate.model_validate({"content": "", "folderId": None})
        assert body.first_missing_field() == "name"

        body = NoteCreate.model_validate({"name": "n", "content": " "})
        assert body.first_missing_field() == "content"

        body = NoteCreate.model_validate({"name": "n", "content": "c"})
        assert body.first_missing_field() == "folderId"

    def test_note_complete(self):
        body = NoteCreate.model_validate({"name": "n", "content": "c", "folderId": "x"})
        assert body.first_missing_field() is None


class TestUpdateFields:

    def test_supplied_fields_use_storage_names(self):
        body = NoteUpdate.model_validate({"content": "new", "folderId": "abc"})
        assert body.supplied_fields() == {"content": "new", "folder_id": "abc"}

    def test_blank_and_unknown_fields_dropped(self):
        body = NoteUpdate.model_validate({"name": "  ", "fieldToIgnore": "x"})
        assert body.supplied_fields() == {}
        assert not hasattr(body, "fieldToIgnore")

    def test_folder_update_ignores_extras(self):
        body = FolderUpdate.model_validate({"name": "Renamed", "id": "nope"})
        assert body.supplied_fields() == {"name": "Renamed"}

    def test_wire_fields(self):
        assert NoteUpdate.wire_fields() == ["name", "content", "folderId"]
        assert FolderUpdate.wire_fields() == ["name"]


class TestValidationMessages:

    def test_missing_field_message(self):
        assert ValidationError.missing_field("folderId").message == "Missing 'folderId' in request body"

    def test_empty_update_single_field(self):
        assert ValidationError.empty_update(["name"]).message == "Request body must contain 'name'"

    def test_empty_update_many_fields(self):
        exc = ValidationError.empty_update(["name", "content", "folderId"])
        assert exc.message == "Request body must contain either 'name', 'content', or 'folderId'"


class TestResponses:

    def test_folder_response_sanitizes(self):
        folder = Folder(id=uuid.uuid4(), name="<b>Hi</b><script>x</script>")
        assert FolderResponse.from_model(folder).name == "<b>Hi</b>&lt;script&gt;x&lt;/script&gt;"

    def test_note_response_wire_shape(self):
        folder_id = uuid.uuid4()
        note = Note(
            id=uuid.uuid4(),
            name="<i>n</i>",
            content="a <script>x</script>",
            folder_id=folder_id,
            modified=datetime(2024, 1, 15, tzinfo=timezone.utc),
        )
        data = NoteResponse.from_model(note).model_dump(mode="json", by_alias=True)
        assert set(data) == {"id", "name", "content", "modified", "folderId"}
        assert data["folderId"] == str(folder_id)
        assert data["name"] == "<i>n</i>"
        assert data["content"] == "a &lt;script&gt;x&lt;/script&gt;"
