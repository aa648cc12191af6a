"""
Noteful Backend — Service Unit Tests
======================================

What:  Tests for the data-access services with a mock AsyncSession.
Why:   Verifies each operation issues one statement and commits writes,
       without needing a database.

What we test:
    ✅ get_by_id returns None for missing rows (never raises)
    ✅ list_all returns every row
    ✅ insert adds, commits and refreshes the row
    ✅ update/delete commit and return nothing
    ✅ store errors propagate unchanged
"""

import uuid
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from noteful.models.folder import Folder
from noteful.models.note import Note
from noteful.services.folder_service import FolderService
from noteful.services.note_service import NoteService


class TestGetById:

    @pytest.mark.asyncio
    async def test_found(self, mock_db_session):
        folder = Folder(id=uuid.uuid4(), name="Work")
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = folder
        mock_db_session.execute.return_value = mock_result

        result = await FolderService(mock_db_session).get_by_id(folder.id)

        assert result is folder

    @pytest.mark.asyncio
    async def test_not_found_returns_none(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = None
        mock_db_session.execute.return_value = mock_result

        assert await NoteService(mock_db_session).get_by_id(uuid.uuid4()) is None


class TestListAll:

    @pytest.mark.asyncio
    async def test_empty(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = []
        mock_db_session.execute.return_value = mock_result

        assert await FolderService(mock_db_session).list_all() == []

    @pytest.mark.asyncio
    async def test_returns_rows(self, mock_db_session):
        rows = [Folder(id=uuid.uuid4(), name=f"Folder {i}") for i in range(3)]
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = rows
        mock_db_session.execute.return_value = mock_result

        result = await FolderService(mock_db_session).list_all()

        assert [f.name for f in result] == ["Folder 0", "Folder 1", "Folder 2"]


class TestWrites:

    @pytest.mark.asyncio
    async def test_insert_commits_and_refreshes(self, mock_db_session):
        folder_id = uuid.uuid4()
        note = await NoteService(mock_db_session).insert(
            {"name": "n", "content": "c", "folder_id": folder_id}
        )

        assert isinstance(note, Note)
        assert note.folder_id == folder_id
        mock_db_session.add.assert_called_once_with(note)
        mock_db_session.commit.assert_awaited_once()
        mock_db_session.refresh.assert_awaited_once_with(note)

    @pytest.mark.asyncio
    async def test_update_commits(self, mock_db_session):
        result = await FolderService(mock_db_session).update(uuid.uuid4(), {"name": "New"})

        assert result is None
        mock_db_session.execute.assert_awaited_once()
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_commits(self, mock_db_session):
        result = await NoteService(mock_db_session).delete(uuid.uuid4())

        assert result is None
        mock_db_session.execute.assert_awaited_once()
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_store_error_propagates(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("DELETE", {}, Exception("gone"))

        with pytest.raises(OperationalError):
            await FolderService(mock_db_session).delete(uuid.uuid4())
        mock_db_session.commit.assert_not_awaited()


def test_resource_name():
    assert FolderService(MagicMock()).resource_name == "Folder"
    assert NoteService(MagicMock()).resource_name == "Note"
