"""
Noteful Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── app:             FastAPI app bound to a fresh on-disk SQLite database
    ├── client:          HTTPX AsyncClient talking to `app` over ASGI
    ├── db_session:      AsyncSession on the same database, for seeding/inspection
    ├── mock_db_session: AsyncMock session for service unit tests (no DB)
    └── folders_in_db / notes_in_db: seeded rows from the fixture arrays
"""

import os
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

# Override settings for testing BEFORE any noteful imports
# Why: the module-level app in noteful.main builds an engine from DATABASE_URL
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./noteful_test.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["API_PREFIX"] = "/api"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from noteful.database import create_tables, dispose_engine  # noqa: E402
from noteful.main import create_app  # noqa: E402
from noteful.models.folder import Folder  # noqa: E402
from noteful.models.note import Note  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Fixture data
# ══════════════════════════════════════════════════════════════════════════

def make_folders_array():
    return [
        {"id": "b07161a6-ffaf-11e8-8eb2-f2801f1b9fd1", "name": "Important"},
        {"id": "b0715efe-ffaf-11e8-8eb2-f2801f1b9fd1", "name": "Super"},
        {"id": "b07162f0-ffaf-11e8-8eb2-f2801f1b9fd1", "name": "Spangley"},
    ]


def make_notes_array():
    return [
        {
            "id": "cbc787a0-ffaf-11e8-8eb2-f2801f1b9fd1",
            "name": "Dogs",
            "content": "Corporis accusamus placeat quas non voluptas.",
            "folderId": "b0715efe-ffaf-11e8-8eb2-f2801f1b9fd1",
        },
        {
            "id": "d26e0034-ffaf-11e8-8eb2-f2801f1b9fd1",
            "name": "Cats",
            "content": "Eos laudantium quia ab blanditiis temporibus.",
            "folderId": "b07161a6-ffaf-11e8-8eb2-f2801f1b9fd1",
        },
        {
            "id": "d26e01a6-ffaf-11e8-8eb2-f2801f1b9fd1",
            "name": "Pigs",
            "content": "Occaecati dignissimos quam qui facere deserunt.",
            "folderId": "b07162f0-ffaf-11e8-8eb2-f2801f1b9fd1",
        },
    ]


def make_malicious_folder():
    malicious = {
        "id": "911c47a4-0d1e-4fbb-9a0e-4d3b3c6a1f52",
        "name": 'Naughty naughty very naughty <script>alert("xss");</script>',
    }
    expected = {
        "id": malicious["id"],
        "name": 'Naughty naughty very naughty &lt;script&gt;alert("xss");&lt;/script&gt;',
    }
    return malicious, expected


def folder_row(data: dict) -> Folder:
    return Folder(id=UUID(data["id"]), name=data["name"])


def note_row(data: dict) -> Note:
    return Note(
        id=UUID(data["id"]),
        name=data["name"],
        content=data["content"],
        folder_id=UUID(data["folderId"]),
        modified=datetime(2019, 1, 3, tzinfo=timezone.utc),
    )


# ══════════════════════════════════════════════════════════════════════════
# Application and database fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def app(tmp_path):
    """
    A fresh app per test, with its own SQLite file and schema.

    The lifespan is not run by ASGITransport, so tables are created here.
    """
    application = create_app(database_url=f"sqlite+aiosqlite:///{tmp_path / 'noteful.db'}")
    await create_tables(application.state.engine)
    yield application
    await dispose_engine(application.state.engine)


@pytest_asyncio.fixture
async def client(app):
    """
    HTTPX AsyncClient routed straight into the app (no server).

    Usage:
        async def test_list(client):
            response = await client.get("/api/folders")
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client


@pytest_asyncio.fixture
async def db_session(app):
    """Direct session on the test database for seeding and row counts."""
    async with app.state.session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def folders_in_db(db_session):
    folders = make_folders_array()
    db_session.add_all([folder_row(f) for f in folders])
    await db_session.commit()
    return folders


@pytest_asyncio.fixture
async def notes_in_db(db_session, folders_in_db):
    notes = make_notes_array()
    db_session.add_all([note_row(n) for n in notes])
    await db_session.commit()
    return notes


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = row
            result = await FolderService(mock_db_session).get_by_id(row_id)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.refresh = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session
