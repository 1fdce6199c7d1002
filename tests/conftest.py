"""Shared pytest fixtures for res_range_bot tests."""

from datetime import datetime

import pytest

from database.db_manager import DatabaseManager
from database.res_db import ResDB

SEEDED_RANGE = range(120, 131)
OEKAKI_POST = 124


@pytest.fixture
def db_manager(tmp_path, monkeypatch):
    """SQLite DatabaseManager on a temp file, tables created."""
    monkeypatch.delenv('DATABASE_URL', raising=False)
    manager = DatabaseManager(db_path=str(tmp_path / 'res.db'), db_url='')
    manager.init_database()
    return manager


@pytest.fixture
def res_db(db_manager):
    """Empty ResDB."""
    return ResDB(db_manager)


@pytest.fixture
def seeded_res_db(res_db):
    """ResDB holding posts 120..130; post 124 carries a drawing."""
    for no in SEEDED_RANGE:
        res_db.add_res(
            no,
            name_and_trip='Anon',
            datetime_value=datetime(2024, 1, 1, 3, 0, no - 100),
            datetime_text=f'2024/01/01(Mon) 12:00:{no - 100:02d}',
            poster_id=f'ID{no}',
            main_text=f'body {no}',
            main_text_html=f'<p>body {no}</p>',
            oekaki_id=7 if no == OEKAKI_POST else None
        )
    return res_db
