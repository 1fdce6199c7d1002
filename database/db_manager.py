"""
File: database/db_manager.py
Location: res_range_bot/database/db_manager.py
Purpose: Universal database connection manager (PostgreSQL/SQLite)
"""

import os
import sqlite3
import psycopg2
import psycopg2.extras
from contextlib import contextmanager
import logging

from config.settings import SQLITE_PATH

logger = logging.getLogger(__name__)

class DatabaseManager:
    """
    Universal database connection manager
    Automatically detects and handles PostgreSQL or SQLite

    Features:
    - Context manager for safe connections
    - Auto-detection of database type
    - Table initialization
    - Dictionary-like row access for both databases
    """

    def __init__(self, db_path=SQLITE_PATH, db_url=None):
        self.db_path = db_path
        self.db_url = db_url if db_url is not None else os.environ.get('DATABASE_URL')

    @contextmanager
    def get_db(self):
        """
        Context manager for database connections
        Automatically detects PostgreSQL or SQLite
        Returns rows as dictionary-like objects
        """
        if self.db_url:
            # PostgreSQL connection with RealDictCursor
            if self.db_url.startswith('postgres://'):
                self.db_url = self.db_url.replace('postgres://', 'postgresql://', 1)

            conn = psycopg2.connect(
                self.db_url,
                connect_timeout=10,
                cursor_factory=psycopg2.extras.RealDictCursor
            )
            conn.autocommit = False
            try:
                yield conn
            finally:
                conn.close()
        else:
            # SQLite connection with Row factory
            conn = sqlite3.connect(self.db_path)
            conn.row_factory = sqlite3.Row
            try:
                yield conn
            finally:
                conn.close()

    def is_postgres(self):
        """Check if using PostgreSQL (True) or SQLite (False)"""
        return bool(self.db_url)

    def init_database(self):
        """
        Initialize the res table
        Column names follow the board's export format
        """
        with self.get_db() as conn:
            c = conn.cursor()
            is_pg = self.is_postgres()

            # "no" is quoted: it is a keyword in SQLite
            c.execute('''
                CREATE TABLE IF NOT EXISTS res (
                    "no" INTEGER PRIMARY KEY,
                    name_and_trip TEXT NOT NULL DEFAULT '',
                    datetime TIMESTAMP,
                    datetime_text TEXT NOT NULL DEFAULT '',
                    id TEXT NOT NULL DEFAULT '',
                    main_text TEXT NOT NULL DEFAULT '',
                    main_text_html TEXT NOT NULL DEFAULT '',
                    oekaki_id INTEGER
                )
            ''')

            c.execute('CREATE INDEX IF NOT EXISTS idx_res_datetime ON res(datetime)')

            conn.commit()
            logger.info(f"✅ Database initialized ({'PostgreSQL' if is_pg else 'SQLite'})")
