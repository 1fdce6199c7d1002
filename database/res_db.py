"""
File: database/res_db.py
Location: res_range_bot/database/res_db.py
Purpose: All res (board post) database operations
"""

from datetime import datetime
import logging

from core.query_ranges import compact

logger = logging.getLogger(__name__)

RES_COLUMNS = [
    'no', 'name_and_trip', 'datetime', 'datetime_text',
    'id', 'main_text', 'main_text_html', 'oekaki_id'
]

class ResDB:
    """
    Res database operations
    Read side used by the bot, plus add_res() for imports and seeding

    Features:
    - Lookups grouped into BETWEEN ranges + one IN list (see core.query_ranges)
    - Consistent dict rows for PostgreSQL and SQLite
    """

    # Bound parameters per SELECT (SQLite caps variables per statement)
    MAX_PARAMS_PER_QUERY = 500

    def __init__(self, db_manager):
        self.db = db_manager

    def _ph(self):
        """Placeholder helper for PostgreSQL (%s) vs SQLite (?)"""
        return '%s' if self.db.is_postgres() else '?'

    def _fetchone_value(self, cursor, column_index=0, column_name=None):
        """
        Safely fetch a single value from fetchone() result
        Handles both dict rows (PostgreSQL RealDictCursor) and sqlite3.Row
        """
        result = cursor.fetchone()
        if not result:
            return None

        if column_name:
            try:
                return result[column_name]
            except (KeyError, IndexError, TypeError):
                pass

        try:
            return result[column_index]
        except (KeyError, IndexError, TypeError):
            if hasattr(result, 'keys'):
                return dict(result)[list(result.keys())[column_index]]
            raise

    def _row_to_dict(self, row):
        """
        Convert database row to dictionary
        SQLite returns timestamps as strings, PostgreSQL as datetime
        """
        if row is None:
            return None

        result = dict(row) if hasattr(row, 'keys') else dict(zip(RES_COLUMNS, row))

        value = result.get('datetime')
        if isinstance(value, str):
            try:
                result['datetime'] = datetime.fromisoformat(value)
            except ValueError:
                logger.warning(f"Res #{result.get('no')}: unparseable datetime {value!r}")
                result['datetime'] = None

        return result

    def _lookup_batches(self, plan):
        """
        Split a QueryPlan into (where_sql, params) batches

        Each range costs two parameters, each single one.
        """
        ph = self._ph()
        batches = []
        conditions, params = [], []

        def flush():
            if conditions:
                batches.append((' OR '.join(conditions), list(params)))
                conditions.clear()
                params.clear()

        for lo, hi in plan.ranges:
            if len(params) + 2 > self.MAX_PARAMS_PER_QUERY:
                flush()
            conditions.append(f'"no" BETWEEN {ph} AND {ph}')
            params.extend([lo, hi])

        singles = list(plan.singles)
        while singles:
            room = self.MAX_PARAMS_PER_QUERY - len(params)
            if room <= 0:
                flush()
                continue
            part, singles = singles[:room], singles[room:]
            conditions.append(f'"no" IN ({", ".join([ph] * len(part))})')
            params.extend(part)

        flush()
        return batches

    def get_max_post_number(self):
        """
        Newest post number

        Returns:
            int: MAX(no), or 0 when the table is empty
        """
        with self.db.get_db() as conn:
            c = conn.cursor()
            c.execute('SELECT MAX("no") AS max_no FROM res')
            result = self._fetchone_value(c, column_index=0, column_name='max_no')

        result = result or 0
        logger.debug(f"get_max_post_number: result = {result}")
        return result

    def get_res_by_numbers(self, numbers):
        """
        Fetch posts by number

        Args:
            numbers: Post numbers (any order, duplicates allowed)

        Returns:
            list: Post dicts ordered by number; missing numbers are skipped
        """
        if not numbers:
            logger.debug("get_res_by_numbers: empty numbers list")
            return []

        plan = compact(numbers)
        columns = ', '.join(f'"{column}"' for column in RES_COLUMNS)
        posts = []

        try:
            with self.db.get_db() as conn:
                c = conn.cursor()
                for where_sql, params in self._lookup_batches(plan):
                    c.execute(f'SELECT {columns} FROM res WHERE {where_sql} ORDER BY "no" ASC', params)
                    posts.extend(self._row_to_dict(row) for row in c.fetchall())
        except Exception as e:
            logger.error(f"get_res_by_numbers: error: {e}")
            raise

        posts.sort(key=lambda post: post['no'])
        logger.debug(f"get_res_by_numbers: {len(numbers)} requested, {plan.lookup_count} lookups, {len(posts)} found")
        return posts

    def add_res(self, no, name_and_trip='', datetime_value=None, datetime_text='',
                poster_id='', main_text='', main_text_html='', oekaki_id=None):
        """Insert a post, replacing any existing post with the same number"""
        with self.db.get_db() as conn:
            c = conn.cursor()
            ph = self._ph()

            c.execute(f'''
                INSERT INTO res ("no", name_and_trip, datetime, datetime_text,
                                 id, main_text, main_text_html, oekaki_id)
                VALUES ({ph}, {ph}, {ph}, {ph}, {ph}, {ph}, {ph}, {ph})
                ON CONFLICT ("no") DO UPDATE SET
                    name_and_trip = excluded.name_and_trip,
                    datetime = excluded.datetime,
                    datetime_text = excluded.datetime_text,
                    id = excluded.id,
                    main_text = excluded.main_text,
                    main_text_html = excluded.main_text_html,
                    oekaki_id = excluded.oekaki_id
            ''', (no, name_and_trip,
                  datetime_value.isoformat() if datetime_value else None,
                  datetime_text, poster_id, main_text, main_text_html, oekaki_id))
            conn.commit()

    def count_res(self):
        """Total number of stored posts"""
        with self.db.get_db() as conn:
            c = conn.cursor()
            c.execute('SELECT COUNT(*) AS total FROM res')
            return self._fetchone_value(c, column_index=0, column_name='total') or 0
