"""Tests for ResDB against a temporary SQLite database."""

from datetime import datetime

from core.query_ranges import compact
from database.db_manager import DatabaseManager
from database.res_db import ResDB


class TestDatabaseManager:
    def test_sqlite_when_no_url(self, db_manager: DatabaseManager) -> None:
        assert not db_manager.is_postgres()

    def test_postgres_when_url(self) -> None:
        manager = DatabaseManager(db_url='postgresql://localhost/res')
        assert manager.is_postgres()

    def test_init_is_idempotent(self, db_manager: DatabaseManager) -> None:
        db_manager.init_database()
        db_manager.init_database()


class TestMaxPostNumber:
    def test_empty_table(self, res_db: ResDB) -> None:
        assert res_db.get_max_post_number() == 0

    def test_seeded(self, seeded_res_db: ResDB) -> None:
        assert seeded_res_db.get_max_post_number() == 130


class TestGetResByNumbers:
    def test_empty_request(self, res_db: ResDB) -> None:
        assert res_db.get_res_by_numbers([]) == []

    def test_ascending_and_missing_skipped(self, seeded_res_db: ResDB) -> None:
        posts = seeded_res_db.get_res_by_numbers([128, 5, 121, 122, 123, 999])
        assert [p['no'] for p in posts] == [121, 122, 123, 128]

    def test_record_fields(self, seeded_res_db: ResDB) -> None:
        post = seeded_res_db.get_res_by_numbers([124])[0]
        assert post['name_and_trip'] == 'Anon'
        assert post['id'] == 'ID124'
        assert post['main_text'] == 'body 124'
        assert post['main_text_html'] == '<p>body 124</p>'
        assert post['datetime_text'] == '2024/01/01(Mon) 12:00:24'
        assert post['datetime'] == datetime(2024, 1, 1, 3, 0, 24)
        assert post['oekaki_id'] == 7

    def test_no_drawing_is_none(self, seeded_res_db: ResDB) -> None:
        assert seeded_res_db.get_res_by_numbers([120])[0]['oekaki_id'] is None

    def test_small_batches(self, seeded_res_db: ResDB) -> None:
        seeded_res_db.MAX_PARAMS_PER_QUERY = 3
        numbers = [120, 121, 122, 124, 126, 128, 130]
        posts = seeded_res_db.get_res_by_numbers(numbers)
        assert [p['no'] for p in posts] == numbers


class TestLookupBatches:
    def test_params_capped(self, res_db: ResDB) -> None:
        res_db.MAX_PARAMS_PER_QUERY = 4
        plan = compact([1, 2, 4, 5, 7, 8, 10, 12, 14])
        batches = res_db._lookup_batches(plan)
        assert all(len(params) <= 4 for _, params in batches)
        all_params = [p for _, params in batches for p in params]
        assert all_params == [1, 2, 4, 5, 7, 8, 10, 12, 14]

    def test_sqlite_placeholders(self, res_db: ResDB) -> None:
        batches = res_db._lookup_batches(compact([1, 2, 3, 9]))
        assert batches == [('"no" BETWEEN ? AND ? OR "no" IN (?)', [1, 3, 9])]


class TestAddRes:
    def test_replaces_existing(self, res_db: ResDB) -> None:
        res_db.add_res(1, main_text='first')
        res_db.add_res(1, main_text='second')
        assert res_db.count_res() == 1
        assert res_db.get_res_by_numbers([1])[0]['main_text'] == 'second'

    def test_count(self, seeded_res_db: ResDB) -> None:
        assert seeded_res_db.count_res() == 11
