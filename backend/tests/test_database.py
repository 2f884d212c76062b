"""
Quotes API - Database Initialization Tests
===========================================

What:  init_database() schema creation and seeding against a real SQLite file.
"""

import json

import pytest
from sqlalchemy import func, select, text

from quotes_api.config import settings
from quotes_api.database import async_session_factory, init_database, load_seed_quotes
from quotes_api.models.quote import Quote


@pytest.fixture
def seed_file(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(
        json.dumps([
            {"text": "One", "author": "A"},
            {"text": "Two"},
            {"text": "Three", "author": ""},
            {"author": "No text"},
            {"text": "Four", "author": "D"},
            {"text": "Five", "author": "E"},
        ]),
        encoding="utf-8",
    )
    return str(path)


async def _count() -> int:
    async with async_session_factory() as session:
        return (await session.execute(select(func.count(Quote.id)))).scalar()


def test_load_seed_quotes(seed_file):
    quotes = load_seed_quotes(seed_file)

    assert [q["text"] for q in quotes] == ["One", "Two", "Three", "Four", "Five"]
    assert quotes[1]["author"] == "Unknown"
    assert quotes[2]["author"] == "Unknown"


def test_packaged_seed_file_is_valid():
    quotes = load_seed_quotes(settings.seed_file)
    assert quotes
    assert all(q["text"] and q["author"] for q in quotes)


class TestInitDatabase:

    @pytest.mark.asyncio
    async def test_seeds_empty_table_in_batches(self, reset_database, seed_file, monkeypatch):
        monkeypatch.setattr(settings, "seed_file", seed_file)
        monkeypatch.setattr(settings, "seed_batch_size", 2)

        inserted = await init_database(seed=True)

        assert inserted == 5
        assert await _count() == 5

    @pytest.mark.asyncio
    async def test_skips_seed_when_table_has_rows(self, reset_database, seed_file, monkeypatch):
        monkeypatch.setattr(settings, "seed_file", seed_file)
        await init_database(seed=True)

        assert await init_database(seed=True) == 0
        assert await _count() == 5

    @pytest.mark.asyncio
    async def test_seeding_disabled(self, reset_database, seed_file, monkeypatch):
        monkeypatch.setattr(settings, "seed_file", seed_file)

        assert await init_database(seed=False) == 0
        assert await _count() == 0

    @pytest.mark.asyncio
    async def test_missing_seed_file(self, reset_database, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "seed_file", str(tmp_path / "missing.json"))

        assert await init_database(seed=True) == 0
        assert await _count() == 0


class TestQuoteTable:

    def test_author_server_default(self):
        default = Quote.__table__.c.author.server_default
        assert default is not None
        assert str(default.arg) == "'Unknown'"

    @pytest.mark.asyncio
    async def test_raw_insert_without_author_gets_unknown(self, reset_database):
        async with async_session_factory() as session:
            await session.execute(text("INSERT INTO quotes (text) VALUES ('Bare row')"))
            await session.commit()
            stored = (await session.execute(select(Quote))).scalar_one()

        assert stored.text == "Bare row"
        assert stored.author == "Unknown"
