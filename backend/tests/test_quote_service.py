"""
Quotes API - Quote Service Unit Tests
======================================

What:  QuoteService business rules against a mocked AsyncSession.

What we test:
    ✅ Create: text required, author defaulting
    ✅ Get / random: not-found handling
    ✅ Update: validation order, author kept when omitted
    ✅ Delete: returns the removed row
    ✅ SQLAlchemy errors become DatabaseError
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from quotes_api.exceptions import DatabaseError, NotFoundError, ValidationError
from quotes_api.models.quote import Quote
from quotes_api.services.quote_service import QuoteService


def _result_with(quote):
    result = MagicMock()
    result.scalar_one_or_none.return_value = quote
    return result


class TestQuoteServiceCreate:

    def setup_method(self):
        self.service = QuoteService()

    @pytest.mark.asyncio
    async def test_create_defaults_author(self, mock_db_session):
        quote = await self.service.create_quote(mock_db_session, text="Hello", author=None)

        assert quote.text == "Hello"
        assert quote.author == "Unknown"
        mock_db_session.add.assert_called_once_with(quote)
        mock_db_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_keeps_author(self, mock_db_session):
        quote = await self.service.create_quote(mock_db_session, text="Hello", author="Ada")
        assert quote.author == "Ada"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", [None, ""])
    async def test_create_requires_text(self, mock_db_session, text):
        with pytest.raises(ValidationError, match="Text is required"):
            await self.service.create_quote(mock_db_session, text=text, author="Ada")
        mock_db_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_database_failure(self, mock_db_session):
        mock_db_session.flush = AsyncMock(
            side_effect=OperationalError("INSERT", {}, Exception("disk I/O error"))
        )
        with pytest.raises(DatabaseError):
            await self.service.create_quote(mock_db_session, text="Hello")


class TestQuoteServiceGet:

    def setup_method(self):
        self.service = QuoteService()

    @pytest.mark.asyncio
    async def test_get_quote_found(self, mock_db_session, sample_quote_data):
        mock_db_session.execute.return_value = _result_with(Quote(**sample_quote_data))

        quote = await self.service.get_quote(mock_db_session, sample_quote_data["id"])

        assert quote.id == sample_quote_data["id"]
        assert quote.author == sample_quote_data["author"]

    @pytest.mark.asyncio
    async def test_get_quote_not_found(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(None)

        with pytest.raises(NotFoundError, match="Quote not found"):
            await self.service.get_quote(mock_db_session, 999)

    @pytest.mark.asyncio
    async def test_random_quote_on_empty_table(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(None)

        with pytest.raises(NotFoundError):
            await self.service.get_random_quote(mock_db_session)

    @pytest.mark.asyncio
    async def test_list_quotes(self, mock_db_session):
        rows = [Quote(id=i, text=f"Quote {i}", author="Ada") for i in (1, 2, 3)]
        result = MagicMock()
        result.scalars.return_value.all.return_value = rows
        mock_db_session.execute.return_value = result

        quotes = await self.service.list_quotes(mock_db_session)

        assert [q.id for q in quotes] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_list_quotes_database_failure(self, mock_db_session):
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("no such table"))
        )
        with pytest.raises(DatabaseError) as exc_info:
            await self.service.list_quotes(mock_db_session)
        assert "no such table" not in exc_info.value.message


class TestQuoteServiceUpdate:

    def setup_method(self):
        self.service = QuoteService()

    @pytest.mark.asyncio
    async def test_update_keeps_author_when_omitted(self, mock_db_session, sample_quote_data):
        mock_db_session.execute.return_value = _result_with(Quote(**sample_quote_data))

        quote = await self.service.update_quote(mock_db_session, 7, text="New text", author=None)

        assert quote.text == "New text"
        assert quote.author == sample_quote_data["author"]
        mock_db_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_replaces_author(self, mock_db_session, sample_quote_data):
        mock_db_session.execute.return_value = _result_with(Quote(**sample_quote_data))

        quote = await self.service.update_quote(mock_db_session, 7, text="New text", author="Ada")

        assert quote.author == "Ada"

    @pytest.mark.asyncio
    async def test_update_validates_text_before_lookup(self, mock_db_session):
        with pytest.raises(ValidationError):
            await self.service.update_quote(mock_db_session, 999, text="", author="Ada")
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_missing_quote(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(None)

        with pytest.raises(NotFoundError):
            await self.service.update_quote(mock_db_session, 999, text="New text")


class TestQuoteServiceDelete:

    def setup_method(self):
        self.service = QuoteService()

    @pytest.mark.asyncio
    async def test_delete_returns_removed_quote(self, mock_db_session, sample_quote_data):
        existing = Quote(**sample_quote_data)
        mock_db_session.execute.return_value = _result_with(existing)

        quote = await self.service.delete_quote(mock_db_session, 7)

        assert quote is existing
        mock_db_session.delete.assert_awaited_once_with(existing)

    @pytest.mark.asyncio
    async def test_delete_missing_quote(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(None)

        with pytest.raises(NotFoundError):
            await self.service.delete_quote(mock_db_session, 999)
        mock_db_session.delete.assert_not_awaited()
