"""
Quotes API - Quote Service (CRUD)
==================================

What:  All reads and writes of the `quotes` table.
How:   One method per API operation, each a single-row statement on the
       session injected by the route. The session dependency commits at the
       end of the request; methods only flush.

Error translation:
    Missing rows       → NotFoundError   (404)
    Missing text       → ValidationError (400)
    SQLAlchemy errors  → DatabaseError   (500, generic message to client)

The service is stateless; a single module-level instance is shared.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from quotes_api.database import DEFAULT_AUTHOR
from quotes_api.exceptions import DatabaseError, NotFoundError, ValidationError
from quotes_api.models.quote import Quote

logger = logging.getLogger(__name__)


def _require_text(text: str | None) -> str:
    if not text:
        raise ValidationError(message="Text is required", field="text")
    return text


class QuoteService:
    """Business logic for quote storage."""

    async def list_quotes(self, db: AsyncSession) -> list[Quote]:
        """All quotes, ordered by id."""
        try:
            result = await db.execute(select(Quote).order_by(Quote.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing quotes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve quotes. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def count_quotes(self, db: AsyncSession) -> int:
        try:
            result = await db.execute(select(func.count(Quote.id)))
            return result.scalar() or 0
        except SQLAlchemyError as e:
            logger.error("Database error counting quotes: %s", str(e))
            raise DatabaseError(context={"error_type": type(e).__name__})

    async def get_random_quote(self, db: AsyncSession) -> Quote:
        """
        One quote chosen uniformly by the database (ORDER BY RANDOM()).

        Raises:
            NotFoundError: The table is empty.
        """
        try:
            result = await db.execute(
                select(Quote).order_by(func.random()).limit(1)
            )
            quote = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error picking random quote: %s", str(e))
            raise DatabaseError(
                message="Could not retrieve a quote. Please try again.",
                context={"error_type": type(e).__name__},
            )

        if quote is None:
            raise NotFoundError(resource="quote")
        return quote

    async def get_quote(self, db: AsyncSession, quote_id: int) -> Quote:
        """
        Fetch a single quote by id.

        Raises:
            NotFoundError: No quote has this id.
            DatabaseError: Query execution failed.
        """
        try:
            result = await db.execute(select(Quote).where(Quote.id == quote_id))
            quote = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching quote %s: %s", quote_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the quote. Please try again.",
                context={"quote_id": quote_id},
            )

        if quote is None:
            raise NotFoundError(resource="quote", resource_id=str(quote_id))
        return quote

    async def create_quote(
        self,
        db: AsyncSession,
        text: str | None,
        author: str | None = None,
    ) -> Quote:
        """
        Insert a new quote and return it with its assigned id.

        Empty or missing text is rejected; an empty or missing author is
        stored as "Unknown".
        """
        text = _require_text(text)
        quote = Quote(text=text, author=author or DEFAULT_AUTHOR)
        try:
            db.add(quote)
            await db.flush()  # assigns the id without committing
        except SQLAlchemyError as e:
            logger.error("Database error creating quote: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the quote. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Quote %s created", quote.id)
        return quote

    async def update_quote(
        self,
        db: AsyncSession,
        quote_id: int,
        text: str | None,
        author: str | None = None,
    ) -> Quote:
        """
        Replace a quote's text, and its author when one is given.

        Text is validated before the existence check, so a request with no
        text is a 400 even for an unknown id.
        """
        text = _require_text(text)
        quote = await self.get_quote(db, quote_id)

        quote.text = text
        if author:
            quote.author = author
        try:
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error updating quote %s: %s", quote_id, str(e))
            raise DatabaseError(
                message="Could not update the quote. Please try again.",
                context={"quote_id": quote_id},
            )

        logger.info("Quote %s updated", quote_id)
        return quote

    async def delete_quote(self, db: AsyncSession, quote_id: int) -> Quote:
        """Delete a quote and return the row as it was before deletion."""
        quote = await self.get_quote(db, quote_id)
        try:
            await db.delete(quote)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error deleting quote %s: %s", quote_id, str(e))
            raise DatabaseError(
                message="Could not delete the quote. Please try again.",
                context={"quote_id": quote_id},
            )

        logger.info("Quote %s deleted", quote_id)
        return quote


quote_service = QuoteService()
