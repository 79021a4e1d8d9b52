from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete

from app.models import Book
from app.schemas.book import BookCreate, BookUpdate
from app.services.book_status_service import (
    derive_status,
    check_page_range,
    is_page_in_range,
)
from app.utils.helpers import collect_changes
import logging

logger = logging.getLogger(__name__)

UPDATABLE_COLUMNS = ("title", "author", "description", "total_pages", "current_page")


async def get_all_books(db: AsyncSession):
    """All books, newest first"""
    result = await db.scalars(
        select(Book).order_by(Book.created_at.desc(), Book.id.desc())
    )
    return result.all()


async def get_book_by_id(db: AsyncSession, book_id: int):
    return await db.get(Book, book_id)


async def create_book(db: AsyncSession, data: BookCreate):
    """
    Insert a new book. The status is derived from the pages sent by the client.

    Returns:
        Book: the stored row with its id and timestamps
    """
    status = derive_status(data.current_page, data.total_pages)
    book = Book(
        title=data.title,
        author=data.author,
        description=data.description,
        total_pages=data.total_pages,
        current_page=data.current_page,
        status=status.value,
    )
    db.add(book)
    await db.commit()
    await db.refresh(book)
    logger.info(f"✅ Book created: {book.id} - {book.title} ({book.status})")
    return book


async def update_book(db: AsyncSession, book_id: int, data: BookUpdate):
    """
    Sparse update of a book.

    Only the fields present in `data` are written. When the pages change the
    status is recomputed from the new values, falling back to the stored ones
    for whatever was not sent.

    Returns:
        Book | None: the updated book, the unchanged book when nothing was
        sent, or None when the id does not exist

    Raises:
        PageOutOfRangeError: current_page would end up above total_pages
    """
    book = await get_book_by_id(db, book_id)
    if not book:
        return None

    changes = collect_changes(data, allowed=UPDATABLE_COLUMNS)
    if not changes:
        logger.debug(f"Book {book_id}: nothing to update")
        return book

    if "current_page" in changes or "total_pages" in changes:
        current_page = changes.get("current_page", book.current_page)
        total_pages = changes.get("total_pages", book.total_pages)
        check_page_range(current_page, total_pages)
        changes["status"] = derive_status(current_page, total_pages).value

    await db.execute(update(Book).where(Book.id == book_id).values(**changes))
    await db.commit()
    await db.refresh(book)
    logger.info(f"✅ Book updated: {book.id}, fields: {sorted(changes)}")
    return book


async def delete_book(db: AsyncSession, book_id: int) -> bool:
    result = await db.execute(delete(Book).where(Book.id == book_id))
    await db.commit()
    deleted = bool(result.rowcount)
    if deleted:
        logger.info(f"🗑️ Book deleted: {book_id}")
    return deleted


async def update_reading_progress(db: AsyncSession, book_id: int, current_page: int):
    """
    Move the bookmark to `current_page`.

    Returns None when the book does not exist or the page is outside
    [0, total_pages]; the stored book is left untouched in both cases.
    """
    book = await get_book_by_id(db, book_id)
    if not book:
        return None

    if not is_page_in_range(current_page, book.total_pages):
        logger.warning(
            f"⚠️ Progress rejected for book {book_id}: "
            f"page {current_page} of {book.total_pages}"
        )
        return None

    return await update_book(db, book_id, BookUpdate(current_page=current_page))
