from typing import Annotated
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from app.core.exceptions import PageOutOfRangeError, bad_request, not_found, server_error
from app.database.db_depends import get_db
from app.schemas.book import (
    BookCreate,
    BookListResponse,
    BookOut,
    BookResponse,
    BookUpdate,
    ErrorResponse,
    MessageResponse,
    ProgressUpdate,
)
from app.services.book_service import (
    get_all_books,
    get_book_by_id,
    create_book,
    delete_book,
    update_book,
    update_reading_progress,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/books", tags=["Books (API)"])
DBType = Annotated[AsyncSession, Depends(get_db)]

BOOK_NOT_FOUND = "Book not found"
ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": MessageResponse},
    500: {"model": ErrorResponse},
}


@router.get("", response_model=BookListResponse, responses={500: {"model": ErrorResponse}})
@router.get("/", response_model=BookListResponse, include_in_schema=False)
async def read_books(db: DBType):
    try:
        books = await get_all_books(db)
    except Exception as e:
        logger.error(f"❌ Error retrieving books: {e}")
        server_error("Failed to retrieve books", e)
    return {
        "message": "Books retrieved successfully",
        "data": [BookOut.model_validate(book) for book in books],
    }


@router.get("/{book_id}", response_model=BookResponse, responses=ERROR_RESPONSES)
async def read_book(db: DBType, book_id: int):
    try:
        book = await get_book_by_id(db, book_id)
    except Exception as e:
        logger.error(f"❌ Error retrieving book {book_id}: {e}")
        server_error("Failed to retrieve book", e)
    if not book:
        not_found(BOOK_NOT_FOUND)
    return {"message": "Book retrieved successfully", "data": BookOut.model_validate(book)}


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
@router.post(
    "/",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def add_book(db: DBType, data: BookCreate):
    """
    Add a book to the shelf.

    - **total_pages**: positive integer
    - **current_page**: 0 by default; the reading status is derived from it
    """
    try:
        book = await create_book(db, data)
    except Exception as e:
        logger.error(f"❌ Error creating book: {e}")
        server_error("Failed to create book", e)
    return {"message": "Book created successfully", "data": BookOut.model_validate(book)}


@router.put("/{book_id}", response_model=BookResponse, responses=ERROR_RESPONSES)
async def edit_book(db: DBType, book_id: int, data: BookUpdate):
    """Partial update: fields that are not sent keep their stored values."""
    try:
        book = await update_book(db, book_id, data)
    except PageOutOfRangeError as e:
        bad_request({"message": "Invalid book data", "error": str(e)})
    except Exception as e:
        logger.error(f"❌ Error updating book {book_id}: {e}")
        server_error("Failed to update book", e)
    if not book:
        not_found(BOOK_NOT_FOUND)
    return {"message": "Book updated successfully", "data": BookOut.model_validate(book)}


@router.delete("/{book_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
async def remove_book(db: DBType, book_id: int):
    try:
        deleted = await delete_book(db, book_id)
    except Exception as e:
        logger.error(f"❌ Error deleting book {book_id}: {e}")
        server_error("Failed to delete book", e)
    if not deleted:
        not_found(BOOK_NOT_FOUND)
    return {"message": "Book deleted successfully"}


@router.patch("/{book_id}/progress", response_model=BookResponse, responses=ERROR_RESPONSES)
async def edit_progress(db: DBType, book_id: int, data: ProgressUpdate):
    """
    Update the reading progress. A page outside [0, total_pages] is answered
    with 404, same as a missing book.
    """
    try:
        book = await update_reading_progress(db, book_id, data.current_page)
    except Exception as e:
        logger.error(f"❌ Error updating reading progress of book {book_id}: {e}")
        server_error("Failed to update reading progress", e)
    if not book:
        not_found("Book not found or invalid page number")
    return {
        "message": "Reading progress updated successfully",
        "data": BookOut.model_validate(book),
    }
