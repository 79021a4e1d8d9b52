import logging

from app.core.exceptions import PageOutOfRangeError
from app.models.enum import ReadStatus


logger = logging.getLogger(__name__)


def derive_status(current_page: int, total_pages: int) -> ReadStatus:
    """
    Reading status as a pure function of the progress.

    0 -> not_started, total_pages -> completed, anything between -> in_progress.
    """
    if current_page == 0:
        return ReadStatus.NOT_STARTED
    if current_page == total_pages:
        return ReadStatus.COMPLETED
    return ReadStatus.IN_PROGRESS


def is_page_in_range(current_page: int, total_pages: int) -> bool:
    return 0 <= current_page <= total_pages


def check_page_range(current_page: int, total_pages: int) -> None:
    if not is_page_in_range(current_page, total_pages):
        logger.warning(
            f"⚠️ Page {current_page} rejected, book has {total_pages} pages"
        )
        raise PageOutOfRangeError(current_page, total_pages)
