import pytest

from app.core.exceptions import PageOutOfRangeError
from app.models.enum import ReadStatus
from app.services.book_status_service import (
    check_page_range,
    derive_status,
    is_page_in_range,
)


@pytest.mark.parametrize("total_pages", [1, 2, 100, 1234])
def test_first_page_is_not_started(total_pages):
    assert derive_status(0, total_pages) is ReadStatus.NOT_STARTED


@pytest.mark.parametrize("total_pages", [1, 2, 100, 1234])
def test_last_page_is_completed(total_pages):
    assert derive_status(total_pages, total_pages) is ReadStatus.COMPLETED


@pytest.mark.parametrize("current_page, total_pages", [(1, 2), (1, 100), (99, 100), (500, 1234)])
def test_pages_in_between_are_in_progress(current_page, total_pages):
    assert derive_status(current_page, total_pages) is ReadStatus.IN_PROGRESS


def test_status_values_match_storage():
    assert [s.value for s in ReadStatus] == ["not_started", "in_progress", "completed"]


@pytest.mark.parametrize(
    "current_page, expected", [(-1, False), (0, True), (50, True), (100, True), (101, False)]
)
def test_is_page_in_range(current_page, expected):
    assert is_page_in_range(current_page, 100) is expected


def test_check_page_range_raises():
    with pytest.raises(PageOutOfRangeError) as exc_info:
        check_page_range(120, 100)
    assert exc_info.value.current_page == 120
    assert exc_info.value.total_pages == 100
    assert isinstance(exc_info.value, ValueError)


def test_check_page_range_accepts_bounds():
    check_page_range(0, 100)
    check_page_range(100, 100)
