from fastapi import HTTPException, status


class PageOutOfRangeError(ValueError):
    """current_page would end up outside [0, total_pages]"""

    def __init__(self, current_page: int, total_pages: int):
        self.current_page = current_page
        self.total_pages = total_pages
        super().__init__(
            f"current_page {current_page} is out of range for total_pages {total_pages}"
        )


def bad_request(detail: str | dict = "Bad request"):
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def not_found(detail: str = "Not found"):
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


def server_error(message: str = "Internal Server Error", error: Exception | None = None):
    detail = {"message": message}
    if error is not None:
        detail["error"] = str(error)
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
