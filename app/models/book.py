from datetime import datetime, timezone

from app.database.db import Base
from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, Text

from app.models.enum import ReadStatus


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# ---------- Book ---------- #
class Book(Base):
    __tablename__ = "books"
    __table_args__ = (
        CheckConstraint("total_pages > 0", name="ck_books_total_pages_positive"),
        CheckConstraint(
            "current_page >= 0 AND current_page <= total_pages",
            name="ck_books_current_page_in_range",
        ),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    author = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    total_pages = Column(Integer, nullable=False)
    current_page = Column(Integer, nullable=False, default=0)
    status = Column(String(20), nullable=False, default=ReadStatus.NOT_STARTED.value)

    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False
    )

    def __repr__(self) -> str:
        return f"<Book id={self.id} title={self.title!r} status={self.status}>"
