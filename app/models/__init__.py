from app.models.book import Book
from app.models.enum import ReadStatus
from app.database.db import Base

from sqlalchemy.schema import CreateTable


if __name__ == "__main__":
    for table in Base.metadata.sorted_tables:
        print(CreateTable(table))
