from pydantic import BaseModel, Field, model_validator
from datetime import datetime
from typing import Any
from app.models.enum import ReadStatus


class BaseSchema(BaseModel):
    """Incoming payloads: surrounding whitespace is trimmed from every string"""

    @model_validator(mode="before")
    @classmethod
    def strip_strings(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v.strip() if isinstance(v, str) else v for k, v in data.items()}
        return data

    class Config:
        from_attributes = True


class BookBase(BaseSchema):
    title: str = Field(..., min_length=1, max_length=255)
    author: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=5000)
    total_pages: int = Field(..., gt=0, strict=True)
    current_page: int = Field(0, ge=0, strict=True)


class BookCreate(BookBase):
    """Schema for creating a book"""

    @model_validator(mode="after")
    def check_pages(self):
        if self.current_page > self.total_pages:
            raise ValueError("Current page cannot be greater than total pages")
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "title": "Dune",
                "author": "Frank Herbert",
                "description": "Desert planet, spice and politics",
                "total_pages": 412,
                "current_page": 0,
            }
        }


class BookUpdate(BaseSchema):
    """Partial update: only the fields sent are written"""

    title: str | None = Field(None, min_length=1, max_length=255)
    author: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=5000)
    total_pages: int | None = Field(None, gt=0, strict=True)
    current_page: int | None = Field(None, ge=0, strict=True)

    @model_validator(mode="after")
    def check_fields(self):
        for name in ("title", "author", "total_pages", "current_page"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        if (
            self.current_page is not None
            and self.total_pages is not None
            and self.current_page > self.total_pages
        ):
            raise ValueError("Current page cannot be greater than total pages")
        return self


class ProgressUpdate(BaseSchema):
    current_page: int = Field(..., ge=0, strict=True)


class BookOut(BaseModel):
    """Schema for returning a book"""

    id: int
    title: str
    author: str
    description: str | None
    total_pages: int
    current_page: int
    status: ReadStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class BookResponse(BaseModel):
    message: str
    data: BookOut


class BookListResponse(BaseModel):
    message: str
    data: list[BookOut]


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(MessageResponse):
    error: Any | None = None
