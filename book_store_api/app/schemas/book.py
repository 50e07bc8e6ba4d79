"""
Pydantic schemas for book records.

A book carries five text fields and is identified by its ISBN.
``publishedDate`` keeps its camelCase name on the wire and on disk.
Request bodies are not parsed through these models: the service checks
field presence itself so that every validation failure is reported as
400 with a ``message`` body.  The models describe responses and feed
the OpenAPI document.
"""

from pydantic import BaseModel, Field


class BookBase(BaseModel):
    title: str = Field(..., examples=["The Pragmatic Programmer"])
    author: str = Field(..., examples=["Andrew Hunt"])
    publisher: str = Field(..., examples=["Addison-Wesley"])
    publishedDate: str = Field(..., examples=["1999-10-20"])


class BookCreate(BookBase):
    """Schema for creating a book."""

    isbn: str = Field(..., examples=["9780201616224"], description="Exactly 13 decimal digits")


class BookUpdate(BookBase):
    """Schema for updating a book.  The ISBN in the path is kept."""


class BookRead(BookCreate):
    """Schema for a stored book.

    Extra keys present in the backing file are passed through.
    """

    model_config = {
        "extra": "allow",
    }


class Message(BaseModel):
    """Error response body."""

    message: str
