"""Pydantic schemas for Word API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field


class WordBase(BaseModel):
    """Base schema for Word."""

    english: str = Field(..., min_length=1, max_length=100, description="The English word")
    chinese: str = Field(..., min_length=1, max_length=500, description="Its translation")
    pronunciation: str | None = Field(None, max_length=200, description="Phonetic spelling")
    example: str | None = Field(None, description="Example sentence")
    category: str | None = Field(None, max_length=50, description="Optional category")


class WordCreateRequest(WordBase):
    """Schema for creating a word."""

    word_set_id: int = Field(..., gt=0, description="Word set to add the word to")


class WordUpdateRequest(WordBase):
    """Schema for replacing a word's content."""


class Word(WordBase):
    """Schema for Word response."""

    id: int
    word_set_id: int
    created_at: datetime | None
    updated_at: datetime | None

    model_config = {"from_attributes": True}


class WordsListResponse(BaseModel):
    """Schema for list of words response."""

    words: list[Word] = Field(..., description="List of words")


class WordCreateResponse(BaseModel):
    """Schema for word creation response."""

    success: bool = Field(..., description="Whether the creation was successful")
    message: str = Field(..., description="Response message")
    word: Word = Field(..., description="Created word")


class WordUpdateResponse(BaseModel):
    """Schema for word update response."""

    success: bool = Field(..., description="Whether the update was successful")
    message: str = Field(..., description="Response message")
    word: Word = Field(..., description="Updated word")
