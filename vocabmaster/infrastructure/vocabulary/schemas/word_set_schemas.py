"""Pydantic schemas for WordSet API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from vocabmaster.domain.vocabulary.entities.word_set import Difficulty


class WordSetCreateRequest(BaseModel):
    """Schema for creating a word set."""

    title: str = Field(..., min_length=1, max_length=100, description="Title of the word set")
    description: str | None = Field(None, max_length=500, description="Optional description")
    category: str | None = Field(None, max_length=50, description="Optional category")
    difficulty: Difficulty | None = Field(None, description="Optional difficulty level")
    tags: list[str] = Field(default_factory=list, description="Free-form tags")
    is_public: bool = Field(True, description="Whether other users can browse and import it")


class WordSet(BaseModel):
    """Schema for WordSet response."""

    id: int
    owner_id: int | None
    title: str
    description: str | None
    category: str | None
    difficulty: Difficulty | None
    tags: list[str]
    is_public: bool
    word_count: int
    created_at: datetime | None
    updated_at: datetime | None

    model_config = {"from_attributes": True}


class WordSetsListResponse(BaseModel):
    """Schema for list of word sets response."""

    word_sets: list[WordSet] = Field(..., description="List of word sets")


class WordSetImportStatus(BaseModel):
    """Schema for the import status of a word set."""

    word_set_id: int = Field(..., description="ID of the word set")
    imported: bool = Field(..., description="Whether the set is in the user's collection")


class WordSetImportResponse(BaseModel):
    """Schema for word set import response."""

    success: bool = Field(..., description="Whether the import was successful")
    message: str = Field(..., description="Response message")
    word_set: WordSet = Field(..., description="Imported word set")
