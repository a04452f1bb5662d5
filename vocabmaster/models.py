"""Database models."""

from datetime import date, datetime

from sqlalchemy import (
    JSON,
    Boolean,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vocabmaster.database import Base


class WordSet(Base):
    """Word set model: a titled collection of words."""

    __tablename__ = "word_sets"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    owner_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    category: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    difficulty: Mapped[str | None] = mapped_column(String(20), nullable=True)
    tags: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    word_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    words: Mapped[list["Word"]] = relationship(
        back_populates="word_set", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        """String representation of WordSet."""
        return f"<WordSet(id={self.id}, title='{self.title}')>"


class Word(Base):
    """Word model: one vocabulary entry."""

    __tablename__ = "words"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    word_set_id: Mapped[int] = mapped_column(
        ForeignKey("word_sets.id", ondelete="CASCADE"), nullable=False, index=True
    )
    english: Mapped[str] = mapped_column(String(100), nullable=False)
    chinese: Mapped[str] = mapped_column(String(500), nullable=False)
    pronunciation: Mapped[str | None] = mapped_column(String(200), nullable=True)
    example: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    word_set: Mapped[WordSet] = relationship(back_populates="words")

    def __repr__(self) -> str:
        """String representation of Word."""
        return f"<Word(id={self.id}, english='{self.english}')>"


class UserWordSet(Base):
    """Link between a user and a word set in their collection."""

    __tablename__ = "user_word_sets"
    __table_args__ = (UniqueConstraint("user_id", "word_set_id", name="uq_user_word_set"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    word_set_id: Mapped[int] = mapped_column(
        ForeignKey("word_sets.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of UserWordSet."""
        return f"<UserWordSet(user_id={self.user_id}, word_set_id={self.word_set_id})>"


class StudyRecord(Base):
    """Daily study tally for one user."""

    __tablename__ = "study_records"
    __table_args__ = (UniqueConstraint("user_id", "study_date", name="uq_study_record_day"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    study_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    words_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    study_time_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation of StudyRecord."""
        return f"<StudyRecord(user_id={self.user_id}, study_date={self.study_date})>"
