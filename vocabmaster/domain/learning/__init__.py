"""
Learning bounded context - Domain layer.

This context handles studying vocabulary:
- Flashcard review sessions (flip, self-grade, undo)
- Daily study records and streaks

Aggregates:
- ReviewSession: in-memory state of one user's pass over a word set
- StudyRecord: per-user, per-day tally of reviewed words
"""
