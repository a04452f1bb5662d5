"""
Domain layer.

Core vocabulary and learning logic with no dependency on the web framework
or the database:
- Entities: word sets, words and study records
- Value Objects: typed identifiers and flashcards
- Review Session: the in-memory flip/grade/undo state machine
- Domain Services: stateless calculations such as study streaks
"""
