"""
Application layer.

Use cases orchestrate domain objects on behalf of API callers. They depend
on repository protocols, never on SQLAlchemy or FastAPI directly.

This layer contains:
- Use Cases: word set, word, review session and study record operations
- Protocols: repository and session store interfaces
- DTOs: data transfer objects returned to the web layer
"""
