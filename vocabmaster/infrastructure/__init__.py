"""
Infrastructure layer.

Implementations of the ports defined in the application layer:

- Persistence (SQLAlchemy repositories and mappers)
- The in-memory registry of live review sessions
- Web framework (FastAPI routers and pydantic schemas)
- Bearer token verification

This layer depends on domain and application layers,
but they do not depend on it.
"""
