from .listing import ListOptions

__all__ = ["ListOptions"]
