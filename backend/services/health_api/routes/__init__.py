"""Routes package for the health API."""

from . import health

__all__ = [
    "health",
]
