"""
Durable client-side storage.
"""

from .local_storage import LocalStorage

__all__ = ["LocalStorage"]
