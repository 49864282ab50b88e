"""Utility helpers for kubernetes metadata."""

from .keys import sanitize_keys

__all__ = [
    "sanitize_keys",
]
