# Base exception class
from .base import DedupeError

from .delegate import InvalidDelegateError

__all__ = [
    "DedupeError",
    "InvalidDelegateError",
]
