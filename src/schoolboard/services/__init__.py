# src/schoolboard/services/__init__.py
"""Business logic services for the Schoolboard application."""

from .policy import Action, Caller
from .store import Store

__all__ = [
    "Action",
    "Caller",
    "Store",
]
