"""Domain-level error types shared by use cases and view models.

Use cases raise :class:`UseCaseError` for failures the user should see as a
message; view models catch it and surface ``message`` instead of crashing.
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str, meta: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta or {}


__all__ = ["UseCaseError"]
