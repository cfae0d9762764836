"""
Structured exceptions for game evaluation.

Only malformed input can fail: positions that are too large to be treated
as short, and positions handed to impartial-only operations that are not
impartial. Everything else is a total function.
"""

from __future__ import annotations
from typing import Any, Dict, Optional


class GameError(ValueError):
    """Base class for evaluation errors."""

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {"type": self.__class__.__name__, "message": str(self)}


class NotShortError(GameError):
    """Raised when a position has too many moves or sub-positions to decide."""

    def __init__(self, limit: int, reason: Optional[str] = None):
        self.limit = limit
        message = f"Position is not short (limit {limit})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["limit"] = self.limit
        return payload


class NotImpartialError(GameError):
    """Raised when an impartial-only operation meets a partizan position."""

    def __init__(self, position: Any):
        self.position = position
        super().__init__(f"Position is not impartial: {position!r}")
