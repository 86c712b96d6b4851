"""Exception hierarchy for popup lifecycle failures."""
from __future__ import annotations


class PopupError(Exception):
    """Base class for every error raised by the popups package."""


class InvalidStateError(PopupError):
    """Raised when show()/hide() is called from a state that does not allow it."""

    def __init__(self, operation: str, state) -> None:
        self.operation = operation
        self.state = state
        super().__init__(f"cannot {operation}() while popup is {getattr(state, 'name', state)}")


class PopupConfigurationError(PopupError):
    """Raised when a popup is driven before its background/main nodes are assigned."""


__all__ = ["PopupError", "InvalidStateError", "PopupConfigurationError"]
