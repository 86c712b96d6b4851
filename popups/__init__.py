"""popups package public API.

Exports the popup lifecycle base class and the frame-driven tween manager
that advances its animations.
"""
from __future__ import annotations

from .core.errors import PopupError, InvalidStateError, PopupConfigurationError
from .core.node import Node
from .core.tween import TweenManager
from .ui.popup_base import PopupBase, PopupState

__all__ = [
    "PopupBase",
    "PopupState",
    "Node",
    "TweenManager",
    "PopupError",
    "InvalidStateError",
    "PopupConfigurationError",
]
