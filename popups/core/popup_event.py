from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional

class PopupEventType(Enum):
    # Entrance
    SHOW_STARTED = auto()
    SHOWN = auto()
    # Exit
    HIDE_STARTED = auto()
    HIDDEN = auto()

@dataclass(slots=True)
class PopupEvent:
    type: PopupEventType
    source: Any | None = None
    payload: Optional[dict[str, Any]] = None

    def get(self, key: str, default: Any = None) -> Any:
        return self.payload.get(key, default) if self.payload else default

    def __repr__(self) -> str:  # Helpful for debugging
        return f"PopupEvent(type={self.type}, payload={self.payload})"

__all__ = ["PopupEvent", "PopupEventType"]
