"""Base class for modal popups (dialogs, alerts, sheets).

A popup owns a root node with two externally built children: a background
scrim and a main content panel. ``show`` fades the scrim in and pops the panel
open; ``hide`` raises an input blocker, shrinks the panel and fades the scrim
out. Both return immediately; the animation runs on the shared
:class:`TweenManager` and the lifecycle continues in its completion callbacks.

State machine::

    HIDDEN --show()--> SHOWING --(panel tween done)--> SHOWN
    SHOWN  --hide()--> HIDING  --(panel tween done)--> HIDDEN

Subclasses customise behaviour through four no-op methods:
  initialize(options) -> build content for this show (called first)
  refresh(options)    -> restyle/repaint from options (called second)
  on_shown()          -> entrance animation finished
  on_hidden()         -> exit animation finished

The owning coordinator registers one callback with
``set_completion_callback``; it fires once per hide cycle, after ``on_hidden``.
Subclasses that override ``hide`` must call ``notify_completion`` themselves.
"""
from __future__ import annotations
import logging
import math
from enum import Enum, auto
from typing import Generic, Optional, TypeVar
import pygame
from popups.core.completion import CompletionCallback, CompletionChannel
from popups.core.errors import InvalidStateError, PopupConfigurationError
from popups.core.event_listener import EventListener
from popups.core.node import Node
from popups.core.popup_event import PopupEvent, PopupEventType
from popups.core.tween import TweenManager, tween
from popups.ui.settings import (
    ANIMATION_DURATION, SCRIM_SHOW_RATIO, SCRIM_HIDE_DELAY_RATIO,
    SCRIM_OPACITY, PANEL_OPACITY, SHOW_EASING, HIDE_EASING,
)

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT")


class PopupState(Enum):
    HIDDEN = auto()
    SHOWING = auto()
    SHOWN = auto()
    HIDING = auto()


class PopupBase(Generic[OptionsT]):
    def __init__(self, node: Node, tweens: TweenManager, *,
                 background: Optional[Node] = None, main: Optional[Node] = None,
                 animation_duration: float = ANIMATION_DURATION,
                 event_listener: Optional[EventListener] = None):
        self.node = node
        self.tweens = tweens
        self.background = background
        self.main = main
        self.event_listener = event_listener
        # Created on first hide(), then reused for the popup's lifetime
        self.blocker: Optional[Node] = None
        self.options: Optional[OptionsT] = None
        self._animation_duration = ANIMATION_DURATION
        self.animation_duration = animation_duration
        self._state = PopupState.HIDDEN
        self._completion = CompletionChannel()
        self._pending_hidden: Optional[PopupState] = None
        # Hidden popups take no part in drawing or input
        self.node.active = False

    # --- Accessors -----------------------------------------------------------
    @property
    def animation_duration(self) -> float:
        return self._animation_duration

    @animation_duration.setter
    def animation_duration(self, value: float) -> None:
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"animation_duration must be positive and finite, got {value}")
        self._animation_duration = float(value)

    @property
    def state(self) -> PopupState:
        return self._state

    def is_shown(self) -> bool:
        return self._state == PopupState.SHOWN

    def is_visible(self) -> bool:
        """True from show() until the exit animation has finished."""
        return self._state != PopupState.HIDDEN

    # --- Lifecycle -----------------------------------------------------------
    def show(self, options: Optional[OptionsT] = None) -> None:
        """Show the popup with ``options``; returns before the animation runs."""
        if self._state in (PopupState.SHOWING, PopupState.HIDING):
            raise InvalidStateError("show", self._state)
        background, main = self._require_nodes()
        self.options = options
        self._completion.begin_cycle()
        background.opacity = 0
        background.active = True
        main.scale = 0
        main.opacity = 0
        main.active = True
        self.node.active = True
        self._set_state(PopupState.SHOWING)
        self.initialize(self.options)
        self.refresh(self.options)
        duration = self._animation_duration
        tween(background, self.tweens) \
            .to(duration * SCRIM_SHOW_RATIO, {'opacity': SCRIM_OPACITY}) \
            .start()
        tween(main, self.tweens) \
            .to(duration, {'scale': 1, 'opacity': PANEL_OPACITY}, easing=SHOW_EASING) \
            .call(self._on_show_finished) \
            .start()

    def hide(self) -> None:
        """Hide the popup; input is blocked until the exit animation finishes."""
        if self._state != PopupState.SHOWN:
            raise InvalidStateError("hide", self._state)
        background, main = self._require_nodes()
        self._ensure_blocker().active = True
        cycle = self._completion.cycle
        self._set_state(PopupState.HIDING)
        duration = self._animation_duration
        tween(background, self.tweens) \
            .delay(duration * SCRIM_HIDE_DELAY_RATIO) \
            .to(duration * (1 - SCRIM_HIDE_DELAY_RATIO), {'opacity': 0}) \
            .call(self._deactivate_background) \
            .start()
        tween(main, self.tweens) \
            .to(duration, {'scale': 0, 'opacity': PANEL_OPACITY}, easing=HIDE_EASING) \
            .call(lambda: self._on_hide_finished(cycle)) \
            .start()

    def set_completion_callback(self, callback: Optional[CompletionCallback]) -> None:
        """Register the coordinator's callback, replacing any previous one."""
        self._completion.set(callback)

    def notify_completion(self) -> bool:
        """Fire the completion callback once for the current show/hide cycle."""
        return self._completion.fire()

    # --- Overridable hooks (no-op by default) --------------------------------
    def initialize(self, options: Optional[OptionsT]) -> None:
        pass

    def refresh(self, options: Optional[OptionsT]) -> None:
        pass

    def on_shown(self) -> None:
        pass

    def on_hidden(self) -> None:
        pass

    # --- Frame integration ---------------------------------------------------
    def handle_event(self, event: pygame.event.Event) -> bool:
        """Route an input event through the popup. Returns True if consumed."""
        if not self.node.active:
            return False
        if self.blocker is not None and self.blocker.active:
            # Nothing gets through while the exit animation runs
            return True
        return self.node.handle_event(event)

    def draw(self, surface: pygame.Surface) -> None:
        self.node.draw(surface)

    # --- Internals -----------------------------------------------------------
    def _require_nodes(self) -> tuple[Node, Node]:
        if self.background is None or self.main is None:
            raise PopupConfigurationError(
                f"{type(self).__name__} needs both background and main nodes assigned")
        return self.background, self.main

    def _ensure_blocker(self) -> Node:
        if self.blocker is None:
            blocker = Node('blocker', size=self.node.get_content_size())
            blocker.blocks_input = True
            blocker.set_parent(self.node)
            self.blocker = blocker
            logger.debug("%s created input blocker %s", type(self).__name__, blocker.get_content_size())
        return self.blocker

    def _deactivate_background(self) -> None:
        self.background.active = False

    def _on_show_finished(self) -> None:
        self._set_state(PopupState.SHOWN)
        self.on_shown()

    def _on_hide_finished(self, cycle: int) -> None:
        self.blocker.active = False
        self.main.active = False
        self.node.active = False
        # HIDDEN is published after on_hidden and the callback so subscribers see a settled popup
        self._pending_hidden = self._set_state(PopupState.HIDDEN, publish=False)
        self.on_hidden()
        # on_hidden may already have re-shown the popup; this cycle still completes once
        self._completion.fire(cycle)
        self._flush_hidden()

    def _set_state(self, new_state: PopupState, publish: bool = True) -> PopupState:
        old = self._state
        self._state = new_state
        logger.debug("%s: %s -> %s", type(self).__name__, old.name, new_state.name)
        if publish:
            self._flush_hidden()
            self._publish(old, new_state)
        return old

    def _flush_hidden(self) -> None:
        old, self._pending_hidden = self._pending_hidden, None
        if old is not None:
            self._publish(old, PopupState.HIDDEN)

    def _publish(self, old: PopupState, new_state: PopupState) -> None:
        if self.event_listener is not None:
            event_type = _STATE_EVENTS[new_state]
            self.event_listener.publish(PopupEvent(event_type, source=self, payload={"from": old, "to": new_state}))


_STATE_EVENTS = {
    PopupState.SHOWING: PopupEventType.SHOW_STARTED,
    PopupState.SHOWN: PopupEventType.SHOWN,
    PopupState.HIDING: PopupEventType.HIDE_STARTED,
    PopupState.HIDDEN: PopupEventType.HIDDEN,
}

__all__ = ["PopupBase", "PopupState", "OptionsT"]
