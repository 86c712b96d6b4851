"""Alert popup: title, message and a single confirm button.

Builds its own node tree (full-screen scrim + centred panel) and fills the
labels from :class:`AlertOptions` on each show. Clicking the confirm button
runs ``on_confirm`` (if given) and hides the popup.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional
from popups.core.event_listener import EventListener
from popups.core.node import Node
from popups.core.tween import TweenManager
from popups.ui.popup_base import PopupBase
from popups.ui.settings import (
    WIDTH, HEIGHT, ANIMATION_DURATION,
    SCRIM_COLOR, PANEL_BG, TEXT_PRIMARY, TEXT_MUTED, TEXT_WHITE,
    BTN_CONFIRM_COLOR, BTN_CONFIRM_HOVER,
    FONT_SIZE_TITLE, FONT_SIZE_BODY,
    ALERT_PANEL_SIZE, ALERT_BUTTON_SIZE, BORDER_RADIUS_PANEL, BORDER_RADIUS_BUTTON,
)
from popups.ui.widgets import Button, Label


@dataclass
class AlertOptions:
    title: str
    message: str = ""
    confirm_text: str = "OK"
    on_confirm: Optional[Callable[[], None]] = None
    # Dim the title when the alert is purely informational
    muted: bool = False


class AlertPopup(PopupBase[AlertOptions]):
    def __init__(self, tweens: TweenManager, *, size: tuple[int, int] = (WIDTH, HEIGHT),
                 animation_duration: float = ANIMATION_DURATION,
                 event_listener: Optional[EventListener] = None):
        root = Node('alert_popup', size=size, position=(size[0] / 2, size[1] / 2))
        background = Node('background', size=size, color=SCRIM_COLOR)
        # Clicks outside the panel must not reach whatever is under the popup
        background.blocks_input = True
        panel_w, panel_h = ALERT_PANEL_SIZE
        main = Node('main', size=ALERT_PANEL_SIZE, color=PANEL_BG)
        main.border_radius = BORDER_RADIUS_PANEL
        root.add_child(background)
        root.add_child(main)
        self.title_label = main.add_child(Label('title', font_size=FONT_SIZE_TITLE, position=(0, -panel_h / 2 + 36)))
        self.message_label = main.add_child(Label('message', font_size=FONT_SIZE_BODY, text_color=TEXT_MUTED,
                                                  position=(0, -10)))
        self.confirm_button = main.add_child(Button('confirm', ALERT_BUTTON_SIZE, BTN_CONFIRM_COLOR,
                                                    hover_color=BTN_CONFIRM_HOVER, on_click=self._on_confirm,
                                                    position=(0, panel_h / 2 - 40)))
        self.confirm_button.border_radius = BORDER_RADIUS_BUTTON
        super().__init__(root, tweens, background=background, main=main,
                         animation_duration=animation_duration, event_listener=event_listener)
        self.confirmed = False

    def initialize(self, options: Optional[AlertOptions]) -> None:
        options = options or AlertOptions(title="")
        self.confirmed = False
        self.title_label.set_text(options.title)
        self.message_label.set_text(options.message)
        self.confirm_button.caption.set_text(options.confirm_text)

    def refresh(self, options: Optional[AlertOptions]) -> None:
        muted = bool(options and options.muted)
        self.title_label.text_color = TEXT_MUTED if muted else TEXT_PRIMARY
        self.confirm_button.caption.text_color = TEXT_WHITE

    def _on_confirm(self) -> None:
        # Clicks during the entrance animation are ignored
        if not self.is_shown():
            return
        self.confirmed = True
        if self.options and self.options.on_confirm:
            self.options.on_confirm()
        self.hide()

__all__ = ["AlertPopup", "AlertOptions"]
