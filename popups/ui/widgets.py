from __future__ import annotations
from typing import Callable, Optional
import pygame
from popups.core.node import Node, Color
from popups.ui.settings import TEXT_PRIMARY, FONT_SIZE_BODY, FONT_SIZE_BUTTON


class Label(Node):
    """Single-line text node. The font is created on first draw (needs pygame.font.init)."""

    def __init__(self, name: str, text: str = "", *, font: Optional[pygame.font.Font] = None,
                 font_size: int = FONT_SIZE_BODY, text_color: Color = TEXT_PRIMARY,
                 position: tuple[float, float] = (0.0, 0.0)):
        super().__init__(name, position=position)
        self.text = text
        self.text_color = text_color
        self.font_size = font_size
        self._font = font

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, self.font_size)
        return self._font

    def world_rect(self) -> pygame.Rect:
        # Size follows the rendered text rather than a fixed content size
        if self.text and self.content_size == (0, 0) and pygame.font.get_init():
            self.content_size = self.font.size(self.text)
        return super().world_rect()

    def set_text(self, text: str) -> None:
        if text != self.text:
            self.text = text
            # re-measured on next draw
            self.content_size = (0, 0)

    def render(self, surface: pygame.Surface, rect: pygame.Rect, alpha: int) -> None:
        super().render(surface, rect, alpha)
        if not self.text:
            return
        surf = self.font.render(self.text, True, self.text_color)
        if surf.get_size() != rect.size:
            surf = pygame.transform.smoothscale(surf, rect.size)
        surf.set_alpha(alpha)
        surface.blit(surf, rect.topleft)


class Button(Node):
    """Clickable rectangle with a centred caption."""

    def __init__(self, name: str, size: tuple[int, int], color: Color, *, text: str = "",
                 on_click: Optional[Callable[[], None]] = None, hover_color: Optional[Color] = None,
                 position: tuple[float, float] = (0.0, 0.0)):
        super().__init__(name, size=size, color=color, position=position)
        self.base_color = color
        self.hover_color = hover_color or color
        self.on_click = on_click
        self.caption = Label(f"{name}_caption", text, font_size=FONT_SIZE_BUTTON)
        self.add_child(self.caption)
        self.blocks_input = True

    def on_pointer(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.color = self.hover_color
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.on_click:
                self.on_click()
            return True
        return False

    def handle_event(self, event: pygame.event.Event) -> bool:
        if self.active and event.type == pygame.MOUSEMOTION and not self.hit_test(event.pos):
            self.color = self.base_color
        return super().handle_event(event)

__all__ = ["Label", "Button"]
