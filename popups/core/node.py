from __future__ import annotations
from typing import Optional
import pygame

Color = tuple[int, int, int]

# Pointer events carry a 'pos' attribute and can be hit-tested
POINTER_EVENTS = (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION)


class Node:
    """Visual node: a rectangle in a parent/child tree.

    Geometry is centre based: a root node's ``position`` is its centre on the
    target surface, a child's ``position`` is the offset of its centre from the
    parent's centre. ``scale`` and ``opacity`` cascade to children when drawn.
    An inactive node is neither drawn nor hit-tested, and neither are its children.
    """
    _id_seq = 0

    def __init__(self, name: str, size: tuple[int, int] = (0, 0), color: Optional[Color] = None,
                 position: tuple[float, float] = (0.0, 0.0)):
        Node._id_seq += 1
        self.id: int = Node._id_seq
        self.name = name
        self.active: bool = True
        self.scale: float = 1.0
        self.position = position
        self.color = color
        self.border_radius: int = 0
        # Swallow pointer events that land inside this node's rect
        self.blocks_input: bool = False
        self.parent: Optional[Node] = None
        self.children: list[Node] = []
        self._opacity: float = 255.0
        self._content_size: tuple[int, int] = (0, 0)
        self.content_size = size

    # --- Properties ----------------------------------------------------------
    @property
    def opacity(self) -> float:
        return self._opacity

    @opacity.setter
    def opacity(self, value: float) -> None:
        # backOut overshoots past 255; the host clamps like an 8-bit channel
        self._opacity = min(255.0, max(0.0, float(value)))

    @property
    def content_size(self) -> tuple[int, int]:
        return self._content_size

    @content_size.setter
    def content_size(self, size: tuple[int, int]) -> None:
        w, h = size
        if w < 0 or h < 0:
            raise ValueError(f"content size must be non-negative, got {size}")
        self._content_size = (int(w), int(h))

    def get_content_size(self) -> tuple[int, int]:
        return self._content_size

    # --- Hierarchy -----------------------------------------------------------
    def set_parent(self, parent: Optional[Node]) -> None:
        if self.parent is parent:
            return
        if self.parent is not None:
            self.parent.children.remove(self)
        self.parent = parent
        if parent is not None:
            parent.children.append(self)

    def add_child(self, child: Node) -> Node:
        child.set_parent(self)
        return child

    def remove_child(self, child: Node) -> None:
        if child.parent is self:
            child.set_parent(None)

    def find(self, name: str) -> Optional[Node]:
        for child in self.children:
            if child.name == name:
                return child
        return None

    @property
    def active_in_hierarchy(self) -> bool:
        node: Optional[Node] = self
        while node is not None:
            if not node.active:
                return False
            node = node.parent
        return True

    # --- Geometry ------------------------------------------------------------
    def world_scale(self) -> float:
        s = self.scale
        p = self.parent
        while p is not None:
            s *= p.scale
            p = p.parent
        return s

    def world_center(self) -> tuple[float, float]:
        if self.parent is None:
            return self.position
        pcx, pcy = self.parent.world_center()
        ps = self.parent.world_scale()
        return (pcx + self.position[0] * ps, pcy + self.position[1] * ps)

    def world_rect(self) -> pygame.Rect:
        # backIn dips below zero scale; size uses the magnitude
        s = abs(self.world_scale())
        w, h = self._content_size
        rect = pygame.Rect(0, 0, round(w * s), round(h * s))
        cx, cy = self.world_center()
        rect.center = (round(cx), round(cy))
        return rect

    # --- Drawing -------------------------------------------------------------
    def draw(self, surface: pygame.Surface, parent_opacity: float = 255.0) -> None:
        if not self.active:
            return
        alpha = self._opacity * parent_opacity / 255.0
        rect = self.world_rect()
        if alpha > 0 and rect.width > 0 and rect.height > 0:
            self.render(surface, rect, int(alpha))
        for child in list(self.children):
            child.draw(surface, alpha)

    def render(self, surface: pygame.Surface, rect: pygame.Rect, alpha: int) -> None:
        """Paint this node's own content. Default: a filled (rounded) rect in ``color``."""
        if self.color is None:
            return
        layer = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.rect(layer, (*self.color, alpha), layer.get_rect(), border_radius=self.border_radius)
        surface.blit(layer, rect.topleft)

    # --- Input ---------------------------------------------------------------
    def hit_test(self, pos) -> bool:
        return self.world_rect().collidepoint(pos)

    def on_pointer(self, event: pygame.event.Event) -> bool:  # default no-op
        """Subclass hook for pointer events inside this node. Return True to consume."""
        return False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Route an event top-down (last child first). Returns True if consumed."""
        if not self.active:
            return False
        for child in reversed(list(self.children)):
            if child.handle_event(event):
                return True
        if event.type not in POINTER_EVENTS or not self.hit_test(event.pos):
            return False
        if self.on_pointer(event):
            return True
        return self.blocks_input

    def __repr__(self) -> str:
        return f"Node(name={self.name!r}, active={self.active}, opacity={self._opacity:.0f}, scale={self.scale:.3f})"

__all__ = ["Node", "POINTER_EVENTS", "Color"]
