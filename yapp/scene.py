"""A headless scene graph holding drawable items and keyboard filters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

KeyHandler = Callable[[Any], bool]


@dataclass(eq=False)
class PixmapItem:
    """An image drawn at a position, optionally scaled to a height."""

    source: str = ""
    height: int | None = None
    pos: tuple[float, float] = (0.0, 0.0)
    rotation: float = 0.0
    visible: bool = True


@dataclass(eq=False)
class TextItem:
    """A line of text drawn at a position."""

    text: str = ""
    pos: tuple[float, float] = (0.0, 0.0)
    color: str = "black"
    scale: float = 1.0
    visible: bool = True


class Scene:
    """Ordered collection of items plus a stack of key event filters."""

    def __init__(
        self, width: int = 560, height: int = 720, top: int = 0, background: str = "black"
    ) -> None:
        self.width = width
        self.height = height
        self.top = top
        self.background = background
        self._items: list[PixmapItem | TextItem] = []
        self._filters: list[KeyHandler] = []

    @property
    def items(self) -> tuple[PixmapItem | TextItem, ...]:
        """Items in drawing order."""
        return tuple(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __len__(self) -> int:
        return len(self._items)

    def add_item(self, item: PixmapItem | TextItem) -> PixmapItem | TextItem:
        """Add item on top of the others; adding it twice has no effect."""
        if item not in self._items:
            self._items.append(item)
        return item

    def remove_item(self, item: PixmapItem | TextItem) -> None:
        """Remove item if it is in the scene."""
        if item in self._items:
            self._items.remove(item)

    def add_text(self, text: str) -> TextItem:
        """Create, add and return a text item."""
        item = TextItem(text=text)
        self._items.append(item)
        return item

    def add_pixmap(self, source: str, height: int | None = None) -> PixmapItem:
        """Create, add and return an image item."""
        item = PixmapItem(source=source, height=height)
        self._items.append(item)
        return item

    def install_event_filter(self, handler: KeyHandler) -> None:
        """Install handler so that it sees key presses before older filters."""
        if handler in self._filters:
            self._filters.remove(handler)
        self._filters.append(handler)

    def remove_event_filter(self, handler: KeyHandler) -> None:
        """Uninstall handler if installed."""
        if handler in self._filters:
            self._filters.remove(handler)

    def dispatch_key(self, key: Any) -> bool:
        """Offer key to the filters, newest first; True once one consumes it."""
        for handler in reversed(list(self._filters)):
            if handler not in self._filters:
                continue
            if handler(key):
                return True
        return False