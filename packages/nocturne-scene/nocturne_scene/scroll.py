"""Scroll-range allocation: physical scroll offset to normalized progress."""
from __future__ import annotations


class ScrollSource:
    """Holds the one scroll offset of a session.

    The page is a spacer ``spacer_vh`` viewport-heights tall, so the
    scrollable distance is the spacer minus one viewport. Progress is
    ``offset / scrollable`` clamped to [0, 1].
    """

    def __init__(self, viewport_height: float, spacer_vh: float = 900.0) -> None:
        if viewport_height <= 0:
            raise ValueError(f"viewport_height must be > 0, got {viewport_height}")
        if spacer_vh <= 100.0:
            raise ValueError(f"spacer_vh must exceed 100, got {spacer_vh}")
        self._viewport_height = viewport_height
        self._spacer_vh = spacer_vh
        self._offset = 0.0

    @property
    def offset(self) -> float:
        return self._offset

    @property
    def spacer_height(self) -> float:
        return self._viewport_height * self._spacer_vh / 100.0

    @property
    def scrollable(self) -> float:
        return self.spacer_height - self._viewport_height

    @property
    def progress(self) -> float:
        return min(max(self._offset / self.scrollable, 0.0), 1.0)

    def scroll_to(self, offset: float) -> None:
        self._offset = min(max(offset, 0.0), self.scrollable)

    def scroll_by(self, delta: float) -> None:
        self.scroll_to(self._offset + delta)

    def offset_for(self, progress: float) -> float:
        """Scroll offset that yields ``progress``."""
        return min(max(progress, 0.0), 1.0) * self.scrollable
