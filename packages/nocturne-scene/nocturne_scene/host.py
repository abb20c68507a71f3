"""Host environment protocol and an in-process implementation."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Host(Protocol):
    """The environment that owns the real scroll position.

    Called once per session start; both effects are opaque to the scene.
    """

    def disable_scroll_restoration(self) -> None:
        """Stop the host from restoring a previous scroll position."""
        ...

    def scroll_to(self, offset: float) -> None:
        """Move the host's scroll position to ``offset`` pixels."""
        ...


class MemoryHost:
    """Deterministic host for headless sessions and tests.

    Conforms to the Host protocol and records every call it receives.
    """

    def __init__(self, offset: float = 0.0, restores_scroll: bool = True) -> None:
        self.offset = offset
        self.restores_scroll = restores_scroll
        self.calls: list[str] = []

    def disable_scroll_restoration(self) -> None:
        self.restores_scroll = False
        self.calls.append("disable_scroll_restoration")

    def scroll_to(self, offset: float) -> None:
        self.offset = offset
        self.calls.append(f"scroll_to({offset:g})")
