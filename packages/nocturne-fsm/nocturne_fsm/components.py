"""FSM component."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FSM:
    """Flat state machine over named phases.

    ``transitions`` maps a phase to its outgoing ``[guard, target]`` edges,
    tried in order. A phase with no entry is terminal.
    """

    state: str
    transitions: dict[str, list[list[str]]]

    def __post_init__(self) -> None:
        for source, edges in self.transitions.items():
            for edge in edges:
                if len(edge) != 2:
                    raise ValueError(
                        f"edge {edge!r} from {source!r} must be [guard, target]"
                    )
