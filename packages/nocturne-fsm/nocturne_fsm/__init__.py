"""nocturne-fsm - Finite state machine primitives for per-element phases."""
from __future__ import annotations

from nocturne_fsm.components import FSM
from nocturne_fsm.guards import FSMGuards
from nocturne_fsm.systems import make_fsm_system

__all__ = ["FSM", "FSMGuards", "make_fsm_system"]
