"""nocturne-schedule - Staged sequences, ambient oscillators and their handles."""
from __future__ import annotations

from nocturne_schedule.components import Oscillator, Sequence, Stage
from nocturne_schedule.handles import Handle
from nocturne_schedule.systems import (
    make_oscillator_system,
    make_sequence_system,
    sample_sequence,
    sample_stage,
    stop_on_detach,
)

__all__ = [
    "Stage",
    "Sequence",
    "Oscillator",
    "Handle",
    "sample_stage",
    "sample_sequence",
    "make_sequence_system",
    "make_oscillator_system",
    "stop_on_detach",
]
