"""Query filters for World.query()."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Not:
    """Exclusion filter: ``world.query(Channels, Not(Oscillator))`` skips
    every entity that already carries an Oscillator."""

    ctype: type
