"""Record of what happened while a planetary system was generated."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

import pandas as pd

EVENT_NAMES = (
    "system_setup",
    "planetesimal_created",
    "planetesimal_accreted",
    "planetesimal_to_gas_giant",
    "dust_bands_updated",
    "planetesimals_coalesced",
    "planetesimal_capture_moon",
    "moon_to_ring",
    "post_accretion_started",
    "outer_body_injected",
    "system_complete",
)


@dataclass(frozen=True)
class AccretionEvent:
    name: str
    a: Optional[float] = None
    e: Optional[float] = None
    mass: Optional[float] = None
    detail: str = ""


class EventLog:
    """
    Ordered list of accretion events. A disabled log drops everything so the
    stages can report unconditionally.
    """

    def __init__(self, enabled=False):
        self.enabled = enabled
        self.events = []

    def __len__(self):
        return len(self.events)

    def __iter__(self):
        return iter(self.events)

    def record(self, name, body=None, detail=""):
        if not self.enabled:
            return
        if name not in EVENT_NAMES:
            raise ValueError(f"Unknown accretion event {name!r}")
        if body is None:
            event = AccretionEvent(name, detail=detail)
        else:
            event = AccretionEvent(
                name, a=body.a, e=body.e, mass=body.mass, detail=detail
            )
        self.events.append(event)

    def names(self):
        return [event.name for event in self.events]

    def to_df(self):
        columns = ["name", "a", "e", "mass", "detail"]
        return pd.DataFrame([asdict(event) for event in self.events], columns=columns)
