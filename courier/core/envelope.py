from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Envelope:
    """A message travelling up the component tree.

    One envelope is created per spawn call and mutated in place as it is
    forwarded: ``source`` always holds the component that last spawned or
    forwarded it. ``round_trip`` is decided once, when the envelope is
    created, and survives renames.
    """

    name: str
    payload: Any = field(default_factory=dict)
    source: Any = None
    round_trip: bool = False

    @staticmethod
    def is_round_trip_name(name: str, marker: str = "!") -> bool:
        return name.endswith(marker)
