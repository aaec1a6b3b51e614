from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Professional:
    name: str
    specialties: tuple[str, ...] = ()
