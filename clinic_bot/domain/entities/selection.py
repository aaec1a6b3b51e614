from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from clinic_bot.domain.entities.professional import Professional


class SelectionKind(str, Enum):
    PROFESSIONAL = "professional"
    SPECIALTY = "specialty"


@dataclass(frozen=True)
class SelectionData:
    kind: SelectionKind
    selection: Professional | str  # Professional for PROFESSIONAL, specialty name for SPECIALTY
