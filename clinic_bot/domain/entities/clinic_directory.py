from __future__ import annotations

from dataclasses import dataclass

from clinic_bot.domain.entities.appointment_options import AppointmentOptions
from clinic_bot.domain.entities.professional import Professional


@dataclass(frozen=True)
class ClinicDirectory:
    """Static clinic reference data, loaded once at startup."""

    clinic_name: str
    professionals: tuple[Professional, ...] = ()
    specialties: tuple[str, ...] = ()
    appointment_options: AppointmentOptions = AppointmentOptions()

    def professional_at(self, position: int) -> Professional | None:
        """Return the professional shown as ``position`` (1-based) in the list."""
        if 1 <= position <= len(self.professionals):
            return self.professionals[position - 1]
        return None

    def specialty_at(self, position: int) -> str | None:
        if 1 <= position <= len(self.specialties):
            return self.specialties[position - 1]
        return None
