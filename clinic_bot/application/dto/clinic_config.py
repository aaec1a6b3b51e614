from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from clinic_bot.domain.entities.appointment_options import AppointmentOptions
from clinic_bot.domain.entities.clinic_directory import ClinicDirectory
from clinic_bot.domain.entities.professional import Professional


class ProfessionalDTO(BaseModel):
    name: str
    specialties: list[str] = Field(default_factory=list)


class AppointmentOptionsDTO(BaseModel):
    duration: int = 30
    interval_between_appointments: int = 0


class ClinicConfigDTO(BaseModel):
    clinic_name: str
    professionals: list[ProfessionalDTO] = Field(default_factory=list)
    specialties: list[str] = Field(default_factory=list)
    appointment_options: AppointmentOptionsDTO = Field(default_factory=AppointmentOptionsDTO)

    @field_validator("clinic_name")
    @classmethod
    def _clinic_name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("clinic_name must not be empty")
        return value

    def to_directory(self) -> ClinicDirectory:
        return ClinicDirectory(
            clinic_name=self.clinic_name,
            professionals=tuple(
                Professional(name=p.name, specialties=tuple(p.specialties)) for p in self.professionals
            ),
            specialties=tuple(self.specialties),
            appointment_options=AppointmentOptions(
                duration=self.appointment_options.duration,
                interval_between_appointments=self.appointment_options.interval_between_appointments,
            ),
        )
