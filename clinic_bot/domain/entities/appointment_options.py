from dataclasses import dataclass


@dataclass(frozen=True)
class AppointmentOptions:
    duration: int = 30  # minutes
    interval_between_appointments: int = 0  # minutes
