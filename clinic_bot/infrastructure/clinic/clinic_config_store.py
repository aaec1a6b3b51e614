from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from clinic_bot.application.dto.clinic_config import ClinicConfigDTO
from clinic_bot.application.exceptions import ConfigError
from clinic_bot.domain.entities.clinic_directory import ClinicDirectory


logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[3]


def load_clinic_directory(path: str | Path) -> ClinicDirectory:
    """
    Read the clinic JSON document. Any problem is a ConfigError.

    Relative paths are taken from the project root, not the working directory.
    """
    config_path = (PROJECT_ROOT / path).resolve()
    logger.info("Loading configuration from: %s", config_path)

    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read clinic configuration at {config_path}: {e}") from e

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Clinic configuration is not valid JSON: {e}") from e

    try:
        directory = ClinicConfigDTO.model_validate(payload).to_directory()
    except ValidationError as e:
        raise ConfigError(f"Invalid clinic configuration: {e}") from e

    logger.info("Configuration loaded for clinic: %s", directory.clinic_name)
    logger.info(
        "Professionals loaded: %s, specialties loaded: %s",
        len(directory.professionals),
        len(directory.specialties),
    )
    logger.info("Appointment options: %s", directory.appointment_options)
    return directory
