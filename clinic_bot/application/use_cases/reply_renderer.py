from __future__ import annotations

from clinic_bot.domain.entities.clinic_directory import ClinicDirectory
from clinic_bot.domain.entities.professional import Professional
from clinic_bot.domain.entities.selection import SelectionData, SelectionKind


ASSISTANT_NAME = "Dogtor 🐶"

ABONO_COMING_SOON = "Consultas sobre abonos: Próximamente disponible. Por ahora, podés sacar un turno."
INVALID_APPOINTMENT_TYPE = "Opción inválida. Por favor, elegí 1 o 2."
INVALID_LIST_CHOICE = "Opción inválida. Por favor, elegí un número de la lista."
SELECTION_CANCELLED = "Entendido. Selección cancelada."
HELP_TEXT = "No entendí eso. ¿Necesitás ayuda? Escribí *Menu* para volver a empezar."
APOLOGY_TEXT = "Lo siento, ocurrió un error interno. Por favor, intenta de nuevo más tarde."

ANY_PROFESSIONAL_LABEL = "un profesional disponible"
DEFAULT_SPECIALTY_LABEL = "Clínica General"
SLOTS_COMING_SOON = "(Próximamente: te mostraremos los horarios disponibles)"


def render_main_menu(directory: ClinicDirectory) -> str:
    return (
        f"¡Hola! Soy {ASSISTANT_NAME}, tu asistente virtual para {directory.clinic_name}.\n"
        "\n"
        "¿Qué necesitas hacer?\n"
        "\n"
        "1. Sacar un Turno 📅\n"
        "2. Consultar Abono 💳\n"
        "\n"
        "Escribí el número de la opción."
    )


def render_appointment_type_prompt() -> str:
    return (
        "¿Cómo preferís buscar tu turno?\n"
        "\n"
        "1. Por Profesional 👨‍⚕️\n"
        "2. Por Especialidad 🩺\n"
        "\n"
        "Escribí el número de la opción."
    )


def render_professional_line(professional: Professional) -> str:
    return f"{professional.name} ({', '.join(professional.specialties)})"


def render_professional_list(directory: ClinicDirectory) -> str:
    lines = [f"{index}. {render_professional_line(p)}" for index, p in enumerate(directory.professionals, start=1)]
    return _numbered_block("Elegí un profesional:", lines, "Escribí el número del profesional.")


def render_specialty_list(directory: ClinicDirectory) -> str:
    lines = [f"{index}. {specialty}" for index, specialty in enumerate(directory.specialties, start=1)]
    return _numbered_block("Elegí una especialidad:", lines, "Escribí el número de la especialidad.")


def render_selection_label(data: SelectionData) -> str:
    """Label echoed back in the confirmation prompt."""
    if data.kind == SelectionKind.PROFESSIONAL and isinstance(data.selection, Professional):
        return render_professional_line(data.selection)
    return str(data.selection)


def render_confirmation_prompt(label: str) -> str:
    return (
        f"Seleccionaste: *{label}*. ¿Confirmamos?\n"
        "\n"
        "1. Sí, confirmar\n"
        "2. No, cancelar\n"
        "\n"
        "Escribí el número."
    )


def render_booking_stub(data: SelectionData) -> str:
    """Reply for a confirmed selection. Booking itself is not available yet."""
    if data.kind == SelectionKind.PROFESSIONAL and isinstance(data.selection, Professional):
        professional_label = data.selection.name
        specialty_label = "/".join(data.selection.specialties) or DEFAULT_SPECIALTY_LABEL
    else:
        professional_label = ANY_PROFESSIONAL_LABEL
        specialty_label = str(data.selection)

    return (
        f"¡Perfecto! 👍 Buscaremos un turno para *{specialty_label}* con *{professional_label}*.\n"
        "\n"
        f"{SLOTS_COMING_SOON}"
    )


def _numbered_block(title: str, lines: list[str], footer: str) -> str:
    body = "".join(f"{line}\n" for line in lines)
    return f"{title}\n\n{body}\n{footer}"
