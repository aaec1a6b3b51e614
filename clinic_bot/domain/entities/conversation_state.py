from enum import Enum


class ConversationState(str, Enum):
    MAIN_MENU = "main_menu"
    AWAITING_APPOINTMENT_TYPE = "awaiting_appointment_type"
    AWAITING_PROFESSIONAL_SELECTION = "awaiting_professional_selection"
    AWAITING_SPECIALTY_SELECTION = "awaiting_specialty_selection"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
