from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable

from clinic_bot.application.use_cases import reply_renderer as render
from clinic_bot.application.utils.message_rules import normalize_text, parse_choice
from clinic_bot.domain.entities.clinic_directory import ClinicDirectory
from clinic_bot.domain.entities.conversation_state import ConversationState
from clinic_bot.domain.entities.selection import SelectionData, SelectionKind
from clinic_bot.domain.entities.session import Session


@dataclass(frozen=True)
class EngineResult:
    """Outcome of one inbound message: the next session and the replies to send, in order."""

    session: Session
    replies: tuple[str, ...] = ()


class ConversationEngine:
    """
    Menu state machine for the appointment flow.

    The engine never sends messages and never touches the session store:
    it returns the next session and the replies, and the caller decides
    when to commit.
    """

    def __init__(self, directory: ClinicDirectory) -> None:
        self._directory = directory
        self._handlers: dict[ConversationState, Callable[[Session, int | None], EngineResult]] = {
            ConversationState.MAIN_MENU: self._on_main_menu,
            ConversationState.AWAITING_APPOINTMENT_TYPE: self._on_appointment_type,
            ConversationState.AWAITING_PROFESSIONAL_SELECTION: self._on_professional_selection,
            ConversationState.AWAITING_SPECIALTY_SELECTION: self._on_specialty_selection,
            ConversationState.AWAITING_CONFIRMATION: self._on_confirmation,
        }
        self._logger = logging.getLogger(__name__)

    def handle(self, session: Session, raw_text: str | None) -> EngineResult:
        text = normalize_text(raw_text)
        if not text:
            return EngineResult(session=session)

        choice = parse_choice(text)
        handler = self._handlers.get(session.state)
        if handler is None:
            return self._on_unknown_state(session)
        return handler(session, choice)

    def _on_main_menu(self, session: Session, choice: int | None) -> EngineResult:
        if choice == 1:
            return self._move(session, ConversationState.AWAITING_APPOINTMENT_TYPE, render.render_appointment_type_prompt())
        if choice == 2:
            return EngineResult(session=session, replies=(render.ABONO_COMING_SOON,))
        return self._main_menu(session)

    def _on_appointment_type(self, session: Session, choice: int | None) -> EngineResult:
        if choice == 1:
            return self._move(
                session,
                ConversationState.AWAITING_PROFESSIONAL_SELECTION,
                render.render_professional_list(self._directory),
            )
        if choice == 2:
            return self._move(
                session,
                ConversationState.AWAITING_SPECIALTY_SELECTION,
                render.render_specialty_list(self._directory),
            )
        return EngineResult(
            session=session,
            replies=(render.INVALID_APPOINTMENT_TYPE, render.render_appointment_type_prompt()),
        )

    def _on_professional_selection(self, session: Session, choice: int | None) -> EngineResult:
        professional = self._directory.professional_at(choice) if choice is not None else None
        if professional is None:
            return EngineResult(
                session=session,
                replies=(render.INVALID_LIST_CHOICE, render.render_professional_list(self._directory)),
            )
        return self._await_confirmation(session, SelectionData(kind=SelectionKind.PROFESSIONAL, selection=professional))

    def _on_specialty_selection(self, session: Session, choice: int | None) -> EngineResult:
        specialty = self._directory.specialty_at(choice) if choice is not None else None
        if specialty is None:
            return EngineResult(
                session=session,
                replies=(render.INVALID_LIST_CHOICE, render.render_specialty_list(self._directory)),
            )
        return self._await_confirmation(session, SelectionData(kind=SelectionKind.SPECIALTY, selection=specialty))

    def _on_confirmation(self, session: Session, choice: int | None) -> EngineResult:
        data = session.data
        if data is None:
            self._logger.warning(
                "Confirmation state without selection, resetting",
                extra={"user_id": session.user_id, "state": session.state.value},
            )
            return self._main_menu(session)

        if choice == 1:
            return self._move(session, ConversationState.MAIN_MENU, render.render_booking_stub(data))
        if choice == 2:
            return self._move(
                session,
                ConversationState.MAIN_MENU,
                render.SELECTION_CANCELLED,
                render.render_main_menu(self._directory),
            )
        return EngineResult(
            session=session,
            replies=(render.render_confirmation_prompt(render.render_selection_label(data)),),
        )

    def _on_unknown_state(self, session: Session) -> EngineResult:
        if not session.state:
            self._logger.info("Fallback to main menu", extra={"user_id": session.user_id, "state": session.state})
            return self._main_menu(session)
        self._logger.warning("Unexpected input in state", extra={"user_id": session.user_id, "state": session.state})
        return EngineResult(session=session, replies=(render.HELP_TEXT,))

    def _await_confirmation(self, session: Session, data: SelectionData) -> EngineResult:
        label = render.render_selection_label(data)
        return EngineResult(
            session=replace(session, state=ConversationState.AWAITING_CONFIRMATION, data=data),
            replies=(render.render_confirmation_prompt(label),),
        )

    def _main_menu(self, session: Session) -> EngineResult:
        return self._move(session, ConversationState.MAIN_MENU, render.render_main_menu(self._directory))

    def _move(self, session: Session, state: ConversationState, *replies: str) -> EngineResult:
        # Leaving confirmation always drops the selection
        return EngineResult(session=replace(session, state=state, data=None), replies=replies)
