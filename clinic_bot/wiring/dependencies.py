from functools import lru_cache
import logging

from clinic_bot.application.ports.chat_transport import ChatTransportPort
from clinic_bot.application.use_cases.conversation_engine import ConversationEngine
from clinic_bot.application.use_cases.handle_incoming_message import HandleIncomingMessageUseCase
from clinic_bot.application.use_cases.send_reply import SendReplyUseCase
from clinic_bot.core.config import settings
from clinic_bot.domain.entities.clinic_directory import ClinicDirectory
from clinic_bot.infrastructure.clinic.clinic_config_store import load_clinic_directory
from clinic_bot.infrastructure.store.memory_store import MemorySessionStore
from clinic_bot.infrastructure.whatsapp.mock_transport import MockChatTransport
from clinic_bot.infrastructure.whatsapp.waha_client import WahaClient
from clinic_bot.infrastructure.whatsapp.waha_transport import WahaTransport


@lru_cache
def get_clinic_directory() -> ClinicDirectory:
    return load_clinic_directory(settings.CLINIC_CONFIG_PATH)


@lru_cache
def get_session_store() -> MemorySessionStore:
    return MemorySessionStore(processed_limit=settings.PROCESSED_MESSAGE_LIMIT)


@lru_cache
def get_chat_transport() -> ChatTransportPort:
    logger = logging.getLogger(__name__)
    logger.info("WAHA_API_KEY present=%s", bool(settings.WAHA_API_KEY))
    logger.info("ENV=%s", settings.ENV)

    if settings.USE_MOCK_TRANSPORT:
        if settings.ENV.lower() in {"dev", "local"}:
            logger.info("Using MockChatTransport (USE_MOCK_TRANSPORT=true, ENV=dev/local)")
            return MockChatTransport()
        raise ValueError("USE_MOCK_TRANSPORT is only allowed when ENV is dev or local.")

    logger.info("Using WahaTransport at %s", settings.WAHA_API_URL)
    client = WahaClient(
        api_url=settings.WAHA_API_URL,
        api_key=settings.WAHA_API_KEY,
        session=settings.WAHA_SESSION,
    )
    return WahaTransport(client=client)


@lru_cache
def get_conversation_engine() -> ConversationEngine:
    return ConversationEngine(directory=get_clinic_directory())


@lru_cache
def get_handle_incoming_message_use_case() -> HandleIncomingMessageUseCase:
    transport = get_chat_transport()
    return HandleIncomingMessageUseCase(
        store=get_session_store(),
        engine=get_conversation_engine(),
        transport=transport,
        send_reply=SendReplyUseCase(transport=transport, auto_reply_enabled=settings.AUTO_REPLY_ENABLED),
        think_delay_min_seconds=settings.THINK_DELAY_MIN_SECONDS,
        think_delay_max_seconds=settings.THINK_DELAY_MAX_SECONDS,
    )
