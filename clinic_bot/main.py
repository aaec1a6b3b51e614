import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from clinic_bot.api.webhooks import router as webhooks_router
from clinic_bot.core.config import settings
from clinic_bot.wiring.dependencies import get_chat_transport, get_clinic_directory


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("chat_id", "user_id", "message_id", "state", "next_state", "reason", "reply_text"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ConfigError and AuthFailure propagate: uvicorn aborts startup.
    directory = get_clinic_directory()
    transport = get_chat_transport()
    await transport.ensure_ready()
    logger.info("WhatsApp bot is ready for %s", directory.clinic_name)
    try:
        yield
    finally:
        logger.info("Gracefully shutting down, closing WhatsApp transport")
        await transport.close()


app = FastAPI(title="Clinic WhatsApp Scheduling Bot", version="1.0.0", lifespan=lifespan)

app.include_router(webhooks_router, tags=["webhooks"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
