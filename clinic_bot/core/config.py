from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    CLINIC_CONFIG_PATH: str = "config/clinic.json"

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    AUTO_REPLY_ENABLED: bool = True

    WAHA_API_URL: str = "http://waha:3000"
    WAHA_API_KEY: str | None = None
    WAHA_SESSION: str = "default"
    WAHA_WEBHOOK_HMAC_KEY: str | None = None
    USE_MOCK_TRANSPORT: bool = False

    THINK_DELAY_MIN_SECONDS: float = 4.0
    THINK_DELAY_MAX_SECONDS: float = 10.0

    PROCESSED_MESSAGE_LIMIT: int = 1000


settings = Settings()
