from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Header the embedding host uses to pass the caller identity
    CALLER_HEADER: str = "X-Participant-Id"

    # App
    APP_NAME: str = "Energy Market Ledger"
    DEBUG: bool = False  # Safe default for production; set DEBUG=True in .env for local dev
    LOG_LEVEL: str = "INFO"


settings = Settings()
