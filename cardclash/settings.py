from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

DEV_SESSION_SECRET = "card_clash_dev_secret_do_not_use_in_production"

class Settings(BaseSettings):
    # Runtime
    ENVIRONMENT: str = "development"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # HTTPS (self-signed, so Brotli assets decode in the browser)
    HTTPS_ENABLED: bool = True
    HTTPS_PORT: int | None = None
    CERTS_DIR: str = "certs"

    # Sessions
    SESSION_SECRET: str | None = None
    SESSION_TTL_MINUTES: int = 480

    # Admin login
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "password"

    # Safety/abuse knobs
    RATE_LIMIT: str = "120/minute"

    LOG_LEVEL: str = "INFO"

    # Unity WebGL build entry point
    UNITY_PATH: str = Field(default="/static/Unity/index.html")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.strip().lower() == "production"

    @property
    def session_secret(self) -> str:
        return self.SESSION_SECRET or DEV_SESSION_SECRET

settings = Settings()
