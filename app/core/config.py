from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Airtable credentials (required at startup, checked in the lifespan hook)
    airtable_api_key: str | None = None
    airtable_base_id: str | None = None
    airtable_api_url: str = "https://api.airtable.com/v0"

    quiz_table: str = "Quiz"
    votes_table: str = "Votes"
    session_table: str = "Session"

    store_timeout: float = 10.0

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # Keep raw string to avoid JSON parsing issues for lists
    cors_origins_raw: str = Field(default="*")

    @property
    def store_base_url(self) -> str:
        return f"{self.airtable_api_url.rstrip('/')}/{self.airtable_base_id}/"

    @property
    def cors_origins(self) -> list[str]:
        raw = self.cors_origins_raw
        if not raw:
            return []
        return [part.strip() for part in raw.split(",") if part.strip()]

    def require_store_credentials(self) -> None:
        missing = [
            name
            for name, value in (
                ("AIRTABLE_API_KEY", self.airtable_api_key),
                ("AIRTABLE_BASE_ID", self.airtable_base_id),
            )
            if not value
        ]
        if missing:
            raise RuntimeError(f"Missing required configuration: {', '.join(missing)}")


settings = Settings()
