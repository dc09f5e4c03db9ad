from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Teacher Match"
    app_env: str = "dev"
    log_level: str = "INFO"

    database_url: str = Field(default="sqlite:///./teacher_match.db")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    llm_enabled: bool = True
    llm_provider: str = "gateway"
    llm_api_key: str | None = None
    llm_model: str = "google/gemini-2.5-flash"
    llm_gateway_url: str = "https://ai.gateway.lovable.dev/v1/chat/completions"
    openai_base_url: str | None = None
    llm_timeout_seconds: int = 25

    enrichment_limit: int = 5


settings = Settings()
