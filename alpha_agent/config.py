from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "AA_", "env_file": ".env", "env_file_encoding": "utf-8"}

    llm_provider: str = Field(default="google", pattern=r"^(google|openai|anthropic)$")
    llm_model: str = Field(default="gemini-2.5-flash")
    google_api_key: str = Field(default="")
    openai_api_key: str = Field(default="")
    anthropic_api_key: str = Field(default="")
    # High on purpose: favours non-consensus picks.
    llm_temperature: float = Field(default=0.9, ge=0.0, le=2.0)
    llm_timeout_ms: int | None = Field(default=None, gt=0)
    min_dwell_ms: int = Field(default=4000, ge=0)
    log_level: str = Field(default="INFO")
    cors_origins: str = Field(default="http://localhost:3000")


settings = Settings()
