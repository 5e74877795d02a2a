from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "Bayesian Network Generator"
    API_PREFIX: str = ""
    BACKEND_CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    LOG_LEVEL: str = "INFO"

    # Any OpenAI-compatible endpoint works; leave LLM_BASE_URL unset for api.openai.com.
    LLM_API_KEY: str | None = None
    OPENAI_API_KEY: str | None = None
    LLM_BASE_URL: str | None = None
    MODEL_DEFAULT: str = "gpt-4o"
    MODEL_AUDITOR: str | None = None

    VERDICT_ACCEPT_PREFIX: str = "VALID"
    AUDIT_DIAGRAMS: bool = True
    MERMAID_HEADER: str = "flowchart TD"


settings = Settings()  # type: ignore
