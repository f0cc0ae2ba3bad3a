from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    llm_provider: str = Field(default="gemini", alias="LLM_PROVIDER")

    openai_api_key: str = Field(default="", alias="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4o-mini", alias="OPENAI_MODEL")
    google_api_key: str = Field(default="", alias="GOOGLE_API_KEY")
    gemini_model: str = Field(default="gemini-2.5-pro", alias="MODEL")
    eval_temperature: float = Field(default=0.1, alias="EVAL_TEMPERATURE")

    langsmith_api_key: str = Field(default="", alias="LANGSMITH_API_KEY")
    langsmith_tracing: bool = Field(default=True, alias="LANGSMITH_TRACING")
    langsmith_project: str = Field(
        default="tomorrow-agents-local", alias="LANGSMITH_PROJECT"
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    default_api_timeout_seconds: int = Field(
        default=20, alias="DEFAULT_API_TIMEOUT_SECONDS"
    )

    # Weather (Open-Meteo, no key required)
    geocoding_api_url: str = Field(
        default="https://geocoding-api.open-meteo.com/v1/search",
        alias="GEOCODING_API_URL",
    )
    weather_api_url: str = Field(
        default="https://api.open-meteo.com/v1/forecast",
        alias="WEATHER_API_URL",
    )

    # Memory: "none" disables the capability entirely.
    memory_backend: str = Field(default="file", alias="MEMORY_BACKEND")
    memory_store_dir: str = Field(default=".tomorrow_memory", alias="MEMORY_STORE_DIR")
    memory_default_user_id: str = Field(
        default="tomorrow-travel-user", alias="MEMORY_USER_ID"
    )
    memory_last_messages: int = Field(default=10, alias="MEMORY_LAST_MESSAGES")

    # Database configuration (memory "db" backend)
    database_url: str = Field(
        default="sqlite:///./tomorrow_agents.db",
        alias="DATABASE_URL",
    )
    database_echo: bool = Field(
        default=False,
        alias="DATABASE_ECHO",
    )
    database_auto_migrate: bool = Field(
        default=True,
        alias="DATABASE_AUTO_MIGRATE",
    )

    # Vector store for the travel knowledge base; empty disables it.
    postgres_connection_string: str = Field(
        default="", alias="POSTGRES_CONNECTION_STRING"
    )
    embedding_model: str = Field(
        default="text-embedding-3-small", alias="EMBEDDING_MODEL"
    )
    knowledge_index_name: str = Field(
        default="travel_knowledge", alias="KNOWLEDGE_INDEX_NAME"
    )

    # OpenTelemetry
    telemetry_enabled: bool = Field(default=True, alias="TELEMETRY_ENABLED")
    telemetry_service_name: str = Field(
        default="tomorrow-travel-agent", alias="OTEL_SERVICE_NAME"
    )
    telemetry_export: str = Field(default="console", alias="TELEMETRY_EXPORT")
    otlp_endpoint: str = Field(
        default="http://localhost:4317", alias="OTEL_EXPORTER_OTLP_ENDPOINT"
    )
    environment: str = Field(default="development", alias="APP_ENV")

    # Voice (OpenAI speech APIs)
    voice_enabled: bool = Field(default=False, alias="VOICE_ENABLED")
    voice_speaker: str = Field(default="nova", alias="VOICE_SPEAKER")
    voice_speech_model: str = Field(default="tts-1", alias="VOICE_SPEECH_MODEL")
    voice_listening_model: str = Field(
        default="whisper-1", alias="VOICE_LISTENING_MODEL"
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
