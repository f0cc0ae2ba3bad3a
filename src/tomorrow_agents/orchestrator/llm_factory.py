from __future__ import annotations

from langchain_core.language_models import BaseChatModel

from tomorrow_agents.config.settings import Settings, get_settings


class LLMFactory:
    @staticmethod
    def create_chat_model(
        streaming: bool = False,
        temperature: float | None = None,
        settings: Settings | None = None,
    ) -> BaseChatModel:
        settings = settings or get_settings()
        provider = settings.llm_provider.strip().lower()
        extra = {} if temperature is None else {"temperature": temperature}

        if provider == "gemini":
            from langchain_google_genai import ChatGoogleGenerativeAI

            return ChatGoogleGenerativeAI(
                model=settings.gemini_model,
                google_api_key=settings.google_api_key,
                streaming=streaming,
                **extra,
            )

        if provider == "openai":
            from langchain_openai import ChatOpenAI

            return ChatOpenAI(
                model=settings.openai_model,
                api_key=settings.openai_api_key,
                streaming=streaming,
                **extra,
            )

        raise ValueError("Unsupported LLM_PROVIDER. Use 'gemini' or 'openai'.")

    @classmethod
    def create_eval_model(cls, settings: Settings | None = None) -> BaseChatModel:
        """Low-temperature model used to judge agent answers."""
        settings = settings or get_settings()
        return cls.create_chat_model(
            temperature=settings.eval_temperature, settings=settings
        )
