from langchain_anthropic import ChatAnthropic
from langchain_openai import ChatOpenAI

from alpha_agent.config import settings
from alpha_agent.exceptions import AppError
from alpha_agent.llm.base import GroundedModel
from alpha_agent.llm.chat import ChatModel
from alpha_agent.llm.config import LLMProvider
from alpha_agent.llm.gemini import GeminiModel


class LLMFactory:
    @staticmethod
    def create(
        provider: str | None = None,
        model: str | None = None,
        **kwargs: object,
    ) -> GroundedModel:
        provider = provider or settings.llm_provider
        model = model or settings.llm_model
        temperature = settings.llm_temperature

        match provider:
            case LLMProvider.GOOGLE:
                api_key = settings.google_api_key
                if not api_key:
                    raise AppError("Google API key is not configured", code="LLM_CONFIG_ERROR")
                return GeminiModel(
                    api_key=api_key,
                    model=model,
                    temperature=temperature,
                    timeout_ms=settings.llm_timeout_ms,
                )

            case LLMProvider.OPENAI:
                api_key = settings.openai_api_key
                if not api_key:
                    raise AppError("OpenAI API key is not configured", code="LLM_CONFIG_ERROR")
                return ChatModel(
                    ChatOpenAI(model=model, api_key=api_key, temperature=temperature, **kwargs)  # type: ignore[arg-type]
                )

            case LLMProvider.ANTHROPIC:
                api_key = settings.anthropic_api_key
                if not api_key:
                    raise AppError("Anthropic API key is not configured", code="LLM_CONFIG_ERROR")
                return ChatModel(
                    ChatAnthropic(model=model, api_key=api_key, temperature=temperature, **kwargs)  # type: ignore[arg-type]
                )

            case _:
                raise AppError(f"Unknown LLM provider: '{provider}'", code="LLM_CONFIG_ERROR")
