from typing import Any

import structlog
from google import genai
from google.genai import types

from alpha_agent.exceptions import NetworkFailure
from alpha_agent.llm.base import GroundedModel
from alpha_agent.recommendations.schemas import RawModelReply

logger = structlog.get_logger()


def _grounding_chunks(response: types.GenerateContentResponse) -> list[Any]:
    """Pull candidates[0].grounding_metadata.grounding_chunks as plain dicts."""
    candidates = response.candidates or []
    if not candidates or candidates[0].grounding_metadata is None:
        return []
    chunks = candidates[0].grounding_metadata.grounding_chunks or []
    return [
        chunk.model_dump(exclude_none=True) if chunk is not None else None
        for chunk in chunks
    ]


class GeminiModel(GroundedModel):
    """Gemini with Google Search grounding enabled."""

    def __init__(
        self,
        api_key: str,
        model: str,
        temperature: float,
        timeout_ms: int | None = None,
    ) -> None:
        http_options = types.HttpOptions(timeout=timeout_ms) if timeout_ms else None
        self._client = genai.Client(api_key=api_key, http_options=http_options)
        self._model = model
        self._config = types.GenerateContentConfig(
            tools=[types.Tool(google_search=types.GoogleSearch())],
            temperature=temperature,
        )

    async def generate(self, prompt: str) -> RawModelReply:
        try:
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=prompt,
                config=self._config,
            )
        except Exception as exc:
            logger.error("gemini_request_error", model=self._model, error=str(exc))
            raise NetworkFailure(f"Gemini request failed: {exc}") from exc

        chunks = _grounding_chunks(response)
        logger.info("gemini_reply_received", model=self._model, grounding_chunks=len(chunks))
        return RawModelReply(text=response.text or "", grounding_chunks=chunks)
