"""Turns a model's free-text reply into a validated AgentResponse.

The reply is untrusted: it may wrap the JSON in prose, use an odd fence tag,
or return elements that do not match the requested shape. The pipeline is

  extract_payload -> parse_payload -> validate_recommendations
                                   -> reduce_grounding

Every step is a pure function. Individual bad recommendations are dropped;
an unparseable payload raises MalformedPayload and a payload with nothing
usable left raises EmptyResult.
"""

import json
import re
from collections.abc import Iterable, Mapping
from typing import Any

import structlog
from pydantic import ValidationError as PydanticValidationError

from alpha_agent.exceptions import EmptyResult, MalformedPayload
from alpha_agent.recommendations.schemas import AgentResponse, Source, StockRecommendation

logger = structlog.get_logger()

EXPECTED_RECOMMENDATIONS = 3
MAX_SOURCES = 5

_TAGGED_FENCE = re.compile(r"```json[ \t]*\r?\n(.*?)```", re.DOTALL | re.IGNORECASE)
_ANY_FENCE = re.compile(r"```(?:[A-Za-z][\w+-]*(?=[ \t]*(?:\r?\n|[\[{])))?(.*?)```", re.DOTALL)

_PARSE_FAILED_MESSAGE = "The agent could not format the market data correctly. Please try again."


def extract_payload(text: str) -> str:
    """Return the JSON candidate inside the reply text."""
    for pattern in (_TAGGED_FENCE, _ANY_FENCE):
        match = pattern.search(text)
        if match:
            return match.group(1).strip()
    return text.strip()


def parse_payload(payload: str) -> tuple[list[Any], str]:
    """Decode the payload into its raw recommendation list and sentiment."""
    try:
        data = json.loads(payload)
    except (ValueError, RecursionError) as exc:  # also digit-limit and nesting-depth failures
        raise MalformedPayload(_PARSE_FAILED_MESSAGE, reason=str(exc)) from exc

    if not isinstance(data, dict):
        raise MalformedPayload(
            _PARSE_FAILED_MESSAGE, reason=f"expected a JSON object, got {type(data).__name__}"
        )

    recommendations = data.get("recommendations")
    if not isinstance(recommendations, list):
        raise MalformedPayload(_PARSE_FAILED_MESSAGE, reason="'recommendations' must be an array")

    sentiment = data.get("marketSentiment")
    if not isinstance(sentiment, str):
        raise MalformedPayload(_PARSE_FAILED_MESSAGE, reason="'marketSentiment' must be a string")

    return recommendations, sentiment


def validate_recommendations(items: Iterable[Any]) -> list[StockRecommendation]:
    """Keep the well-formed elements, in order."""
    valid: list[StockRecommendation] = []
    for idx, item in enumerate(items):
        if not isinstance(item, Mapping):
            logger.warning("recommendation_skipped", index=idx, reason="not an object")
            continue
        try:
            valid.append(StockRecommendation.model_validate(item))
        except PydanticValidationError as exc:
            fields = sorted({".".join(str(p) for p in err["loc"]) for err in exc.errors()})
            logger.warning("recommendation_skipped", index=idx, fields=fields)
    return valid


def _web_field(chunk: Any, name: str) -> Any:
    web = chunk.get("web") if isinstance(chunk, Mapping) else getattr(chunk, "web", None)
    if web is None:
        return None
    return web.get(name) if isinstance(web, Mapping) else getattr(web, name, None)


def reduce_grounding(chunks: Iterable[Any] | None) -> list[Source]:
    """Map grounding chunks to unique web sources, first-seen order, at most MAX_SOURCES."""
    sources: list[Source] = []
    seen: set[str] = set()
    for chunk in chunks or ():
        if len(sources) == MAX_SOURCES:
            break
        title = _web_field(chunk, "title")
        uri = _web_field(chunk, "uri")
        if not (isinstance(title, str) and title and isinstance(uri, str) and uri):
            continue
        if uri in seen:
            continue
        seen.add(uri)
        sources.append(Source(title=title, uri=uri))
    return sources


def normalize(raw_text: str, grounding_chunks: Iterable[Any] | None = None) -> AgentResponse:
    """Build an AgentResponse from a raw model reply or raise a NormalizationError."""
    items, sentiment = parse_payload(extract_payload(raw_text or ""))

    recommendations = validate_recommendations(items)
    if not recommendations:
        raise EmptyResult()
    if len(recommendations) != EXPECTED_RECOMMENDATIONS:
        logger.warning(
            "recommendation_count_unexpected",
            expected=EXPECTED_RECOMMENDATIONS,
            received=len(recommendations),
        )

    return AgentResponse(
        recommendations=tuple(recommendations),
        market_sentiment=sentiment,
        sources=tuple(reduce_grounding(grounding_chunks)),
    )
