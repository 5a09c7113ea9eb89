from collections.abc import Callable
from datetime import date

import structlog

from alpha_agent.exceptions import NormalizationError
from alpha_agent.llm.base import GroundedModel
from alpha_agent.preferences.schemas import UserPreferences
from alpha_agent.recommendations.normalizer import normalize
from alpha_agent.recommendations.prompts import build_recommendation_prompt
from alpha_agent.recommendations.schemas import AgentResponse

logger = structlog.get_logger()


class RecommendationAgent:
    """One grounded model call per request. Failures propagate; nothing is retried."""

    def __init__(self, model: GroundedModel, today: Callable[[], date] = date.today) -> None:
        self._model = model
        self._today = today

    def build_prompt(self, prefs: UserPreferences) -> str:
        return build_recommendation_prompt(prefs, self._today())

    async def run(self, prefs: UserPreferences) -> AgentResponse:
        logger.info(
            "recommendations_requested",
            strategy=prefs.strategy.value,
            horizon=prefs.horizon.value,
            risk_level=prefs.risk_level.value,
            sectors=list(prefs.sectors),
        )

        reply = await self._model.generate(self.build_prompt(prefs))

        try:
            response = normalize(reply.text, reply.grounding_chunks)
        except NormalizationError as exc:
            logger.error(
                "recommendations_normalization_error",
                kind=exc.kind.value,
                reason=getattr(exc, "reason", None),
            )
            raise

        logger.info(
            "recommendations_ready",
            symbols=[r.symbol for r in response.recommendations],
            sources=len(response.sources),
        )
        return response
