import asyncio
import json

import pytest

from alpha_agent.preferences.schemas import (
    InvestmentHorizon,
    InvestmentStrategy,
    RiskLevel,
    UserPreferences,
)
from alpha_agent.recommendations.schemas import AgentResponse, RawModelReply, StockRecommendation


class StubAgent:
    """Stands in for RecommendationAgent."""

    def __init__(self, response=None, error=None, delay=0.0):
        self.response = response
        self.error = error
        self.delay = delay
        self.calls = []
        self.cancelled = 0

    async def run(self, prefs):
        self.calls.append(prefs)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled += 1
            raise
        if self.error is not None:
            raise self.error
        return self.response


class StubModel:
    """Stands in for a GroundedModel."""

    def __init__(self, text="", grounding_chunks=None, error=None):
        self.reply = RawModelReply(text=text, grounding_chunks=list(grounding_chunks or []))
        self.error = error
        self.prompts = []

    async def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


def _recommendation(symbol: str = "PYPL", **overrides) -> dict:
    item = {
        "symbol": symbol,
        "name": f"{symbol} Holdings",
        "price": "$61.20",
        "changePercent": "-1.4%",
        "rationale": "Trades at 11x earnings with 400M active accounts.",
        "riskRating": "High",
        "potentialUpside": "+450% over 5y",
        "sector": "Technology",
    }
    item.update(overrides)
    return item


@pytest.fixture
def make_recommendation():
    return _recommendation


@pytest.fixture
def payload() -> dict:
    return {
        "recommendations": [
            _recommendation("PYPL"),
            _recommendation("SNAP", riskRating="Medium", potentialUpside="+300%"),
            _recommendation("ETSY", changePercent=None, riskRating="Low"),
        ],
        "marketSentiment": "Cautiously optimistic ahead of CPI data.",
    }


@pytest.fixture
def fenced():
    def _fenced(data, tag: str = "json") -> str:
        return (
            "Here are today's picks based on live market data.\n\n"
            f"```{tag}\n{json.dumps(data, indent=2)}\n```\n\n"
            "This is not financial advice."
        )

    return _fenced


@pytest.fixture
def prefs() -> UserPreferences:
    return UserPreferences(
        risk_level=RiskLevel.aggressive,
        horizon=InvestmentHorizon.long,
        strategy=InvestmentStrategy.deep_value,
        sectors=["Technology"],
        capital=5000,
    )


@pytest.fixture
def agent_response(payload) -> AgentResponse:
    return AgentResponse(
        recommendations=tuple(
            StockRecommendation.model_validate(item) for item in payload["recommendations"]
        ),
        market_sentiment=payload["marketSentiment"],
        sources=(),
    )


@pytest.fixture
def stub_agent():
    return StubAgent


@pytest.fixture
def stub_model():
    return StubModel
