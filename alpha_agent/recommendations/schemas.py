from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import Field, field_validator

from alpha_agent.schemas import FrozenCamelModel

RiskRating = Literal["Low", "Medium", "High"]


@dataclass(frozen=True)
class RawModelReply:
    text: str
    grounding_chunks: list[Any] = field(default_factory=list)


class StockRecommendation(FrozenCamelModel):
    symbol: str = Field(min_length=1)
    name: str = Field(min_length=1)
    price: str = Field(min_length=1)  # display string, e.g. "$12.40"
    change_percent: str | None = None
    rationale: str = Field(min_length=1)
    risk_rating: RiskRating
    # e.g. "+450% over 5y"; text without a number is kept and charted at DEFAULT_POTENTIAL
    potential_upside: str = Field(min_length=1)
    sector: str = Field(min_length=1)

    @field_validator("symbol")
    @classmethod
    def _ticker(cls, value: str) -> str:
        ticker = value.strip().upper()
        if not ticker:
            raise ValueError("must not be blank")
        return ticker

    @field_validator("change_percent", mode="before")
    @classmethod
    def _numeric_change(cls, value: Any) -> Any:
        if isinstance(value, int | float) and not isinstance(value, bool):
            return f"{value:+.2f}%"
        return value

    @field_validator("name", "price", "rationale", "potential_upside", "sector")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class Source(FrozenCamelModel):
    title: str
    uri: str


class AgentResponse(FrozenCamelModel):
    recommendations: tuple[StockRecommendation, ...]
    market_sentiment: str
    sources: tuple[Source, ...] = ()
