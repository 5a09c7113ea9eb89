from enum import StrEnum

from pydantic import Field, field_validator

from alpha_agent.schemas import CamelModel, FrozenCamelModel

MAX_SECTORS = 3

SECTORS = [
    "Technology",
    "Healthcare",
    "Finance",
    "Energy",
    "Consumer Discretionary",
    "Industrials",
    "Utilities",
    "Real Estate",
]

DEFAULT_SECTORS = ["Technology", "Consumer Discretionary"]


class RiskLevel(StrEnum):
    conservative = "Conservative"
    moderate = "Moderate"
    aggressive = "Aggressive"


class InvestmentHorizon(StrEnum):
    short = "Short Term (< 1 year)"
    medium = "Medium Term (1-5 years)"
    long = "Long Term (5+ years)"


class InvestmentStrategy(StrEnum):
    momentum_growth = "Momentum Growth"
    deep_value = "Deep Value & Turnaround (5x Potential)"
    dividend_income = "Dividend & Stability"


STRATEGY_DESCRIPTIONS: dict[InvestmentStrategy, str] = {
    InvestmentStrategy.momentum_growth: (
        "Chasing high-flying stocks with strong current momentum."
    ),
    InvestmentStrategy.deep_value: (
        "Find undervalued companies with 5x+ potential, declined charts, "
        "but strong fundamentals."
    ),
    InvestmentStrategy.dividend_income: (
        "Stable companies with consistent dividends and lower volatility."
    ),
}


class UserPreferences(FrozenCamelModel):
    """Investor profile captured by the onboarding form. Immutable once built."""

    risk_level: RiskLevel = RiskLevel.aggressive
    horizon: InvestmentHorizon = InvestmentHorizon.long
    strategy: InvestmentStrategy = InvestmentStrategy.deep_value
    sectors: tuple[str, ...] = Field(default=(), max_length=MAX_SECTORS, validate_default=True)
    capital: float = Field(default=10000.0, gt=0)

    @field_validator("sectors")
    @classmethod
    def _distinct_or_default(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        cleaned = tuple(s.strip() for s in value if s.strip())
        if len(set(cleaned)) != len(cleaned):
            raise ValueError("sectors must be distinct")
        return cleaned or tuple(DEFAULT_SECTORS)


class StrategyOption(CamelModel):
    value: InvestmentStrategy
    description: str


class PreferenceOptions(CamelModel):
    risk_levels: list[RiskLevel]
    horizons: list[InvestmentHorizon]
    strategies: list[StrategyOption]
    sectors: list[str]
    max_sectors: int
    defaults: UserPreferences
