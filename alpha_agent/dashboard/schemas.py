from typing import Literal

from alpha_agent.preferences.schemas import InvestmentHorizon, InvestmentStrategy
from alpha_agent.recommendations.schemas import RiskRating, Source
from alpha_agent.schemas import CamelModel


class StockCard(CamelModel):
    symbol: str
    name: str
    price: str
    change_display: str
    direction: Literal["up", "down"]
    sector: str
    risk_rating: RiskRating
    potential_upside: str
    rationale: str


class ChartPoint(CamelModel):
    symbol: str
    potential: float  # upside, percent
    risk: int  # 1 = Low, 2 = Medium, 3 = High


class DashboardReport(CamelModel):
    strategy: InvestmentStrategy
    horizon: InvestmentHorizon
    market_sentiment: str
    cards: list[StockCard]
    chart: list[ChartPoint]
    sources: list[Source]
    sources_caption: str | None = None
