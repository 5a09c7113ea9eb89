import re

import structlog

from alpha_agent.dashboard.schemas import ChartPoint, DashboardReport, StockCard
from alpha_agent.exceptions import ConflictError
from alpha_agent.recommendations.schemas import StockRecommendation
from alpha_agent.session.schemas import View, ViewState

logger = structlog.get_logger()

DEFAULT_POTENTIAL = 10.0
NEUTRAL_CHANGE = "0.00%"
SOURCES_FALLBACK = "Real-time market data aggregators and financial news feeds."

_RISK_SCORES = {"Low": 1, "Medium": 2, "High": 3}
_NUMBER = re.compile(r"\d+(?:\.\d+)?")


def parse_potential(potential_upside: str) -> float:
    """First numeric run of the upside text, e.g. "+450% over 5y" -> 450.0."""
    match = _NUMBER.search(potential_upside.replace(",", ""))
    return float(match.group()) if match else DEFAULT_POTENTIAL


def _card(rec: StockRecommendation) -> StockCard:
    change = rec.change_percent or NEUTRAL_CHANGE
    return StockCard(
        symbol=rec.symbol,
        name=rec.name,
        price=rec.price,
        change_display=change,
        direction="down" if change.strip().startswith("-") else "up",
        sector=rec.sector,
        risk_rating=rec.risk_rating,
        potential_upside=rec.potential_upside,
        rationale=rec.rationale,
    )


def build_dashboard(state: ViewState) -> DashboardReport:
    if state.view is not View.results or state.response is None or state.preferences is None:
        raise ConflictError(f"No results to show while {state.view.value}")

    data = state.response
    logger.info("dashboard_built", recommendations=len(data.recommendations))
    return DashboardReport(
        strategy=state.preferences.strategy,
        horizon=state.preferences.horizon,
        market_sentiment=data.market_sentiment,
        cards=[_card(rec) for rec in data.recommendations],
        chart=[
            ChartPoint(
                symbol=rec.symbol,
                potential=parse_potential(rec.potential_upside),
                risk=_RISK_SCORES[rec.risk_rating],
            )
            for rec in data.recommendations
        ],
        sources=list(data.sources),
        sources_caption=None if data.sources else SOURCES_FALLBACK,
    )
