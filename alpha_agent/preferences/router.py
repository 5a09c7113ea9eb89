from fastapi import APIRouter

from alpha_agent.preferences.schemas import (
    MAX_SECTORS,
    SECTORS,
    STRATEGY_DESCRIPTIONS,
    InvestmentHorizon,
    PreferenceOptions,
    RiskLevel,
    StrategyOption,
    UserPreferences,
)

router = APIRouter()


@router.get("/options", response_model=PreferenceOptions)
async def get_options() -> PreferenceOptions:
    """Choices offered by the onboarding form."""
    return PreferenceOptions(
        risk_levels=list(RiskLevel),
        horizons=list(InvestmentHorizon),
        strategies=[
            StrategyOption(value=strategy, description=description)
            for strategy, description in STRATEGY_DESCRIPTIONS.items()
        ],
        sectors=SECTORS,
        max_sectors=MAX_SECTORS,
        defaults=UserPreferences(),
    )
