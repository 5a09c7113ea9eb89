from datetime import date

import pytest

from alpha_agent.preferences.schemas import InvestmentHorizon, InvestmentStrategy, UserPreferences
from alpha_agent.recommendations.prompts import (
    DEEP_VALUE_INSTRUCTION,
    DIVIDEND_INCOME_INSTRUCTION,
    MOMENTUM_GROWTH_INSTRUCTION,
    build_recommendation_prompt,
)

TODAY = date(2026, 10, 19)


def test_prompt_interpolates_profile(prefs) -> None:
    prompt = build_recommendation_prompt(prefs, TODAY)

    assert "Today is 2026-10-19." in prompt
    assert "- Risk Tolerance: Aggressive" in prompt
    assert "- Investment Horizon: Long Term (5+ years)" in prompt
    assert "- Strategy: Deep Value & Turnaround (5x Potential)" in prompt
    assert "- Interested Sectors: Technology" in prompt
    assert "- Capital: $5000" in prompt


def test_prompt_requests_three_picks_and_json_contract(prefs) -> None:
    prompt = build_recommendation_prompt(prefs, TODAY)

    assert "Identify 3 specific stock recommendations" in prompt
    assert "Ensure 3 unique recommendations." in prompt
    assert "```json```" in prompt
    for key in ("symbol", "name", "price", "changePercent", "rationale", "riskRating",
                "potentialUpside", "sector", "marketSentiment"):
        assert f'"{key}"' in prompt


@pytest.mark.parametrize(
    ("strategy", "marker", "others"),
    [
        (
            InvestmentStrategy.deep_value,
            'CRITICAL STRATEGY: "Deep Value / 5x Potential Turnaround".',
            ['"Momentum Growth".', '"Dividend & Stability".'],
        ),
        (
            InvestmentStrategy.momentum_growth,
            'CRITICAL STRATEGY: "Momentum Growth".',
            ["Deep Value / 5x", '"Dividend & Stability".'],
        ),
        (
            InvestmentStrategy.dividend_income,
            'CRITICAL STRATEGY: "Dividend & Stability".',
            ["Deep Value / 5x", '"Momentum Growth".'],
        ),
    ],
)
def test_strategy_selects_its_instruction_block(strategy, marker, others) -> None:
    prompt = build_recommendation_prompt(UserPreferences(strategy=strategy), TODAY)

    assert marker in prompt
    for other in others:
        assert other not in prompt


def test_deep_value_block_uses_horizon() -> None:
    prefs = UserPreferences(
        strategy=InvestmentStrategy.deep_value, horizon=InvestmentHorizon.medium
    )

    prompt = build_recommendation_prompt(prefs, TODAY)

    assert "growth potential over the Medium Term (1-5 years)." in prompt


def test_instruction_blocks_are_fixed_text() -> None:
    assert "Do NOT recommend generic blue-chip stocks" in DEEP_VALUE_INSTRUCTION
    assert "accelerating revenue earnings" in MOMENTUM_GROWTH_INSTRUCTION
    assert "low volatility" in DIVIDEND_INCOME_INSTRUCTION


def test_sectors_are_comma_joined() -> None:
    prefs = UserPreferences(sectors=["Energy", "Utilities", "Real Estate"], capital=2500.5)

    prompt = build_recommendation_prompt(prefs, TODAY)

    assert "- Interested Sectors: Energy, Utilities, Real Estate" in prompt
    assert "- Capital: $2500.50" in prompt


def test_default_sectors_when_none_chosen() -> None:
    prompt = build_recommendation_prompt(UserPreferences(sectors=[]), TODAY)

    assert "- Interested Sectors: Technology, Consumer Discretionary" in prompt


def test_default_capital_is_rendered_whole() -> None:
    prefs = UserPreferences()

    assert isinstance(prefs.capital, float)
    assert "- Capital: $10000\n" in build_recommendation_prompt(prefs, TODAY)
