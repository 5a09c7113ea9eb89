"""Prompt templates for the recommendation agent."""

from datetime import date

from alpha_agent.preferences.schemas import InvestmentStrategy, UserPreferences

DEEP_VALUE_INSTRUCTION = """CRITICAL STRATEGY: "Deep Value / 5x Potential Turnaround".
You must find stocks that meet the following strict criteria:
1. **High Return Potential**: Target 500% (5x) growth potential over the {horizon}.
2. **Contrarian Entry**: The stock price should be currently depressed or have a \
declining chart/trend (buying the dip).
3. **Undervalued**: Look for low P/E (Price to Earnings) or extremely low P/S \
(Price to Sales) ratios relative to peers.
4. **Strong Fundamentals**: The company MUST have a solid user base, high brand \
awareness, or inelastic market demand.
5. **Turnaround Story**: Identify a clear catalyst (e.g., new product, management \
change, market cycle shift) that will drive the 5x growth.

Do NOT recommend generic blue-chip stocks like Apple or Microsoft unless they are \
severely crashed. Focus on hidden gems, beaten-down tech, or misunderstood companies."""

MOMENTUM_GROWTH_INSTRUCTION = """CRITICAL STRATEGY: "Momentum Growth".
Focus on companies with accelerating revenue earnings, high relative strength, \
and sector leadership."""

DIVIDEND_INCOME_INSTRUCTION = """CRITICAL STRATEGY: "Dividend & Stability".
Focus on safe, income-generating stocks with low volatility."""

STRATEGY_INSTRUCTIONS: dict[InvestmentStrategy, str] = {
    InvestmentStrategy.deep_value: DEEP_VALUE_INSTRUCTION,
    InvestmentStrategy.momentum_growth: MOMENTUM_GROWTH_INSTRUCTION,
    InvestmentStrategy.dividend_income: DIVIDEND_INCOME_INSTRUCTION,
}

RECOMMENDATION_PROMPT = """You are an elite hedge fund analyst AI. Today is {today}.

User Profile:
- Risk Tolerance: {risk_level}
- Investment Horizon: {horizon}
- Strategy: {strategy}
- Interested Sectors: {sectors}
- Capital: ${capital}

{strategy_instruction}

Task:
1. Search for current real-time market data, news, valuations, and technical trends.
2. Identify 3 specific stock recommendations that perfectly match the "CRITICAL STRATEGY" above.
3. Determine the overall market sentiment based on today's news.

Output Requirements:
- Return a VALID JSON object wrapped in a ```json``` code block.
- The JSON must follow this structure exactly:
  {{
    "recommendations": [
      {{
        "symbol": "TICKER",
        "name": "Company Name",
        "price": "Current Price",
        "changePercent": "Today's change",
        "rationale": "Detailed explanation of WHY this matches the strategy criteria. \
Mention valuation metrics (P/E, P/S) and the specific fundamental strength \
(brand/users) vs price decline.",
        "riskRating": "Low" | "Medium" | "High",
        "potentialUpside": "Estimated upside (e.g. +450% over 5y)",
        "sector": "Sector Name"
      }}
    ],
    "marketSentiment": "A brief summary of the market mood today."
  }}
- Ensure 3 unique recommendations."""


def _format_capital(capital: float) -> str:
    return str(int(capital)) if float(capital).is_integer() else f"{capital:.2f}"


def build_recommendation_prompt(prefs: UserPreferences, today: date) -> str:
    strategy_instruction = STRATEGY_INSTRUCTIONS[prefs.strategy].format(
        horizon=prefs.horizon.value
    )
    return RECOMMENDATION_PROMPT.format(
        today=today.isoformat(),
        risk_level=prefs.risk_level.value,
        horizon=prefs.horizon.value,
        strategy=prefs.strategy.value,
        sectors=", ".join(prefs.sectors),
        capital=_format_capital(prefs.capital),
        strategy_instruction=strategy_instruction,
    )
