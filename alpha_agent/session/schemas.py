from enum import StrEnum

from alpha_agent.preferences.schemas import UserPreferences
from alpha_agent.recommendations.schemas import AgentResponse
from alpha_agent.schemas import FrozenCamelModel


class View(StrEnum):
    onboarding = "onboarding"
    analyzing = "analyzing"
    results = "results"


class ViewState(FrozenCamelModel):
    """What the UI should show right now.

    onboarding  -- form; `error` set when the last analysis failed
    analyzing   -- `preferences` set; `response` set once the data is in but
                   the minimum dwell has not elapsed yet
    results     -- `preferences` and `response` both set
    """

    view: View = View.onboarding
    preferences: UserPreferences | None = None
    response: AgentResponse | None = None
    error: str | None = None
