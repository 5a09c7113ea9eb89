from typing import Annotated

from fastapi import Depends, Request

from alpha_agent.recommendations.service import RecommendationAgent
from alpha_agent.session.machine import ViewStateMachine


def get_recommendation_agent() -> RecommendationAgent:
    from alpha_agent.llm.factory import LLMFactory

    return RecommendationAgent(LLMFactory.create())


def get_view_state_machine(request: Request) -> ViewStateMachine:
    return request.app.state.machine


ViewStateMachineDep = Annotated[ViewStateMachine, Depends(get_view_state_machine)]
RecommendationAgentDep = Annotated[RecommendationAgent, Depends(get_recommendation_agent)]
