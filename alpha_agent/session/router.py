"""Session endpoints -- the UI drives the view state machine through these."""

from collections.abc import AsyncGenerator

from fastapi import APIRouter
from sse_starlette.sse import EventSourceResponse

from alpha_agent.dependencies import RecommendationAgentDep, ViewStateMachineDep
from alpha_agent.exceptions import ConflictError
from alpha_agent.preferences.schemas import UserPreferences
from alpha_agent.session.activity import AgentLogSequencer
from alpha_agent.session.machine import ViewStateMachine
from alpha_agent.session.schemas import ViewState

router = APIRouter()


@router.get("", response_model=ViewState)
async def get_state(machine: ViewStateMachineDep) -> ViewState:
    return machine.state


@router.post("/preferences", status_code=202, response_model=ViewState)
async def submit_preferences(
    prefs: UserPreferences,
    machine: ViewStateMachineDep,
    agent: RecommendationAgentDep,
) -> ViewState:
    if not machine.submit_preferences(prefs, agent):
        raise ConflictError(f"Cannot start an analysis while {machine.state.view.value}")
    return machine.state


@router.post("/reset", response_model=ViewState)
async def reset(machine: ViewStateMachineDep) -> ViewState:
    machine.reset()
    return machine.state


async def _activity_events(machine: ViewStateMachine) -> AsyncGenerator[dict, None]:
    async for line in machine.follow_activity(AgentLogSequencer()):
        yield {"event": "log", "data": line}

    state = await machine.wait()
    yield {"event": "state", "data": state.model_dump_json(by_alias=True)}


@router.get("/activity", response_class=EventSourceResponse)
async def stream_activity(machine: ViewStateMachineDep) -> EventSourceResponse:
    """Stream the analysis log via Server-Sent Events, then the settled state."""
    return EventSourceResponse(_activity_events(machine))
