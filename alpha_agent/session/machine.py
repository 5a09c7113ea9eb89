"""Onboarding -> analyzing -> results lifecycle for a single investor session.

The machine is the only writer of the view state. Every transition goes
through `submit_preferences`, the analysis task it schedules, or `reset`.
"""

import asyncio
from collections.abc import AsyncIterable, AsyncIterator
from typing import Protocol

import structlog

from alpha_agent.preferences.schemas import UserPreferences
from alpha_agent.recommendations.schemas import AgentResponse
from alpha_agent.session.schemas import View, ViewState

logger = structlog.get_logger()

MIN_DWELL_SECONDS = 4.0
FAILURE_MESSAGE = "Market data streams disrupted. Please try again."


class RecommendationRunner(Protocol):
    async def run(self, prefs: UserPreferences) -> AgentResponse: ...


class ViewStateMachine:
    def __init__(
        self,
        agent: RecommendationRunner | None = None,
        min_dwell: float = MIN_DWELL_SECONDS,
    ) -> None:
        self._agent = agent
        self._min_dwell = min_dwell
        self._state = ViewState()
        self._task: asyncio.Task[None] | None = None

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def min_dwell(self) -> float:
        return self._min_dwell

    def submit_preferences(
        self, prefs: UserPreferences, agent: RecommendationRunner | None = None
    ) -> bool:
        """Start an analysis. Returns False, doing nothing, unless onboarding.

        `agent` runs this analysis only; it defaults to the one given at construction.
        """
        runner = agent if agent is not None else self._agent
        if runner is None:
            raise RuntimeError("no recommendation agent to run the analysis")
        if self._state.view is not View.onboarding:
            logger.warning("session_submit_ignored", view=self._state.view.value)
            return False

        loop = asyncio.get_running_loop()
        dwell_until = loop.time() + self._min_dwell
        self._state = ViewState(view=View.analyzing, preferences=prefs)
        self._task = loop.create_task(self._analyze(runner, prefs, dwell_until))
        logger.info("session_analyzing", strategy=prefs.strategy.value)
        return True

    def reset(self) -> None:
        """Back to onboarding. An in-flight analysis is cancelled and never lands."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
            logger.info("session_analysis_cancelled")
        self._task = None
        self._state = ViewState()
        logger.info("session_reset")

    async def wait(self) -> ViewState:
        """Wait for the in-flight analysis, if any, to settle."""
        task = self._task
        if task is not None and not task.done():
            await asyncio.wait({task})
        return self._state

    async def aclose(self) -> None:
        task = self._task
        self.reset()
        if task is not None and not task.done():
            await asyncio.wait({task})

    async def follow_activity(self, lines: AsyncIterable[str]) -> AsyncIterator[str]:
        """Relay `lines` while the current analysis runs.

        The pending line is cancelled as soon as the analysis settles or is
        reset; the log itself never triggers a transition.
        """
        run = self._task
        if run is None or run.done():
            return

        iterator = aiter(lines)
        pending: asyncio.Future[str] | None = None
        try:
            while True:
                pending = asyncio.ensure_future(anext(iterator))
                await asyncio.wait({pending, run}, return_when=asyncio.FIRST_COMPLETED)
                if run.done():
                    return
                try:
                    line = pending.result()
                except StopAsyncIteration:
                    return
                yield line
        finally:
            if pending is not None and not pending.done():
                pending.cancel()

    async def _analyze(
        self, agent: RecommendationRunner, prefs: UserPreferences, dwell_until: float
    ) -> None:
        try:
            response = await agent.run(prefs)
        except Exception as exc:
            logger.error("session_analysis_failed", error=str(exc), error_type=type(exc).__name__)
            self._state = ViewState(view=View.onboarding, error=FAILURE_MESSAGE)
            return

        self._state = ViewState(view=View.analyzing, preferences=prefs, response=response)

        loop = asyncio.get_running_loop()
        while (remaining := dwell_until - loop.time()) > 0:
            await asyncio.sleep(remaining)

        self._state = ViewState(view=View.results, preferences=prefs, response=response)
        logger.info("session_results", recommendations=len(response.recommendations))
