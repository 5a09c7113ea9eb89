"""Decorative activity log shown while an analysis runs.

Purely cosmetic: the lines are fixed and revealed on a random timer. Nothing
here influences when the analysis finishes.
"""

import asyncio
import random
from collections.abc import Sequence

AGENT_LOG_LINES = (
    "Connecting to global market data streams...",
    "Analyzing pre-market volatility...",
    "Scanning S&P 500 for sector outperformers...",
    "Cross-referencing analyst ratings...",
    "Evaluating P/E ratios against historical averages...",
    "Checking recent insider trading activity...",
    "Synthesizing news sentiment analysis...",
    "Finalizing daily alpha picks...",
)

MIN_LINE_DELAY = 0.4
MAX_LINE_DELAY = 1.2


class AgentLogSequencer:
    """Async iterator revealing each line after a random delay.

    Finite and single-use: iterating it a second time raises RuntimeError.
    Cancelling a pending `__anext__` leaves the sequencer where it was.
    """

    def __init__(
        self,
        lines: Sequence[str] = AGENT_LOG_LINES,
        min_delay: float = MIN_LINE_DELAY,
        max_delay: float = MAX_LINE_DELAY,
        rng: random.Random | None = None,
    ) -> None:
        if min_delay < 0 or max_delay < min_delay:
            raise ValueError("delays must satisfy 0 <= min_delay <= max_delay")
        self._lines = tuple(lines)
        self._min_delay = min_delay
        self._max_delay = max_delay
        self._rng = rng or random.Random()
        self._index = 0
        self._started = False

    @property
    def revealed(self) -> tuple[str, ...]:
        return self._lines[: self._index]

    @property
    def finished(self) -> bool:
        return self._index >= len(self._lines)

    def __aiter__(self) -> "AgentLogSequencer":
        if self._started:
            raise RuntimeError("activity log can only be iterated once")
        self._started = True
        return self

    async def __anext__(self) -> str:
        if self.finished:
            raise StopAsyncIteration
        await asyncio.sleep(self._rng.uniform(self._min_delay, self._max_delay))
        line = self._lines[self._index]
        self._index += 1
        return line
