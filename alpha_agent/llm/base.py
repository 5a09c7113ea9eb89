from abc import ABC, abstractmethod

from alpha_agent.recommendations.schemas import RawModelReply


class GroundedModel(ABC):
    @abstractmethod
    async def generate(self, prompt: str) -> RawModelReply:
        """Send one prompt and return the reply text with any grounding chunks.

        Implementations raise NetworkFailure when the call cannot complete.
        """
        ...
