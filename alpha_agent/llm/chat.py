import structlog
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage

from alpha_agent.exceptions import NetworkFailure
from alpha_agent.llm.base import GroundedModel
from alpha_agent.recommendations.schemas import RawModelReply

logger = structlog.get_logger()


class ChatModel(GroundedModel):
    """Any LangChain chat model. These providers return no grounding metadata."""

    def __init__(self, llm: BaseChatModel) -> None:
        self._llm = llm

    async def generate(self, prompt: str) -> RawModelReply:
        try:
            response = await self._llm.ainvoke([HumanMessage(content=prompt)])
        except Exception as exc:
            logger.error("chat_model_request_error", error=str(exc))
            raise NetworkFailure(f"Model request failed: {exc}") from exc

        raw = response.content
        content = raw if isinstance(raw, str) else str(raw)
        return RawModelReply(text=content)
