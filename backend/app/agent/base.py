from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

from app.agent.llm_client import LLMClient
from app.core.config import settings

InType = TypeVar("InType", bound=BaseModel | str)
OutType = TypeVar("OutType", bound=BaseModel | str)

class BaseAgent(ABC, Generic[InType, OutType]):
    """Abstract base class for all agents in the pipeline."""

    temperature: float = 0.2
    max_tokens: int | None = None

    def __init__(self, model_name: str | None = None, llm: LLMClient | None = None):
        model_to_use = model_name or settings.MODEL_DEFAULT
        self.llm = llm or LLMClient(model_name=model_to_use)

    @abstractmethod
    async def run(self, input_data: InType) -> OutType:
        """Run the agent on the given input to produce the output artifact."""
        pass

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Send one prompt with this agent's sampling defaults unless overridden."""
        return await self.llm.generate_text(
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            temperature=self.temperature if temperature is None else temperature,
            max_tokens=self.max_tokens if max_tokens is None else max_tokens,
        )
