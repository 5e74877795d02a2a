from app.agent.artifacts import AuditVerdict
from app.agent.base import BaseAgent
from app.agent.llm_client import LLMClient
from app.agent.mermaid import clean_mermaid
from app.agent.prompts.diagram import (
    DIAGRAM_CORRECTION_SYSTEM_PROMPT,
    DIAGRAM_SYSTEM_PROMPT,
    build_diagram_correction_prompt,
    build_diagram_prompt,
)
from app.core.config import settings


class DiagramCompilerAgent(BaseAgent[str, str]):
    """
    Agent responsible for converting a network description into Mermaid flowchart source.
    Model output always goes through clean_mermaid before it leaves the agent.
    """

    temperature = 0.3
    max_tokens = 1000

    def __init__(self, model_name: str | None = None, llm: LLMClient | None = None, *, header: str | None = None):
        super().__init__(model_name=model_name, llm=llm)
        self.header = header or settings.MERMAID_HEADER

    def _system_prompt(self) -> str:
        return DIAGRAM_SYSTEM_PROMPT.format(header=self.header)

    async def run(self, input_data: str) -> str:
        text = await self.complete(self._system_prompt(), build_diagram_prompt(input_data))
        return clean_mermaid(text, self.header)

    async def regenerate(self, network_description: str, previous_code: str, verdict: AuditVerdict) -> str:
        system_prompt = DIAGRAM_CORRECTION_SYSTEM_PROMPT.format(base=self._system_prompt().strip())
        prompt = build_diagram_correction_prompt(network_description, previous_code, verdict.text)
        return clean_mermaid(await self.complete(system_prompt, prompt), self.header)
