import logging
from typing import Callable

from app.agent.artifacts import AuditVerdict
from app.agent.base import BaseAgent
from app.agent.llm_client import LLMClient
from app.agent.prompts.auditor import (
    DIAGRAM_AUDIT_SYSTEM_PROMPT,
    NETWORK_AUDIT_SYSTEM_PROMPT,
    build_diagram_audit_prompt,
    build_network_audit_prompt,
)
from app.core.config import settings

logger = logging.getLogger(__name__)

VerdictPredicate = Callable[[str], bool]


def is_verdict_accepted(text: str, prefix: str | None = None) -> bool:
    """Exact, case-sensitive prefix match at position 0. Anything else is a rejection."""
    accept_prefix = settings.VERDICT_ACCEPT_PREFIX if prefix is None else prefix
    return bool(accept_prefix) and text.startswith(accept_prefix)


class AuditorAgent(BaseAgent[str, AuditVerdict]):
    """
    Agent responsible for auditing generated networks and diagrams for completeness.
    The classification predicate can be swapped when a provider phrases its sentinel differently.
    """

    temperature = 0.1
    max_tokens = 700

    def __init__(
        self,
        model_name: str | None = None,
        llm: LLMClient | None = None,
        *,
        accept_prefix: str | None = None,
        is_accepted: VerdictPredicate | None = None,
    ):
        super().__init__(model_name=model_name or settings.MODEL_AUDITOR, llm=llm)
        self.accept_prefix = accept_prefix or settings.VERDICT_ACCEPT_PREFIX
        self.is_accepted = is_accepted or (lambda text: is_verdict_accepted(text, self.accept_prefix))

    def classify(self, text: str) -> AuditVerdict:
        verdict = AuditVerdict(text=text.strip(), accepted=False)
        verdict.accepted = bool(self.is_accepted(verdict.text))
        if not verdict.accepted:
            logger.warning("Auditor rejected artifact: %s", verdict.text[:200])
        return verdict

    async def run(self, input_data: str) -> AuditVerdict:
        return await self.audit_network(input_data)

    async def audit_network(self, network_description: str) -> AuditVerdict:
        system_prompt = NETWORK_AUDIT_SYSTEM_PROMPT.format(accept_prefix=self.accept_prefix)
        text = await self.complete(system_prompt, build_network_audit_prompt(network_description))
        return self.classify(text)

    async def audit_diagram(self, network_description: str, mermaid_code: str) -> AuditVerdict:
        system_prompt = DIAGRAM_AUDIT_SYSTEM_PROMPT.format(accept_prefix=self.accept_prefix)
        text = await self.complete(system_prompt, build_diagram_audit_prompt(network_description, mermaid_code))
        return self.classify(text)
