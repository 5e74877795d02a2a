from app.agent.artifacts import AuditVerdict, NetworkInput
from app.agent.base import BaseAgent
from app.agent.prompts.network import (
    NETWORK_CORRECTION_SYSTEM_PROMPT,
    NETWORK_SYSTEM_PROMPT,
    build_network_correction_prompt,
    build_network_prompt,
)


class NetworkSynthesizerAgent(BaseAgent[NetworkInput, str]):
    """
    Agent responsible for turning a JSON dataset plus a situation description
    into a free-text Bayesian network specification.
    """

    temperature = 0.7
    max_tokens = 6000
    correction_temperature = 0.65
    correction_max_tokens = 2200

    async def run(self, input_data: NetworkInput) -> str:
        """
        Returns the trimmed network description. Invalid JSON raises
        InvalidInputError before the model is contacted.
        """
        prompt = build_network_prompt(input_data.situation_description, input_data.formatted_json())
        return await self.complete(NETWORK_SYSTEM_PROMPT, prompt)

    async def regenerate(self, input_data: NetworkInput, previous: str, verdict: AuditVerdict) -> str:
        """Rebuild the whole specification with the auditor's defect list attached verbatim."""
        prompt = build_network_correction_prompt(
            input_data.situation_description,
            input_data.formatted_json(),
            previous_network=previous,
            feedback=verdict.text,
        )
        return await self.complete(
            NETWORK_CORRECTION_SYSTEM_PROMPT,
            prompt,
            temperature=self.correction_temperature,
            max_tokens=self.correction_max_tokens,
        )
