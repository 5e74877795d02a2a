import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class InvalidInputError(ValueError):
    """Raised for client input that must be rejected before any model call."""


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON.
    raise ValueError(f"Unsupported JSON constant: {name}")


class CamelModel(BaseModel):
    """Response artifacts are exchanged with the browser in camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NetworkInput(BaseModel):
    json_data: str = Field(description="Raw JSON text describing the persona or dataset")
    situation_description: str = Field(description="Free-text description of the decision situation")

    def parse_json_data(self) -> Any:
        try:
            return json.loads(self.json_data, parse_constant=_reject_constant)
        except (ValueError, RecursionError, TypeError) as e:
            raise InvalidInputError("Invalid JSON format") from e

    def formatted_json(self) -> str:
        return json.dumps(self.parse_json_data(), indent=2, ensure_ascii=False)


class AuditVerdict(BaseModel):
    """Artifact produced by the Auditor Agent."""
    text: str = Field(description="Trimmed auditor response, either the acceptance sentinel or a defect list")
    accepted: bool = Field(description="Whether the verdict classifies as accepted")


class CorrectionState(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Attempt(CamelModel):
    artifact: str
    verdict: str


class CorrectionOutcome(BaseModel):
    """Running state of one audit/correct cycle. Mutated in place so partial progress survives failures."""
    artifact: str
    verdict: AuditVerdict | None = None
    state: CorrectionState | None = None
    audits: int = 0
    corrections: int = 0
    previous_attempts: list[Attempt] = Field(default_factory=list)


class NetworkResult(CamelModel):
    """Response artifact for /generate-network."""
    bayes_net: str
    judge_verdict: str


class PreviousDiagram(CamelModel):
    mermaid_code: str
    judge_verdict: str


class DiagramResult(CamelModel):
    """Response artifact for /generate-mermaid."""
    mermaid_code: str
    judge_verdict: str | None = None
    previous_attempt: PreviousDiagram | None = None
