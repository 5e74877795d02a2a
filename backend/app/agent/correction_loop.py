from __future__ import annotations

import logging
from typing import Awaitable, Callable

from app.agent.artifacts import Attempt, AuditVerdict, CorrectionOutcome, CorrectionState

logger = logging.getLogger(__name__)

# One regeneration after a rejected verdict, then the second verdict is final whatever it says.
MAX_CORRECTION_PASSES = 1

AuditFn = Callable[[str], Awaitable[AuditVerdict]]
RegenerateFn = Callable[[str, AuditVerdict], Awaitable[str]]


class CorrectionLoop:
    """
    Bounded audit -> regenerate -> re-audit cycle.

    States are ACCEPTED (terminal) and REJECTED (triggers a regeneration while
    passes remain). With the default bound an artifact is audited at most twice
    and regenerated at most once.
    """

    def __init__(
        self,
        audit: AuditFn,
        regenerate: RegenerateFn,
        max_passes: int = MAX_CORRECTION_PASSES,
    ):
        self.audit = audit
        self.regenerate = regenerate
        self.max_passes = max_passes

    async def run(self, artifact: str, outcome: CorrectionOutcome | None = None) -> CorrectionOutcome:
        """
        Callers that need partial progress when a step raises pass their own
        `outcome`; it is updated after every audit and regeneration.
        """
        if outcome is None:
            outcome = CorrectionOutcome(artifact=artifact)
        outcome.artifact = artifact

        while True:
            verdict = await self.audit(outcome.artifact)
            outcome.audits += 1
            outcome.verdict = verdict
            outcome.state = CorrectionState.ACCEPTED if verdict.accepted else CorrectionState.REJECTED

            if outcome.state == CorrectionState.ACCEPTED:
                return outcome
            if outcome.corrections >= self.max_passes:
                logger.warning(
                    "Artifact still rejected after %s correction pass(es); returning last verdict.",
                    outcome.corrections,
                )
                return outcome

            logger.info(
                "Verdict rejected; running correction pass %s/%s.",
                outcome.corrections + 1,
                self.max_passes,
            )
            outcome.previous_attempts.append(Attempt(artifact=outcome.artifact, verdict=verdict.text))
            outcome.artifact = await self.regenerate(outcome.artifact, verdict)
            outcome.corrections += 1
