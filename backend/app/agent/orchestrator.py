import logging
from typing import Any

from app.agent.artifacts import (
    AuditVerdict,
    CorrectionOutcome,
    DiagramResult,
    NetworkInput,
    NetworkResult,
    PreviousDiagram,
)
from app.agent.auditor_agent import AuditorAgent
from app.agent.correction_loop import CorrectionLoop
from app.agent.diagram_agent import DiagramCompilerAgent
from app.agent.network_agent import NetworkSynthesizerAgent
from app.core.config import settings

logger = logging.getLogger(__name__)


class PipelineError(RuntimeError):
    """An upstream step failed; `partial` holds whatever artifacts were produced before it."""

    def __init__(self, message: str, partial: dict[str, Any] | None = None):
        super().__init__(message)
        self.partial = partial or {}


def _error_message(exc: Exception, default: str) -> str:
    return str(exc).strip() or default


def _network_partial(bayes_net: str | None, outcome: CorrectionOutcome | None) -> dict[str, Any]:
    if outcome is not None:
        bayes_net = outcome.artifact
    return {
        "bayesNet": bayes_net,
        "judgeVerdict": outcome.verdict.text if outcome and outcome.verdict else None,
    }


def _diagram_partial(mermaid_code: str | None, outcome: CorrectionOutcome | None) -> dict[str, Any]:
    partial: dict[str, Any] = {"mermaidCode": outcome.artifact if outcome else mermaid_code}
    if outcome and outcome.verdict:
        partial["judgeVerdict"] = outcome.verdict.text
    return {key: value for key, value in partial.items() if value is not None}


async def run_network_pipeline(
    network_input: NetworkInput,
    *,
    synthesizer: NetworkSynthesizerAgent | None = None,
    auditor: AuditorAgent | None = None,
) -> NetworkResult:
    """
    Synthesize a network, audit it and, on rejection, regenerate and re-audit once.
    InvalidInputError is raised before any agent or client is created.
    """
    network_input.parse_json_data()

    bayes_net: str | None = None
    outcome: CorrectionOutcome | None = None
    try:
        synthesizer = synthesizer or NetworkSynthesizerAgent()
        auditor = auditor or AuditorAgent()

        bayes_net = await synthesizer.run(network_input)
        logger.info("Synthesized network description (%s chars); auditing.", len(bayes_net))

        async def regenerate(previous: str, verdict: AuditVerdict) -> str:
            return await synthesizer.regenerate(network_input, previous, verdict)

        outcome = CorrectionOutcome(artifact=bayes_net)
        loop = CorrectionLoop(audit=auditor.audit_network, regenerate=regenerate)
        await loop.run(bayes_net, outcome)
    except Exception as exc:
        logger.error("Network pipeline failed: %s", exc)
        raise PipelineError(
            _error_message(exc, "Failed to generate Bayesian network"),
            partial=_network_partial(bayes_net, outcome),
        ) from exc

    logger.info(
        "Network pipeline finished: state=%s audits=%s corrections=%s",
        outcome.state.value if outcome.state else None,
        outcome.audits,
        outcome.corrections,
    )
    return NetworkResult(bayes_net=outcome.artifact, judge_verdict=outcome.verdict.text)


async def run_diagram_pipeline(
    network_description: str,
    *,
    compiler: DiagramCompilerAgent | None = None,
    auditor: AuditorAgent | None = None,
    audit: bool | None = None,
) -> DiagramResult:
    """
    Compile a network description into cleaned Mermaid source. When auditing is enabled the
    diagram goes through the same single-correction loop as networks do.
    """
    should_audit = settings.AUDIT_DIAGRAMS if audit is None else audit

    mermaid_code: str | None = None
    outcome: CorrectionOutcome | None = None
    try:
        compiler = compiler or DiagramCompilerAgent()
        mermaid_code = await compiler.run(network_description)
        if not should_audit:
            return DiagramResult(mermaid_code=mermaid_code)

        auditor = auditor or AuditorAgent()

        async def audit_diagram(code: str) -> AuditVerdict:
            return await auditor.audit_diagram(network_description, code)

        async def regenerate(previous: str, verdict: AuditVerdict) -> str:
            return await compiler.regenerate(network_description, previous, verdict)

        outcome = CorrectionOutcome(artifact=mermaid_code)
        loop = CorrectionLoop(audit=audit_diagram, regenerate=regenerate)
        await loop.run(mermaid_code, outcome)
    except Exception as exc:
        logger.error("Diagram pipeline failed: %s", exc)
        raise PipelineError(
            _error_message(exc, "Failed to generate Mermaid diagram"),
            partial=_diagram_partial(mermaid_code, outcome),
        ) from exc

    previous_attempt = None
    if outcome.previous_attempts:
        last = outcome.previous_attempts[-1]
        previous_attempt = PreviousDiagram(mermaid_code=last.artifact, judge_verdict=last.verdict)

    return DiagramResult(
        mermaid_code=outcome.artifact,
        judge_verdict=outcome.verdict.text,
        previous_attempt=previous_attempt,
    )
