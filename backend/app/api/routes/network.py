import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.agent.artifacts import CamelModel, InvalidInputError, NetworkInput
from app.agent.orchestrator import PipelineError, run_diagram_pipeline, run_network_pipeline

router = APIRouter()
logger = logging.getLogger(__name__)

NETWORK_FAILURE_SUGGESTION = (
    "The model service could not finish the request. Try again in a moment; "
    "if it keeps failing, shorten the JSON data or the situation description."
)
DIAGRAM_FAILURE_SUGGESTION = (
    "The diagram could not be generated. The network description above is still usable; "
    "try generating the diagram again."
)


class GenerateNetworkRequest(CamelModel):
    json_data: str | None = None
    situation_description: str | None = None


class GenerateMermaidRequest(CamelModel):
    network_output: str | None = None


def _error_response(status_code: int, message: str, **extra) -> JSONResponse:
    content = {"error": message}
    content.update({key: value for key, value in extra.items() if value is not None})
    return JSONResponse(status_code=status_code, content=content)


@router.post("/generate-network")
async def generate_network(request: GenerateNetworkRequest) -> JSONResponse:
    json_data = (request.json_data or "").strip()
    situation = (request.situation_description or "").strip()
    if not json_data or not situation:
        return _error_response(400, "Missing required fields")

    network_input = NetworkInput(json_data=json_data, situation_description=situation)
    try:
        result = await run_network_pipeline(network_input)
    except InvalidInputError as e:
        return _error_response(400, str(e))
    except PipelineError as e:
        logger.exception("Failed to generate Bayesian network")
        return _error_response(500, str(e), suggestion=NETWORK_FAILURE_SUGGESTION, **e.partial)

    return JSONResponse(content=result.model_dump(by_alias=True, exclude_none=True))


@router.post("/generate-mermaid")
async def generate_mermaid(request: GenerateMermaidRequest) -> JSONResponse:
    network_output = (request.network_output or "").strip()
    if not network_output:
        return _error_response(400, "Missing network output")

    try:
        result = await run_diagram_pipeline(network_output)
    except PipelineError as e:
        logger.exception("Failed to generate Mermaid diagram")
        return _error_response(500, str(e), suggestion=DIAGRAM_FAILURE_SUGGESTION, **e.partial)

    return JSONResponse(content=result.model_dump(by_alias=True, exclude_none=True))
