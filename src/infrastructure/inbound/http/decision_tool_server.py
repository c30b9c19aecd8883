from typing import Any, Optional

from fastapi import Body, FastAPI, HTTPException
import uvicorn

from src.config.settings import settings
from src.decision.domain.exceptions import ProblemTextRejected
from src.decision.services.decision_pipeline import DecisionPipeline
from src.infrastructure.inbound.http.decision_tool_registry import DecisionToolRegistry, UnknownToolError
from src.infrastructure.inbound.http.problem_text_validator import ProblemTextValidator
from src.infrastructure.observability.structured_runtime_logger import StructuredRuntimeLogger

app = FastAPI(title=settings.SERVICE_NAME, version=settings.SERVICE_VERSION)

# Dependencies (re-wired by setup_dependencies)
runtime_logger = StructuredRuntimeLogger()
validator = ProblemTextValidator(settings.MIN_PROBLEM_TEXT_LENGTH, settings.MAX_PROBLEM_TEXT_LENGTH)
registry = DecisionToolRegistry.with_default_tools(
    DecisionPipeline(logger=runtime_logger),
    min_length=settings.MIN_PROBLEM_TEXT_LENGTH,
    max_length=settings.MAX_PROBLEM_TEXT_LENGTH,
)


def setup_dependencies(
    pipeline: Optional[DecisionPipeline] = None,
    tools: Optional[DecisionToolRegistry] = None,
    text_validator: Optional[ProblemTextValidator] = None,
    logger: Optional[StructuredRuntimeLogger] = None,
):
    global registry, validator, runtime_logger
    runtime_logger = logger or StructuredRuntimeLogger()
    validator = text_validator or ProblemTextValidator(
        settings.MIN_PROBLEM_TEXT_LENGTH, settings.MAX_PROBLEM_TEXT_LENGTH
    )
    registry = tools or DecisionToolRegistry.with_default_tools(
        pipeline or DecisionPipeline(logger=runtime_logger),
        min_length=validator.min_length,
        max_length=validator.max_length,
    )


def _tool_result(text: str, is_error: bool = False) -> dict:
    return {"content": [{"type": "text", "text": text}], "isError": is_error}


@app.get("/tools")
async def list_tools():
    return {"tools": [tool.describe() for tool in registry.list_tools()]}


# Sync handler: FastAPI runs it in its threadpool, off the event loop.
# Malformed JSON is rejected by FastAPI itself with 422.
@app.post("/tools/{tool_name}")
def call_tool(tool_name: str, payload: Any = Body(None)):
    # 1. Resolve
    try:
        tool = registry.resolve(tool_name)
    except UnknownToolError as exc:
        raise HTTPException(status_code=404, detail=str(exc))

    # 2. Shape
    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Request body must be a JSON object")

    # 3. Validate (input rejection never reaches the pipeline)
    try:
        problem_text = validator.validate(payload.get("problem_text"))
    except ProblemTextRejected as exc:
        runtime_logger.emit(event_type="TOOL_CALL_REJECTED", status="rejected", tool=tool_name, reason=str(exc))
        raise HTTPException(status_code=422, detail=str(exc))

    # 4. Analyze + render
    try:
        text = tool.render(problem_text)
    except Exception as exc:
        runtime_logger.emit_error("TOOL_CALL_FAILED", exc, status="failed", tool=tool_name)
        return _tool_result(tool.render_error(exc), is_error=True)

    runtime_logger.emit(
        event_type="TOOL_CALL_OK",
        status="ok",
        tool=tool_name,
        text_length=len(problem_text),
    )
    return _tool_result(text)


def run_server(host: str = settings.HTTP_HOST, port: int = settings.HTTP_PORT):
    uvicorn.run(app, host=host, port=port)
