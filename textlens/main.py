import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from textlens import llm
from textlens.errors import AnalysisInProgressError
from textlens.models import (
    AnalyzeRequest,
    SelectViewRequest,
    SetModelRequest,
    StateResponse,
    ViewId,
)
from textlens.samples import SAMPLE_TEXT
from textlens.state import AnalysisSession, AppState
from textlens.views import VIEW_TABS, ViewSpec

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)

session = AnalysisSession()


def _state_to_response(state: AppState) -> StateResponse:
    return StateResponse(
        status=state.status.value,
        active_view=state.active_view,
        result=state.result.to_payload() if state.result else None,
        error=state.error,
        elapsed_s=state.elapsed_s,
        model=llm.get_model(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Missing credential is fatal: raising here aborts startup.
    llm.check_configuration()
    log.info("AI service configured (model: %s)", llm.get_model())
    yield


app = FastAPI(title="textlens", version="0.1.0", lifespan=lifespan)


@app.get("/api/health")
async def health():
    return {"status": "ok", "model": llm.get_model()}


@app.get("/api/sample")
async def sample():
    return {"text": SAMPLE_TEXT}


@app.get("/api/settings")
async def get_settings():
    return {
        "current_model": llm.get_model(),
        "available_models": llm.AVAILABLE_MODELS,
    }


@app.put("/api/settings/model")
async def set_model(req: SetModelRequest):
    try:
        llm.set_model(req.model)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return {"current_model": llm.get_model()}


@app.get("/api/tabs")
async def tabs():
    return [{"id": view.value, "label": label, "title": title} for view, label, title in VIEW_TABS]


@app.post("/api/analyze", response_model=StateResponse)
async def analyze(req: AnalyzeRequest):
    try:
        state = await session.run(req.text)
    except AnalysisInProgressError as exc:
        raise HTTPException(status_code=409, detail=exc.user_message)
    return _state_to_response(state)


@app.get("/api/state", response_model=StateResponse)
async def get_state():
    return _state_to_response(session.state)


@app.put("/api/state/view", response_model=StateResponse)
async def select_view(req: SelectViewRequest):
    return _state_to_response(session.select(req.view))


@app.get("/api/views/{view_id}", response_model=ViewSpec, response_model_exclude_none=True)
async def get_view(view_id: ViewId):
    spec = session.current_view(view_id)
    if spec is None:
        raise HTTPException(status_code=404, detail="No analysis result available")
    return spec
