# orchestrator/main.py

"""Orchestrator service: runs the whole video pipeline for one request."""
import logging
from typing import Any, Dict

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

from orchestrator.client import AgentClient
from orchestrator.config import settings
from orchestrator.models import GenerationRequest
from orchestrator.pipeline import InvalidTopicError, Orchestrator
from orchestrator.state import PipelineState

logger = logging.getLogger(__name__)

app = FastAPI(title="Orchestrator", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)


def build_orchestrator() -> Orchestrator:
    """A fresh orchestrator per request, so concurrent runs share no state."""
    return Orchestrator(preview_before_render=False)


@app.get("/health", tags=["Utility"])
async def health_check() -> Dict[str, str]:
    return {"status": "ok", "agent": "Orchestrator"}


@app.get("/services/images", tags=["Utility"])
async def image_service_info() -> Dict[str, Any]:
    """Report whether the image agent is reachable and configured."""
    async with AgentClient.from_settings(settings) as client:
        result = await client.get_image_service_info()
    if not result.ok:
        return {"success": False, "error": result.message}
    return result.payload


@app.post("/run", response_model=PipelineState, tags=["Orchestration"])
async def run(request: GenerationRequest) -> PipelineState:
    """Run script, voice, image and render steps and return the final state."""
    orchestrator = build_orchestrator()
    try:
        final_state = await orchestrator.run(request)
    except InvalidTopicError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    logger.info(f"Run for '{request.topic[:50]}' ended in phase '{final_state.phase.value}'")
    return final_state


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("orchestrator.main:app", host=settings.HOST, port=settings.PORT, reload=True)
