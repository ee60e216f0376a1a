# agents/script_agent/main.py

"""FastAPI application for the Script Agent."""
import logging
import time

from fastapi import Body, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agents.common import HealthResponse, install_error_handlers, require_api_key
from .config import settings
from .gemini_client import GeminiScriptClient
from .models import ScriptRequest, ScriptResponse

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Script Agent",
    description="Generates short-form video scripts with Gemini.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)

install_error_handlers(app, "Script Agent")


def get_script_client() -> GeminiScriptClient:
    api_key = require_api_key(settings.GEMINI_API_KEY, "GEMINI_API_KEY")
    return GeminiScriptClient(api_key=api_key, model=settings.GEMINI_MODEL, timeout=settings.TIMEOUT)


@app.get("/health", response_model=HealthResponse, tags=["Utility"])
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="ok",
        agent="Script Agent",
        version=app.version,
        api_key_configured=bool(settings.GEMINI_API_KEY),
    )


@app.post("/script-generation", response_model=ScriptResponse, tags=["Core"])
async def generate_script_endpoint(
    request: ScriptRequest = Body(...),
    client: GeminiScriptClient = Depends(get_script_client),
) -> ScriptResponse:
    start = time.perf_counter()
    script = await client.generate_script(request.topic)
    logger.info(f"Generated script for topic '{request.topic[:50]}' in {time.perf_counter() - start:.2f}s")
    return ScriptResponse(
        script=script,
        topic=request.topic,
        model=client.model,
        cost=settings.COST_LABEL,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("agents.script_agent.main:app", host=settings.HOST, port=settings.PORT, reload=True)
