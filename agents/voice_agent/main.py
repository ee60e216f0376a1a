# agents/voice_agent/main.py

"""FastAPI application for the Voice Agent."""
import base64
import logging
import time

from fastapi import Body, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agents.common import HealthResponse, install_error_handlers, require_api_key
from .config import VOICE_PRESETS, settings
from .elevenlabs_client import ElevenLabsClient
from .models import VoiceListResponse, VoicePreset, VoiceRequest, VoiceResponse

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Voice Agent",
    description="ElevenLabs text-to-speech proxy.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)

install_error_handlers(app, "Voice Agent")


def get_tts_client() -> ElevenLabsClient:
    api_key = require_api_key(settings.ELEVENLABS_API_KEY, "ELEVENLABS_API_KEY")
    return ElevenLabsClient(
        api_key=api_key,
        base_url=settings.ELEVENLABS_BASE_URL,
        model_id=settings.MODEL_ID,
        output_format=settings.OUTPUT_FORMAT,
        timeout=settings.TIMEOUT,
    )


@app.get("/health", response_model=HealthResponse, tags=["Utility"])
async def health_check_endpoint() -> HealthResponse:
    return HealthResponse(
        status="ok",
        agent="Voice Agent",
        version=app.version,
        api_key_configured=bool(settings.ELEVENLABS_API_KEY),
    )


@app.get("/voices", response_model=VoiceListResponse, tags=["TTS Utility"])
async def list_voices_endpoint() -> VoiceListResponse:
    return VoiceListResponse(
        voices=[VoicePreset(voice_id=vid, label=label) for vid, label in VOICE_PRESETS.items()],
        default=settings.DEFAULT_VOICE_ID,
    )


@app.post("/voice-generation", response_model=VoiceResponse, tags=["TTS"])
async def text_to_speech_endpoint(
    request_body: VoiceRequest = Body(...),
    tts_client: ElevenLabsClient = Depends(get_tts_client),
) -> VoiceResponse:
    start_time = time.perf_counter()
    voice_id = request_body.voice_id or settings.DEFAULT_VOICE_ID

    audio_bytes = await tts_client.synthesize(request_body.script, voice_id)

    logger.info(f"Voice generation took {time.perf_counter() - start_time:.2f}s")
    return VoiceResponse(
        audio=base64.b64encode(audio_bytes).decode("utf-8"),
        script=request_body.script,
        format=tts_client.output_format,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("agents.voice_agent.main:app", host=settings.HOST, port=settings.PORT, reload=True, log_level=settings.LOG_LEVEL.lower())
