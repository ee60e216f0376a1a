"""Tests for the ElevenLabs streaming client."""
import json

import httpx
import pytest
import respx

from agents.voice_agent.elevenlabs_client import ElevenLabsClient, VoiceClientError

BASE_URL = "https://api.elevenlabs.test"
VOICE_ID = "JBFqnCBsd6RMkjVDRZzb"
STREAM_URL = f"{BASE_URL}/v1/text-to-speech/{VOICE_ID}/stream"


@pytest.fixture
def tts():
    return ElevenLabsClient(api_key="xi-test", base_url=BASE_URL, timeout=5)


@pytest.mark.asyncio
async def test_synthesize_collects_stream(tts):
    with respx.mock:
        route = respx.post(STREAM_URL).respond(200, content=b"ID3" + b"\x00" * 64)

        audio = await tts.synthesize("Hello there", VOICE_ID)

    assert audio.startswith(b"ID3")
    assert len(audio) == 67
    request = route.calls.last.request
    assert request.headers["xi-api-key"] == "xi-test"
    assert request.url.params["output_format"] == "mp3_44100_128"
    payload = json.loads(request.content)
    assert payload["text"] == "Hello there"
    assert payload["model_id"] == "eleven_multilingual_v2"
    assert payload["voice_settings"] == {
        "stability": 0.0,
        "similarity_boost": 1.0,
        "use_speaker_boost": True,
        "speed": 1.0,
    }


@pytest.mark.asyncio
async def test_synthesize_passes_vendor_message_through(tts):
    error_body = {"detail": {"status": "invalid_api_key", "message": "Invalid API key"}}
    with respx.mock:
        respx.post(STREAM_URL).respond(401, json=error_body)

        with pytest.raises(VoiceClientError) as exc_info:
            await tts.synthesize("Hello", VOICE_ID)

    assert exc_info.value.message == "Invalid API key"


@pytest.mark.asyncio
async def test_synthesize_network_error(tts):
    with respx.mock:
        respx.post(STREAM_URL).mock(side_effect=httpx.ConnectError("connection refused"))

        with pytest.raises(VoiceClientError) as exc_info:
            await tts.synthesize("Hello", VOICE_ID)

    assert "connection refused" in exc_info.value.message


@pytest.mark.asyncio
async def test_synthesize_timeout(tts):
    with respx.mock:
        respx.post(STREAM_URL).mock(side_effect=httpx.ReadTimeout("slow"))

        with pytest.raises(VoiceClientError) as exc_info:
            await tts.synthesize("Hello", VOICE_ID)

    assert "timed out" in exc_info.value.message


@pytest.mark.asyncio
async def test_synthesize_empty_audio_is_error(tts):
    with respx.mock:
        respx.post(STREAM_URL).respond(200, content=b"")

        with pytest.raises(VoiceClientError):
            await tts.synthesize("Hello", VOICE_ID)
