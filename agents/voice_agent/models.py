# agents/voice_agent/models.py

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VoiceRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    script: str = Field(..., description="Text to synthesize")
    voice_id: Optional[str] = Field(None, alias="voiceId", description="ElevenLabs voice ID")

    @field_validator("script")
    @classmethod
    def script_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("script must not be empty")
        return v


class VoiceResponse(BaseModel):
    success: bool = True
    audio: str = Field(..., description="Base64-encoded audio")
    script: str
    format: str


class VoicePreset(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    voice_id: str = Field(..., alias="voiceId")
    label: str


class VoiceListResponse(BaseModel):
    success: bool = True
    voices: List[VoicePreset]
    default: str
