# agents/script_agent/models.py

from pydantic import BaseModel, Field, field_validator


class ScriptRequest(BaseModel):
    topic: str = Field(..., description="What the video is about")

    @field_validator("topic")
    @classmethod
    def topic_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("topic must not be empty")
        return v


class ScriptResponse(BaseModel):
    success: bool = True
    script: str
    topic: str
    model: str
    cost: str
