# agents/image_agent/models.py

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .config import settings

Orientation = Literal["landscape", "portrait", "squarish"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ImageSearchRequest(CamelModel):
    query: str
    # Out-of-range values are clamped by the client.
    count: int = settings.DEFAULT_COUNT
    orientation: Orientation = settings.DEFAULT_ORIENTATION

    @field_validator("query")
    @classmethod
    def query_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("query must not be empty")
        return v


class ImageRecord(CamelModel):
    id: int = Field(..., description="1-based position in the result list")
    unsplash_id: str
    url: str = Field(..., description="Regular quality image URL")
    full_url: str
    thumb_url: str
    width: int
    height: int
    alt_text: str
    photographer_name: str
    photographer_url: Optional[str] = None
    download_url: Optional[str] = None
    description: str
    tags: List[str] = Field(default_factory=list)


class SearchConfig(CamelModel):
    count: int
    orientation: str
    source: str
    cost: str


class ImageSearchResponse(CamelModel):
    success: bool = True
    images: List[ImageRecord]
    count: int
    query: str
    total_results: int
    total_pages: int
    config: SearchConfig


class ImageServiceInfo(CamelModel):
    success: bool = True
    message: str
    source: str
    pricing: str
    supported_orientations: List[str]
    max_images_per_request: int
    note: str
