# agents/image_agent/main.py

"""FastAPI application for the Image Agent."""
import logging

from fastapi import Body, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agents.common import HealthResponse, install_error_handlers, require_api_key
from .config import settings
from .models import ImageSearchRequest, ImageSearchResponse, ImageServiceInfo, SearchConfig
from .unsplash_client import UnsplashClient

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Image Agent",
    description="Stock photo search backed by Unsplash.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)

install_error_handlers(app, "Image Agent")


def get_unsplash_client() -> UnsplashClient:
    api_key = require_api_key(settings.UNSPLASH_API_KEY, "UNSPLASH_API_KEY")
    return UnsplashClient(api_key=api_key, base_url=settings.UNSPLASH_BASE_URL, timeout=settings.TIMEOUT)


@app.get("/health", response_model=HealthResponse, tags=["Utility"])
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="ok",
        agent="Image Agent",
        version=app.version,
        api_key_configured=bool(settings.UNSPLASH_API_KEY),
    )


@app.get("/image-search", response_model=ImageServiceInfo, tags=["Images"])
async def image_service_info() -> ImageServiceInfo:
    require_api_key(settings.UNSPLASH_API_KEY, "UNSPLASH_API_KEY")
    return ImageServiceInfo(
        message="Unsplash API service is available",
        source=settings.SOURCE_NAME,
        pricing=settings.PRICING,
        supported_orientations=settings.SUPPORTED_ORIENTATIONS,
        max_images_per_request=settings.MAX_IMAGES_PER_REQUEST,
        note="Images are free to use with proper attribution to photographers",
    )


@app.post("/image-search", response_model=ImageSearchResponse, tags=["Images"])
async def image_search(
    request: ImageSearchRequest = Body(...),
    client: UnsplashClient = Depends(get_unsplash_client),
) -> ImageSearchResponse:
    result = await client.search(request.query, request.count, request.orientation)
    return ImageSearchResponse(
        images=result.images,
        count=len(result.images),
        query=request.query,
        total_results=result.total,
        total_pages=result.total_pages,
        config=SearchConfig(
            count=request.count,
            orientation=request.orientation,
            source=settings.SOURCE_NAME,
            cost=settings.PRICING,
        ),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("agents.image_agent.main:app", host=settings.HOST, port=settings.PORT, reload=True)
