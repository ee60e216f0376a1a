# agents/image_agent/config.py

import logging
from typing import List, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    UNSPLASH_API_KEY: Optional[str] = None
    UNSPLASH_BASE_URL: str = "https://api.unsplash.com"
    UNSPLASH_API_VERSION: str = "v1"
    TIMEOUT: int = 20

    MIN_IMAGES_PER_REQUEST: int = 1
    MAX_IMAGES_PER_REQUEST: int = 30 # Unsplash per_page ceiling
    DEFAULT_COUNT: int = 4
    DEFAULT_ORIENTATION: str = "landscape"
    SUPPORTED_ORIENTATIONS: List[str] = ["landscape", "portrait", "squarish"]
    ORDER_BY: str = "relevant"

    SOURCE_NAME: str = "Unsplash"
    PRICING: str = "FREE (with attribution)"

    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8103

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()

log_level_to_set = settings.LOG_LEVEL.upper()
if not hasattr(logging, log_level_to_set):
    logging.warning(f"Invalid LOG_LEVEL '{log_level_to_set}' in Image Agent settings. Defaulting to INFO.")
    log_level_to_set = "INFO"

logging.basicConfig(
    level=getattr(logging, log_level_to_set),
    format="%(asctime)s - %(name)s (IMAGE_AGENT) - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)
