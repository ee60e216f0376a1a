# agents/voice_agent/config.py

from typing import Dict, Optional
import logging

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

# Preset voices offered by the UI, voice_id -> label
VOICE_PRESETS: Dict[str, str] = {
    "JBFqnCBsd6RMkjVDRZzb": "Sarah (Friendly)",
    "pNInz6obpgDQGcFmaJgB": "Adam (Professional)",
    "yoZ06aMxZJJ28mfd3POQ": "Josh (Casual)",
}


class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"
    TIMEOUT: int = 60 # Seconds for the whole synthesis stream

    ELEVENLABS_API_KEY: Optional[str] = None
    ELEVENLABS_BASE_URL: str = "https://api.elevenlabs.io"
    DEFAULT_VOICE_ID: str = "JBFqnCBsd6RMkjVDRZzb"
    MODEL_ID: str = "eleven_multilingual_v2"
    OUTPUT_FORMAT: str = "mp3_44100_128"

    # Fixed synthesis parameters
    STABILITY: float = 0.0
    SIMILARITY_BOOST: float = 1.0
    USE_SPEAKER_BOOST: bool = True
    SPEED: float = 1.0

    HOST: str = "0.0.0.0"
    PORT: int = 8102

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()

# Configure logging
log_level_to_set = settings.LOG_LEVEL.upper()
if not hasattr(logging, log_level_to_set):
    logging.warning(f"Invalid LOG_LEVEL '{log_level_to_set}' in Voice Agent settings. Defaulting to INFO.")
    log_level_to_set = "INFO"

logging.basicConfig(
    level=getattr(logging, log_level_to_set),
    format="%(asctime)s - %(name)s (VOICE_AGENT) - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)
