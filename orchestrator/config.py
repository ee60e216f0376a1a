# orchestrator/config.py

"""Configuration for the Orchestrator."""
import logging
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    """Settings for the Orchestrator."""

    # Proxy service URLs
    SCRIPT_AGENT_URL: str = "http://localhost:8101"
    VOICE_AGENT_URL: str = "http://localhost:8102"
    IMAGE_AGENT_URL: str = "http://localhost:8103"

    # Render service; unset means every render step fails
    RENDER_SERVICE_URL: Optional[str] = None

    HOST: str = "0.0.0.0"
    PORT: int = 8100

    # Per-step request timeouts (seconds)
    SCRIPT_TIMEOUT: float = 45.0
    VOICE_TIMEOUT: float = 90.0
    IMAGE_TIMEOUT: float = 30.0
    RENDER_TIMEOUT: float = 60.0

    # Render job polling
    RENDER_POLL_INTERVAL: float = 2.0
    RENDER_DEADLINE: float = 600.0

    # Stop in the preview phase after images and wait for an explicit render
    PREVIEW_BEFORE_RENDER: bool = False

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


settings = Settings()

log_level_to_set = settings.LOG_LEVEL.upper()
if not hasattr(logging, log_level_to_set):
    logging.warning(f"Invalid LOG_LEVEL '{log_level_to_set}' in settings. Defaulting to INFO.")
    log_level_to_set = "INFO"

logging.basicConfig(
    level=getattr(logging, log_level_to_set),
    format="%(asctime)s - %(name)s (ORCHESTRATOR) - %(levelname)s - %(message)s"
)
