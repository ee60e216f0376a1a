# agents/script_agent/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
from typing import Optional
import logging

load_dotenv()


class Settings(BaseSettings):
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-2.5-flash"
    THINKING_BUDGET: int = 0 # 0 disables thinking for faster responses
    TIMEOUT: int = 30 # Seconds before a Gemini call is treated as failed
    COST_LABEL: str = "FREE"

    TEMPLATES_DIR: str = "prompts" # Relative to this package
    SCRIPT_TEMPLATE: str = "tiktok_script.tpl"

    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8101

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()

# Configure logging
log_level_to_set = settings.LOG_LEVEL.upper()
if not hasattr(logging, log_level_to_set):
    logging.getLogger(__name__).warning(
        f"Invalid LOG_LEVEL '{log_level_to_set}' in Script Agent settings. Defaulting to INFO."
    )
    log_level_to_set = "INFO"

logging.basicConfig(
    level=getattr(logging, log_level_to_set),
    format="%(asctime)s - %(name)s (SCRIPT_AGENT) - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)
