"""Gemini text-generation client for the Script Agent."""
import asyncio
import logging
from pathlib import Path
from typing import Optional

from google import genai
from google.genai import types
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from agents.common import ProxyError
from .config import settings

logger = logging.getLogger(__name__)

_TEMPLATES_PATH = Path(__file__).resolve().parent / settings.TEMPLATES_DIR
_jinja_env = Environment(
    loader=FileSystemLoader(str(_TEMPLATES_PATH)),
    undefined=StrictUndefined,
    keep_trailing_newline=False,
)


class ScriptClientError(ProxyError):
    """Exception raised for errors while generating a script."""
    pass


def build_prompt(topic: str, min_seconds: int = 30, max_seconds: int = 60, hook_seconds: int = 3) -> str:
    template = _jinja_env.get_template(settings.SCRIPT_TEMPLATE)
    return template.render(
        topic=topic,
        min_seconds=min_seconds,
        max_seconds=max_seconds,
        hook_seconds=hook_seconds,
    )


class GeminiScriptClient:
    """Generates video scripts with a Gemini model.

    A client is built per request from explicit configuration so that no
    credential or connection state is shared between callers.
    """

    def __init__(
        self,
        api_key: str,
        model: str = settings.GEMINI_MODEL,
        timeout: int = settings.TIMEOUT,
        thinking_budget: int = settings.THINKING_BUDGET,
        client: Optional[genai.Client] = None,
    ):
        self.model = model
        self.timeout = timeout
        self.thinking_budget = thinking_budget
        self._client = client or genai.Client(api_key=api_key)

    async def generate_script(self, topic: str) -> str:
        """
        Generate a spoken script for ``topic``.

        Raises:
            ScriptClientError: on timeout, vendor error or an empty response.
        """
        try:
            prompt = build_prompt(topic)
            response = await asyncio.wait_for(
                self._client.aio.models.generate_content(
                    model=self.model,
                    contents=prompt,
                    config=types.GenerateContentConfig(
                        thinking_config=types.ThinkingConfig(thinking_budget=self.thinking_budget),
                    ),
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            raise ScriptClientError(f"Request timed out after {self.timeout} seconds")
        except Exception as e:
            logger.error(f"Gemini API Error: {e}")
            raise ScriptClientError(str(e)) from e

        text = (response.text or "").strip()
        if not text:
            raise ScriptClientError("Gemini returned an empty script")
        return text
