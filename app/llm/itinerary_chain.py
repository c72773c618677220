import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Protocol

from langchain_core.output_parsers import StrOutputParser
from langchain_google_genai import ChatGoogleGenerativeAI

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when the model could not be reached or refused the request."""


@dataclass(frozen=True)
class GenerationParams:
    temperature: float = 0.6
    max_output_tokens: int = 2000
    timeout_seconds: float = 30.0


class ItineraryGenerator(Protocol):
    async def generate(self, prompt: str, schema: Dict[str, Any], params: GenerationParams) -> str:
        ...


# ------------------------------------------------------------
# Gemini via LangChain
# ------------------------------------------------------------
class GeminiItineraryGenerator:
    """
    Sends a rendered prompt to Gemini and returns the raw JSON text.
    Every failure, including a timeout, surfaces as GenerationError.
    """

    def __init__(self, api_key: str, model_name: str = "gemini-1.5-flash"):
        self.api_key = api_key
        self.model_name = model_name

    def _build_model(self, schema: Dict[str, Any], params: GenerationParams) -> ChatGoogleGenerativeAI:
        return ChatGoogleGenerativeAI(
            model=self.model_name,
            google_api_key=self.api_key,
            temperature=params.temperature,
            max_output_tokens=params.max_output_tokens,
            response_mime_type="application/json",
            response_schema=schema,
            max_retries=0,
        )

    async def generate(self, prompt: str, schema: Dict[str, Any], params: GenerationParams) -> str:
        logger.debug("Calling %s (temperature=%s)", self.model_name, params.temperature)
        try:
            chain =self._build_model(schema, params) | StrOutputParser()
            return await asyncio.wait_for(chain.ainvoke(prompt), timeout=params.timeout_seconds)
        except asyncio.TimeoutError as e:
            raise GenerationError(f"Gemini call timed out after {params.timeout_seconds}s") from e
        except Exception as e:
            raise GenerationError(str(e) or e.__class__.__name__) from e
