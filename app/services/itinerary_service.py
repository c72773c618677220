import json
import logging
from functools import lru_cache
from typing import Any, List, Optional

from pydantic import ValidationError

from app.config import settings
from app.llm.itinerary_chain import (
    GeminiItineraryGenerator,
    GenerationError,
    GenerationParams,
    ItineraryGenerator,
)
from app.llm.itinerary_prompt import ITINERARY_RESPONSE_SCHEMA, itinerary_prompt
from app.models.itinerary_models import ItineraryResult, TripRequest
from app.planner.template_planner import build_template_itinerary, enumerate_dates
from app.planner.validator import parse_iso_date

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# 🧾 Prompt + response helpers
# ------------------------------------------------------------------
def build_prompt(req: TripRequest) -> str:
    """Render the planning prompt for a single trip request."""
    messages = itinerary_prompt.format_messages(
        destination=req.destination,
        start_date=req.start_date,
        end_date=req.end_date,
        travelers=req.travelers,
        interests=", ".join(req.interests) or "general sightseeing",
        budget_level=req.budget_level,
        pace=req.pace,
        extras=req.extras or "none",
    )
    return messages[0].content


def safe_parse_json(text: Optional[str]) -> Any:
    try:
        return json.loads(text or "")
    except (TypeError, ValueError):
        return None


def _covers_trip(days: List[Any], req: TripRequest) -> bool:
    """One day per calendar date of the trip, in order, and nothing else."""
    dates = []
    for day in days:
        parsed = parse_iso_date(day.get("date")) if isinstance(day, dict) else None
        dates.append(parsed.isoformat() if parsed else None)
    return dates == enumerate_dates(req.start_date, req.end_date)


def _as_generated(data: Any, req: TripRequest) -> Optional[ItineraryResult]:
    """
    Trust the model output only as far as its shape: an object with a
    `days` array dated exactly across the trip. Day contents are passed
    through untouched.
    """
    if not isinstance(data, dict) or not isinstance(data.get("days"), list):
        return None
    try:
        result = ItineraryResult.model_validate({**data, "ok": True, "source": "generated"})
    except ValidationError as e:
        logger.warning("Generated itinerary has an unusable shape: %s", e.error_count())
        return None
    if not _covers_trip(result.days, req):
        logger.warning("Generated itinerary dates do not match %s..%s", req.start_date, req.end_date)
        return None
    return result


# ------------------------------------------------------------------
# 🚀 Core Service
# ------------------------------------------------------------------
class ItineraryService:
    """
    Turns a validated trip request into an itinerary.

    The model is tried once; a missing credential, unparseable output or a
    failed call each degrade to the template planner with a matching source.
    """

    def __init__(
        self,
        generator: Optional[ItineraryGenerator],
        has_credentials: bool,
        params: Optional[GenerationParams] = None,
    ):
        self.generator = generator
        self.has_credentials = has_credentials and generator is not None
        self.params = params or GenerationParams()

    async def plan(self, req: TripRequest) -> ItineraryResult:
        if not self.has_credentials:
            return build_template_itinerary(req, "fallback-no-credentials")

        try:
            text = await self.generator.generate(build_prompt(req), ITINERARY_RESPONSE_SCHEMA, self.params)
        except GenerationError as e:
            logger.error("AI error: %s", e)
            return build_template_itinerary(req, "fallback-error")
        except Exception as e:
            # Generators outside the Gemini adapter may not wrap their errors
            logger.error("AI error (%s): %s", e.__class__.__name__, e)
            return build_template_itinerary(req, "fallback-error")

        result = _as_generated(safe_parse_json(text), req)
        if result is None:
            logger.warning("Model returned malformed itinerary for %s; using template", req.destination)
            return build_template_itinerary(req, "fallback-malformed")

        return result


@lru_cache(maxsize=1)
def get_itinerary_service() -> ItineraryService:
    """Service wired from process settings; credential presence is read once."""
    generator = None
    if settings.has_gemini_credentials:
        generator = GeminiItineraryGenerator(settings.GEMINI_API_KEY, settings.GEMINI_MODEL)

    return ItineraryService(
        generator=generator,
        has_credentials=settings.has_gemini_credentials,
        params=GenerationParams(
            temperature=settings.GENERATION_TEMPERATURE,
            max_output_tokens=settings.GENERATION_MAX_OUTPUT_TOKENS,
            timeout_seconds=settings.GENERATION_TIMEOUT_SECONDS,
        ),
    )
