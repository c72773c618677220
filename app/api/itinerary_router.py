import json
import logging
import re
from typing import Any, Dict
from urllib.parse import quote

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse, Response
from app.models.itinerary_models import TripRequest
from app.planner.validator import normalize_body, validate
from app.schemas.itinerary_schema import PlanErrorSchema, PlanOptionsSchema
from app.services.itinerary_service import ItineraryService, get_itinerary_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/plan", tags=["Trip Plan"])


async def _read_body(request: Request) -> Dict[str, Any]:
    """Anything that is not a JSON object is planned as an empty request."""
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _error_response(errors) -> JSONResponse:
    return JSONResponse(status_code=400, content=PlanErrorSchema(errors=errors).model_dump())


def export_filename(itinerary: Dict[str, Any]) -> str:
    name = f"trip-{itinerary.get('destination')}-{itinerary.get('startDate')}_to_{itinerary.get('endDate')}.json"
    # Header-safe: no control characters, quotes or backslashes
    return re.sub(r'[\x00-\x1f\x7f"\\]', "", name)


@router.post("")
async def create_plan(request: Request, service: ItineraryService = Depends(get_itinerary_service)):
    """
    Validate a trip request and return a day-by-day itinerary.
    Generation problems never fail the request; `source` tells them apart.
    """
    body = await _read_body(request)

    errors = validate(body)
    if errors:
        return _error_response(errors)

    trip = TripRequest.model_validate(normalize_body(body))

    result = await service.plan(trip)
    logger.info("Planned %d day(s) for %s (source=%s)", len(result.days), trip.destination, result.source)
    return result.to_response()


@router.get("/options", response_model=PlanOptionsSchema, response_model_by_alias=True)
def plan_options():
    """Form vocabularies and server-side defaults."""
    return PlanOptionsSchema()


@router.post("/export")
def export_plan(itinerary: Dict[str, Any] = Body(...)):
    filename = export_filename(itinerary)
    ascii_name = filename.encode("ascii", "ignore").decode()
    return Response(
        content=json.dumps(itinerary, indent=2, ensure_ascii=False),
        media_type="application/json",
        headers={
            "Content-Disposition": f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename)}"
        },
    )
