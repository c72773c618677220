from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from app.models.itinerary_models import BUDGET_LEVELS, PACES, TripRequest


REQUIRED_FIELDS = ("destination", "startDate", "endDate")

# Longest range planned in one request; the template builds one day per date
MAX_TRIP_DAYS = 60

FIELD_MESSAGES = {
    "destination": "destination must be a string",
    "travelers": "travelers must be a positive integer",
    "budgetLevel": f"budgetLevel must be one of {', '.join(BUDGET_LEVELS)}",
    "pace": f"pace must be one of {', '.join(PACES)}",
    "interests": "interests must be a list of strings",
    "extras": "extras must be a string",
}


def parse_iso_date(value: Any) -> Optional[date]:
    """
    Parse a calendar date from an ISO 8601 string.
    Full timestamps are accepted and truncated to their date part.
    Returns None when the value is not a usable date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def normalize_body(body: Dict[str, Any]) -> Dict[str, Any]:
    """Drop explicit nulls so the model defaults apply."""
    return {k: v for k, v in body.items() if v is not None}


def _field_errors(body: Dict[str, Any]) -> List[str]:
    """
    Type and enumeration rules come from TripRequest itself; only the
    wording of the messages lives here.
    """
    try:
        TripRequest.model_validate(normalize_body(body))
    except ValidationError as ve:
        errors: List[str] = []
        for err in ve.errors():
            field = str(err["loc"][0]) if err["loc"] else "body"
            # Required fields and dates are reported by the rules above
            if field in ("startDate", "endDate") or (field == "destination" and _is_missing(body.get(field))):
                continue
            message = FIELD_MESSAGES.get(field, f"{field}: {err['msg']}")
            if message not in errors:
                errors.append(message)
        return errors
    return []


def validate(body: Dict[str, Any]) -> List[str]:
    """
    Collect every rule the submitted trip request violates.
    An empty list means the request can be planned.
    """
    errors: List[str] = []

    for field in REQUIRED_FIELDS:
        if _is_missing(body.get(field)):
            errors.append(f"{field} is required")

    raw_start, raw_end = body.get("startDate"), body.get("endDate")
    start, end = parse_iso_date(raw_start), parse_iso_date(raw_end)
    unparseable = (start is None and not _is_missing(raw_start)) or (
        end is None and not _is_missing(raw_end)
    )
    if unparseable or (start and end and end < start):
        errors.append("Invalid date range")
    elif start and end and (end - start).days + 1 > MAX_TRIP_DAYS:
        errors.append(f"Trip cannot be longer than {MAX_TRIP_DAYS} days")

    errors.extend(_field_errors(body))
    return errors
