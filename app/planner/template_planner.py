from datetime import timedelta
from typing import List

from app.models.itinerary_models import DayPlan, ItineraryResult, Source, TripRequest
from app.planner.validator import parse_iso_date


FOOD_SUGGESTIONS = [
    "Local breakfast cafe near center",
    "Lunch at a well-rated casual spot",
    "Dinner at a popular local kitchen",
]

TRAVEL_TIPS = [
    "Buy transit pass/card to save time",
    "Prebook tickets for major attractions",
    "Carry cash card/UPI backup",
]


# -------------------------------------------------------------------
# 📅 Calendar helpers
# -------------------------------------------------------------------
def enumerate_dates(start_iso: str, end_iso: str) -> List[str]:
    """
    Every calendar date in [start, end] as ISO strings.
    Unparseable or reversed ranges give an empty list.
    """
    start = parse_iso_date(start_iso)
    end = parse_iso_date(end_iso)
    if start is None or end is None or end < start:
        return []
    return [(start + timedelta(days=i)).isoformat() for i in range((end - start).days + 1)]


# -------------------------------------------------------------------
# 🧩 Day Plan Builder
# -------------------------------------------------------------------
def build_day(destination: str, day_date: str, day_index: int, budget_level: str, pace: str) -> DayPlan:
    """Assemble a single fixed-pattern day for the destination."""
    return DayPlan(
        date=day_date,
        title=f"Day {day_index} in {destination}",
        summary=f"Highlights of {destination} tailored to {budget_level} budget and {pace} pace.",
        morning=f"08:30 – City stroll and landmark visit near central {destination}.",
        afternoon="13:00 – Museum/market in a nearby district; short transfer.",
        evening="18:30 – Sunset spot + riverside/old-town walk.",
        food_suggestions=list(FOOD_SUGGESTIONS),
        tips=list(TRAVEL_TIPS),
    )


def build_template_itinerary(req: TripRequest, source: Source) -> ItineraryResult:
    """
    Deterministic itinerary used whenever the model cannot be relied on.
    Pure: the same request always yields the same days.
    """
    days = [
        build_day(req.destination, day_date, i + 1, req.budget_level, req.pace).model_dump(by_alias=True)
        for i, day_date in enumerate(enumerate_dates(req.start_date, req.end_date))
    ]

    return ItineraryResult(
        ok=True,
        source=source,
        destination=req.destination,
        start_date=req.start_date,
        end_date=req.end_date,
        days=days,
        budget_level=req.budget_level,
        pace=req.pace,
    )
