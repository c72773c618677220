from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, StrictInt


BudgetLevel = Literal["low", "medium", "high"]
Pace = Literal["chill", "balanced", "packed"]
Source = Literal["generated", "fallback-malformed", "fallback-error", "fallback-no-credentials"]

BUDGET_LEVELS = ("low", "medium", "high")
PACES = ("chill", "balanced", "packed")
SOURCES = ("generated", "fallback-malformed", "fallback-error", "fallback-no-credentials")


# ------------------------------------------------------------
#  Trip Request (Input)
# ------------------------------------------------------------
class TripRequest(BaseModel):
    """
    A single form submission. Dates stay as the ISO strings the client sent
    so they can be echoed back untouched.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    destination: str
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    travelers: StrictInt = Field(default=1, gt=0)
    interests: List[str] = Field(default_factory=list)
    budget_level: BudgetLevel = Field(default="medium", alias="budgetLevel")
    pace: Pace = "balanced"
    extras: str = ""


# ------------------------------------------------------------
#  Day-wise Plan
# ------------------------------------------------------------
class DayPlan(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    date: str
    title: str
    summary: str
    morning: str
    afternoon: str
    evening: str
    food_suggestions: List[str] = Field(default_factory=list, alias="foodSuggestions")
    tips: List[str] = Field(default_factory=list)


# ------------------------------------------------------------
#  Itinerary Result (Response)
# ------------------------------------------------------------
class ItineraryResult(BaseModel):
    """
    Response wrapper for every successful plan. Generated payloads may carry
    keys beyond the schema; they are kept and passed through.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    ok: bool = True
    source: Source
    destination: Optional[str] = None
    start_date: Optional[str] = Field(default=None, alias="startDate")
    end_date: Optional[str] = Field(default=None, alias="endDate")
    days: List[Dict[str, Any]] = Field(default_factory=list)
    budget_level: Optional[str] = Field(default=None, alias="budgetLevel")
    pace: Optional[str] = None

    def to_response(self) -> Dict[str, Any]:
        body = self.model_dump(by_alias=True, exclude_unset=True)
        return {"ok": self.ok, "source": self.source, **body}
