from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from app.models.itinerary_models import BUDGET_LEVELS, PACES


INTEREST_OPTIONS = [
    "history",
    "museums",
    "nature",
    "food",
    "adventure",
    "beaches",
    "nightlife",
    "shopping",
    "culture",
    "photography",
]


# ============================================================
# 🩺 Liveness
# ============================================================
class LivenessSchema(BaseModel):
    ok: bool = True
    name: str
    time: datetime


# ============================================================
# ❌ Validation failure (response)
# ============================================================
class PlanErrorSchema(BaseModel):
    ok: bool = False
    errors: List[str]


# ============================================================
# 🎛️ Form vocabularies (response)
# ============================================================
class PlanDefaultsSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    travelers: int = 1
    budget_level: str = Field(default="medium", alias="budgetLevel")
    pace: str = "balanced"


class PlanOptionsSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    budget_levels: List[str] = Field(default_factory=lambda: list(BUDGET_LEVELS), alias="budgetLevels")
    paces: List[str] = Field(default_factory=lambda: list(PACES))
    interests: List[str] = Field(default_factory=lambda: list(INTEREST_OPTIONS))
    defaults: PlanDefaultsSchema = Field(default_factory=PlanDefaultsSchema)
