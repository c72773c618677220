import json
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.llm.itinerary_chain import GenerationError, GenerationParams
from app.main import app
from app.services.itinerary_service import ItineraryService, get_itinerary_service


class FakeGenerator:
    """Stand-in for Gemini: returns canned text or raises."""

    def __init__(self, text: Optional[str] = None, error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def generate(self, prompt: str, schema: Dict[str, Any], params: GenerationParams) -> str:
        self.calls.append({"prompt": prompt, "schema": schema, "params": params})
        if self.error is not None:
            raise self.error
        return self.text


def generated_payload(days: int = 3) -> Dict[str, Any]:
    return {
        "destination": "Lisbon",
        "startDate": "2025-06-01",
        "endDate": f"2025-06-0{days}",
        "budgetLevel": "medium",
        "pace": "balanced",
        "days": [
            {
                "date": f"2025-06-0{i + 1}",
                "title": f"Lisbon day {i + 1}",
                "summary": "Trams and tiles",
                "morning": "09:00 Alfama",
                "afternoon": "14:00 Belem",
                "evening": "19:00 Bairro Alto",
                "foodSuggestions": ["Pasteis de nata"],
                "tips": ["Wear good shoes"],
            }
            for i in range(days)
        ],
    }


@pytest.fixture
def trip_body() -> Dict[str, Any]:
    return {
        "destination": "Lisbon",
        "startDate": "2025-06-01",
        "endDate": "2025-06-03",
        "travelers": 2,
        "interests": ["food", "history"],
        "budgetLevel": "low",
        "pace": "chill",
        "extras": "vegetarian",
    }


@pytest.fixture
def make_client():
    def _make(generator=None, has_credentials=True):
        service = ItineraryService(generator=generator, has_credentials=has_credentials)
        app.dependency_overrides[get_itinerary_service] = lambda: service
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def good_generator():
    return FakeGenerator(text=json.dumps(generated_payload()))


@pytest.fixture
def failing_generator():
    return FakeGenerator(error=GenerationError("quota exceeded"))
