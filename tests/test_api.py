import json
from datetime import datetime

from conftest import FakeGenerator


def test_liveness(make_client):
    res = make_client().get("/")
    assert res.status_code == 200
    body = res.json()
    assert body["ok"] is True
    assert body["name"] == "AI Trip Planner API"
    stamp = datetime.fromisoformat(body["time"])
    assert stamp.tzinfo is not None
    assert stamp.year >= 2025


def test_health(make_client):
    assert make_client().get("/health").json() == {"status": "ok"}


def test_validation_failure_returns_400_with_all_errors(make_client):
    res = make_client().post("/api/plan", json={"startDate": "2025-05-10", "endDate": "2025-05-05"})
    assert res.status_code == 400
    assert res.json() == {"ok": False, "errors": ["destination is required", "Invalid date range"]}


def test_non_object_body_is_treated_as_empty(make_client):
    client = make_client()
    for kwargs in ({"json": ["Lisbon"]}, {"content": b"not json"}):
        res = client.post("/api/plan", **kwargs)
        assert res.status_code == 400
        assert res.json()["errors"] == [
            "destination is required",
            "startDate is required",
            "endDate is required",
        ]


def test_generated_plan(make_client, good_generator, trip_body):
    res = make_client(good_generator).post("/api/plan", json=trip_body)
    assert res.status_code == 200
    body = res.json()
    assert body["ok"] is True
    assert body["source"] == "generated"
    assert len(body["days"]) == 3


def test_defaults_applied_server_side(make_client):
    generator = FakeGenerator(text="{}")
    res = make_client(generator).post(
        "/api/plan", json={"destination": "Rome", "startDate": "2025-06-01", "endDate": "2025-06-02"}
    )
    body = res.json()
    assert body["budgetLevel"] == "medium"
    assert body["pace"] == "balanced"
    assert "Travelers: 1" in generator.calls[0]["prompt"]


def test_null_optional_fields_use_defaults(make_client):
    res = make_client(has_credentials=False).post(
        "/api/plan",
        json={"destination": "Rome", "startDate": "2025-06-01", "endDate": "2025-06-01", "pace": None},
    )
    assert res.status_code == 200
    assert res.json()["pace"] == "balanced"


def test_unreachable_model_still_returns_itinerary(make_client, failing_generator, trip_body):
    res = make_client(failing_generator).post("/api/plan", json=trip_body)
    assert res.status_code == 200
    body = res.json()
    assert body["ok"] is True
    assert body["source"] == "fallback-error"
    assert "quota" not in json.dumps(body)
    assert [d["date"] for d in body["days"]] == ["2025-06-01", "2025-06-02", "2025-06-03"]


def test_malformed_model_output(make_client, trip_body):
    res = make_client(FakeGenerator(text="```json\n{broken")).post("/api/plan", json=trip_body)
    body = res.json()
    assert res.status_code == 200
    assert body["source"] == "fallback-malformed"
    assert len(body["days"]) == 3


def test_no_credentials(make_client, trip_body):
    body = make_client(has_credentials=False).post("/api/plan", json=trip_body).json()
    assert body["source"] == "fallback-no-credentials"
    assert body["days"][0]["title"] == "Day 1 in Lisbon"


def test_plan_options(make_client):
    body = make_client().get("/api/plan/options").json()
    assert body["budgetLevels"] == ["low", "medium", "high"]
    assert body["paces"] == ["chill", "balanced", "packed"]
    assert "photography" in body["interests"]
    assert body["defaults"] == {"travelers": 1, "budgetLevel": "medium", "pace": "balanced"}


def test_export_plan_as_attachment(make_client, trip_body):
    client = make_client(has_credentials=False)
    plan = client.post("/api/plan", json=trip_body).json()

    res = client.post("/api/plan/export", json=plan)

    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/json")
    assert 'filename="trip-Lisbon-2025-06-01_to_2025-06-03.json"' in res.headers["content-disposition"]
    assert res.json() == plan


def test_wrong_type_for_destination_is_rejected(make_client):
    res = make_client().post(
        "/api/plan", json={"destination": 42, "startDate": "2025-06-01", "endDate": "2025-06-02"}
    )
    assert res.status_code == 400
    body = res.json()
    assert body["ok"] is False
    assert body["errors"][0].startswith("destination")


def test_export_filename_drops_header_breaking_characters(make_client):
    plan = {"destination": 'Nice\r\nSet-Cookie: x=1"', "startDate": "2025-06-01", "endDate": "2025-06-02", "days": []}

    res = make_client().post("/api/plan/export", json=plan)

    assert res.status_code == 200
    disposition = res.headers["content-disposition"]
    assert "\r" not in disposition and "\n" not in disposition
    assert 'filename="trip-NiceSet-Cookie: x=1-2025-06-01_to_2025-06-02.json"' in disposition
    assert "set-cookie" not in res.headers
    assert res.json() == plan


def test_overlong_trip_is_rejected(make_client):
    res = make_client().post(
        "/api/plan", json={"destination": "Everywhere", "startDate": "1900-01-01", "endDate": "2100-12-31"}
    )
    assert res.status_code == 400
    assert res.json()["errors"] == ["Trip cannot be longer than 60 days"]
