from langchain_core.prompts import ChatPromptTemplate

itinerary_prompt = ChatPromptTemplate.from_template("""
You are a meticulous travel planner. Create a practical, locally-optimized itinerary.

Constraints:
- Destination: {destination}
- Dates: {start_date} to {end_date}
- Travelers: {travelers}
- Interests: {interests}
- Budget: {budget_level} (low/medium/high)
- Pace: {pace} (chill/balanced/packed)
- Extras: {extras}

Rules:
- Return ONLY JSON that matches the schema.
- Each day must include: title, summary, morning, afternoon, evening, foodSuggestions (array), tips (array).
- Keep items geographically sensible to reduce backtracking.
- Put approximate times and short reasons for each stop.
""")


DAY_FIELDS = ["date", "title", "summary", "morning", "afternoon", "evening", "foodSuggestions", "tips"]

# JSON schema the model output is constrained to
ITINERARY_RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "destination": {"type": "string"},
        "startDate": {"type": "string"},
        "endDate": {"type": "string"},
        "days": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "date": {"type": "string"},
                    "title": {"type": "string"},
                    "summary": {"type": "string"},
                    "morning": {"type": "string"},
                    "afternoon": {"type": "string"},
                    "evening": {"type": "string"},
                    "foodSuggestions": {"type": "array", "items": {"type": "string"}},
                    "tips": {"type": "array", "items": {"type": "string"}},
                },
                "required": DAY_FIELDS,
            },
        },
        "budgetLevel": {"type": "string"},
        "pace": {"type": "string"},
    },
    "required": ["destination", "startDate", "endDate", "days", "budgetLevel", "pace"],
}
