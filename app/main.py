# -------------------------------------------------------------
# AI Trip Planner - FastAPI Entrypoint
# -------------------------------------------------------------
import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Routers
from app.api.itinerary_router import router as itinerary_router

from app.config import settings
from app.schemas.itinerary_schema import LivenessSchema

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# -------------------------------------------------------------
# Initialize FastAPI App
# -------------------------------------------------------------
app = FastAPI(
    title=settings.APP_NAME,
    description="Day-by-day trip itineraries from Gemini, with a deterministic fallback",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routers
app.include_router(itinerary_router)


# -------------------------------------------------------------
# Liveness + Health Check
# -------------------------------------------------------------
@app.get("/", response_model=LivenessSchema)
def liveness():
    return LivenessSchema(name=settings.APP_NAME, time=datetime.now(timezone.utc))


@app.get("/health")
def health():
    return {"status": "ok"}


# -------------------------------------------------------------
# Startup Hook
# -------------------------------------------------------------
@app.on_event("startup")
async def on_startup():
    logger.info("Environment: %s", settings.ENV)
    if settings.has_gemini_credentials:
        logger.info("Gemini model: %s", settings.GEMINI_MODEL)
    else:
        logger.warning("GEMINI_API_KEY not set; every plan will use the template itinerary")
    logger.info("Application startup complete.")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)
