import os
from typing import List
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseModel):
    ENV: str = os.getenv("ENV", "development")
    APP_NAME: str = os.getenv("APP_NAME", "AI Trip Planner API")
    PORT: int = int(os.getenv("PORT", "4000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Comma-separated list, "*" allows everything
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    # Gemini
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "") or os.getenv("GOOGLE_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
    GENERATION_TEMPERATURE: float = float(os.getenv("GENERATION_TEMPERATURE", "0.6"))
    GENERATION_MAX_OUTPUT_TOKENS: int = int(os.getenv("GENERATION_MAX_OUTPUT_TOKENS", "2000"))
    GENERATION_TIMEOUT_SECONDS: float = float(os.getenv("GENERATION_TIMEOUT_SECONDS", "30"))

    # Allow extra .env variables without throwing validation errors
    model_config = {"extra": "allow"}

    @property
    def has_gemini_credentials(self) -> bool:
        return bool(self.GEMINI_API_KEY.strip())

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()] or ["*"]

settings = Settings()
