from os import getenv
from pathlib import Path

from dotenv import load_dotenv

# .env à la racine du repo (optionnel)
load_dotenv(Path(__file__).resolve().parents[2] / ".env")


class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "sqlite:///./todos.db")
    HOST = getenv("HOST", "0.0.0.0")
    PORT = int(getenv("PORT", "3001"))
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = [o.strip() for o in getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    # côté client: où trouver l'API
    API_BASE_URL = getenv("TODO_API_BASE_URL", "http://localhost:3001")

settings = Settings()
