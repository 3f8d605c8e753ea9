# backend/config.py
import os
from dotenv import load_dotenv
from sqlalchemy.pool import StaticPool

# Load .env from the same folder as config.py
load_dotenv(os.path.join(os.path.dirname(__file__), ".env"))

DEFAULT_ORIGINS = "http://localhost:8080,http://localhost:1234,https://movies.com"


def _split_origins(raw):
    return [o.strip() for o in raw.split(",") if o.strip()]


class Config:
    PORT = int(os.getenv("PORT", "1234"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    ACCEPTED_ORIGINS = _split_origins(os.getenv("ACCEPTED_ORIGINS", DEFAULT_ORIGINS))

    # Empty string disables seeding
    SEED_FILE = os.getenv("SEED_FILE", os.path.join(os.path.dirname(__file__), "movies.json"))

    # In-memory database, one shared connection per app
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {
        "poolclass": StaticPool,
        "connect_args": {"check_same_thread": False},
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False


class TestingConfig(Config):
    TESTING = True
    LOG_LEVEL = "DEBUG"
    ACCEPTED_ORIGINS = _split_origins(DEFAULT_ORIGINS)
    SEED_FILE = os.path.join(os.path.dirname(__file__), "movies.json")
