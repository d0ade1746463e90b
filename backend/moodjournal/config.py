# backend configuration
# loads env vars for mongodb, cors, and login rules

import os
from pathlib import Path
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# load .env from project root
load_dotenv(Path(__file__).parent.parent.parent / ".env")


class Settings(BaseSettings):
    # mongodb
    MONGODB_URI: str = os.getenv("MONGODB_URI", "")
    MONGODB_DATABASE: str = os.getenv("MONGODB_DATABASE", "mood_journal")
    MOODS_COLLECTION: str = os.getenv("MOODS_COLLECTION", "moods")

    # cors
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:3000")

    # login gate
    MIN_PASSWORD_LENGTH: int = 6

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
