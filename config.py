# config.py

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///kinobi.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = os.getenv("SECRET_KEY", "shhh")

    # Reported by /api/<sync_id>/app-version for client update prompts
    APP_VERSION = os.getenv("APP_VERSION", "v1.0.9-simple")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3000"))
    DEBUG = os.getenv("FLASK_DEBUG", "0").lower() in ("1", "true", "yes")
