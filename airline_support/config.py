"""
Configuration module — environment variables and constants.
- Loads env vars from .env
- Provides fixed response strings and placeholder identifiers
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


# ── Environment ──────────────────────────────────────────────────────────────
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8000"))
CORS_ORIGINS: list[str] = [
    s.strip() for s in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if s.strip()
]
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT: str = os.getenv("LOG_FORMAT", "console")
SERVICE_NAME: str = os.getenv("SERVICE_NAME", "airline-support")
API_BASE: str = os.getenv("API_BASE", "http://localhost:8000")


# ── Constants ────────────────────────────────────────────────────────────────
REFUSAL_MESSAGE: str = "Sorry, I can only answer questions related to airline travel."
GENERIC_ERROR_MESSAGE: str = "Something went wrong while processing your request."

# Placeholders used when the context has not been enriched by a handoff hook yet
DEFAULT_CONFIRMATION_NUMBER: str = "ABC123"
DEFAULT_FLIGHT_NUMBER: str = "FLT-123"

# Marker the UI turns into an interactive seat picker
SEAT_MAP_SENTINEL: str = "DISPLAY_SEAT_MAP"

CONFIRMATION_NUMBER_LENGTH: int = 6
