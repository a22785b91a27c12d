"""Edge Service — settings read from the environment."""

import logging
import os

from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(__file__), ".env"))

AI_SERVICE_URL = os.getenv("AI_SERVICE_URL", "https://ai-worker.emily-cogsdill.workers.dev/api/v1/chat")
AI_MODEL = os.getenv("AI_MODEL", "@cf/openai/gpt-oss-20b")
AI_API_KEY = os.getenv("AI_API_KEY", "")
AI_TIMEOUT_SECONDS = float(os.getenv("AI_TIMEOUT_SECONDS", "30"))

MAX_MESSAGE_LENGTH = int(os.getenv("MAX_MESSAGE_LENGTH", "4000"))

STATIC_DIR = os.getenv("STATIC_DIR") or os.path.join(os.path.dirname(__file__), "static")


def resolve_log_level(name: str) -> str:
    """Unknown level names fall back to INFO."""
    name = (name or "").upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return "INFO"


LOG_LEVEL = resolve_log_level(os.getenv("LOG_LEVEL", "INFO"))

# Reported by name only on /debug
CONFIG_KEYS = (
    "AI_SERVICE_URL",
    "AI_MODEL",
    "AI_API_KEY",
    "AI_TIMEOUT_SECONDS",
    "MAX_MESSAGE_LENGTH",
    "STATIC_DIR",
    "LOG_LEVEL",
)


def configured_keys() -> list[str]:
    return [key for key in CONFIG_KEYS if os.getenv(key)]
