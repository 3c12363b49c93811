"""
Configuration for the humanizer pipeline.

Fixed constants consumed by the core (thresholds, timeouts, generation
parameters) live at module level. Connection details for the local model
server are read from the environment (or a .env file) via Settings.from_env().
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv


DEFAULT_BASE_URL = "http://localhost:1234/v1"
DEFAULT_MODEL = "llama-3.2-3b-instruct"
# Local servers ignore the key, but the OpenAI SDK refuses to start without one
DEFAULT_API_KEY = "lm-studio"

# Text length thresholds (in words), exclusive upper bounds
LENGTH_THRESHOLDS = {
    "SHORT": 100,
    "MEDIUM": 500,
    "LONG": 2000,
}

# Timeout per size category (seconds)
TIMEOUTS = {
    "SHORT": 30,
    "MEDIUM": 60,
    "LONG": 90,
    "VERY_LONG": 120,
}

# LLM generation parameters
LLM_PARAMS = {
    "temperature": 0.75,
    "top_p": 0.92,
    "frequency_penalty": 0.6,
    "presence_penalty": 0.5,
    "repeat_penalty": 1.15,
}

MAX_INPUT_WORDS = 5000
MAX_OUTPUT_TOKENS = 2500
TOKEN_MULTIPLIER = 1.3

# Preference names used by whoever persists the user's settings
STORAGE_KEYS = {
    "INPUT_TEXT": "inputText",
    "PERSPECTIVE": "perspective",
    "TONE": "tone",
    "STYLE": "style",
    "MASK_PII": "maskPII",
    "MASK_BEFORE": "maskBefore",
}


@dataclass
class Settings:
    """Connection settings for the local chat-completion server."""

    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    api_key: str = DEFAULT_API_KEY

    @classmethod
    def from_env(cls):
        """
        Build settings from environment variables.

        Loads a .env file first if one exists. Recognized variables:
        HUMANIZER_BASE_URL, HUMANIZER_MODEL, HUMANIZER_API_KEY.

        Returns:
            Settings: Settings with defaults for anything not set
        """
        load_dotenv()
        return cls(
            base_url=os.getenv("HUMANIZER_BASE_URL", DEFAULT_BASE_URL),
            model=os.getenv("HUMANIZER_MODEL", DEFAULT_MODEL),
            api_key=os.getenv("HUMANIZER_API_KEY", DEFAULT_API_KEY),
        )
