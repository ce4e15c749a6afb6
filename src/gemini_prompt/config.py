"""Startup configuration, loaded once from the environment / .env."""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional
from dotenv import load_dotenv

GEMINI_MODEL = "gemini-2.0-flash"
GEMINI_OPENAI_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"

@dataclass(frozen=True)
class Settings:
    api_key: str
    model: str = GEMINI_MODEL
    base_url: str = GEMINI_OPENAI_URL
    verbose: bool = False

def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Read API_KEY. A missing key is not an error until the first call."""
    if env is None:
        load_dotenv()
        env = os.environ
    verbose = env.get("GEMINI_PROMPT_VERBOSE", "").lower() in {"1", "true", "yes"}
    return Settings(api_key=env.get("API_KEY", ""), verbose=verbose)
