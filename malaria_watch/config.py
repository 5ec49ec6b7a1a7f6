"""
Runtime configuration.
Reads the Gemini credential, model name, and server options from the environment.
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple
from dotenv import load_dotenv

DEFAULT_MODEL = "gemini-1.5-flash-latest"
DEFAULT_UPLOAD_DIR = "uploads"
DEFAULT_PORT = 5050


@dataclass(frozen=True)
class Settings:
    """
    Configuration injected into the app factories.

    Attributes:
        gemini_api_key (str): Credential for the Gemini API. May be None; requests then fail at call time.
        gemini_model (str): Model used for solution generation.
        upload_dir (str): Directory holding multipart uploads while a request is processed.
        cors_origins (tuple): Origins allowed by the gateway.
        port (int): Port for the local gateway.
    """
    gemini_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_MODEL
    upload_dir: str = DEFAULT_UPLOAD_DIR
    cors_origins: Tuple[str, ...] = field(default_factory=lambda: ("*",))
    port: int = DEFAULT_PORT


def load_settings() -> Settings:
    """
    Build Settings from environment variables (and a .env file if present).

    Returns:
        Settings: The loaded configuration.
    """
    load_dotenv()

    origins = os.getenv("CORS_ORIGINS", "*")

    return Settings(
        gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
        gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        upload_dir=os.getenv("UPLOAD_DIR", DEFAULT_UPLOAD_DIR),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        port=int(os.getenv("GATEWAY_PORT", DEFAULT_PORT)),
    )
