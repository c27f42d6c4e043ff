"""
Application configuration and factory
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional

from fastapi import FastAPI
from dotenv import load_dotenv
from starlette.middleware.cors import CORSMiddleware

from app.errors import register_error_handlers

# Load environment variables
load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Provider keys and transport options, read once from the environment"""
    env: str = "dev"
    gemini_api_key: Optional[str] = None
    fal_api_key: Optional[str] = None
    discord_webhook_url: Optional[str] = None
    cors_allowed_origins: tuple = ("http://localhost:5173",)
    http_timeout_seconds: float = 30.0


def _parse_origins(value: Optional[str]) -> tuple:
    if not value:
        return Settings.cors_allowed_origins
    return tuple(o.strip() for o in value.split(",") if o.strip())


def load_settings() -> Settings:
    try:
        timeout = float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"))
    except ValueError:
        timeout = 30.0

    return Settings(
        env=os.getenv("ENV", "dev"),
        gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
        fal_api_key=os.getenv("FAL_API_KEY") or os.getenv("FAL_KEY") or None,
        discord_webhook_url=os.getenv("DISCORD_WEBHOOK_URL") or None,
        cors_allowed_origins=_parse_origins(os.getenv("CORS_ALLOWED_ORIGINS")),
        http_timeout_seconds=timeout,
    )


@lru_cache()
def get_settings() -> Settings:
    """FastAPI dependency returning the process-wide settings"""
    return load_settings()


def create_app(settings: Settings = None) -> FastAPI:
    """
    Application factory function
    """
    settings = settings or get_settings()

    if settings.env == "prod":
        # Production configuration - disable docs
        app = FastAPI(
            title="Showcase Proxy Server",
            description="Demo showcase backend proxying Gemini, fal.ai and Discord",
            version="1.0.0",
            docs_url=None,
            openapi_url=None,
            redoc_url=None,
        )
    elif settings.env == "dev":
        app = FastAPI(
            title="Showcase Proxy Server",
            description="Demo showcase backend proxying Gemini, fal.ai and Discord",
            version="1.0.0",
        )
    else:
        raise ValueError("Invalid ENV value")

    allowed_origins: List[str] = list(settings.cors_allowed_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    return app
