"""
FastAPI dependencies wiring provider clients to the process settings
"""
from typing import Tuple

from fastapi import Depends, Request

from app.config import Settings, get_settings
from app.discord_webhook import DiscordWebhook
from app.fal_config import FalConfig
from app.gemini_config import GeminiConfig


def get_gemini(settings: Settings = Depends(get_settings)) -> GeminiConfig:
    return GeminiConfig(settings.gemini_api_key)


def get_fal(settings: Settings = Depends(get_settings)) -> FalConfig:
    return FalConfig(settings.fal_api_key)


def get_discord(settings: Settings = Depends(get_settings)) -> DiscordWebhook:
    return DiscordWebhook(settings.discord_webhook_url, timeout=settings.http_timeout_seconds)


def caller_info(request: Request) -> Tuple[str, str]:
    """Client address and referring page, for audit lines"""
    ip = request.client.host if request.client else "unknown"
    referer = request.headers.get("referer") or "no-referrer"
    return ip, referer
