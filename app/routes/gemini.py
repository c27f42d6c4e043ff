"""
Gemini AI route handlers
"""
from typing import Dict, Any
from fastapi import APIRouter, BackgroundTasks, Depends, Request

from app.config import Settings, get_settings
from app.dependencies import caller_info, get_discord, get_gemini
from app.discord_webhook import DiscordWebhook, send_audit_message
from app.errors import ClientError, ProviderError, ProxyError
from app.gemini_config import DEFAULT_MODEL, GeminiConfig
from app.images import normalize_images
from app.logger import LOG
from app.pydantic.llm import GeminiRequest, GeminiResponse, GeminiVisionRequest, GenerationConfig

router = APIRouter(prefix="/api/gemini", tags=["Gemini AI"])

AUDIT_PROMPT_LENGTH = 100


def _config_kwargs(config: GenerationConfig = None) -> Dict[str, Any]:
    config = config or GenerationConfig()
    return {
        "temperature": config.temperature,
        "top_k": config.top_k,
        "top_p": config.top_p,
        "max_tokens": config.max_output_tokens,
    }


@router.post("/generate", response_model=GeminiResponse)
def generate_content(
    body: GeminiRequest,
    request: Request,
    background_tasks: BackgroundTasks,
    gemini: GeminiConfig = Depends(get_gemini),
    discord: DiscordWebhook = Depends(get_discord),
) -> Dict[str, Any]:
    """
    Generate text from a prompt
    """
    if not body.prompt:
        raise ClientError("Prompt is required")

    model = body.model or DEFAULT_MODEL
    try:
        text = gemini.generate_text(body.prompt, model=model, **_config_kwargs(body.generation_config))
    except ProxyError:
        raise
    except Exception as e:
        LOG.exception(f"Error calling Gemini API: {e}")
        raise ProviderError("Internal server error")

    ip, referer = caller_info(request)
    background_tasks.add_task(send_audit_message, discord, f"Gemini[{ip}] {referer} {model}")
    return {"response": text}


@router.post("/vision", response_model=GeminiResponse)
def generate_vision(
    body: GeminiVisionRequest,
    request: Request,
    background_tasks: BackgroundTasks,
    gemini: GeminiConfig = Depends(get_gemini),
    discord: DiscordWebhook = Depends(get_discord),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """
    Generate text from a prompt and one or more images.
    Images may be data URLs, bare base64 or http(s) URLs.
    """
    refs = body.image_refs()
    if not body.prompt or not refs:
        raise ClientError("Both prompt and image are required")

    gemini.ensure_configured()
    images = normalize_images(refs, timeout=settings.http_timeout_seconds)

    model = body.model or DEFAULT_MODEL
    try:
        text = gemini.generate_vision(body.prompt, images, model=model, **_config_kwargs(body.generation_config))
    except ProxyError:
        raise
    except Exception as e:
        LOG.exception(f"Error calling Gemini Vision API: {e}")
        raise ProviderError("Internal server error")

    ip, referer = caller_info(request)
    message = f"Gemini Vision[{ip}] {referer} {model}: {body.prompt[:AUDIT_PROMPT_LENGTH]}..."
    background_tasks.add_task(send_audit_message, discord, message)
    return {"response": text}
