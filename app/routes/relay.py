"""
Relays to Discord and fal.ai
"""
from typing import Dict, Any
from fastapi import APIRouter, Depends

from app.dependencies import get_discord, get_fal
from app.discord_webhook import DiscordWebhook
from app.errors import ClientError, ProviderError, ProxyError
from app.fal_config import FalConfig
from app.logger import LOG
from app.pydantic.relay import DiscordPostRequest, DiscordPostResponse, SamRequest, SamResponse

router = APIRouter(prefix="/api", tags=["Relay"])


@router.post("/discord/post", response_model=DiscordPostResponse)
def post_to_discord(
    body: DiscordPostRequest,
    discord: DiscordWebhook = Depends(get_discord),
) -> Dict[str, Any]:
    if not body.content:
        raise ClientError("Content is required")

    try:
        discord.post_message(body.content)
    except ProxyError:
        raise
    except Exception as e:
        LOG.exception(f"Error posting to Discord: {e}")
        raise ProviderError("Internal server error")

    return {"success": True, "message": "Posted to Discord successfully"}


@router.post("/fal/sam", response_model=SamResponse)
def segment_image(
    body: SamRequest,
    fal: FalConfig = Depends(get_fal),
) -> Dict[str, Any]:
    """
    Segment an image with SAM-3, returning masks and boxes
    """
    if not body.image_url:
        raise ClientError("image_url is required")

    try:
        result = fal.segment(body.image_url, body.prompt)
    except ProxyError:
        raise
    except Exception as e:
        LOG.exception(f"Error calling FAL SAM API: {e}")
        raise ProviderError("Internal server error")

    return {"response": result}
