from typing import Any, Dict, Optional
from pydantic import BaseModel


class DiscordPostRequest(BaseModel):
    content: Optional[str] = None


class DiscordPostResponse(BaseModel):
    success: bool
    message: str


class SamRequest(BaseModel):
    image_url: Optional[str] = None
    prompt: Optional[str] = None


class SamResponse(BaseModel):
    # image, masks, metadata, scores and boxes as returned by fal.ai
    response: Dict[str, Any]
