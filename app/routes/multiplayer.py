"""
Next-speaker prediction for multiplayer chat
"""
from typing import Dict, Any
from fastapi import APIRouter, Depends

from app.dependencies import get_gemini
from app.errors import ClientError, ProviderError, ProxyError
from app.gemini_config import LITE_MODEL, GeminiConfig
from app.logger import LOG
from app.prompts import build_next_speaker_prompt, parse_next_speaker
from app.pydantic.llm import MultiplayerRequest, NextSpeaker

router = APIRouter(prefix="/api", tags=["Multiplayer"])


@router.post("/multiplayer", response_model=NextSpeaker, response_model_exclude_none=True)
def next_speaker(
    body: MultiplayerRequest,
    gemini: GeminiConfig = Depends(get_gemini),
) -> Dict[str, Any]:
    """
    Pick who speaks next in a chat dialog and what they say
    """
    if not body.chat_dialog:
        raise ClientError("Chat dialog is required")

    prompt = build_next_speaker_prompt(body.chat_dialog, body.participants)
    try:
        # gemini-2.5-flash is too slow for turn taking
        result = gemini.generate_text(prompt, model=LITE_MODEL, temperature=0.8)
    except ProxyError:
        raise
    except Exception as e:
        LOG.exception(f"Error in multiplayer API: {e}")
        raise ProviderError("Internal server error")

    try:
        return parse_next_speaker(result)
    except ProviderError:
        LOG.error(f"Failed to parse AI response as JSON: {result!r}")
        raise
