"""
Cached web page generation for the navigator demo
"""
from typing import Dict, Any
from fastapi import APIRouter, Depends

from app.dependencies import get_gemini
from app.errors import ClientError, ProviderError, ProxyError
from app.gemini_config import LITE_MODEL, GeminiConfig
from app.logger import LOG
from app.prompts import build_cached_page_prompt
from app.pydantic.llm import BrowseRequest, BrowseResponse

router = APIRouter(prefix="/api", tags=["Browse"])

BROWSE_TEMPERATURE = 0.1
BROWSE_MAX_TOKENS = 10000


@router.post("/browse", response_model=BrowseResponse)
def browse(
    body: BrowseRequest,
    gemini: GeminiConfig = Depends(get_gemini),
) -> Dict[str, Any]:
    """
    Ask the model for the HTML it imagines is cached at a URL
    """
    if not body.url:
        raise ClientError("URL is required")

    prompt = build_cached_page_prompt(body.url, body.text)
    try:
        result = gemini.generate_text(
            prompt,
            model=LITE_MODEL,
            temperature=BROWSE_TEMPERATURE,
            max_tokens=BROWSE_MAX_TOKENS,
        )
    except ProxyError:
        raise
    except Exception as e:
        LOG.exception(f"Error in browse API: {e}")
        raise ProviderError("Internal server error")

    return {"result": result}
