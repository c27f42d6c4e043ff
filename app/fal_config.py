from typing import Any, Dict, Optional

import fal_client

from app.errors import ProviderError
from app.logger import LOG

SAM_APPLICATION = "fal-ai/sam-3/image"
DEFAULT_SAM_PROMPT = "snowboard"


class FalConfig:
    def __init__(self, api_key: Optional[str], timeout: float = 120.0):
        self.api_key = api_key
        self.timeout = timeout

    def get_client(self) -> fal_client.SyncClient:
        if not self.api_key:
            raise ProviderError("FAL_API_KEY not configured")
        return fal_client.SyncClient(key=self.api_key, default_timeout=self.timeout)

    @staticmethod
    def _on_queue_update(update) -> None:
        if isinstance(update, fal_client.InProgress) and update.logs:
            for log in update.logs:
                LOG.debug(f"fal: {log.get('message')}")

    def segment(self, image_url: str, prompt: Optional[str] = None) -> Dict[str, Any]:
        """
        Run SAM-3 on an image and return the raw result (image, masks,
        metadata, scores, boxes).
        """
        client = self.get_client()
        prompt = prompt or DEFAULT_SAM_PROMPT
        LOG.info(f"Calling FAL SAM API for prompt: {prompt}")

        result = client.subscribe(
            SAM_APPLICATION,
            arguments={
                "image_url": image_url,
                "prompt": prompt,
                "apply_mask": True,
                "output_format": "png",
                "return_multiple_masks": True,
                "max_masks": 20,
                "include_boxes": True,
            },
            with_logs=True,
            on_queue_update=self._on_queue_update,
        )
        if not isinstance(result, dict):
            raise ProviderError("Unexpected response from FAL SAM API")

        LOG.info(f"FAL SAM API success: masks={len(result.get('masks') or [])}")
        return result
