from typing import List, Optional, Sequence

from google import genai
from google.genai import types

from app.errors import ProviderError
from app.images import InlineImage
from app.logger import LOG

DEFAULT_MODEL = "gemini-2.5-flash"
LITE_MODEL = "gemini-2.5-flash-lite"

DEFAULT_TEMPERATURE = 0.7
DEFAULT_TOP_K = 40
DEFAULT_TOP_P = 0.95
DEFAULT_MAX_TOKENS = 8192


class GeminiConfig:
    def __init__(self, api_key: Optional[str]):
        self.api_key = api_key
        self._client = None

    def ensure_configured(self) -> None:
        if not self.api_key:
            raise ProviderError("GEMINI_API_KEY not configured")

    @property
    def client(self) -> genai.Client:
        self.ensure_configured()
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    @staticmethod
    def build_config(
        temperature: Optional[float] = None,
        top_k: Optional[int] = None,
        top_p: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> types.GenerateContentConfig:
        """Fill in the defaults for anything the caller left unset"""
        return types.GenerateContentConfig(
            temperature=DEFAULT_TEMPERATURE if temperature is None else temperature,
            top_k=DEFAULT_TOP_K if top_k is None else top_k,
            top_p=DEFAULT_TOP_P if top_p is None else top_p,
            max_output_tokens=DEFAULT_MAX_TOKENS if max_tokens is None else max_tokens,
        )

    def _generate(self, model: str, contents, config: types.GenerateContentConfig) -> str:
        client = self.client
        LOG.debug(f"Calling Gemini model {model}")
        response = client.models.generate_content(
            model=model,
            contents=contents,
            config=config,
        )
        if not response or not response.text:
            raise ProviderError("No content generated from Gemini model")
        return response.text

    def generate_text(
        self,
        prompt: str,
        model: str = DEFAULT_MODEL,
        temperature: Optional[float] = None,
        top_k: Optional[int] = None,
        top_p: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        config = self.build_config(temperature, top_k, top_p, max_tokens)
        return self._generate(model, prompt, config)

    def generate_vision(
        self,
        prompt: str,
        images: Sequence[InlineImage],
        model: str = DEFAULT_MODEL,
        temperature: Optional[float] = None,
        top_k: Optional[int] = None,
        top_p: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        """
        Send the prompt text followed by one inline data part per image,
        in the order given.
        """
        parts: List[types.Part] = [types.Part.from_text(text=prompt)]
        parts.extend(
            types.Part.from_bytes(data=image.data, mime_type=image.mime_type)
            for image in images
        )
        contents = [types.Content(role="user", parts=parts)]
        config = self.build_config(temperature, top_k, top_p, max_tokens)
        return self._generate(model, contents, config)
