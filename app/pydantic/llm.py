from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

# Required fields are Optional here so a missing value reaches the handler
# and is answered with a 400 naming the field.


class GenerationConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    temperature: Optional[float] = None
    top_k: Optional[int] = Field(None, alias="topK")
    top_p: Optional[float] = Field(None, alias="topP")
    max_output_tokens: Optional[int] = Field(None, alias="maxOutputTokens")


class GeminiRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    prompt: Optional[str] = None
    model: Optional[str] = None
    generation_config: Optional[GenerationConfig] = Field(None, alias="generationConfig")


class GeminiVisionRequest(GeminiRequest):
    image: Optional[str] = None
    images: Optional[List[str]] = None

    def image_refs(self) -> List[str]:
        refs = []
        if self.image:
            refs.append(self.image)
        if self.images:
            refs.extend(ref for ref in self.images if ref)
        return refs


class GeminiResponse(BaseModel):
    response: str


class MultiplayerRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    chat_dialog: Optional[str] = Field(None, alias="chatDialog")
    participants: Optional[str] = None


class NextSpeaker(BaseModel):
    nextUser: str
    message: str
    targetedUser: Optional[str] = None


class BrowseRequest(BaseModel):
    url: Optional[str] = None
    text: Optional[str] = None


class BrowseResponse(BaseModel):
    result: str
