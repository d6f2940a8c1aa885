"""Value objects for one round trip to the completion model."""

from pydantic import BaseModel


class CompletionRequest(BaseModel):
    prompt: str
    model: str
    max_tokens: int = 60
    temperature: float = 0.5
    top_p: float = 0.3
    frequency_penalty: float = 0.5
    presence_penalty: float = 0.0


class CompletionResponse(BaseModel):
    text: str
    model: str
