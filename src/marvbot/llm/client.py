"""OpenAI completions wrapper.

Sends the Marv persona prompt to the legacy completions endpoint with fixed
sampling parameters and returns the first choice untouched.
"""

from typing import Optional

from openai import OpenAI, OpenAIError

from ..config import Settings
from ..log import get_logger
from ..schemas.completion import CompletionRequest, CompletionResponse
from .prompts import build_prompt

logger = get_logger("llm_client")


class CompletionError(Exception):
    """The completion provider failed or returned nothing usable."""


class CompletionClient:
    def __init__(self, settings: Settings, client: Optional[OpenAI] = None):
        self.model = settings.completion_model
        self.client = client or OpenAI(api_key=settings.gpt_token, timeout=settings.http_timeout)

    def build_request(self, text: str) -> CompletionRequest:
        return CompletionRequest(prompt=build_prompt(text), model=self.model)

    def run(self, request: CompletionRequest) -> CompletionResponse:
        try:
            completion = self.client.completions.create(
                model=request.model,
                prompt=request.prompt,
                max_tokens=request.max_tokens,
                temperature=request.temperature,
                top_p=request.top_p,
                frequency_penalty=request.frequency_penalty,
                presence_penalty=request.presence_penalty,
            )
        except OpenAIError as e:
            raise CompletionError(f"Completion request failed: {e}") from e

        if not completion.choices:
            raise CompletionError("Completion returned no choices")
        return CompletionResponse(text=completion.choices[0].text, model=request.model)

    def complete(self, text: str) -> str:
        """Return the model's continuation for `text`, untrimmed."""
        logger.debug(f"Requesting completion ({len(text)} chars of user text)")
        return self.run(self.build_request(text)).text
