"""OpenAI chat completions client."""

from typing import Protocol

import httpx
from pydantic import ValidationError

from tshabot.models import ChatCompletion, ChatCompletionRequest

TIMEOUT = 30.0


class ProviderError(Exception):
    pass


class CompletionProvider(Protocol):
    async def create_chat_completion(self, request: ChatCompletionRequest) -> ChatCompletion: ...


class OpenAIProvider:
    """Talks to an OpenAI-compatible /chat/completions endpoint.

    One AsyncClient is shared by every request and closed on shutdown.
    """

    def __init__(self, api_key: str, base_url: str, client: httpx.AsyncClient | None = None):
        self.url = f"{base_url.rstrip('/')}/chat/completions"
        self._api_key = api_key
        self.client = client or httpx.AsyncClient(timeout=TIMEOUT)

    async def create_chat_completion(self, request: ChatCompletionRequest) -> ChatCompletion:
        try:
            response = await self.client.post(
                self.url,
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "Content-Type": "application/json",
                },
                json=request.model_dump(),
            )
        except httpx.TimeoutException:
            raise ProviderError("OpenAI API timeout")
        except httpx.HTTPError as e:
            raise ProviderError(f"OpenAI API request failed: {e}")

        if response.status_code != 200:
            raise ProviderError(f"OpenAI API error: {response.status_code}")

        try:
            return ChatCompletion.model_validate_json(response.content)
        except ValidationError as e:
            raise ProviderError(f"Unexpected OpenAI response: {e.error_count()} validation error(s)")

    async def close(self) -> None:
        await self.client.aclose()
