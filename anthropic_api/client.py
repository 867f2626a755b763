"""Top-level client owning configuration and the shared transport."""
from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from anthropic_api.embeddings import EmbeddingsApi
from anthropic_api.messages import MessagesApi
from anthropic_api.request_client import RequestClient
from anthropic_api.text_completions import TextCompletionsApi


class AnthropicClient:
    """Entry point handing out the per-endpoint facades.

    ``base_url`` and ``api_key`` are fixed for the lifetime of the client.
    One :class:`RequestClient` (and therefore one connection pool) is
    created here and shared by every facade, so the client is safe to use
    from many concurrent tasks.

    Example::

        async with AnthropicClient("https://api.anthropic.com/v1", key) as client:
            reply = await client.messages().create(
                MessageRequest("claude-3-opus-20240229", [{"role": "user", "content": "hi"}])
                .max_tokens(256)
            )
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        settings: Optional[Dict[str, Any]] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._base_url = base_url
        self._api_key = api_key
        self.request_client = RequestClient(
            api_key,
            base_url=base_url,
            settings=settings,
            http_client=http_client,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_key(self) -> str:
        return self._api_key

    def messages(self) -> MessagesApi:
        return MessagesApi(self)

    def text_completions(self) -> TextCompletionsApi:
        return TextCompletionsApi(self)

    def embeddings(self) -> EmbeddingsApi:
        return EmbeddingsApi(self)

    async def aclose(self) -> None:
        await self.request_client.aclose()

    async def __aenter__(self) -> "AnthropicClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"AnthropicClient(base_url={self._base_url!r})"
