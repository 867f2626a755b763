"""Text completions endpoint (``/complete``)."""
from __future__ import annotations

from typing import Any, Dict, Sequence

from anthropic_api.base import EndpointApi, RequestBuilder


class TextCompletionRequest(RequestBuilder):
    """Parameters for a single prompt completion.

    Example::

        request = (
            TextCompletionRequest("claude-2.1", "\\n\\nHuman: Hi\\n\\nAssistant:")
            .max_tokens_to_sample(256)
            .temperature(0.5)
        )
    """

    optional_fields = (
        "max_tokens_to_sample",
        "stop_sequences",
        "temperature",
        "top_p",
        "top_k",
    )

    def __init__(self, model: str, prompt: str) -> None:
        super().__init__()
        self.model = model
        self.prompt = prompt

    def required_body(self) -> Dict[str, Any]:
        return {"model": self.model, "prompt": self.prompt}

    def max_tokens_to_sample(self, max_tokens_to_sample: int) -> "TextCompletionRequest":
        """Maximum number of tokens to generate before stopping."""
        return self._set("max_tokens_to_sample", max_tokens_to_sample)

    def stop_sequences(self, stop_sequences: Sequence[str]) -> "TextCompletionRequest":
        """Sequences that end generation when produced."""
        return self._set("stop_sequences", list(stop_sequences))

    def temperature(self, temperature: float) -> "TextCompletionRequest":
        return self._set("temperature", temperature)

    def top_p(self, top_p: float) -> "TextCompletionRequest":
        """Nucleus sampling cutoff."""
        return self._set("top_p", top_p)

    def top_k(self, top_k: int) -> "TextCompletionRequest":
        """Sample only from the ``top_k`` most likely tokens."""
        return self._set("top_k", top_k)


class TextCompletionsApi(EndpointApi):
    """Facade for the legacy text completions endpoint."""

    path = "/complete"
