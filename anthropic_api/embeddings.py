"""Embeddings endpoint (``/embeddings``)."""
from __future__ import annotations

from typing import Any, Dict, Sequence

from anthropic_api.base import EndpointApi, RequestBuilder


class EmbeddingsRequest(RequestBuilder):
    """Parameters for generating vector embeddings.

    The inputs are kept on ``inputs`` but travel under the wire key ``input``.
    """

    optional_fields = ("input_type", "truncation", "encoding_format")

    def __init__(self, model: str, inputs: Sequence[str]) -> None:
        super().__init__()
        self.model = model
        self.inputs = list(inputs)

    def required_body(self) -> Dict[str, Any]:
        return {"model": self.model, "input": self.inputs}

    def input_type(self, input_type: str) -> "EmbeddingsRequest":
        """Hint describing the inputs, e.g. ``"query"`` or ``"document"``."""
        return self._set("input_type", input_type)

    def truncation(self, truncation: bool) -> "EmbeddingsRequest":
        return self._set("truncation", truncation)

    def encoding_format(self, encoding_format: str) -> "EmbeddingsRequest":
        return self._set("encoding_format", encoding_format)


class EmbeddingsApi(EndpointApi):
    path = "/embeddings"
