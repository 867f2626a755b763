"""Asynchronous client for the Anthropic HTTP API."""

from .client import AnthropicClient
from .embeddings import EmbeddingsApi, EmbeddingsRequest
from .messages import MessageRequest, MessagesApi
from .models import CompletionResponse, EmbeddingsResponse, Message, MessageResponse
from .request_client import (
    API_KEY_HEADER,
    API_VERSION,
    API_VERSION_HEADER,
    ClientError,
    DeserializationError,
    RequestClient,
    TransportError,
)
from .text_completions import TextCompletionRequest, TextCompletionsApi

__all__ = [
    "AnthropicClient",
    "RequestClient",
    "MessagesApi",
    "TextCompletionsApi",
    "EmbeddingsApi",
    "MessageRequest",
    "TextCompletionRequest",
    "EmbeddingsRequest",
    "Message",
    "MessageResponse",
    "CompletionResponse",
    "EmbeddingsResponse",
    "ClientError",
    "TransportError",
    "DeserializationError",
    "API_KEY_HEADER",
    "API_VERSION_HEADER",
    "API_VERSION",
]
