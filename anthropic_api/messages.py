"""Messages endpoint (``/messages``)."""
from __future__ import annotations

from typing import Any, Dict, Mapping, Sequence, Union

from anthropic_api.base import EndpointApi, RequestBuilder
from anthropic_api.models import Message

MessageInput = Union[Message, Mapping[str, Any]]


class MessageRequest(RequestBuilder):
    """Parameters for a chat-style request over an ordered conversation.

    ``messages`` may mix :class:`Message` objects and plain mappings; the
    mappings are sent as given.
    """

    optional_fields = ("max_tokens", "temperature", "stop_sequences", "stream")

    def __init__(self, model: str, messages: Sequence[MessageInput]) -> None:
        super().__init__()
        self.model = model
        self.messages = list(messages)

    def required_body(self) -> Dict[str, Any]:
        return {"model": self.model, "messages": self.messages}

    def max_tokens(self, max_tokens: int) -> "MessageRequest":
        return self._set("max_tokens", max_tokens)

    def temperature(self, temperature: float) -> "MessageRequest":
        return self._set("temperature", temperature)

    def stop_sequences(self, stop_sequences: Sequence[str]) -> "MessageRequest":
        return self._set("stop_sequences", list(stop_sequences))

    def stream(self, stream: bool) -> "MessageRequest":
        """Ask the server to stream partial progress.

        Only the flag is sent; the reply is still read as a single JSON body.
        """
        return self._set("stream", stream)


class MessagesApi(EndpointApi):
    path = "/messages"
