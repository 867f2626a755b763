"""Message input type and typed response models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union


@dataclass
class Message:
    """Represents a single turn within a chat-style conversation."""

    role: str
    content: Union[str, Sequence[Mapping[str, Any]]]

    def to_dict(self) -> Dict[str, Any]:
        content = self.content if isinstance(self.content, str) else [dict(block) for block in self.content]
        return {"role": self.role, "content": content}


@dataclass
class CompletionResponse:
    """Result returned from the text completions endpoint."""

    completion: str
    stop_reason: Optional[str] = None
    model: Optional[str] = None
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "CompletionResponse":
        completion = payload["completion"]
        if not isinstance(completion, str):
            raise TypeError("completion must be a string")
        return cls(
            completion=completion,
            stop_reason=payload.get("stop_reason"),
            model=payload.get("model"),
            raw=dict(payload),
        )


@dataclass
class MessageResponse:
    """Result returned from the messages endpoint."""

    id: str
    role: str
    content: List[Dict[str, Any]]
    model: Optional[str] = None
    stop_reason: Optional[str] = None
    usage: Mapping[str, Any] = field(default_factory=dict)
    raw: Mapping[str, Any] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "".join(block.get("text", "") for block in self.content if block.get("type") == "text")

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "MessageResponse":
        content = payload["content"]
        if not isinstance(content, list):
            raise TypeError("content must be a list of blocks")
        return cls(
            id=payload["id"],
            role=payload["role"],
            content=[dict(block) for block in content],
            model=payload.get("model"),
            stop_reason=payload.get("stop_reason"),
            usage=payload.get("usage") or {},
            raw=dict(payload),
        )


@dataclass
class EmbeddingsResponse:
    """Result returned from the embeddings endpoint."""

    embeddings: List[List[float]]
    model: Optional[str] = None
    usage: Mapping[str, Any] = field(default_factory=dict)
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "EmbeddingsResponse":
        data = payload["data"]
        if not isinstance(data, list):
            raise TypeError("data must be a list")
        embeddings = [list(item["embedding"]) for item in data]
        return cls(
            embeddings=embeddings,
            model=payload.get("model"),
            usage=payload.get("usage") or {},
            raw=dict(payload),
        )
