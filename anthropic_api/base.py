"""Request builder and endpoint facade base classes."""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Tuple, TypeVar

from anthropic_api.models import Message

if TYPE_CHECKING:  # pragma: no cover
    from anthropic_api.client import AnthropicClient

B = TypeVar("B", bound="RequestBuilder")


def _to_json_value(value: Any) -> Any:
    if isinstance(value, Message):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_to_json_value(item) for item in value]
    return value


class RequestBuilder(abc.ABC):
    """Accumulates optional parameters on top of a set of required fields.

    Setters return the builder itself so calls can be chained. Unset
    optional fields never appear in :meth:`to_body`.
    """

    optional_fields: ClassVar[Tuple[str, ...]] = ()

    def __init__(self) -> None:
        self._options: Dict[str, Any] = {}

    def _set(self: B, name: str, value: Any) -> B:
        if name not in self.optional_fields:
            raise AttributeError(f"{type(self).__name__} has no optional field {name!r}")
        self._options[name] = value
        return self

    @property
    def options(self) -> Dict[str, Any]:
        """Optional fields that have been set so far."""
        return dict(self._options)

    @abc.abstractmethod
    def required_body(self) -> Dict[str, Any]:
        """Wire representation of the required fields."""

    def to_body(self) -> Dict[str, Any]:
        body = {key: _to_json_value(value) for key, value in self.required_body().items()}
        for name in self.optional_fields:
            if name in self._options:
                body[name] = _to_json_value(self._options[name])
        return body

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_body()!r})"


class EndpointApi:
    """Binds one request builder type to a fixed path on the shared transport."""

    path: ClassVar[str]

    def __init__(self, client: "AnthropicClient") -> None:
        self.client = client

    async def create(self, request: RequestBuilder, response_type: Any = None) -> Any:
        return await self.client.request_client.post(self.path, request.to_body(), response_type)
