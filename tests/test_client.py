from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from anthropic_api import (
    AnthropicClient,
    CompletionResponse,
    DeserializationError,
    EmbeddingsRequest,
    EmbeddingsResponse,
    MessageRequest,
    MessageResponse,
    TextCompletionRequest,
    TransportError,
)
from anthropic_api.embeddings import EmbeddingsApi
from anthropic_api.messages import MessagesApi
from anthropic_api.text_completions import TextCompletionsApi
from tests.mock_anthropic_server import (
    RecordingServer,
    failing_http_client,
    sample_completion_payload,
    sample_embeddings_payload,
    sample_message_payload,
)

BASE_URL = "https://api.example.com/v1"
TEST_SETTINGS = {
    "http": {"timeout_sec": 5},
    "logging": {"level": "WARNING", "json_output": False},
}


def _client(server: RecordingServer) -> AnthropicClient:
    return AnthropicClient(BASE_URL, "sk-test", settings=TEST_SETTINGS, http_client=server.http_client())


def test_client_exposes_configuration():
    client = AnthropicClient(BASE_URL, "sk-test", settings=TEST_SETTINGS)
    assert client.base_url == BASE_URL
    assert client.api_key == "sk-test"
    with pytest.raises(AttributeError):
        client.api_key = "other"  # type: ignore[misc]
    asyncio.run(client.aclose())


def test_accessors_return_facades_bound_to_client():
    client = AnthropicClient(BASE_URL, "sk-test", settings=TEST_SETTINGS)
    assert isinstance(client.messages(), MessagesApi)
    assert isinstance(client.text_completions(), TextCompletionsApi)
    assert isinstance(client.embeddings(), EmbeddingsApi)
    assert client.messages().client is client
    assert client.embeddings().client.request_client is client.text_completions().client.request_client
    asyncio.run(client.aclose())


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "accessor, request_factory, path",
    [
        ("text_completions", lambda: TextCompletionRequest("claude-2.1", "hi"), "/complete"),
        ("messages", lambda: MessageRequest("claude-3", [{"role": "user", "content": "hi"}]), "/messages"),
        ("embeddings", lambda: EmbeddingsRequest("voyage-2", ["hi"]), "/embeddings"),
    ],
)
async def test_create_posts_to_endpoint_path(accessor, request_factory, path):
    server = RecordingServer({"ok": True})
    client = _client(server)
    request = request_factory()

    result = await getattr(client, accessor)().create(request)

    assert result == {"ok": True}
    assert str(server.last_request.url) == f"{BASE_URL}{path}"
    assert server.last_request.headers["x-api-key"] == "sk-test"
    assert server.last_request.headers["anthropic-version"] == "2023-06-01"
    assert server.last_body() == request.to_body()


@pytest.mark.asyncio
async def test_messages_create_with_typed_response():
    server = RecordingServer(sample_message_payload())
    client = _client(server)
    request = MessageRequest("claude-3", [{"role": "user", "content": "hi"}]).max_tokens(32).temperature(0.7)

    reply = await client.messages().create(request, MessageResponse)

    assert reply.id == "msg_01"
    assert reply.text == "Hello there"
    assert reply.usage["output_tokens"] == 2
    assert server.last_body() == {
        "model": "claude-3",
        "messages": [{"role": "user", "content": "hi"}],
        "max_tokens": 32,
        "temperature": 0.7,
    }


@pytest.mark.asyncio
async def test_text_completion_create_with_typed_response():
    server = RecordingServer(sample_completion_payload())
    client = _client(server)
    request = TextCompletionRequest("claude-2.1", "\n\nHuman: hi\n\nAssistant:").max_tokens_to_sample(16)

    reply = await client.text_completions().create(request, CompletionResponse)

    assert reply.completion == " Hello!"
    assert reply.stop_reason == "stop_sequence"
    assert server.last_body()["max_tokens_to_sample"] == 16


@pytest.mark.asyncio
async def test_embeddings_create_with_typed_response():
    server = RecordingServer(sample_embeddings_payload())
    client = _client(server)
    request = EmbeddingsRequest("voyage-2", ["a", "b"]).input_type("query")

    reply = await client.embeddings().create(request, EmbeddingsResponse)

    assert reply.embeddings == [[0.1, 0.2, 0.3], [0.4, 0.5, 0.6]]
    assert reply.model == "voyage-2"
    assert server.last_body() == {"model": "voyage-2", "input": ["a", "b"], "input_type": "query"}


@pytest.mark.asyncio
async def test_embeddings_create_with_wrong_shape_raises_deserialization_error():
    server = RecordingServer({"unexpected": "shape"})
    client = _client(server)
    with pytest.raises(DeserializationError):
        await client.embeddings().create(EmbeddingsRequest("voyage-2", ["a"]), EmbeddingsResponse)


@pytest.mark.asyncio
async def test_create_surfaces_transport_error():
    client = AnthropicClient(
        BASE_URL,
        "sk-test",
        settings=TEST_SETTINGS,
        http_client=failing_http_client(lambda request: httpx.ConnectError("Connection refused", request=request)),
    )
    with pytest.raises(TransportError):
        await client.messages().create(MessageRequest("claude-3", []))


@pytest.mark.asyncio
async def test_concurrent_creates_share_one_client():
    server = RecordingServer({"ok": True})
    client = _client(server)
    requests = [EmbeddingsRequest("voyage-2", [str(i)]) for i in range(5)]

    results = await asyncio.gather(*(client.embeddings().create(r) for r in requests))

    assert results == [{"ok": True}] * 5
    sent_inputs = sorted(json.loads(r.content)["input"][0] for r in server.requests)
    assert sent_inputs == [str(i) for i in range(5)]


@pytest.mark.asyncio
async def test_async_context_manager_closes_owned_pool():
    async with AnthropicClient(BASE_URL, "sk-test", settings=TEST_SETTINGS) as client:
        http_client = client.request_client.http_client
        assert not http_client.is_closed
    assert http_client.is_closed
