"""Unit tests for BackendClient and HttpResourceRepository."""

import json

import httpx
import pytest

from sinjapan_manager.domain.exceptions import BackendError
from sinjapan_manager.infrastructure.backend import BackendClient, HttpResourceRepository


# ── Helpers ──


def _client(handler, **kwargs) -> BackendClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return BackendClient("http://backend.test/", http_client=http_client, **kwargs)


class Recorder:
    """MockTransport handler that records requests and replies from a table."""

    def __init__(self, routes: dict[tuple[str, str], httpx.Response]):
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.routes.get(
            (request.method, request.url.path),
            httpx.Response(404, json={"message": "Not Found"}),
        )


# ── BackendClient ──


@pytest.mark.asyncio
async def test_forwards_session_headers_and_decodes_json():
    recorder = Recorder({("GET", "/api/auth/me"): httpx.Response(200, json={"id": 1})})
    client = _client(recorder, forward_headers={"cookie": "connect.sid=abc"})

    data = await client.get("/api/auth/me")

    assert data == {"id": 1}
    sent = recorder.requests[0]
    assert sent.headers["cookie"] == "connect.sid=abc"
    assert sent.headers["accept"] == "application/json"


@pytest.mark.asyncio
async def test_no_content_returns_none():
    client = _client(lambda request: httpx.Response(204))
    assert await client.delete("/api/tasks/1") is None


@pytest.mark.asyncio
async def test_query_params_and_json_body_are_sent():
    recorder = Recorder({("POST", "/api/leads/bulk"): httpx.Response(201, json={"count": 1})})
    client = _client(recorder)

    await client.request("POST", "api/leads/bulk", params={"x": "1"}, json={"leads": []})

    sent = recorder.requests[0]
    assert sent.url.params["x"] == "1"
    assert json.loads(sent.content) == {"leads": []}
    assert sent.headers["content-type"] == "application/json"


@pytest.mark.parametrize(
    "response, expected",
    [
        (httpx.Response(400, json={"message": "メールアドレスは既に使用されています"}), "メールアドレスは既に使用されています"),
        (httpx.Response(500, json={"error": "Database error"}), "Database error"),
        (httpx.Response(401, json={"error": {"message": "Unauthorized"}}), "Unauthorized"),
        (httpx.Response(502, text="Bad gateway upstream"), "Bad gateway upstream"),
        (httpx.Response(503), "Service Unavailable"),
    ],
)
@pytest.mark.asyncio
async def test_error_message_extraction(response, expected):
    client = _client(lambda request: response)
    with pytest.raises(BackendError) as exc_info:
        await client.get("/api/customers")
    assert exc_info.value.status_code == response.status_code
    assert exc_info.value.message == expected


@pytest.mark.asyncio
async def test_transport_failure_becomes_502():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(BackendError) as exc_info:
        await _client(handler).get("/api/customers")
    assert exc_info.value.status_code == 502
    assert exc_info.value.message == "バックエンドに接続できません"


# ── HttpResourceRepository ──


@pytest.mark.asyncio
async def test_repository_crud_paths():
    recorder = Recorder(
        {
            ("GET", "/api/customers"): httpx.Response(200, json=[{"id": 1}]),
            ("GET", "/api/customers/1"): httpx.Response(200, json={"id": 1}),
            ("POST", "/api/customers"): httpx.Response(201, json={"id": 2}),
            ("PATCH", "/api/customers/1"): httpx.Response(200, json={"id": 1, "phone": "1"}),
            ("DELETE", "/api/customers/1"): httpx.Response(204),
        }
    )
    repo = HttpResourceRepository(_client(recorder), "api/customers/")

    assert await repo.list({"search": "abc"}) == [{"id": 1}]
    assert await repo.get(1) == {"id": 1}
    assert await repo.create({"companyName": "X"}) == {"id": 2}
    assert await repo.update(1, {"phone": "1"}) == {"id": 1, "phone": "1"}
    assert await repo.delete(1) is True
    assert recorder.requests[0].url.params["search"] == "abc"


@pytest.mark.asyncio
async def test_repository_maps_404_to_missing():
    repo = HttpResourceRepository(_client(Recorder({})), "/api/customers")
    assert await repo.get(9) is None
    assert await repo.update(9, {"x": 1}) is None
    assert await repo.delete(9) is False


@pytest.mark.asyncio
async def test_repository_propagates_other_errors():
    client = _client(lambda request: httpx.Response(500, json={"message": "boom"}))
    with pytest.raises(BackendError):
        await HttpResourceRepository(client, "/api/customers").get(1)


@pytest.mark.asyncio
async def test_non_list_collection_body_is_empty_list():
    client = _client(lambda request: httpx.Response(200, json={"unexpected": True}))
    assert await HttpResourceRepository(client, "/api/customers").list() == []


@pytest.mark.asyncio
async def test_leads_are_updated_with_put():
    recorder = Recorder({("PUT", "/api/leads/5"): httpx.Response(200, json={"id": 5, "status": "contacted"})})
    repo = HttpResourceRepository(_client(recorder), "/api/leads", update_method="put")

    await repo.update(5, {"status": "contacted"})

    assert recorder.requests[0].method == "PUT"
    assert json.loads(recorder.requests[0].content) == {"status": "contacted"}


@pytest.mark.asyncio
async def test_update_with_empty_body_is_still_found():
    client = _client(lambda request: httpx.Response(204))
    assert await HttpResourceRepository(client, "/api/tasks").update(1, {"status": "completed"}) == {}


@pytest.mark.asyncio
async def test_nested_routes_and_upload():
    recorder = Recorder(
        {
            ("GET", "/api/chat/messages/3"): httpx.Response(200, json=[]),
            ("PATCH", "/api/notifications/4/read"): httpx.Response(200, json={"ok": True}),
            ("POST", "/api/chat/upload"): httpx.Response(200, json={"url": "https://files/x.png"}),
        }
    )
    client = _client(recorder)
    chat = HttpResourceRepository(client, "/api/chat")

    assert await chat.fetch("/messages/3") == []
    assert await HttpResourceRepository(client, "/api/notifications").patch("4/read") == {"ok": True}
    assert await chat.upload("upload", "x.png", b"\x89PNG", "image/png") == {"url": "https://files/x.png"}

    upload = recorder.requests[-1]
    assert upload.headers["content-type"].startswith("multipart/form-data")
    assert b'name="file"; filename="x.png"' in upload.content
