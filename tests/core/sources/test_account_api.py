# tests/core/sources/test_account_api.py
from __future__ import annotations

import httpx
import pytest

from fxa.content.core.errors import SourceAPIError, SourceUnavailableError
from fxa.content.core.sources.account_api import AccountApiClient


def _patch_transport(monkeypatch, handler):
    transport = httpx.MockTransport(handler)
    real_client = httpx.AsyncClient
    monkeypatch.setattr(
        httpx,
        "AsyncClient",
        lambda **kw: real_client(transport=transport, **kw),
    )


@pytest.mark.asyncio
async def test_fetch_devices_stamps_client_type(monkeypatch, account):
    async def handler(request):
        assert request.url.path == "/v1/account/devices"
        assert request.headers["Authorization"] == "Bearer session-token"
        return httpx.Response(200, json=[{"id": "d1", "name": "Phone"}])

    _patch_transport(monkeypatch, handler)
    client = AccountApiClient(base_url="http://accounts/v1/")

    devices = await client.fetch_devices(account)

    assert devices == [{"id": "d1", "name": "Phone", "clientType": "device"}]


@pytest.mark.asyncio
async def test_fetch_oauth_apps(monkeypatch, account):
    async def handler(request):
        assert request.url.path == "/v1/account/oauth-apps"
        return httpx.Response(200, json=[{"id": "a1", "name": "Notes"}])

    _patch_transport(monkeypatch, handler)
    client = AccountApiClient(base_url="http://accounts/v1")

    apps = await client.fetch_oauth_apps(account)

    assert apps == [{"id": "a1", "name": "Notes", "clientType": "oAuthApp"}]


@pytest.mark.asyncio
async def test_http_error_raises_source_api_error(monkeypatch, account):
    async def handler(request):
        return httpx.Response(401, json={"errno": 110})

    _patch_transport(monkeypatch, handler)

    with pytest.raises(SourceAPIError) as exc_info:
        await AccountApiClient(base_url="http://accounts/v1").fetch_devices(account)

    assert exc_info.value.status_code == 401
    assert exc_info.value.endpoint == "/account/devices"


@pytest.mark.asyncio
async def test_transport_error_raises_unavailable(monkeypatch, account):
    async def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    _patch_transport(monkeypatch, handler)

    with pytest.raises(SourceUnavailableError):
        await AccountApiClient(base_url="http://accounts/v1").fetch_oauth_apps(account)


@pytest.mark.asyncio
async def test_non_list_body_rejected(monkeypatch, account):
    async def handler(request):
        return httpx.Response(200, json={"devices": []})

    _patch_transport(monkeypatch, handler)

    with pytest.raises(SourceAPIError, match="JSON array"):
        await AccountApiClient(base_url="http://accounts/v1").fetch_devices(account)


@pytest.mark.asyncio
async def test_non_json_body_rejected(monkeypatch, account):
    async def handler(request):
        return httpx.Response(200, text="<html>proxy</html>")

    _patch_transport(monkeypatch, handler)

    with pytest.raises(SourceAPIError, match="invalid JSON"):
        await AccountApiClient(base_url="http://accounts/v1").fetch_devices(account)


@pytest.mark.asyncio
async def test_non_object_items_rejected(monkeypatch, account):
    async def handler(request):
        return httpx.Response(200, json=[{"id": "a1"}, "a2", 3])

    _patch_transport(monkeypatch, handler)

    with pytest.raises(SourceAPIError, match="array of objects"):
        await AccountApiClient(base_url="http://accounts/v1").fetch_oauth_apps(account)
