"""
Key-Value API Integration Tests

Both `/inmemory` and `/redis` share one contract; every test runs against
each path.
"""

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

KV_PATHS = ["/inmemory", "/redis"]
JSON_HEADERS = {"Content-Type": "application/json"}


@pytest.mark.asyncio
@pytest.mark.parametrize("path", KV_PATHS)
async def test_post_valid_body(client, path):
    resp = await client.post(path, content='{"key": "test","value":"test"}', headers=JSON_HEADERS)

    assert resp.status_code == 200, resp.text
    assert resp.json() == {"key": "test", "value": "test"}
    assert resp.headers["content-type"] == "application/json"


@pytest.mark.asyncio
@pytest.mark.parametrize("path", KV_PATHS)
async def test_post_then_get(client, path):
    await client.post(path, json={"key": "exists", "value": "exists"})

    resp = await client.get(path, params={"key": "exists"})

    assert resp.status_code == 200, resp.text
    assert resp.json() == {"key": "exists", "value": "exists"}


@pytest.mark.asyncio
@pytest.mark.parametrize("path", KV_PATHS)
async def test_post_overwrites(client, path):
    await client.post(path, json={"key": "k", "value": "first"})
    resp = await client.post(path, json={"key": "k", "value": "second"})

    assert resp.json() == {"key": "k", "value": "second"}


@pytest.mark.asyncio
@pytest.mark.parametrize("path", KV_PATHS)
@pytest.mark.parametrize(
    "body",
    [
        "",
        "{}",
        '{"key": "", "value": "test"}',
        '{"key": "test", "value": ""}',
        '{"key": "test"}',
        '{"key": 1, "value": "test"}',
        "[]",
        "{not json",
    ],
)
async def test_post_invalid_input(client, path, body):
    resp = await client.post(path, content=body, headers=JSON_HEADERS)

    assert resp.status_code == 400
    assert resp.json() == {"error": "invalid json input"}


@pytest.mark.asyncio
@pytest.mark.parametrize("path", KV_PATHS)
async def test_post_wrong_content_type(client, path):
    resp = await client.post(path, content='{"key":"a","value":"b"}', headers={"Content-Type": "text/html"})

    assert resp.status_code == 415
    assert resp.json() == {"error": "invalid content-type"}


@pytest.mark.asyncio
@pytest.mark.parametrize("path", KV_PATHS)
async def test_post_json_with_charset(client, path):
    resp = await client.post(
        path,
        content='{"key":"a","value":"b"}',
        headers={"Content-Type": "application/json; charset=utf-8"},
    )

    assert resp.status_code == 200, resp.text


@pytest.mark.asyncio
@pytest.mark.parametrize("path", KV_PATHS)
@pytest.mark.parametrize("method", ["PATCH", "PUT", "DELETE", "TRACE", "PROPFIND"])
async def test_method_not_allowed(client, path, method):
    resp = await client.request(method, path, headers=JSON_HEADERS)

    assert resp.status_code == 405
    assert resp.json() == {"error": "method not allowed"}


@pytest.mark.asyncio
@pytest.mark.parametrize("path", KV_PATHS)
@pytest.mark.parametrize("query", ["", "?key="])
async def test_get_without_key(client, path, query):
    resp = await client.get(path + query)

    assert resp.status_code == 400
    assert resp.json() == {"error": "key can not be empty"}


@pytest.mark.asyncio
@pytest.mark.parametrize(("path", "message"), [("/inmemory", "inmemory: nil"), ("/redis", "redis: nil")])
async def test_get_not_exists(client, path, message):
    resp = await client.get(path, params={"key": "not-exists"})

    assert resp.status_code == 400
    assert resp.json() == {"error": message}


@pytest.mark.asyncio
async def test_redis_set_error_is_passed_through(client, backends):
    backends.redis.set_error = RedisConnectionError("Connection refused")

    resp = await client.post("/redis", json={"key": "test", "value": "test"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "Connection refused"}


@pytest.mark.asyncio
async def test_redis_get_error_after_set_is_passed_through(client, backends):
    backends.redis.get_error = RedisConnectionError("Timeout reading from socket")

    resp = await client.post("/redis", json={"key": "test", "value": "test"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "Timeout reading from socket"}
    assert backends.redis.data == {"test": "test"}


@pytest.mark.asyncio
@pytest.mark.parametrize(("path", "attr"), [("/inmemory", "inmemory"), ("/redis", "redis")])
async def test_backend_not_configured(client, backends, path, attr):
    setattr(backends, attr, None)

    get_resp = await client.get(path, params={"key": "k"})
    post_resp = await client.post(path, json={"key": "k", "value": "v"})

    assert get_resp.status_code == 400
    assert get_resp.json() == {"error": f"{attr}: backend not configured"}
    assert post_resp.status_code == 400
    assert post_resp.json() == {"error": f"{attr}: backend not configured"}
