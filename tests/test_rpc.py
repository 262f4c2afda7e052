import json

import pytest
import responses

from evm_lens.chain.rpc import RPCError, clear_cache, get_code

RPC_URL = "https://eth.llamarpc.com"
ADDRESS = "0x1234567890abcdef1234567890abcdef12345678"


@pytest.fixture(autouse=True)
def _clear_rpc_cache():
    """Clear LRU cache before each test."""
    clear_cache()
    yield
    clear_cache()


@responses.activate
def test_get_code_success():
    responses.post(
        RPC_URL,
        json={"jsonrpc": "2.0", "id": 1, "result": "0x6080604052"},
    )
    assert get_code(ADDRESS, RPC_URL) == "0x6080604052"


@responses.activate
def test_get_code_request_payload():
    responses.post(RPC_URL, json={"jsonrpc": "2.0", "id": 1, "result": "0x00"})
    get_code(ADDRESS, RPC_URL)
    body = json.loads(responses.calls[0].request.body)
    assert body == {
        "jsonrpc": "2.0",
        "method": "eth_getCode",
        "params": [ADDRESS, "latest"],
        "id": 1,
    }


@responses.activate
def test_get_code_eoa_returns_0x():
    responses.post(RPC_URL, json={"jsonrpc": "2.0", "id": 1, "result": "0x"})
    assert get_code("0x0000000000000000000000000000000000000001", RPC_URL) == "0x"


@responses.activate
def test_get_code_rpc_error():
    responses.post(
        RPC_URL,
        json={
            "jsonrpc": "2.0",
            "id": 1,
            "error": {"code": -32600, "message": "Invalid request"},
        },
    )
    with pytest.raises(RPCError, match="Invalid request") as exc_info:
        get_code(ADDRESS, RPC_URL)
    assert exc_info.value.code == -32600


@responses.activate
def test_get_code_network_error():
    responses.post(RPC_URL, body=ConnectionError("timeout"))
    with pytest.raises(RPCError, match="RPC request failed"):
        get_code(ADDRESS, RPC_URL)


@responses.activate
def test_get_code_http_error():
    responses.post(RPC_URL, status=503, body="unavailable")
    with pytest.raises(RPCError, match="RPC request failed"):
        get_code(ADDRESS, RPC_URL)


@responses.activate
def test_get_code_invalid_json():
    responses.post(RPC_URL, body="not json", content_type="text/plain")
    with pytest.raises(RPCError, match="invalid JSON"):
        get_code(ADDRESS, RPC_URL)


@responses.activate
def test_get_code_null_result():
    responses.post(RPC_URL, json={"jsonrpc": "2.0", "id": 1, "result": None})
    with pytest.raises(RPCError, match="null result"):
        get_code(ADDRESS, RPC_URL)


@responses.activate
def test_get_code_caching():
    responses.post(RPC_URL, json={"jsonrpc": "2.0", "id": 1, "result": "0x6080"})
    addr = "0xaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa"
    assert get_code(addr, RPC_URL) == get_code(addr, RPC_URL)
    assert len(responses.calls) == 1  # only one HTTP call due to cache


@responses.activate
def test_get_code_non_string_result():
    responses.post(RPC_URL, json={"jsonrpc": "2.0", "id": 1, "result": 123})
    with pytest.raises(RPCError, match="non-string result: int"):
        get_code(ADDRESS, RPC_URL)


@responses.activate
def test_get_code_result_without_prefix():
    responses.post(RPC_URL, json={"jsonrpc": "2.0", "id": 1, "result": "6080"})
    with pytest.raises(RPCError, match="without 0x prefix"):
        get_code(ADDRESS, RPC_URL)


@responses.activate
def test_get_code_non_object_payload():
    responses.post(RPC_URL, json=["0x6080"])
    with pytest.raises(RPCError, match="unexpected payload: list"):
        get_code(ADDRESS, RPC_URL)


@responses.activate
def test_get_code_string_error_member():
    responses.post(RPC_URL, json={"jsonrpc": "2.0", "id": 1, "error": "rate limited"})
    with pytest.raises(RPCError, match="rate limited") as exc_info:
        get_code(ADDRESS, RPC_URL)
    assert exc_info.value.code is None
