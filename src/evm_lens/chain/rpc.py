"""Ethereum RPC client using raw JSON-RPC via requests."""

from __future__ import annotations

import functools
import logging

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class RPCError(Exception):
    """Raised when an RPC call fails."""

    def __init__(self, message: str, code: int | None = None):
        super().__init__(message)
        self.code = code


def _code_from_response(data: object) -> str:
    """Pull the 0x-prefixed code string out of an eth_getCode response body."""
    if not isinstance(data, dict):
        raise RPCError(f"RPC returned unexpected payload: {type(data).__name__}")

    if "error" in data:
        err = data["error"]
        if not isinstance(err, dict):
            raise RPCError(f"RPC error: {err}")
        raise RPCError(
            f"RPC error: {err.get('message', 'unknown')}",
            code=err.get("code"),
        )

    result = data.get("result")
    if result is None:
        raise RPCError("RPC returned null result")
    if not isinstance(result, str):
        raise RPCError(
            f"RPC returned non-string result: {type(result).__name__}"
        )
    if not result.startswith(("0x", "0X")):
        raise RPCError(f"RPC returned code without 0x prefix: {result[:16]!r}")

    return result


@functools.lru_cache(maxsize=256)
def get_code(address: str, rpc_url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Fetch contract bytecode via eth_getCode.

    Returns hex string (with 0x prefix). Returns "0x" for EOAs.
    Raises RPCError on network failures, RPC errors and malformed responses.
    """
    payload = {
        "jsonrpc": "2.0",
        "method": "eth_getCode",
        "params": [address, "latest"],
        "id": 1,
    }
    logger.debug("eth_getCode %s via %s", address, rpc_url)

    try:
        resp = requests.post(rpc_url, json=payload, timeout=timeout)
        resp.raise_for_status()
    except (requests.RequestException, ConnectionError) as e:
        raise RPCError(f"RPC request failed: {e}") from e

    try:
        data = resp.json()
    except ValueError as e:
        raise RPCError(f"RPC returned invalid JSON: {e}") from e

    return _code_from_response(data)


def clear_cache() -> None:
    """Clear LRU caches (useful for testing)."""
    get_code.cache_clear()
