"""Bytecode sources: typed-in hex, stdin, a file, or deployed contract code."""

from __future__ import annotations

import logging
import re
import string
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TextIO

from evm_lens.chain.rpc import DEFAULT_TIMEOUT, get_code

logger = logging.getLogger(__name__)

# Ethereum address pattern: 0x followed by 40 hex chars
ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")

_HEX_DIGITS = frozenset(string.hexdigits)


class BytecodeSourceError(Exception):
    """Raised when bytecode cannot be read or decoded from its source."""


class SourceKind(Enum):
    STDIN = "stdin"
    FILE = "file"
    ONCHAIN = "onchain"


@dataclass(frozen=True, slots=True)
class Source:
    kind: SourceKind
    path: Path | None = None
    address: str = ""
    rpc_url: str = ""

    @classmethod
    def stdin(cls) -> Source:
        return cls(SourceKind.STDIN)

    @classmethod
    def file(cls, path: str | Path) -> Source:
        return cls(SourceKind.FILE, path=Path(path))

    @classmethod
    def onchain(cls, address: str, rpc_url: str) -> Source:
        return cls(SourceKind.ONCHAIN, address=address, rpc_url=rpc_url)


def decode_hex(text: str) -> bytes:
    """Decode a hex string (optional 0x prefix, surrounding whitespace allowed)."""
    cleaned = text.strip()
    if cleaned.startswith(("0x", "0X")):
        cleaned = cleaned[2:]

    if not cleaned:
        raise BytecodeSourceError("Empty hex string provided")

    if len(cleaned) % 2 != 0:
        raise BytecodeSourceError(
            f"Invalid hex string length ({len(cleaned)}). "
            "Hex strings must have an even number of characters"
        )

    if not all(c in _HEX_DIGITS for c in cleaned):
        raise BytecodeSourceError(
            "Invalid hex characters found. Only 0-9, a-f, and A-F are allowed"
        )

    return bytes.fromhex(cleaned)


def _read_stdin(stream: TextIO) -> bytes:
    try:
        text = stream.read()
    except (OSError, UnicodeDecodeError) as e:
        raise BytecodeSourceError(f"Failed to read from stdin: {e}") from e

    if not text.strip():
        raise BytecodeSourceError("No input provided via stdin")
    return decode_hex(text)


def _read_file(path: Path) -> bytes:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise BytecodeSourceError(f"Failed to read file {str(path)!r}: {e}") from e

    if not text.strip():
        raise BytecodeSourceError(f"File {str(path)!r} is empty")
    return decode_hex(text)


def _fetch_onchain(address: str, rpc_url: str, timeout: float) -> bytes:
    if not ADDRESS_RE.match(address):
        raise BytecodeSourceError(f"Invalid Ethereum address: {address}")

    code = get_code(address, rpc_url, timeout)
    if code in ("0x", "0X", ""):
        raise BytecodeSourceError(
            f"Address {address} has no contract code "
            "(might be an EOA or empty contract)"
        )

    logger.debug("Fetched %d hex chars of code for %s", len(code), address)
    return decode_hex(code)


def read_bytecode(
    source: Source,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    stream: TextIO | None = None,
) -> bytes:
    """Fetch raw bytecode from a Source.

    Raises BytecodeSourceError for unreadable, empty or malformed input and
    lets RPCError from the on-chain fetch propagate.
    """
    if source.kind is SourceKind.STDIN:
        return _read_stdin(stream if stream is not None else sys.stdin)
    if source.kind is SourceKind.FILE:
        if source.path is None:
            raise BytecodeSourceError("File source has no path")
        return _read_file(source.path)
    return _fetch_onchain(source.address, source.rpc_url, timeout)
