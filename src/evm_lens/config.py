"""Environment configuration loading."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_RPC_URL = "https://eth.llamarpc.com"


class ConfigError(Exception):
    """Raised when configuration is invalid."""


@dataclass(frozen=True, slots=True)
class Config:
    rpc_url: str = DEFAULT_RPC_URL
    rpc_timeout: float = 10.0
    log_level: str = "WARNING"


def load_config() -> Config:
    """Load configuration from environment variables (and a .env file).

    Raises ConfigError if EVM_LENS_RPC_TIMEOUT or EVM_LENS_LOG_LEVEL
    cannot be used.
    """
    load_dotenv()

    raw_timeout = os.environ.get("EVM_LENS_RPC_TIMEOUT", "")
    try:
        rpc_timeout = float(raw_timeout) if raw_timeout else 10.0
    except ValueError as e:
        raise ConfigError(
            f"EVM_LENS_RPC_TIMEOUT must be a number, got {raw_timeout!r}"
        ) from e
    if not math.isfinite(rpc_timeout) or rpc_timeout <= 0:
        raise ConfigError("EVM_LENS_RPC_TIMEOUT must be a positive finite number")

    log_level = (os.environ.get("EVM_LENS_LOG_LEVEL", "") or "WARNING").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"Unknown log level: {log_level}")

    return Config(
        rpc_url=os.environ.get("EVM_LENS_RPC_URL", "") or DEFAULT_RPC_URL,
        rpc_timeout=rpc_timeout,
        log_level=log_level,
    )
