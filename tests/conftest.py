import io

import pytest
from rich.console import Console

from evm_lens.chain.rpc import clear_cache


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep host settings (.env, color forcing) out of every test."""
    for var in ("EVM_LENS_RPC_URL", "EVM_LENS_RPC_TIMEOUT", "EVM_LENS_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    for var in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("evm_lens.config.load_dotenv", lambda: False)
    clear_cache()
    yield
    clear_cache()


@pytest.fixture()
def console():
    """Plain-text console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=100, color_system=None, soft_wrap=True)


@pytest.fixture()
def color_console():
    return Console(
        file=io.StringIO(), width=100, color_system="truecolor", force_terminal=True
    )
