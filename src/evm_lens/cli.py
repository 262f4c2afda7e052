"""evm-lens command-line entry point.

Usage:
    evm-lens 60FF61ABCD00
    evm-lens 0x602060005260005100 --stats
    evm-lens --file code.hex
    cat code.hex | evm-lens
    evm-lens --address 0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48 --rpc https://...

Environment:
    EVM_LENS_RPC_URL      - Default JSON-RPC endpoint for --address
    EVM_LENS_RPC_TIMEOUT  - RPC timeout in seconds
    EVM_LENS_LOG_LEVEL    - Log level (overridden by -v)
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from evm_lens.analysis.disassembler import DisassemblyError, disassemble
from evm_lens.analysis.stats import compute_stats
from evm_lens.chain.rpc import RPCError
from evm_lens.config import Config, ConfigError, load_config
from evm_lens.render import print_error, print_listing, print_stats, print_usage_hint
from evm_lens.source import (
    BytecodeSourceError,
    Source,
    decode_hex,
    read_bytecode,
)

logger = logging.getLogger(__name__)

EPILOG = """examples:
    evm-lens 60FF                    # Simple PUSH1 instruction
    evm-lens 0x60FF61ABCD00          # Multiple instructions with 0x prefix
    evm-lens 602060005260005100      # Memory operations (MSTORE/MLOAD)
    evm-lens 6001600280900100        # Stack operations (DUP/SWAP/ADD)
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="evm-lens",
        description="A colorful EVM bytecode disassembler",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "bytecode",
        nargs="?",
        metavar="BYTECODE",
        help="Hexadecimal EVM bytecode to disassemble",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--stdin",
        action="store_true",
        help="Read hex bytecode from standard input (default with no BYTECODE)",
    )
    source.add_argument("--file", metavar="PATH", help="Read hex bytecode from a file")
    source.add_argument(
        "--address",
        metavar="ADDR",
        help="Fetch deployed code for a contract address via eth_getCode",
    )
    parser.add_argument(
        "--rpc",
        metavar="URL",
        help="JSON-RPC endpoint for --address (default: $EVM_LENS_RPC_URL)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Also print byte length, opcode count and max stack depth",
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Disable colored output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def _setup_logging(level: str, console: Console) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=False)],
    )


def _load_bytes(args: argparse.Namespace, config: Config) -> bytes:
    if args.bytecode is not None:
        return decode_hex(args.bytecode)
    if args.file:
        return read_bytecode(Source.file(args.file))
    if args.address:
        source = Source.onchain(args.address, args.rpc or config.rpc_url)
        return read_bytecode(source, timeout=config.rpc_timeout)
    return read_bytecode(Source.stdin())


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.bytecode is not None and (args.stdin or args.file or args.address):
        parser.error("BYTECODE cannot be combined with --stdin, --file or --address")
    if args.rpc and not args.address:
        parser.error("--rpc requires --address")

    out = Console(no_color=args.no_color, highlight=False, soft_wrap=True)
    err = Console(
        stderr=True, no_color=args.no_color, highlight=False, soft_wrap=True
    )

    try:
        config = load_config()
    except ConfigError as e:
        print_error(err, str(e))
        return 1

    _setup_logging("DEBUG" if args.verbose else config.log_level, err)

    try:
        raw = _load_bytes(args, config)
    except (BytecodeSourceError, RPCError) as e:
        print_error(err, str(e))
        print_usage_hint(err)
        return 1

    try:
        instructions = disassemble(raw)
        stats = compute_stats(raw) if args.stats else None
    except DisassemblyError as e:
        logger.debug("Analysis failed for %d bytes", len(raw), exc_info=True)
        print_error(err, f"Failed to disassemble bytecode: {e}")
        return 1

    print_listing(out, instructions)
    if stats is not None:
        out.print()
        print_stats(out, stats)
    return 0


if __name__ == "__main__":
    sys.exit(main())
