"""Colorized terminal rendering of disassembly listings and stats."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from evm_lens.analysis.disassembler import Instruction
from evm_lens.analysis.stats import Stats

RULE_WIDTH = 50
DIM = "bright_black"

_ARITHMETIC = {"ADD", "SUB", "MUL", "DIV", "MOD", "ADDMOD", "MULMOD"}
_COMPARISON = {"LT", "GT", "SLT", "SGT", "EQ", "ISZERO"}
_MEMORY = {"MLOAD", "MSTORE", "MSTORE8", "MSIZE", "MCOPY"}
_STORAGE = {"SLOAD", "SSTORE"}
_JUMPS = {"JUMP", "JUMPI", "JUMPDEST"}
_CALLS = {"CALL", "CALLCODE", "DELEGATECALL", "STATICCALL"}
_CREATES = {"CREATE", "CREATE2"}
_TERMINAL = {"STOP", "RETURN", "REVERT", "SELFDESTRUCT"}


def opcode_style(name: str) -> str:
    """Rich style for a mnemonic, by opcode category ("" for no styling)."""
    if name.startswith("PUSH"):
        return "bold bright_green"
    if name.startswith(("POP", "DUP", "SWAP")):
        return "green"
    if name in _ARITHMETIC:
        return "bold bright_yellow"
    if name in _COMPARISON:
        return "yellow"
    if name in _MEMORY:
        return "bold bright_blue"
    if name in _STORAGE:
        return "bold bright_magenta"
    if name == "KECCAK256":
        return "bold bright_cyan"
    if name in _JUMPS:
        return "bold bright_red"
    if name in _CALLS:
        return "bold red"
    if name in _CREATES:
        return "red"
    if name in _TERMINAL:
        return "bold bright_white"
    return ""


def format_instruction(ins: Instruction) -> Text:
    line = Text()
    line.append(f"{ins.offset:04x}", style=DIM)
    line.append(" │ ", style=DIM)
    line.append(ins.name, style=opcode_style(ins.name))
    if ins.operand:
        line.append(f" 0x{ins.operand.hex()}")
    return line


def print_listing(console: Console, instructions: list[Instruction]) -> None:
    console.print(Text("EVM BYTECODE DISASSEMBLY", style="bold bright_blue"))
    console.print(Text("=" * RULE_WIDTH, style=DIM))

    for ins in instructions:
        console.print(format_instruction(ins))

    console.print(Text("=" * RULE_WIDTH, style=DIM))
    footer = Text()
    footer.append(str(len(instructions)), style="bold bright_green")
    footer.append(" opcodes total", style=DIM)
    console.print(footer)


def print_stats(console: Console, stats: Stats) -> None:
    table = Table(title="BYTECODE STATS", show_header=False, title_justify="left")
    table.add_column("metric", style=DIM)
    table.add_column("value", justify="right", style="bold")
    table.add_row("Byte length", str(stats.byte_len))
    table.add_row("Opcode count", str(stats.opcode_count))
    table.add_row("Max stack depth", str(stats.max_stack_depth))
    console.print(table)


def print_error(console: Console, message: str) -> None:
    error = Text()
    error.append("Error:", style="bold bright_red")
    error.append(f" {message}")
    console.print(error)


def print_usage_hint(console: Console) -> None:
    console.print()
    console.print(Text("Usage examples:", style="bold bright_blue"))
    for example in ("60FF61ABCD00", "0x60FF61ABCD00", "--file code.hex"):
        hint = Text("  ")
        hint.append("evm-lens", style="bright_green")
        hint.append(f" {example}")
        console.print(hint)
    console.print()
    console.print(
        Text("The input should be valid hexadecimal EVM bytecode.", style=DIM)
    )
