import pytest

from evm_lens.analysis.disassembler import Instruction, disassemble
from evm_lens.analysis.stats import Stats
from evm_lens.render import (
    format_instruction,
    opcode_style,
    print_error,
    print_listing,
    print_stats,
    print_usage_hint,
)
from tests.fixtures.bytecodes import PUSH_SEQUENCE


@pytest.mark.parametrize(
    "name, style",
    [
        ("PUSH1", "bold bright_green"),
        ("PUSH0", "bold bright_green"),
        ("POP", "green"),
        ("DUP16", "green"),
        ("SWAP3", "green"),
        ("ADD", "bold bright_yellow"),
        ("MULMOD", "bold bright_yellow"),
        ("ISZERO", "yellow"),
        ("MCOPY", "bold bright_blue"),
        ("SSTORE", "bold bright_magenta"),
        ("KECCAK256", "bold bright_cyan"),
        ("JUMPDEST", "bold bright_red"),
        ("DELEGATECALL", "bold red"),
        ("CREATE2", "red"),
        ("REVERT", "bold bright_white"),
        ("CALLER", ""),
        ("UNKNOWN_0C", ""),
    ],
)
def test_opcode_style(name, style):
    assert opcode_style(name) == style


def test_format_instruction_plain():
    line = format_instruction(Instruction(0x1F, 0x00, "STOP", b""))
    assert line.plain == "001f │ STOP"


def test_format_instruction_with_operand():
    line = format_instruction(Instruction(2, 0x61, "PUSH2", b"\xab\xcd"))
    assert line.plain == "0002 │ PUSH2 0xabcd"


def test_print_listing(console):
    print_listing(console, disassemble(bytes.fromhex(PUSH_SEQUENCE)))
    lines = console.file.getvalue().splitlines()
    assert lines[0] == "EVM BYTECODE DISASSEMBLY"
    assert lines[1] == "=" * 50
    assert lines[2:5] == [
        "0000 │ PUSH1 0xff",
        "0002 │ PUSH2 0xabcd",
        "0005 │ STOP",
    ]
    assert lines[5] == "=" * 50
    assert lines[6] == "3 opcodes total"


def test_print_listing_colored(color_console):
    print_listing(color_console, disassemble(b"\x60\x01\x00"))
    output = color_console.file.getvalue()
    assert "\x1b[" in output
    assert "PUSH1" in output


def test_print_stats(console):
    print_stats(console, Stats(byte_len=41, opcode_count=21, max_stack_depth=20))
    output = console.file.getvalue()
    assert "BYTECODE STATS" in output
    assert "Byte length" in output and "41" in output
    assert "Opcode count" in output and "21" in output
    assert "Max stack depth" in output and "20" in output


def test_print_error(console):
    print_error(console, "Bytecode is empty")
    assert console.file.getvalue() == "Error: Bytecode is empty\n"


def test_print_usage_hint(console):
    print_usage_hint(console)
    output = console.file.getvalue()
    assert "Usage examples:" in output
    assert "evm-lens 0x60FF61ABCD00" in output
