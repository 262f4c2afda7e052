"""EVM bytecode disassembler: raw bytes → list of Instruction."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from evm_lens.analysis.opcodes import opcode_name, operand_size

logger = logging.getLogger(__name__)


class DisassemblyError(Exception):
    """Base class for bytecode decoding and analysis failures."""


class EmptyBytecodeError(DisassemblyError):
    """Raised when the input buffer has zero length."""

    def __init__(self) -> None:
        super().__init__("Bytecode is empty")


class InvalidBytecodeError(DisassemblyError):
    """Raised when the input cannot be framed as bytecode at all."""

    def __init__(self, reason: str):
        super().__init__(f"Invalid bytecode: {reason}")
        self.reason = reason


@dataclass(frozen=True, slots=True)
class Instruction:
    offset: int
    opcode: int
    name: str
    operand: bytes  # empty for non-PUSH instructions, short if truncated

    @property
    def size(self) -> int:
        """Bytes this instruction occupies in the buffer."""
        return 1 + len(self.operand)


def _check_buffer(bytecode: object) -> bytes:
    if not isinstance(bytecode, (bytes, bytearray, memoryview)):
        raise InvalidBytecodeError(
            f"expected a byte buffer, got {type(bytecode).__name__}"
        )
    raw = bytes(bytecode)
    if not raw:
        raise EmptyBytecodeError()
    return raw


def iter_instructions(bytecode: bytes) -> Iterator[Instruction]:
    """Lazily walk the buffer from offset 0, yielding one Instruction per opcode.

    Unassigned bytes are yielded as zero-operand instructions. A PUSH whose
    operand runs past the end of the buffer takes whatever bytes remain and
    ends the walk.
    """
    i = 0
    end = len(bytecode)

    while i < end:
        opcode = bytecode[i]
        size = operand_size(opcode)
        operand = bytecode[i + 1 : i + 1 + size]
        yield Instruction(i, opcode, opcode_name(opcode), operand)
        # advance past opcode + full declared operand size
        i += 1 + size


def disassemble(bytecode: bytes) -> list[Instruction]:
    """Disassemble raw EVM bytecode into positioned instructions.

    Raises EmptyBytecodeError for a zero-length buffer and
    InvalidBytecodeError if the input is not a byte buffer. Never fails
    on unassigned opcodes; that check belongs to compute_stats.
    """
    raw = _check_buffer(bytecode)
    instructions = list(iter_instructions(raw))

    if not instructions:
        raise InvalidBytecodeError("No valid opcodes found")

    logger.debug(
        "Disassembled %d bytes into %d instructions", len(raw), len(instructions)
    )
    return instructions
