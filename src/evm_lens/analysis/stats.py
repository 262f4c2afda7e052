"""Static bytecode statistics: byte length, opcode count, peak stack depth.

The stack depth is a linear estimate. Instructions are replayed once in
program order with no regard for JUMP/JUMPI, so the result is the peak of
the trace that executes every decoded instruction top to bottom.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from evm_lens.analysis.disassembler import (
    DisassemblyError,
    Instruction,
    disassemble,
)
from evm_lens.analysis.opcodes import lookup

logger = logging.getLogger(__name__)


class UnknownOpcodeError(DisassemblyError):
    """Raised when stack accounting reaches an unassigned opcode."""

    def __init__(self, position: int, byte: int):
        super().__init__(f"Unknown opcode 0x{byte:02x} at position {position}")
        self.position = position
        self.byte = byte


@dataclass(frozen=True, slots=True)
class Stats:
    byte_len: int
    opcode_count: int
    max_stack_depth: int


def get_byte_len(bytecode: bytes) -> int:
    return len(bytecode)


def compute_opcode_count(instructions: list[Instruction]) -> int:
    return len(instructions)


def compute_max_stack_depth(instructions: list[Instruction]) -> int:
    """Peak of the running stack height over a single linear pass.

    Raises UnknownOpcodeError at the first unassigned opcode. The running
    height may dip below zero for code that pops values it never pushed;
    the reported peak is never negative.
    """
    depth = 0
    max_depth = 0

    for ins in instructions:
        info = lookup(ins.opcode)
        if info is None:
            raise UnknownOpcodeError(ins.offset, ins.opcode)
        depth += info.stack_effect
        max_depth = max(max_depth, depth)

    return max_depth


def compute_stats(bytecode: bytes) -> Stats:
    """Decode the buffer and compute its Stats.

    Raises EmptyBytecodeError / InvalidBytecodeError exactly as disassemble
    does, and UnknownOpcodeError if any instruction is unassigned. No
    partial result is returned on failure.
    """
    instructions = disassemble(bytecode)

    stats = Stats(
        byte_len=get_byte_len(bytecode),
        opcode_count=compute_opcode_count(instructions),
        max_stack_depth=compute_max_stack_depth(instructions),
    )
    logger.debug(
        "Stats: %d bytes, %d opcodes, max stack depth %d",
        stats.byte_len,
        stats.opcode_count,
        stats.max_stack_depth,
    )
    return stats
