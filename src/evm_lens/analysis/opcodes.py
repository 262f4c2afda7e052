"""Complete EVM opcode table: int → OpcodeInfo (name, operand size, stack arity)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OpcodeInfo:
    name: str
    operand_size: int  # only non-zero for PUSH1..PUSH32
    inputs: int
    outputs: int

    @property
    def stack_effect(self) -> int:
        """Net change in stack height: outputs minus inputs."""
        return self.outputs - self.inputs


def _op(name: str, inputs: int, outputs: int, operand_size: int = 0) -> OpcodeInfo:
    return OpcodeInfo(name, operand_size, inputs, outputs)


OPCODES: dict[int, OpcodeInfo] = {
    # Stop & arithmetic
    0x00: _op("STOP", 0, 0),
    0x01: _op("ADD", 2, 1),
    0x02: _op("MUL", 2, 1),
    0x03: _op("SUB", 2, 1),
    0x04: _op("DIV", 2, 1),
    0x05: _op("SDIV", 2, 1),
    0x06: _op("MOD", 2, 1),
    0x07: _op("SMOD", 2, 1),
    0x08: _op("ADDMOD", 3, 1),
    0x09: _op("MULMOD", 3, 1),
    0x0A: _op("EXP", 2, 1),
    0x0B: _op("SIGNEXTEND", 2, 1),
    # Comparison & bitwise
    0x10: _op("LT", 2, 1),
    0x11: _op("GT", 2, 1),
    0x12: _op("SLT", 2, 1),
    0x13: _op("SGT", 2, 1),
    0x14: _op("EQ", 2, 1),
    0x15: _op("ISZERO", 1, 1),
    0x16: _op("AND", 2, 1),
    0x17: _op("OR", 2, 1),
    0x18: _op("XOR", 2, 1),
    0x19: _op("NOT", 1, 1),
    0x1A: _op("BYTE", 2, 1),
    0x1B: _op("SHL", 2, 1),
    0x1C: _op("SHR", 2, 1),
    0x1D: _op("SAR", 2, 1),
    # Hashing
    0x20: _op("KECCAK256", 2, 1),
    # Environmental
    0x30: _op("ADDRESS", 0, 1),
    0x31: _op("BALANCE", 1, 1),
    0x32: _op("ORIGIN", 0, 1),
    0x33: _op("CALLER", 0, 1),
    0x34: _op("CALLVALUE", 0, 1),
    0x35: _op("CALLDATALOAD", 1, 1),
    0x36: _op("CALLDATASIZE", 0, 1),
    0x37: _op("CALLDATACOPY", 3, 0),
    0x38: _op("CODESIZE", 0, 1),
    0x39: _op("CODECOPY", 3, 0),
    0x3A: _op("GASPRICE", 0, 1),
    0x3B: _op("EXTCODESIZE", 1, 1),
    0x3C: _op("EXTCODECOPY", 4, 0),
    0x3D: _op("RETURNDATASIZE", 0, 1),
    0x3E: _op("RETURNDATACOPY", 3, 0),
    0x3F: _op("EXTCODEHASH", 1, 1),
    # Block
    0x40: _op("BLOCKHASH", 1, 1),
    0x41: _op("COINBASE", 0, 1),
    0x42: _op("TIMESTAMP", 0, 1),
    0x43: _op("NUMBER", 0, 1),
    0x44: _op("PREVRANDAO", 0, 1),
    0x45: _op("GASLIMIT", 0, 1),
    0x46: _op("CHAINID", 0, 1),
    0x47: _op("SELFBALANCE", 0, 1),
    0x48: _op("BASEFEE", 0, 1),
    0x49: _op("BLOBHASH", 1, 1),
    0x4A: _op("BLOBBASEFEE", 0, 1),
    # Stack / memory / storage / flow
    0x50: _op("POP", 1, 0),
    0x51: _op("MLOAD", 1, 1),
    0x52: _op("MSTORE", 2, 0),
    0x53: _op("MSTORE8", 2, 0),
    0x54: _op("SLOAD", 1, 1),
    0x55: _op("SSTORE", 2, 0),
    0x56: _op("JUMP", 1, 0),
    0x57: _op("JUMPI", 2, 0),
    0x58: _op("PC", 0, 1),
    0x59: _op("MSIZE", 0, 1),
    0x5A: _op("GAS", 0, 1),
    0x5B: _op("JUMPDEST", 0, 0),
    0x5C: _op("TLOAD", 1, 1),
    0x5D: _op("TSTORE", 2, 0),
    0x5E: _op("MCOPY", 3, 0),
    # PUSH0
    0x5F: _op("PUSH0", 0, 1),
    # PUSH1 through PUSH32
    **{0x60 + i: _op(f"PUSH{i + 1}", 0, 1, i + 1) for i in range(32)},
    # DUPn reads n items and leaves n + 1
    **{0x80 + i: _op(f"DUP{i + 1}", i + 1, i + 2) for i in range(16)},
    # SWAPn touches n + 1 items, height unchanged
    **{0x90 + i: _op(f"SWAP{i + 1}", i + 2, i + 2) for i in range(16)},
    # LOG0 through LOG4: offset, size, then n topics
    **{0xA0 + i: _op(f"LOG{i}", i + 2, 0) for i in range(5)},
    # System
    0xF0: _op("CREATE", 3, 1),
    0xF1: _op("CALL", 7, 1),
    0xF2: _op("CALLCODE", 7, 1),
    0xF3: _op("RETURN", 2, 0),
    0xF4: _op("DELEGATECALL", 6, 1),
    0xF5: _op("CREATE2", 4, 1),
    0xFA: _op("STATICCALL", 6, 1),
    0xFD: _op("REVERT", 2, 0),
    0xFE: _op("INVALID", 0, 0),
    0xFF: _op("SELFDESTRUCT", 1, 0),
}


def lookup(opcode: int) -> OpcodeInfo | None:
    """Return the OpcodeInfo for a byte value, or None if it is unassigned."""
    return OPCODES.get(opcode)


def opcode_name(opcode: int) -> str:
    """Mnemonic for a byte value; unassigned bytes render as UNKNOWN_XX."""
    info = OPCODES.get(opcode)
    if info is None:
        return f"UNKNOWN_{opcode:02X}"
    return info.name


def operand_size(opcode: int) -> int:
    """Immediate operand length in bytes (0 for unassigned bytes)."""
    info = OPCODES.get(opcode)
    return info.operand_size if info is not None else 0
