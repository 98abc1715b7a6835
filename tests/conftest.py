"""Test configuration and fixtures for CHIP-8 disassembler tests."""

import pytest
from c8dis.decode import Operand, OperandKind, PseudoRegister


@pytest.fixture
def write_rom(tmp_path):
    """Write raw bytes to a ROM file and return its path."""
    def _write(data, name="test.ch8"):
        path = tmp_path / name
        path.write_bytes(bytes(data))
        return str(path)
    return _write


def reg(index):
    """Helper to build a register operand."""
    return Operand(kind=OperandKind.REGISTER, value=index)


def imm(value):
    """Helper to build an immediate byte operand."""
    return Operand(kind=OperandKind.BYTE, value=value)


def addr(value):
    """Helper to build an address operand."""
    return Operand(kind=OperandKind.ADDRESS, value=value)


def tok(pseudo: PseudoRegister):
    """Helper to build a pseudo-register operand."""
    return Operand(kind=OperandKind.TOKEN, value=pseudo)
