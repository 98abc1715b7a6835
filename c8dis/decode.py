"""CHIP-8 instruction data model and opcode field extraction."""

import enum
from typing import Tuple

from chex import dataclass

from c8dis.constants import INVALID_TOKEN


class Mnemonic(enum.Enum):
    """Every mnemonic the decoder can produce."""
    CLS = "CLS"
    RET = "RET"
    SYS = "SYS"
    JP = "JP"
    CALL = "CALL"
    SE = "SE"
    SNE = "SNE"
    LD = "LD"
    ADD = "ADD"
    OR = "OR"
    AND = "AND"
    XOR = "XOR"
    SUB = "SUB"
    SHR = "SHR"
    SUBN = "SUBN"
    SHL = "SHL"
    RND = "RND"
    DRW = "DRW"
    SKP = "SKP"
    SKNP = "SKNP"
    INVALID = INVALID_TOKEN


class PseudoRegister(enum.Enum):
    """Fixed operand tokens that are not numbered registers."""
    I = "I"
    DT = "DT"
    ST = "ST"
    F = "F"
    B = "B"
    K = "K"
    I_INDIRECT = "[I]"
    V0 = "V0"


class OperandKind(enum.Enum):
    REGISTER = "register"  # Vx, 0-15
    BYTE = "byte"          # kk, 0-255
    ADDRESS = "address"    # nnn, 0-0xFFF
    NIBBLE = "nibble"      # n, 0-15
    TOKEN = "token"        # PseudoRegister


@dataclass(frozen=True)
class OpcodeFields:
    """The nibble fields of a raw 16-bit opcode."""
    raw: int
    family: int  # First nibble
    x: int       # Second nibble (VX register)
    y: int       # Third nibble (VY register)
    n: int       # Fourth nibble (4-bit immediate)
    kk: int      # Last byte (8-bit immediate)
    nnn: int     # Last 12 bits (12-bit address)


@dataclass(frozen=True)
class Operand:
    """A single decoded operand."""
    kind: OperandKind
    value: object


@dataclass(frozen=True)
class Instruction:
    """Decoded CHIP-8 instruction.

    Fully determined by ``opcode``: decoding the same opcode twice gives two
    equal instructions.
    """
    opcode: int
    mnemonic: Mnemonic
    operands: Tuple[Operand, ...] = ()

    @property
    def is_valid(self) -> bool:
        return self.mnemonic is not Mnemonic.INVALID

    @classmethod
    def invalid(cls, opcode: int) -> "Instruction":
        """Sentinel for bit patterns with no assigned mnemonic."""
        return cls(opcode=opcode, mnemonic=Mnemonic.INVALID, operands=())


@dataclass(frozen=True)
class DecodedLine:
    """One listing row: where a word sits, its bytes and what it decodes to."""
    address: int
    high: int
    low: int
    instruction: Instruction

    @property
    def raw(self) -> Tuple[int, int]:
        return self.high, self.low


def register(index: int) -> Operand:
    return Operand(kind=OperandKind.REGISTER, value=index)


def byte(value: int) -> Operand:
    return Operand(kind=OperandKind.BYTE, value=value)


def address(value: int) -> Operand:
    return Operand(kind=OperandKind.ADDRESS, value=value)


def nibble(value: int) -> Operand:
    return Operand(kind=OperandKind.NIBBLE, value=value)


def token(pseudo: PseudoRegister) -> Operand:
    return Operand(kind=OperandKind.TOKEN, value=pseudo)


def split_opcode(opcode: int) -> OpcodeFields:
    """Split a 16-bit opcode into its nibble fields."""
    opcode = int(opcode) & 0xFFFF
    return OpcodeFields(
        raw=opcode,
        family=(opcode & 0xF000) >> 12,
        x=(opcode & 0x0F00) >> 8,
        y=(opcode & 0x00F0) >> 4,
        n=opcode & 0x000F,
        kk=opcode & 0x00FF,
        nnn=opcode & 0x0FFF
    )
