"""CHIP-8 register and index load instructions (6xxx, 7xxx, Axxx, Cxxx)."""

from c8dis.decode import (
    Instruction, Mnemonic, OpcodeFields, PseudoRegister,
    address, byte, register, token,
)


def decode_set(fields: OpcodeFields) -> Instruction:
    """6XNN - Set VX = NN."""
    return Instruction(
        opcode=fields.raw,
        mnemonic=Mnemonic.LD,
        operands=(register(fields.x), byte(fields.kk)),
    )


def decode_add(fields: OpcodeFields) -> Instruction:
    """7XNN - Add NN to VX."""
    return Instruction(
        opcode=fields.raw,
        mnemonic=Mnemonic.ADD,
        operands=(register(fields.x), byte(fields.kk)),
    )


def decode_set_index(fields: OpcodeFields) -> Instruction:
    """ANNN - Set I = NNN."""
    return Instruction(
        opcode=fields.raw,
        mnemonic=Mnemonic.LD,
        operands=(token(PseudoRegister.I), address(fields.nnn)),
    )


def decode_random(fields: OpcodeFields) -> Instruction:
    """CXNN - Set VX = random byte AND NN."""
    return Instruction(
        opcode=fields.raw,
        mnemonic=Mnemonic.RND,
        operands=(register(fields.x), byte(fields.kk)),
    )
