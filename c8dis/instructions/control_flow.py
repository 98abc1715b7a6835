"""CHIP-8 control flow instructions (1xxx, 2xxx, 3xxx, 4xxx, 5xxx, 9xxx, Bxxx, Exxx)."""

from c8dis.decode import (
    Instruction, Mnemonic, OpcodeFields, PseudoRegister,
    address, byte, register, token,
)


def decode_jump(fields: OpcodeFields) -> Instruction:
    """1NNN - Jump to address NNN."""
    return Instruction(opcode=fields.raw, mnemonic=Mnemonic.JP, operands=(address(fields.nnn),))


def decode_call(fields: OpcodeFields) -> Instruction:
    """2NNN - Call subroutine at NNN."""
    return Instruction(opcode=fields.raw, mnemonic=Mnemonic.CALL, operands=(address(fields.nnn),))


def decode_skip_if_equal_immediate(fields: OpcodeFields) -> Instruction:
    """3XNN - Skip next instruction if VX == NN."""
    return Instruction(
        opcode=fields.raw,
        mnemonic=Mnemonic.SE,
        operands=(register(fields.x), byte(fields.kk)),
    )


def decode_skip_if_not_equal_immediate(fields: OpcodeFields) -> Instruction:
    """4XNN - Skip next instruction if VX != NN."""
    return Instruction(
        opcode=fields.raw,
        mnemonic=Mnemonic.SNE,
        operands=(register(fields.x), byte(fields.kk)),
    )


def decode_skip_if_equal_register(fields: OpcodeFields) -> Instruction:
    """5XY0 - Skip next instruction if VX == VY.

    The low nibble is not checked.
    """
    return Instruction(
        opcode=fields.raw,
        mnemonic=Mnemonic.SE,
        operands=(register(fields.x), register(fields.y)),
    )


def decode_skip_if_not_equal_register(fields: OpcodeFields) -> Instruction:
    """9XY0 - Skip next instruction if VX != VY."""
    return Instruction(
        opcode=fields.raw,
        mnemonic=Mnemonic.SNE,
        operands=(register(fields.x), register(fields.y)),
    )


def decode_jump_with_offset(fields: OpcodeFields) -> Instruction:
    """BNNN - Jump to NNN + V0."""
    return Instruction(
        opcode=fields.raw,
        mnemonic=Mnemonic.JP,
        operands=(token(PseudoRegister.V0), address(fields.nnn)),
    )


_KEY_SKIPS = {
    0x9E: Mnemonic.SKP,
    0xA1: Mnemonic.SKNP,
}


def decode_skip_if_key(fields: OpcodeFields) -> Instruction:
    """EX9E / EXA1 - Skip next instruction if key VX is (not) pressed."""
    mnemonic = _KEY_SKIPS.get(fields.kk)
    if mnemonic is None:
        return Instruction.invalid(fields.raw)
    return Instruction(opcode=fields.raw, mnemonic=mnemonic, operands=(register(fields.x),))
