"""CHIP-8 display instructions (Dxxx)."""

from c8dis.decode import Instruction, Mnemonic, OpcodeFields, nibble, register


def decode_display(fields: OpcodeFields) -> Instruction:
    """DXYN - Draw an N-row sprite at (VX, VY)."""
    return Instruction(
        opcode=fields.raw,
        mnemonic=Mnemonic.DRW,
        operands=(register(fields.x), register(fields.y), nibble(fields.n)),
    )
