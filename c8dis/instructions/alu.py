"""CHIP-8 ALU operations (8xxx)."""

from c8dis.decode import Instruction, Mnemonic, OpcodeFields, register

# Keyed on the low nibble; 8, 9, A, B, C, D and F are unassigned.
ALU_OPERATIONS = {
    0x0: Mnemonic.LD,    # 8XY0 - VX = VY
    0x1: Mnemonic.OR,    # 8XY1 - VX |= VY
    0x2: Mnemonic.AND,   # 8XY2 - VX &= VY
    0x3: Mnemonic.XOR,   # 8XY3 - VX ^= VY
    0x4: Mnemonic.ADD,   # 8XY4 - VX += VY, carry
    0x5: Mnemonic.SUB,   # 8XY5 - VX -= VY, borrow
    0x6: Mnemonic.SHR,   # 8XY6 - VX >>= 1
    0x7: Mnemonic.SUBN,  # 8XY7 - VX = VY - VX
    0xE: Mnemonic.SHL,   # 8XYE - VX <<= 1
}


def decode_alu_operation(fields: OpcodeFields) -> Instruction:
    """Dispatch ALU operations on the low nibble."""
    mnemonic = ALU_OPERATIONS.get(fields.n)
    if mnemonic is None:
        return Instruction.invalid(fields.raw)
    return Instruction(
        opcode=fields.raw,
        mnemonic=mnemonic,
        operands=(register(fields.x), register(fields.y)),
    )
