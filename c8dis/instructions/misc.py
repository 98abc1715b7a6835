"""CHIP-8 miscellaneous instructions (Fxxx)."""

from c8dis.decode import (
    Instruction, Mnemonic, OpcodeFields, PseudoRegister,
    register, token,
)

# Low byte -> (mnemonic, operand layout). "x" stands for VX.
MISC_OPERATIONS = {
    0x07: (Mnemonic.LD, ("x", PseudoRegister.DT)),          # FX07 - VX = delay timer
    0x0A: (Mnemonic.LD, ("x", PseudoRegister.K)),           # FX0A - wait for key
    0x15: (Mnemonic.LD, (PseudoRegister.DT, "x")),          # FX15 - delay timer = VX
    0x18: (Mnemonic.LD, (PseudoRegister.ST, "x")),          # FX18 - sound timer = VX
    0x1E: (Mnemonic.ADD, (PseudoRegister.I, "x")),          # FX1E - I += VX
    0x29: (Mnemonic.LD, (PseudoRegister.F, "x")),           # FX29 - I = font sprite for VX
    0x33: (Mnemonic.LD, (PseudoRegister.B, "x")),           # FX33 - BCD of VX at I
    0x55: (Mnemonic.LD, (PseudoRegister.I_INDIRECT, "x")),  # FX55 - store V0..VX
    0x65: (Mnemonic.LD, ("x", PseudoRegister.I_INDIRECT)),  # FX65 - load V0..VX
}


def decode_misc_instruction(fields: OpcodeFields) -> Instruction:
    """Dispatch misc instructions on the low byte."""
    entry = MISC_OPERATIONS.get(fields.kk)
    if entry is None:
        return Instruction.invalid(fields.raw)

    mnemonic, layout = entry
    operands = tuple(
        register(fields.x) if slot == "x" else token(slot)
        for slot in layout
    )
    return Instruction(opcode=fields.raw, mnemonic=mnemonic, operands=operands)
