"""CHIP-8 system instructions (0x0xxx)."""

from c8dis.decode import Instruction, Mnemonic, OpcodeFields, address

_NO_OPERAND = {
    0xE0: Mnemonic.CLS,
    0xEE: Mnemonic.RET,
}


def decode_system_call(fields: OpcodeFields) -> Instruction:
    """0NNN - SYS addr.

    The address is assembled from the low nibble of the high byte and the
    full low byte, as the original system-call form encodes it.
    """
    return Instruction(
        opcode=fields.raw,
        mnemonic=Mnemonic.SYS,
        operands=(address(fields.x * 0x100 + fields.kk),),
    )


def decode_system_instruction(fields: OpcodeFields) -> Instruction:
    """Dispatch system instructions: 00E0, 00EE and 0NNN."""
    if fields.x != 0:
        return decode_system_call(fields)

    mnemonic = _NO_OPERAND.get(fields.kk)
    if mnemonic is None:
        return Instruction.invalid(fields.raw)
    return Instruction(opcode=fields.raw, mnemonic=mnemonic)
