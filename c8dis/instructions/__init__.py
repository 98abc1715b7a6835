"""Per-family CHIP-8 opcode decoders."""
