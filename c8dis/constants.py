"""CHIP-8 disassembler constants."""

# Programs are loaded at 0x200; everything below belongs to the interpreter.
PROGRAM_START = 0x200

# Size of the read buffer. Bytes past this are never read.
MAX_ROM_SIZE = 4096

INSTRUCTION_SIZE = 2

INVALID_TOKEN = "#INVALID"
