"""CHIP-8 disassembler package."""

from c8dis.decode import (
    DecodedLine, Instruction, Mnemonic, Operand, OperandKind, PseudoRegister, split_opcode,
)
from c8dis.disassembler import decode, decode_bytes, disassemble, disassemble_file, load_rom, words
from c8dis.rendering import Category, CATEGORIES, format_instruction, format_line, format_operand
from c8dis.constants import *

__all__ = [
    "DecodedLine",
    "Instruction",
    "Mnemonic",
    "Operand",
    "OperandKind",
    "PseudoRegister",
    "split_opcode",
    "decode",
    "decode_bytes",
    "disassemble",
    "disassemble_file",
    "load_rom",
    "words",
    "Category",
    "CATEGORIES",
    "format_instruction",
    "format_line",
    "format_operand",
    "PROGRAM_START",
    "MAX_ROM_SIZE",
    "INSTRUCTION_SIZE",
    "INVALID_TOKEN",
]
