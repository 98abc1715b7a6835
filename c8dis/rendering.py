"""Text rendering of decoded CHIP-8 instructions."""

import enum
from typing import Dict

from c8dis.decode import DecodedLine, Instruction, Mnemonic, Operand, OperandKind


class Category(enum.Enum):
    """Visual class shared by a group of mnemonics."""
    SYSTEM = "system"
    CONTROL_FLOW = "control_flow"
    IO = "io"
    COMPARISON = "comparison"
    MOVEMENT = "movement"
    INVALID = "invalid"


CATEGORIES: Dict[Mnemonic, Category] = {
    Mnemonic.CLS: Category.SYSTEM,
    Mnemonic.RET: Category.SYSTEM,
    Mnemonic.SYS: Category.SYSTEM,
    Mnemonic.JP: Category.CONTROL_FLOW,
    Mnemonic.SKP: Category.CONTROL_FLOW,
    Mnemonic.SKNP: Category.CONTROL_FLOW,
    Mnemonic.CALL: Category.IO,
    Mnemonic.RND: Category.IO,
    Mnemonic.DRW: Category.IO,
    Mnemonic.SE: Category.COMPARISON,
    Mnemonic.SNE: Category.COMPARISON,
    Mnemonic.LD: Category.MOVEMENT,
    Mnemonic.OR: Category.MOVEMENT,
    Mnemonic.AND: Category.MOVEMENT,
    Mnemonic.ADD: Category.MOVEMENT,
    Mnemonic.XOR: Category.MOVEMENT,
    Mnemonic.SUB: Category.MOVEMENT,
    Mnemonic.SHR: Category.MOVEMENT,
    Mnemonic.SUBN: Category.MOVEMENT,
    Mnemonic.SHL: Category.MOVEMENT,
}

ANSI_COLORS: Dict[Category, str] = {
    Category.SYSTEM: "\033[36m",        # cyan
    Category.CONTROL_FLOW: "\033[35m",  # magenta
    Category.IO: "\033[33m",            # yellow
    Category.COMPARISON: "\033[34m",    # blue
    Category.MOVEMENT: "\033[32m",      # green
    Category.INVALID: "\033[31m",       # red
}

ADDRESS_COLOR = "\033[31m"
RESET = "\033[0m"


def category_of(mnemonic: Mnemonic) -> Category:
    return CATEGORIES.get(mnemonic, Category.INVALID)


def colorize(text: str, color: str) -> str:
    return f"{color}{text}{RESET}"


def format_operand(operand: Operand) -> str:
    """Render one operand with its fixed-width template.

    Registers are ``V`` plus a hex digit, addresses four hex digits, bytes
    two hex digits, sprite heights decimal and pseudo-registers verbatim.
    """
    if operand.kind is OperandKind.REGISTER:
        return f"V{operand.value:X}"
    if operand.kind is OperandKind.ADDRESS:
        return f"{operand.value:04X}"
    if operand.kind is OperandKind.BYTE:
        return f"{operand.value:02X}"
    if operand.kind is OperandKind.NIBBLE:
        return f"{operand.value}"
    return operand.value.value


def format_instruction(instruction: Instruction, use_colors: bool = False) -> str:
    """Render ``MNEMONIC OP1, OP2``; invalid encodings render as ``#INVALID``."""
    mnemonic = instruction.mnemonic.value
    if use_colors:
        mnemonic = colorize(mnemonic, ANSI_COLORS[category_of(instruction.mnemonic)])

    if not instruction.operands:
        return mnemonic
    return f"{mnemonic} " + ", ".join(format_operand(op) for op in instruction.operands)


def format_line(line: DecodedLine, use_colors: bool = False) -> str:
    """Render a listing row as ``ADDR:<tab>B1 B2<tab>MNEMONIC OPERANDS``."""
    prefix = f"{line.address:04X}:\t{line.high:02X} {line.low:02X}\t"
    if use_colors:
        prefix = colorize(prefix, ADDRESS_COLOR)
    return prefix + format_instruction(line.instruction, use_colors)
