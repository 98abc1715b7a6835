"""CHIP-8 disassembly engine: opcode dispatch and the ROM word walker."""

import os
from typing import Iterator, Optional, Sequence, Union

import jax.numpy as jnp

from c8dis.constants import INSTRUCTION_SIZE, MAX_ROM_SIZE, PROGRAM_START
from c8dis.decode import DecodedLine, Instruction, split_opcode
from c8dis.instructions.system import decode_system_instruction
from c8dis.instructions.control_flow import (
    decode_jump, decode_call, decode_skip_if_equal_immediate,
    decode_skip_if_not_equal_immediate, decode_skip_if_equal_register,
    decode_skip_if_not_equal_register, decode_jump_with_offset, decode_skip_if_key
)
from c8dis.instructions.alu import decode_alu_operation
from c8dis.instructions.memory import decode_set, decode_add, decode_set_index, decode_random
from c8dis.instructions.display import decode_display
from c8dis.instructions.misc import decode_misc_instruction
from c8dis.logging import ConsoleLogger

RomData = Union[bytes, bytearray, Sequence[int], jnp.ndarray]

# Indexed by the high nibble of the opcode.
FAMILY_DECODERS = (
    decode_system_instruction,
    decode_jump,
    decode_call,
    decode_skip_if_equal_immediate,
    decode_skip_if_not_equal_immediate,
    decode_skip_if_equal_register,
    decode_set,
    decode_add,
    decode_alu_operation,
    decode_skip_if_not_equal_register,
    decode_set_index,
    decode_jump_with_offset,
    decode_random,
    decode_display,
    decode_skip_if_key,
    decode_misc_instruction,
)


def decode(opcode: int) -> Instruction:
    """Decode a single 16-bit CHIP-8 opcode.

    Every value maps to exactly one instruction; bit patterns with no
    assigned mnemonic come back as ``Instruction.invalid``.
    """
    fields = split_opcode(opcode)
    return FAMILY_DECODERS[fields.family](fields)


def decode_bytes(high: int, low: int) -> Instruction:
    """Decode the big-endian word made of two ROM bytes."""
    return decode(((high & 0xFF) << 8) | (low & 0xFF))


def _pack_u16(high: jnp.ndarray, low: jnp.ndarray) -> jnp.ndarray:
    """Pack bytes into uint16."""
    return (high.astype(jnp.uint16) << 8) | low.astype(jnp.uint16)


def _as_rom_array(data: RomData) -> jnp.ndarray:
    if isinstance(data, (bytes, bytearray)):
        data = list(data)
    return jnp.asarray(data, dtype=jnp.uint8)


def words(data: RomData) -> jnp.ndarray:
    """Slice ROM bytes into big-endian 16-bit words.

    A trailing odd byte is dropped.
    """
    rom = _as_rom_array(data)
    usable = rom.shape[0] - rom.shape[0] % INSTRUCTION_SIZE
    return _pack_u16(rom[0:usable:2], rom[1:usable:2])


def disassemble(data: RomData, base: int = PROGRAM_START) -> Iterator[DecodedLine]:
    """Decode ROM bytes word by word, in byte order.

    Decoding is positional: no instruction boundaries are inferred from
    jumps or calls, and data is decoded as if it were code.
    """
    for index, word in enumerate(words(data).tolist()):
        yield DecodedLine(
            address=base + index * INSTRUCTION_SIZE,
            high=word >> 8,
            low=word & 0xFF,
            instruction=decode(word),
        )


def load_rom(filename: str, max_size: int = MAX_ROM_SIZE,
             logger: Optional[ConsoleLogger] = None) -> jnp.ndarray:
    """Read at most ``max_size`` bytes of a ROM file.

    Bytes past the cap are not read. ``OSError`` from opening or reading the
    file propagates to the caller.
    """
    with open(filename, 'rb') as f:
        rom_data = f.read(max_size)
        file_size = os.fstat(f.fileno()).st_size

    if logger is not None:
        logger.info(f"Filename: {filename!r}")
        logger.info(f"File size: {len(rom_data)} bytes")
        if file_size > len(rom_data):
            logger.info(
                f"ROM is {file_size} bytes, only the first {len(rom_data)} are decoded"
            )
        if len(rom_data) % INSTRUCTION_SIZE:
            logger.debug(f"Dropping trailing byte {rom_data[-1]:02X}")

    return _as_rom_array(rom_data)


def disassemble_file(filename: str, max_size: int = MAX_ROM_SIZE,
                     logger: Optional[ConsoleLogger] = None) -> Iterator[DecodedLine]:
    """Load a ROM file and decode it from PROGRAM_START."""
    return disassemble(load_rom(filename, max_size, logger))
