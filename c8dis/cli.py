"""Command line entry point: ``c8dis <rom_file>``."""

import argparse
import os
import sys
from typing import List, Optional

from c8dis.constants import MAX_ROM_SIZE
from c8dis.disassembler import disassemble_file
from c8dis.logging import ConsoleLogger
from c8dis.rendering import format_line

USAGE = "Usage: c8dis <rom_file>"

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="c8dis",
        description="Disassemble a CHIP-8 ROM into a mnemonic listing.",
    )
    parser.add_argument(
        "rom_file",
        nargs="?",
        help="Path to the ROM image, decoded from address 0x200",
    )
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Highlight mnemonics by category (default: auto, only on a terminal)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log file name, size and truncation notices to stderr",
    )
    return parser

def _use_colors(mode: str) -> bool:
    if mode == "always":
        return True
    if mode == "never":
        return False
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.rom_file is None:
        print(USAGE)
        return 0

    logger = ConsoleLogger(log_level="DEBUG" if args.verbose else "WARNING")
    use_colors = _use_colors(args.color)

    try:
        lines = disassemble_file(args.rom_file, MAX_ROM_SIZE, logger)
    except OSError as e:
        logger.error(f"Cannot read {args.rom_file!r}: {e}")
        return 1

    try:
        for line in lines:
            print(format_line(line, use_colors))
        sys.stdout.flush()
    except BrokenPipeError:
        # Reader closed early (e.g. `| head`); keep the exit-time flush quiet.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    return 0


if __name__ == "__main__":
    sys.exit(main())
