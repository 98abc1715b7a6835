"""Tests for the ROM word walker and loader."""

import pytest
from c8dis import disassemble, disassemble_file, load_rom, words, format_line, Mnemonic, MAX_ROM_SIZE
from c8dis.logging import ConsoleLogger


class TestWords:
    """Test byte to word packing."""

    def test_big_endian(self):
        assert words(b"\x00\xE0\x1A\xBC").tolist() == [0x00E0, 0x1ABC]

    def test_odd_trailing_byte_dropped(self):
        assert words(b"\x00\xE0\x1A").tolist() == [0x00E0]

    def test_empty(self):
        assert words(b"").tolist() == []

    def test_accepts_int_sequences(self):
        assert words([0x12, 0x34]).tolist() == [0x1234]


class TestDisassemble:
    """Test the listing pipeline."""

    def test_end_to_end(self):
        lines = [format_line(line) for line in disassemble(b"\x00\xE0\x1A\xBC")]
        assert lines == ["0200:\t00 E0\tCLS", "0202:\t1A BC\tJP 0ABC"]

    def test_addresses_and_bytes(self):
        lines = list(disassemble(bytes([0x60, 0x01, 0x61, 0x02, 0xFF, 0xFF])))
        assert [line.address for line in lines] == [0x200, 0x202, 0x204]
        assert lines[1].raw == (0x61, 0x02)
        assert lines[2].instruction.mnemonic == Mnemonic.INVALID

    def test_invalid_does_not_stop_walk(self):
        lines = list(disassemble(bytes([0xE0, 0x00, 0x00, 0xE0])))
        assert [line.instruction.mnemonic for line in lines] == [Mnemonic.INVALID, Mnemonic.CLS]

    def test_odd_length_has_no_extra_line(self):
        assert len(list(disassemble(bytes([0x00, 0xE0, 0x00, 0xEE, 0x12])))) == 2

    def test_custom_base(self):
        assert next(disassemble(b"\x00\xE0", base=0x600)).address == 0x600


class TestLoadRom:
    """Test file loading and the size cap."""

    def test_load(self, write_rom):
        rom = load_rom(write_rom([0x00, 0xE0]))
        assert rom.tolist() == [0x00, 0xE0]

    def test_exact_capacity_fully_decoded(self, write_rom):
        path = write_rom([0x00, 0xE0] * (MAX_ROM_SIZE // 2))
        assert len(list(disassemble_file(path))) == MAX_ROM_SIZE // 2

    def test_over_capacity_truncated_without_error(self, write_rom):
        path = write_rom([0x00, 0xE0] * (MAX_ROM_SIZE // 2) + [0x12])
        assert len(load_rom(path)) == MAX_ROM_SIZE
        assert len(list(disassemble_file(path))) == MAX_ROM_SIZE // 2

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_rom(str(tmp_path / "missing.ch8"))

    def test_logs_header_and_truncation(self, write_rom, capsys):
        logger = ConsoleLogger(log_level="DEBUG", use_colors=False)
        path = write_rom([0x00, 0xE0, 0x00], name="tiny.ch8")
        load_rom(path, max_size=2, logger=logger)
        err = capsys.readouterr().err
        assert "Filename:" in err
        assert "File size: 2 bytes" in err
        assert "ROM is 3 bytes" in err

    def test_logs_dropped_byte(self, write_rom, capsys):
        logger = ConsoleLogger(log_level="DEBUG", use_colors=False)
        load_rom(write_rom([0x00, 0xE0, 0xAB]), logger=logger)
        assert "Dropping trailing byte AB" in capsys.readouterr().err
