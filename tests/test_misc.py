"""Tests for miscellaneous instructions (Fxxx)."""

import pytest
from c8dis import decode, Mnemonic, Instruction, PseudoRegister
from conftest import reg, tok


class TestTimersAndKeys:
    """Test timer and key loads."""

    def test_get_delay_timer(self):
        """FX07 - LD VX, DT."""
        instruction = decode(0xF207)
        assert instruction.mnemonic == Mnemonic.LD
        assert instruction.operands == (reg(2), tok(PseudoRegister.DT))

    def test_wait_for_key(self):
        """FX0A - LD VX, K."""
        assert decode(0xF30A).operands == (reg(3), tok(PseudoRegister.K))

    def test_set_delay_timer(self):
        """FX15 - LD DT, VX."""
        assert decode(0xF015).operands == (tok(PseudoRegister.DT), reg(0))

    def test_set_sound_timer(self):
        """FX18 - LD ST, VX."""
        assert decode(0xF118).operands == (tok(PseudoRegister.ST), reg(1))


class TestIndexOperations:
    """Test index-register forms."""

    def test_add_to_index(self):
        """FX1E - ADD I, VX."""
        instruction = decode(0xF51E)
        assert instruction.mnemonic == Mnemonic.ADD
        assert instruction.operands == (tok(PseudoRegister.I), reg(5))

    def test_font_character(self):
        """FX29 - LD F, VX."""
        assert decode(0xF029) == Instruction(
            opcode=0xF029, mnemonic=Mnemonic.LD, operands=(tok(PseudoRegister.F), reg(0))
        )

    def test_bcd(self):
        """FX33 - LD B, VX."""
        assert decode(0xF933).operands == (tok(PseudoRegister.B), reg(9))

    def test_store_registers(self):
        """FX55 - LD [I], VX."""
        assert decode(0xFA55).operands == (tok(PseudoRegister.I_INDIRECT), reg(0xA))

    def test_load_registers(self):
        """FX65 - LD VX, [I]."""
        assert decode(0xFA65).operands == (reg(0xA), tok(PseudoRegister.I_INDIRECT))


class TestMiscInvalid:

    @pytest.mark.parametrize("opcode", [0xF000, 0xF030, 0xF075, 0xFFFF])
    def test_unassigned_low_bytes(self, opcode):
        assert decode(opcode) == Instruction.invalid(opcode)
