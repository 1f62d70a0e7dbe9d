"""Tests for lightness ramp generation."""

from __future__ import annotations

import re

import pytest

NINE_STOPS = (0.98, 0.95, 0.9, 0.8, 0.7, 0.6, 0.5, 0.4, 0.3)


class TestLadders:
    def test_ladder_lengths(self):
        from hueforge.core.ramps import BRAND_LADDER, NEUTRAL_LADDER

        assert len(BRAND_LADDER) == 10
        assert len(NEUTRAL_LADDER) == 12
        assert NEUTRAL_LADDER[0] == 25
        assert NEUTRAL_LADDER[-1] == 950

    def test_ladder_for(self):
        from hueforge.core.ramps import BRAND_LADDER, NEUTRAL_LADDER, ladder_for

        assert ladder_for("neutral") == NEUTRAL_LADDER
        assert ladder_for("p1") == BRAND_LADDER
        assert ladder_for("danger") == BRAND_LADDER


class TestGenerateRamp:
    def test_primary_ramp(self):
        from hueforge.core.ir import ColorSpec
        from hueforge.core.ramps import generate_ramp

        ramp = generate_ramp("p1", ColorSpec(hue=320.0, chroma=0.15))

        assert len(ramp) == 10
        assert ramp.token_at(0).name == "--p1-50"
        assert ramp.token_at(9).name == "--p1-900"

        first = ramp.token_for(50)
        assert (first.l, first.c, first.h) == (0.98, 0.15, 320.0)

        brand = ramp.token_for(600)
        assert (brand.l, brand.c, brand.h) == (0.5, 0.15, 320.0)
        assert brand.primitive_name == "p1/600"

    def test_token_hex_matches_conversion(self):
        from hueforge.core.ir import ColorSpec
        from hueforge.core.oklch import oklch_to_hex
        from hueforge.core.ramps import generate_ramp

        ramp = generate_ramp("p1", ColorSpec(hue=320.0, chroma=0.15))
        for token in ramp.tokens:
            assert re.fullmatch(r"#[0-9a-f]{6}", token.hex)
            assert token.hex == oklch_to_hex(token.l, token.c, token.h)

    def test_brand_600_reads_back_close_to_input(self):
        from hueforge.core.ir import ColorSpec
        from hueforge.core.oklch import hex_to_oklch
        from hueforge.core.ramps import generate_ramp

        token = generate_ramp("p1", ColorSpec(hue=320.0, chroma=0.15)).token_for(600)
        lightness, chroma, hue = hex_to_oklch(token.hex)
        assert lightness == pytest.approx(0.5, abs=0.02)
        assert chroma == pytest.approx(0.15, abs=0.02)
        assert hue == pytest.approx(320.0, abs=3.0)

    def test_neutral_ramp(self):
        from hueforge.core.ir import NeutralSpec
        from hueforge.core.ramps import generate_ramp

        ramp = generate_ramp("neutral", NeutralSpec())
        assert [t.name for t in ramp.tokens][:2] == ["--neutral-25", "--neutral-50"]
        assert ramp.token_for(950).l == 0.1

    def test_custom_ladder(self):
        from hueforge.core.ir import ColorSpec
        from hueforge.core.ramps import generate_ramp

        ramp = generate_ramp("x", ColorSpec(stops=(0.9, 0.5)), ladder=[1, 2])
        assert [t.name for t in ramp.tokens] == ["--x-1", "--x-2"]

    def test_stop_count_mismatch(self):
        from hueforge.core.errors import StopLadderMismatch
        from hueforge.core.ir import ColorSpec
        from hueforge.core.ramps import generate_ramp

        with pytest.raises(StopLadderMismatch) as exc_info:
            generate_ramp("p2", ColorSpec(stops=NINE_STOPS))

        error = exc_info.value
        assert error.prefix == "p2"
        assert error.stop_count == 9
        assert error.ladder_length == 10

    def test_unknown_weight(self):
        from hueforge.core.ir import ColorSpec
        from hueforge.core.ramps import generate_ramp

        ramp = generate_ramp("p1", ColorSpec())
        with pytest.raises(KeyError):
            ramp.token_for(950)

    def test_deterministic(self):
        from hueforge.core.ir import ColorSpec
        from hueforge.core.ramps import generate_ramp

        spec = ColorSpec(hue=107.0, chroma=0.18)
        assert generate_ramp("success", spec) == generate_ramp("success", spec)


class TestGenerateRamps:
    def test_all_groups_in_order(self, default_config):
        from hueforge.core.ir import GROUP_PREFIXES
        from hueforge.core.ramps import generate_ramps

        ramps = generate_ramps(default_config)

        assert ramps.is_complete
        assert ramps.prefixes == GROUP_PREFIXES
        assert len(ramps.tokens()) == 6 * 10 + 12

    def test_mismatch_isolated_to_group(self, mismatched_config):
        from hueforge.core.errors import StopLadderMismatch
        from hueforge.core.ramps import generate_ramps

        ramps = generate_ramps(mismatched_config)

        assert not ramps.is_complete
        assert "p2" not in ramps
        assert "p1" in ramps
        assert "danger" in ramps
        assert len(ramps.errors) == 1
        assert isinstance(ramps.errors[0], StopLadderMismatch)
        assert ramps["p1"].token_for(600).l == 0.5
