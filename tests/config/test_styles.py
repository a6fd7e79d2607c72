"""Tests for cosmogen.config.styles module."""

from __future__ import annotations

import pytest

from cosmogen.config.styles import RANDOM_SEED_LENGTH, random_seed, style_config
from cosmogen.config.types import GenerationConfig, StylePreset


class TestStyleConfig:
    @pytest.mark.parametrize("preset", list(StylePreset))
    def test_every_style_is_a_valid_config(self, preset: StylePreset) -> None:
        config = style_config(preset)
        assert config.style_preset is preset

    def test_sparse_is_single_star(self) -> None:
        config = style_config(StylePreset.SPARSE)
        assert config.max_stars_per_system == 1
        assert not config.enable_nary_systems
        assert not config.enable_comets

    def test_crowded_has_more_systems_than_sparse(self) -> None:
        sparse = style_config(StylePreset.SPARSE)
        crowded = style_config(StylePreset.CROWDED)
        assert crowded.max_systems > sparse.max_systems

    def test_base_fields_not_pinned_are_kept(self) -> None:
        base = GenerationConfig(seed="keep-me", topology_preset="moonRich")
        config = style_config(StylePreset.SOLAR_LIKE, base)
        assert config.seed == "keep-me"
        assert config.topology_preset == "moonRich"


class TestRandomSeed:
    def test_shape(self) -> None:
        seed = random_seed()
        assert len(seed) == RANDOM_SEED_LENGTH
        assert seed.isalnum() and seed == seed.lower()

    def test_usable_as_config_seed(self) -> None:
        assert GenerationConfig(seed=random_seed()).seed is not None
