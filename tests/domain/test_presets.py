"""Tests for cosmogen.domain.presets module."""

from __future__ import annotations

import logging

import pytest

from cosmogen.domain.grammar import NodeType, expand
from cosmogen.domain.presets import (
    BUILTIN_PRESETS,
    CLASSIC,
    SPARSE_OUTPOST,
    PresetRegistry,
    TopologyPreset,
    default_registry,
)
from cosmogen.domain.prng import Generator
from cosmogen.errors import UnknownPresetWarning


class TestBuiltinPresets:
    def test_catalog_ids(self) -> None:
        assert [p.id for p in BUILTIN_PRESETS] == [
            "classic",
            "compact",
            "multiStarHeavy",
            "moonRich",
            "sparseOutpost",
            "deepHierarchy",
        ]

    def test_only_deep_hierarchy_allows_sub_moons(self) -> None:
        allowed = [p.id for p in BUILTIN_PRESETS if p.grammar.allow_sub_moons]
        assert allowed == ["deepHierarchy"]

    def test_classic_defers_star_table(self) -> None:
        assert CLASSIC.grammar.star_count is None
        assert CLASSIC.suggested_overrides is None

    @pytest.mark.parametrize("preset", BUILTIN_PRESETS, ids=lambda p: p.id)
    def test_every_preset_expands_with_a_star(self, preset: TopologyPreset) -> None:
        grammar = preset.grammar
        for seed in range(10):
            root = expand(grammar, Generator.from_seed(seed))
            assert root.count_by_type()[NodeType.STAR] >= 1

    def test_sparse_outpost_empty_fraction(self) -> None:
        empty = 0
        for seed in range(1000):
            root = expand(SPARSE_OUTPOST.grammar, Generator.from_seed(f"outpost-{seed}"))
            if root.count_by_type()[NodeType.PLANET] == 0:
                empty += 1
        # 15% empty-planets weight; 1000 draws give sd ~11
        assert 105 <= empty <= 195


class TestPresetRegistry:
    def test_default_registry_contents(self) -> None:
        registry = default_registry()
        assert len(registry) == 6
        assert "moonRich" in registry
        assert registry.get("compact").id == "compact"

    def test_registries_are_independent(self) -> None:
        a = default_registry()
        b = PresetRegistry()
        assert len(b) == 0
        b.register(CLASSIC)
        assert len(a) == 6 and len(b) == 1

    def test_duplicate_registration_rejected(self) -> None:
        registry = default_registry()
        with pytest.raises(ValueError, match="already registered"):
            registry.register(CLASSIC)

    def test_get_unknown_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            default_registry().get("spiral")

    def test_resolve_unknown_falls_back_with_warning(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        registry = default_registry()
        with caplog.at_level(logging.WARNING, logger="cosmogen.domain.presets"):
            with pytest.warns(UnknownPresetWarning, match="spiral"):
                preset = registry.resolve("spiral")
        assert preset is CLASSIC
        assert "spiral" in caplog.text

    def test_options_for_pickers(self) -> None:
        options = default_registry().options()
        assert options[0] == {
            "id": "classic",
            "name": "Classic",
            "description": CLASSIC.description,
        }
        assert {"id", "name", "description"} == set(options[-1])
