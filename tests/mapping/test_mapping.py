"""Tests for cosmogen.mapping package (lookup table and config slicing)."""

from __future__ import annotations

from dataclasses import fields

import pytest

from cosmogen.config.types import GenerationConfig
from cosmogen.mapping import MAPPERS, InternalParams, config_slice, map_config
from cosmogen.mapping.topology import TopologySettings


class TestMappers:
    def test_one_attribute_per_mapper(self) -> None:
        assert [f.name for f in fields(InternalParams)] == list(MAPPERS)

    def test_mapper_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            MAPPERS["extra"] = MAPPERS["topology"]  # type: ignore[index]

    @pytest.mark.parametrize("name", list(MAPPERS))
    def test_settings_fields_exist_on_config(self, name: str) -> None:
        config_names = {f.name for f in fields(GenerationConfig)}
        slice_names = {f.name for f in fields(MAPPERS[name].settings_type)}
        assert slice_names <= config_names


class TestConfigSlice:
    def test_copies_same_named_fields(self) -> None:
        config = GenerationConfig(max_depth=5, planet_density=0.1)
        settings = config_slice(config, TopologySettings)
        assert isinstance(settings, TopologySettings)
        assert settings.max_depth == 5
        assert settings.planet_density == 0.1


class TestMapConfig:
    def test_pure(self) -> None:
        config = GenerationConfig(seed="x", enable_comets=True)
        assert map_config(config) == map_config(config)

    def test_default_config_disables_optional_subsystems(self) -> None:
        params = map_config(GenerationConfig())
        assert not params.comets.enabled
        assert not params.rings.enabled
        assert not params.lagrange.enabled
        assert not params.black_holes.enabled
        assert not params.rogue_planets.enabled
        assert not params.nebulae.enabled
        assert not params.grouping.enabled
        assert not params.asteroid_belts.enabled
        assert not params.kuiper_belt.enabled
        assert not params.protoplanetary_disks.enabled

    def test_toggle_only_touches_its_subsystem(self) -> None:
        off = map_config(GenerationConfig())
        on = map_config(GenerationConfig(enable_comets=True))
        assert on.comets.enabled
        for f in fields(InternalParams):
            if f.name != "comets":
                assert getattr(on, f.name) == getattr(off, f.name)
