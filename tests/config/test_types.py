"""Tests for cosmogen.config.types module."""

from __future__ import annotations

import math
from dataclasses import FrozenInstanceError, fields

import pytest

from cosmogen.config.constants import MAX_DEPTH_LIMIT, MAX_SYSTEMS
from cosmogen.config.types import (
    BOOL_FIELDS,
    ENUM_FIELDS,
    UNIT_INTERVAL_FIELDS,
    BeltPlacementMode,
    GenerationConfig,
    LagrangeMarkerMode,
    coerce_bool,
    coerce_enum,
    coerce_float,
    coerce_int,
)
from cosmogen.errors import ConfigValidationError


class TestGenerationConfigDefaults:
    def test_defaults_are_valid(self) -> None:
        config = GenerationConfig()
        assert config.seed is None
        assert config.topology_preset == "classic"
        assert not config.apply_preset_overrides

    def test_optional_populations_default_off(self) -> None:
        config = GenerationConfig()
        toggles = [f.name for f in fields(config) if f.name.startswith("enable_")]
        assert "enable_comets" in toggles
        assert not any(getattr(config, name) for name in toggles if name != "enable_nary_systems")

    def test_frozen(self) -> None:
        config = GenerationConfig()
        with pytest.raises(FrozenInstanceError):
            config.max_systems = 2  # type: ignore[misc]

    def test_field_groups_cover_config(self) -> None:
        names = {f.name for f in fields(GenerationConfig)}
        assert set(ENUM_FIELDS) <= names
        assert set(BOOL_FIELDS) <= names
        assert set(UNIT_INTERVAL_FIELDS) <= names


class TestGenerationConfigValidation:
    @pytest.mark.parametrize("value", [0, MAX_SYSTEMS + 1, -3])
    def test_max_systems_range(self, value: int) -> None:
        with pytest.raises(ConfigValidationError, match="max_systems"):
            GenerationConfig(max_systems=value)

    @pytest.mark.parametrize("value", [0, 4])
    def test_max_stars_range(self, value: int) -> None:
        with pytest.raises(ConfigValidationError, match="max_stars_per_system"):
            GenerationConfig(max_stars_per_system=value)

    def test_max_depth_range(self) -> None:
        GenerationConfig(max_depth=MAX_DEPTH_LIMIT)
        with pytest.raises(ConfigValidationError, match="max_depth"):
            GenerationConfig(max_depth=MAX_DEPTH_LIMIT + 1)

    @pytest.mark.parametrize("value", [-0.01, 1.01, math.nan, math.inf])
    def test_slider_range(self, value: float) -> None:
        with pytest.raises(ConfigValidationError, match="planet_density"):
            GenerationConfig(planet_density=value)

    def test_slider_boundaries_accepted(self) -> None:
        GenerationConfig(planet_density=0.0, moon_density=1.0)

    def test_negative_belt_cap_rejected(self) -> None:
        with pytest.raises(ConfigValidationError, match="max_belts_per_system"):
            GenerationConfig(max_belts_per_system=-1)

    def test_inclination_range(self) -> None:
        with pytest.raises(ConfigValidationError, match="orbit_inclination_max"):
            GenerationConfig(orbit_inclination_max=91.0)

    def test_curvature_order(self) -> None:
        with pytest.raises(ConfigValidationError, match="rogue_curvature_min"):
            GenerationConfig(rogue_curvature_min=0.8, rogue_curvature_max=0.2)

    def test_enum_field_must_be_member(self) -> None:
        with pytest.raises(ConfigValidationError, match="belt_placement_mode"):
            GenerationConfig(belt_placement_mode="both")  # type: ignore[arg-type]

    def test_bool_field_must_be_bool(self) -> None:
        with pytest.raises(ConfigValidationError, match="enable_comets"):
            GenerationConfig(enable_comets=1)  # type: ignore[arg-type]

    def test_int_field_rejects_bool(self) -> None:
        with pytest.raises(ConfigValidationError, match="max_systems"):
            GenerationConfig(max_systems=True)

    @pytest.mark.parametrize("seed", [True, math.nan, [1, 2]])
    def test_bad_seed_rejected(self, seed: object) -> None:
        with pytest.raises(ConfigValidationError, match="seed"):
            GenerationConfig(seed=seed)  # type: ignore[arg-type]

    @pytest.mark.parametrize("seed", ["alpha", 42, 3.5, None])
    def test_good_seed_accepted(self, seed: object) -> None:
        assert GenerationConfig(seed=seed).seed == seed  # type: ignore[arg-type]

    def test_empty_topology_preset_rejected(self) -> None:
        with pytest.raises(ConfigValidationError, match="topology_preset"):
            GenerationConfig(topology_preset="")

    def test_unknown_topology_preset_is_not_a_config_error(self) -> None:
        assert GenerationConfig(topology_preset="spiral").topology_preset == "spiral"

    def test_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            GenerationConfig(max_depth=0)


class TestFromMapping:
    def test_coerces_json_values(self) -> None:
        config = GenerationConfig.from_mapping(
            {
                "seed": "alpha",
                "max_systems": "4",
                "planet_density": "0.25",
                "enable_comets": "true",
                "belt_placement_mode": "both",
                "lagrange_marker_mode": "all",
            }
        )
        assert config.max_systems == 4
        assert config.planet_density == 0.25
        assert config.enable_comets is True
        assert config.belt_placement_mode is BeltPlacementMode.BOTH
        assert config.lagrange_marker_mode is LagrangeMarkerMode.ALL

    def test_unknown_keys_rejected(self) -> None:
        with pytest.raises(ConfigValidationError, match="bogus"):
            GenerationConfig.from_mapping({"bogus": 1})

    def test_bad_enum_value_rejected(self) -> None:
        with pytest.raises(ConfigValidationError, match="belt_placement_mode"):
            GenerationConfig.from_mapping({"belt_placement_mode": "everywhere"})

    def test_to_dict_inverts_from_mapping(self) -> None:
        config = GenerationConfig(
            seed="beta",
            enable_lagrange_points=True,
            lagrange_marker_mode=LagrangeMarkerMode.ALL,
        )
        raw = config.to_dict()
        assert raw["lagrange_marker_mode"] == "all"
        assert GenerationConfig.from_mapping(raw) == config


class TestCoercion:
    @pytest.mark.parametrize(("raw", "expected"), [("yes", True), ("OFF", False), (True, True)])
    def test_coerce_bool(self, raw: object, expected: bool) -> None:
        assert coerce_bool(raw, "flag") is expected

    @pytest.mark.parametrize("raw", ["maybe", 1, None])
    def test_coerce_bool_rejects(self, raw: object) -> None:
        with pytest.raises(ConfigValidationError):
            coerce_bool(raw, "flag")

    def test_coerce_int(self) -> None:
        assert coerce_int("7", "n") == 7
        assert coerce_int(3.0, "n") == 3
        for bad in (True, 2.5, "x", None):
            with pytest.raises(ConfigValidationError):
                coerce_int(bad, "n")

    def test_coerce_float(self) -> None:
        assert coerce_float("0.5", "x") == 0.5
        assert coerce_float(2, "x") == 2.0
        with pytest.raises(ConfigValidationError):
            coerce_float(False, "x")

    def test_coerce_enum(self) -> None:
        assert coerce_enum("none", "mode", BeltPlacementMode) is BeltPlacementMode.NONE
        assert coerce_enum(BeltPlacementMode.BOTH, "mode", BeltPlacementMode) is (
            BeltPlacementMode.BOTH
        )
