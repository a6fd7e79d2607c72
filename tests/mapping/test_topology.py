"""Tests for cosmogen.mapping.topology module."""

from __future__ import annotations

import pytest

from cosmogen.domain.presets import TopologyOverrides
from cosmogen.mapping.topology import (
    BINARY_STAR_PROBABILITIES,
    DEFAULT_STAR_PROBABILITIES,
    SINGLE_STAR_PROBABILITIES,
    TopologySettings,
    density_to_geometric_p,
    map_topology,
    star_probabilities,
)


def _settings(**overrides: object) -> TopologySettings:
    base: dict[str, object] = {
        "topology_preset": "classic",
        "max_stars_per_system": 3,
        "enable_nary_systems": True,
        "max_depth": 3,
        "planet_density": 0.5,
        "moon_density": 0.5,
        "apply_preset_overrides": False,
    }
    base.update(overrides)
    return TopologySettings(**base)  # type: ignore[arg-type]


class TestDensity:
    @pytest.mark.parametrize(("density", "p"), [(0.0, 0.8), (0.5, 0.5), (1.0, 0.2)])
    def test_density_to_p(self, density: float, p: float) -> None:
        assert density_to_geometric_p(density) == pytest.approx(p)

    def test_higher_density_lower_stop_probability(self) -> None:
        assert density_to_geometric_p(0.9) < density_to_geometric_p(0.1)


class TestStarProbabilities:
    def test_single_when_nary_disabled(self) -> None:
        assert star_probabilities(3, False) == SINGLE_STAR_PROBABILITIES

    def test_caps(self) -> None:
        assert star_probabilities(1, True) == SINGLE_STAR_PROBABILITIES
        assert star_probabilities(2, True) == BINARY_STAR_PROBABILITIES
        assert star_probabilities(3, True) == DEFAULT_STAR_PROBABILITIES

    def test_max_stars_is_one_without_nary(self) -> None:
        params = map_topology(_settings(enable_nary_systems=False))
        assert params.max_stars == 1
        assert params.expansion_params().max_stars == 1


class TestOverrides:
    OVERRIDES = TopologyOverrides(planet_geometric_p=0.1, max_depth=2)

    def test_ignored_without_opt_in(self) -> None:
        params = map_topology(_settings())
        assert params.with_overrides(self.OVERRIDES) is params

    def test_applied_with_opt_in(self) -> None:
        params = map_topology(_settings(apply_preset_overrides=True))
        applied = params.with_overrides(self.OVERRIDES)
        assert applied.planet_geometric_p == 0.1
        assert applied.max_depth == 2
        assert applied.moon_geometric_p == params.moon_geometric_p
        assert applied.star_probabilities == params.star_probabilities

    def test_none_overrides(self) -> None:
        params = map_topology(_settings(apply_preset_overrides=True))
        assert params.with_overrides(None) is params
