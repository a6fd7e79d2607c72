"""Tests for the per-subsystem mappers."""

from __future__ import annotations

import pytest

from cosmogen.config.types import (
    BeltPlacementMode,
    BlackHoleAccretionStyle,
    BlackHoleMassProfile,
    BlackHoleRarityStyle,
    BlackHoleVisualComplexity,
    CometOrbitStyle,
    GenerationConfig,
    GroupStructureMode,
    LagrangeMarkerMode,
    LagrangePairScope,
    SmallBodyDetail,
)
from cosmogen.domain.prng import Generator
from cosmogen.mapping import map_config
from cosmogen.mapping.common import CountRange, Span, clamp, lerp
from cosmogen.mapping.grouping import group_count_range
from cosmogen.mapping.lagrange import ALL_POINTS, STABLE_POINTS
from cosmogen.mapping.small_bodies import small_body_detail_label


class TestCommon:
    def test_span_sample_in_range(self) -> None:
        rng = Generator.from_seed("span")
        span = Span(2.0, 3.0)
        assert all(2.0 <= span.sample(rng) < 3.0 for _ in range(100))

    def test_span_helpers(self) -> None:
        assert Span(0.0, 10.0).at(0.25) == 2.5
        assert Span(1.0, 2.0).scaled(3.0) == Span(3.0, 6.0)

    def test_count_range_sample_inclusive(self) -> None:
        rng = Generator.from_seed("count")
        seen = {CountRange(1, 3).sample(rng) for _ in range(200)}
        assert seen == {1, 2, 3}

    def test_clamp_and_lerp(self) -> None:
        assert clamp(5.0, 0.0, 1.0) == 1.0
        assert clamp(-1.0, 0.0, 1.0) == 0.0
        assert lerp(1.0, 3.0, 0.5) == 2.0


class TestGrouping:
    def test_flat_is_exact(self) -> None:
        assert group_count_range(4, GroupStructureMode.FLAT) == CountRange(4, 4)

    def test_cluster_has_at_least_two(self) -> None:
        assert group_count_range(1, GroupStructureMode.GALAXY_CLUSTER).lo == 2

    def test_deep_hierarchy_widens(self) -> None:
        assert group_count_range(4, GroupStructureMode.DEEP_HIERARCHY) == CountRange(2, 6)

    def test_flat_never_nests(self) -> None:
        params = map_config(GenerationConfig(enable_groups=True)).grouping
        assert params.enabled
        assert params.nesting_probability == 0.0


class TestSmallBodies:
    def test_belts_disabled_by_zero_cap(self) -> None:
        config = GenerationConfig(enable_asteroid_belts=True, max_belts_per_system=0)
        assert not map_config(config).asteroid_belts.enabled

    def test_belts_disabled_by_none_placement(self) -> None:
        config = GenerationConfig(
            enable_asteroid_belts=True, belt_placement_mode=BeltPlacementMode.NONE
        )
        assert not map_config(config).asteroid_belts.enabled

    def test_detail_scales_particle_counts(self) -> None:
        low = map_config(GenerationConfig(small_body_detail=SmallBodyDetail.LOW))
        ultra = map_config(GenerationConfig(small_body_detail=SmallBodyDetail.ULTRA))
        assert ultra.asteroid_belts.particle_count.hi > low.asteroid_belts.particle_count.hi
        assert ultra.kuiper_belt.particle_count.lo > low.kuiper_belt.particle_count.lo
        assert (
            ultra.protoplanetary_disks.particle_count.hi
            > low.protoplanetary_disks.particle_count.hi
        )

    def test_detail_label(self) -> None:
        assert small_body_detail_label(SmallBodyDetail.LOW) == "Low (fastest)"


class TestComets:
    def test_zero_frequency_disables(self) -> None:
        config = GenerationConfig(enable_comets=True, comet_frequency=0.0)
        assert not map_config(config).comets.enabled

    def test_many_short_favours_short_period(self) -> None:
        rare = map_config(GenerationConfig(comet_orbit_style=CometOrbitStyle.RARE_LONG)).comets
        many = map_config(GenerationConfig(comet_orbit_style=CometOrbitStyle.MANY_SHORT)).comets
        assert many.short_period_fraction > rare.short_period_fraction
        assert many.mean_per_system > rare.mean_per_system


class TestLagrange:
    def test_none_mode_disables(self) -> None:
        config = GenerationConfig(
            enable_lagrange_points=True, lagrange_marker_mode=LagrangeMarkerMode.NONE
        )
        assert not map_config(config).lagrange.enabled

    def test_marker_modes(self) -> None:
        stable = map_config(
            GenerationConfig(lagrange_marker_mode=LagrangeMarkerMode.STABLE_ONLY)
        ).lagrange
        every = map_config(GenerationConfig(lagrange_marker_mode=LagrangeMarkerMode.ALL)).lagrange
        assert stable.point_indices == STABLE_POINTS
        assert every.point_indices == ALL_POINTS

    @pytest.mark.parametrize(
        ("scope", "star_planet", "planet_moon"),
        [
            (LagrangePairScope.STAR_PLANET, True, False),
            (LagrangePairScope.PLANET_MOON, False, True),
            (LagrangePairScope.BOTH, True, True),
        ],
    )
    def test_pair_scope(
        self, scope: LagrangePairScope, star_planet: bool, planet_moon: bool
    ) -> None:
        params = map_config(GenerationConfig(lagrange_pair_scope=scope)).lagrange
        assert (params.star_planet, params.planet_moon) == (star_planet, planet_moon)

    def test_richness_bounds_trojan_count(self) -> None:
        poor = map_config(GenerationConfig(trojan_richness=0.0)).lagrange
        rich = map_config(GenerationConfig(trojan_richness=1.0)).lagrange
        assert poor.trojan_count == CountRange(1, 1)
        assert rich.trojan_count.hi > poor.trojan_count.hi


class TestBlackHoles:
    def test_single_unless_multiple_allowed(self) -> None:
        assert map_config(GenerationConfig()).black_holes.max_per_system == 1
        multi = GenerationConfig(black_hole_allow_multiple_per_system=True)
        assert map_config(multi).black_holes.max_per_system > 1

    def test_rarity_scales_probability(self) -> None:
        rare = GenerationConfig(
            black_hole_frequency=1.0, black_hole_rarity_style=BlackHoleRarityStyle.ULTRA_RARE
        )
        common = GenerationConfig(
            black_hole_frequency=1.0, black_hole_rarity_style=BlackHoleRarityStyle.COMMON
        )
        assert map_config(rare).black_holes.system_probability == pytest.approx(0.1)
        assert map_config(common).black_holes.system_probability == 1.0

    def test_spin_is_sub_extremal(self) -> None:
        params = map_config(GenerationConfig(black_hole_spin_level=1.0)).black_holes
        assert params.spin.hi < 1.0
        assert params.spin.lo >= 0.0

    def test_profiles_and_styles(self) -> None:
        params = map_config(
            GenerationConfig(
                black_hole_mass_profile=BlackHoleMassProfile.STELLAR_ONLY,
                black_hole_accretion_style=BlackHoleAccretionStyle.QUASAR,
                black_hole_visual_complexity=BlackHoleVisualComplexity.MINIMAL,
            )
        ).black_holes
        assert params.mass_class_weights == (1.0, 0.0, 0.0)
        assert params.quasar
        assert params.photon_ring_probability == 0.0


class TestRoguesAndNebulae:
    def test_rogue_curvature_span_follows_config(self) -> None:
        config = GenerationConfig(rogue_curvature_min=0.2, rogue_curvature_max=0.6)
        assert map_config(config).rogue_planets.curvature == Span(0.2, 0.6)

    def test_nebula_count_grows_with_density(self) -> None:
        thin = map_config(GenerationConfig(nebula_density=0.1)).nebulae
        thick = map_config(GenerationConfig(nebula_density=1.0)).nebulae
        assert thick.count.hi > thin.count.hi
        assert thin.count.lo >= 1

    def test_zero_nebula_density_disables(self) -> None:
        config = GenerationConfig(enable_nebulae=True, nebula_density=0.0)
        assert not map_config(config).nebulae.enabled


class TestDisksAndRings:
    def test_no_spiral_arms_at_zero(self) -> None:
        params = map_config(GenerationConfig(protoplanetary_disk_spiral_level=0.0))
        assert params.protoplanetary_disks.spiral_arms == CountRange(0, 0)

    def test_ring_probability_clamped(self) -> None:
        config = GenerationConfig(enable_planetary_rings=True, ring_frequency=1.0)
        params = map_config(config).rings
        assert 0.0 <= params.probability <= 1.0
