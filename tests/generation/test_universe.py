"""Tests for cosmogen.generation.universe module."""

from __future__ import annotations

import math

from cosmogen.config.types import GenerationConfig, GroupStructureMode, RogueTrajectoryMode
from cosmogen.domain.entities import BodyType, Entities
from cosmogen.domain.prng import Generator
from cosmogen.generation.pipeline import generate
from cosmogen.generation.universe import (
    generate_groups,
    generate_nebulae,
    generate_rogue_planets,
    group_name,
    nebula_name,
)
from cosmogen.generation.validate import check_integrity
from cosmogen.mapping import map_config


def _universe(**overrides: object) -> Entities:
    config = GenerationConfig(seed="universe", max_systems=12, **overrides)  # type: ignore
    return generate(config).entities


class TestGroups:
    def test_every_system_in_exactly_one_group(self) -> None:
        entities = _universe(enable_groups=True, target_galaxy_count=4)
        members = [
            child.id
            for group in entities.groups.values()
            for child in group.children
            if child.kind == "system"
        ]
        assert sorted(members) == sorted(entities.root_ids)

    def test_flat_groups_are_all_roots(self) -> None:
        entities = _universe(enable_groups=True, target_galaxy_count=4)
        assert len(entities.groups) == 4
        assert sorted(entities.root_group_ids) == sorted(entities.groups)

    def test_never_more_groups_than_systems(self) -> None:
        entities = generate(
            GenerationConfig(seed="few", max_systems=2, enable_groups=True, target_galaxy_count=9)
        ).entities
        assert len(entities.groups) == 2

    def test_deep_hierarchy_nests_without_cycles(self) -> None:
        nested = False
        for seed in ("g1", "g2", "g3", "g4"):
            config = GenerationConfig(
                seed=seed,
                max_systems=20,
                enable_groups=True,
                target_galaxy_count=8,
                group_structure_mode=GroupStructureMode.DEEP_HIERARCHY,
            )
            entities = generate(config).entities
            nested = nested or any(g.parent_group_id for g in entities.groups.values())
            for group in entities.groups.values():
                seen = {group.id}
                parent = group.parent_group_id
                while parent is not None:
                    assert parent not in seen
                    seen.add(parent)
                    parent = entities.groups[parent].parent_group_id
        assert nested

    def test_no_groups_without_systems(self) -> None:
        entities = Entities()
        params = map_config(GenerationConfig(enable_groups=True)).grouping
        generate_groups(entities, Generator.from_seed(1), params)
        assert not entities.groups

    def test_group_names(self) -> None:
        assert group_name(0) == "Cluster A"
        assert group_name(26) == "Cluster 27"


class TestNebulae:
    def test_count_and_associations(self) -> None:
        entities = _universe(enable_groups=True, enable_nebulae=True, nebula_density=1.0)
        params = map_config(GenerationConfig(nebula_density=1.0)).nebulae
        assert params.count.lo <= len(entities.nebulae) <= params.count.hi
        for nebula in entities.nebulae.values():
            assert nebula.radius > 0.0
            assert set(nebula.associated_group_ids) <= set(entities.groups)

    def test_nebulae_without_groups_have_no_associations(self) -> None:
        entities = Entities()
        params = map_config(GenerationConfig(enable_nebulae=True)).nebulae
        generate_nebulae(entities, Generator.from_seed(2), params)
        assert entities.nebulae
        assert all(not n.associated_group_ids for n in entities.nebulae.values())

    def test_nebula_names_cycle(self) -> None:
        assert nebula_name(0).endswith(" Nebula")
        assert nebula_name(1000).split()[-1].isdigit()


class TestRoguePlanets:
    def test_rogues_have_no_host(self) -> None:
        entities = _universe(enable_rogue_planets=True, rogue_planet_frequency=1.0)
        rogues = [b for b in entities.bodies.values() if b.is_rogue_planet]
        assert rogues
        for rogue in rogues:
            assert rogue.body_type is BodyType.PLANET
            assert rogue.parent_id is None
            assert rogue.system_index is None
            assert rogue.id not in entities.root_ids
            assert rogue.rogue_planet is not None

    def test_linear_trajectories_have_no_path(self) -> None:
        entities = Entities()
        config = GenerationConfig(
            enable_rogue_planets=True,
            rogue_planet_frequency=1.0,
            rogue_trajectory_mode=RogueTrajectoryMode.LINEAR_ONLY,
        )
        generate_rogue_planets(entities, Generator.from_seed(3), map_config(config).rogue_planets)
        for rogue in entities.bodies.values():
            meta = rogue.rogue_planet
            assert meta is not None
            assert meta.path_curvature == 0.0
            assert meta.semi_major_axis is None
            assert meta.path_period is None

    def test_curved_trajectories_have_period(self) -> None:
        entities = Entities()
        config = GenerationConfig(
            enable_rogue_planets=True,
            rogue_planet_frequency=1.0,
            rogue_trajectory_mode=RogueTrajectoryMode.CURVED,
            rogue_curvature_min=0.2,
            rogue_curvature_max=0.4,
        )
        generate_rogue_planets(entities, Generator.from_seed(4), map_config(config).rogue_planets)
        assert entities.bodies
        for rogue in entities.bodies.values():
            meta = rogue.rogue_planet
            assert meta is not None
            assert 0.2 <= meta.path_curvature <= 0.4
            assert meta.path_period is not None and meta.path_period > 0.0
            speed = math.sqrt(meta.velocity.x**2 + meta.velocity.y**2 + meta.velocity.z**2)
            assert speed > 0.0
        check_integrity(entities)
