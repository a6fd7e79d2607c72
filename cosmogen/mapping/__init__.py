"""Config-to-parameter mapping layer.

Each subsystem owns a pure mapper that reads a narrow slice of
``GenerationConfig`` (its ``*Settings`` dataclass, whose field names match
the config's) and returns frozen internal parameters. ``MAPPERS`` is the
lookup table the pipeline iterates; adding a subsystem means adding one
entry.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Any

from cosmogen.config.types import GenerationConfig
from cosmogen.mapping.black_holes import BlackHoleParams, BlackHoleSettings, map_black_holes
from cosmogen.mapping.comets import CometParams, CometSettings, map_comets
from cosmogen.mapping.disks import DiskParams, DiskSettings, map_protoplanetary_disks
from cosmogen.mapping.grouping import GroupingParams, GroupingSettings, map_grouping
from cosmogen.mapping.lagrange import LagrangeParams, LagrangeSettings, map_lagrange
from cosmogen.mapping.nebulae import NebulaParams, NebulaSettings, map_nebulae
from cosmogen.mapping.orbits import OrbitParams, OrbitSettings, map_orbits
from cosmogen.mapping.rings import RingParams, RingSettings, map_rings
from cosmogen.mapping.rogues import RogueParams, RogueSettings, map_rogue_planets
from cosmogen.mapping.small_bodies import (
    BeltParams,
    BeltSettings,
    KuiperParams,
    KuiperSettings,
    map_asteroid_belts,
    map_kuiper_belt,
)
from cosmogen.mapping.topology import TopologyParams, TopologySettings, map_topology


@dataclass(frozen=True)
class Mapper:
    settings_type: type
    fn: Callable[[Any], Any]


MAPPERS: Mapping[str, Mapper] = MappingProxyType(
    {
        "topology": Mapper(TopologySettings, map_topology),
        "orbits": Mapper(OrbitSettings, map_orbits),
        "grouping": Mapper(GroupingSettings, map_grouping),
        "asteroid_belts": Mapper(BeltSettings, map_asteroid_belts),
        "kuiper_belt": Mapper(KuiperSettings, map_kuiper_belt),
        "rings": Mapper(RingSettings, map_rings),
        "comets": Mapper(CometSettings, map_comets),
        "lagrange": Mapper(LagrangeSettings, map_lagrange),
        "protoplanetary_disks": Mapper(DiskSettings, map_protoplanetary_disks),
        "nebulae": Mapper(NebulaSettings, map_nebulae),
        "rogue_planets": Mapper(RogueSettings, map_rogue_planets),
        "black_holes": Mapper(BlackHoleSettings, map_black_holes),
    }
)


@dataclass(frozen=True)
class InternalParams:
    """Mapped parameters for every subsystem, one attribute per ``MAPPERS`` key."""

    topology: TopologyParams
    orbits: OrbitParams
    grouping: GroupingParams
    asteroid_belts: BeltParams
    kuiper_belt: KuiperParams
    rings: RingParams
    comets: CometParams
    lagrange: LagrangeParams
    protoplanetary_disks: DiskParams
    nebulae: NebulaParams
    rogue_planets: RogueParams
    black_holes: BlackHoleParams


def config_slice(config: GenerationConfig, settings_type: type) -> Any:
    """Copy the same-named config fields into a subsystem settings slice."""
    return settings_type(**{f.name: getattr(config, f.name) for f in fields(settings_type)})


def map_config(config: GenerationConfig) -> InternalParams:
    mapped = {
        name: mapper.fn(config_slice(config, mapper.settings_type))
        for name, mapper in MAPPERS.items()
    }
    return InternalParams(**mapped)


__all__ = ["InternalParams", "MAPPERS", "Mapper", "config_slice", "map_config"]
