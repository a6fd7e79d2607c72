"""Domain layer: PRNG, topology grammar, preset catalog and entity records."""

from cosmogen.domain.entities import (
    Body,
    BodyType,
    Entities,
    Group,
    NebulaRegion,
    ProtoplanetaryDisk,
    SmallBodyField,
)
from cosmogen.domain.grammar import AbstractNode, Grammar, GrammarSymbol, expand
from cosmogen.domain.presets import PresetRegistry, TopologyPreset, default_registry
from cosmogen.domain.prng import Generator, GeneratorState, draw_u32, fork_state, seed_state

__all__ = [
    "AbstractNode",
    "Body",
    "BodyType",
    "Entities",
    "Generator",
    "GeneratorState",
    "Grammar",
    "GrammarSymbol",
    "Group",
    "NebulaRegion",
    "PresetRegistry",
    "ProtoplanetaryDisk",
    "SmallBodyField",
    "TopologyPreset",
    "default_registry",
    "draw_u32",
    "expand",
    "fork_state",
    "seed_state",
]
