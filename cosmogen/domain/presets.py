"""Named topology presets and the registry that resolves them.

Each preset bundles a ``Grammar`` with display metadata and optional
``TopologyOverrides`` that pair well with it. The registry is an ordinary
object built by ``default_registry()``; extending it means registering a new
preset, never mutating an existing one.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Iterator
from dataclasses import dataclass

from cosmogen.config.constants import DEFAULT_TOPOLOGY_PRESET
from cosmogen.domain.grammar import (
    FixedRepeat,
    GeometricRepeat,
    Grammar,
    GrammarSymbol,
    ProductionRule,
    StarCountTable,
    UniformRepeat,
)
from cosmogen.errors import UnknownPresetWarning

logger = logging.getLogger(__name__)

S = GrammarSymbol


@dataclass(frozen=True)
class TopologyOverrides:
    """Topology parameters a preset suggests; ``None`` leaves the mapped value."""

    planet_geometric_p: float | None = None
    moon_geometric_p: float | None = None
    star_probabilities: tuple[float, float, float] | None = None
    max_depth: int | None = None


@dataclass(frozen=True)
class TopologyPreset:
    id: str
    name: str
    description: str
    grammar: Grammar
    suggested_overrides: TopologyOverrides | None = None


# ---------------------------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------------------------

_TERMINAL = {
    S.STAR: (ProductionRule(weight=1.0),),
    S.MOON: (ProductionRule(weight=1.0),),
}

CLASSIC = TopologyPreset(
    id="classic",
    name="Classic",
    description="Standard L-system topology: 1-3 stars, geometric planet/moon distribution",
    grammar=Grammar(
        productions={
            S.SYSTEM: (ProductionRule(weight=1.0, expand=(S.STARS, S.PLANETS)),),
            S.STARS: (ProductionRule(weight=1.0, expand=(S.STAR,), min_count=1, max_count=3),),
            S.PLANETS: (
                ProductionRule(weight=1.0, expand=(S.PLANET,), repeat=GeometricRepeat()),
            ),
            S.PLANET: (ProductionRule(weight=1.0, expand=(S.MOONS,)),),
            S.MOONS: (
                ProductionRule(weight=1.0, expand=(S.MOON,), repeat=GeometricRepeat()),
            ),
            **_TERMINAL,
        },
        max_depth=4,
    ),
)

COMPACT = TopologyPreset(
    id="compact",
    name="Compact",
    description="Only 1-2 planets but each has 5-18 moons - Jupiter-like systems",
    grammar=Grammar(
        productions={
            S.SYSTEM: (ProductionRule(weight=1.0, expand=(S.STARS, S.PLANETS)),),
            S.STARS: (ProductionRule(weight=1.0, expand=(S.STAR,), min_count=1, max_count=1),),
            S.PLANETS: (
                ProductionRule(weight=1.0, expand=(S.PLANET,), repeat=UniformRepeat(1, 2)),
            ),
            S.PLANET: (ProductionRule(weight=1.0, expand=(S.MOONS,)),),
            S.MOONS: (
                ProductionRule(
                    weight=1.0,
                    expand=(S.MOON,),
                    repeat=GeometricRepeat(p=0.08),
                    min_count=5,
                    max_count=18,
                ),
            ),
            **_TERMINAL,
        },
        max_depth=4,
        star_count=StarCountTable(1.0, 0.0, 0.0),
        default_planet_geometric_p=0.9,
        default_moon_geometric_p=0.08,
    ),
    suggested_overrides=TopologyOverrides(
        planet_geometric_p=0.9,
        moon_geometric_p=0.08,
        star_probabilities=(1.0, 0.0, 0.0),
    ),
)

MULTI_STAR_HEAVY = TopologyPreset(
    id="multiStarHeavy",
    name="Multi-Star Heavy",
    description="Binary and ternary systems dominate, with a handful of planets each",
    grammar=Grammar(
        productions={
            S.SYSTEM: (ProductionRule(weight=1.0, expand=(S.STARS, S.PLANETS)),),
            S.STARS: (ProductionRule(weight=1.0, expand=(S.STAR,), min_count=1, max_count=3),),
            S.PLANETS: (
                ProductionRule(weight=1.0, expand=(S.PLANET,), repeat=UniformRepeat(1, 4)),
            ),
            S.PLANET: (
                ProductionRule(weight=0.7, expand=(S.MOONS,)),
                ProductionRule(weight=0.3),
            ),
            S.MOONS: (
                ProductionRule(weight=1.0, expand=(S.MOON,), repeat=UniformRepeat(1, 3)),
            ),
            **_TERMINAL,
        },
        max_depth=4,
        star_count=StarCountTable(0.05, 0.55, 0.40),
        default_planet_geometric_p=0.6,
        default_moon_geometric_p=0.5,
    ),
    suggested_overrides=TopologyOverrides(
        planet_geometric_p=0.6,
        moon_geometric_p=0.5,
        star_probabilities=(0.05, 0.55, 0.40),
    ),
)

MOON_RICH = TopologyPreset(
    id="moonRich",
    name="Moon-Rich",
    description="Several planets, each surrounded by a large family of moons",
    grammar=Grammar(
        productions={
            S.SYSTEM: (ProductionRule(weight=1.0, expand=(S.STARS, S.PLANETS)),),
            S.STARS: (ProductionRule(weight=1.0, expand=(S.STAR,), min_count=1, max_count=1),),
            S.PLANETS: (
                ProductionRule(weight=1.0, expand=(S.PLANET,), repeat=UniformRepeat(3, 6)),
            ),
            S.PLANET: (ProductionRule(weight=1.0, expand=(S.MOONS,)),),
            S.MOONS: (
                ProductionRule(
                    weight=1.0,
                    expand=(S.MOON,),
                    repeat=GeometricRepeat(p=0.05),
                    min_count=4,
                    max_count=25,
                ),
            ),
            **_TERMINAL,
        },
        max_depth=4,
        star_count=StarCountTable(1.0, 0.0, 0.0),
        default_planet_geometric_p=0.3,
        default_moon_geometric_p=0.05,
    ),
    suggested_overrides=TopologyOverrides(
        planet_geometric_p=0.3,
        moon_geometric_p=0.05,
        star_probabilities=(1.0, 0.0, 0.0),
    ),
)

SPARSE_OUTPOST = TopologyPreset(
    id="sparseOutpost",
    name="Sparse Outpost",
    description="Lonely single stars with zero to two planets and few moons",
    grammar=Grammar(
        productions={
            S.SYSTEM: (ProductionRule(weight=1.0, expand=(S.STARS, S.PLANETS)),),
            S.STARS: (ProductionRule(weight=1.0, expand=(S.STAR,), min_count=1, max_count=1),),
            S.PLANETS: (
                ProductionRule(weight=0.15),
                ProductionRule(weight=0.60, expand=(S.PLANET,), repeat=FixedRepeat(1)),
                ProductionRule(weight=0.25, expand=(S.PLANET,), repeat=FixedRepeat(2)),
            ),
            S.PLANET: (
                ProductionRule(weight=0.75),
                ProductionRule(weight=0.25, expand=(S.MOONS,)),
            ),
            S.MOONS: (
                ProductionRule(weight=0.85, expand=(S.MOON,), repeat=FixedRepeat(1)),
                ProductionRule(weight=0.15, expand=(S.MOON,), repeat=FixedRepeat(2)),
            ),
            **_TERMINAL,
        },
        max_depth=3,
        star_count=StarCountTable(1.0, 0.0, 0.0),
        default_planet_geometric_p=0.95,
        default_moon_geometric_p=0.95,
    ),
    suggested_overrides=TopologyOverrides(
        planet_geometric_p=0.95,
        moon_geometric_p=0.95,
        star_probabilities=(1.0, 0.0, 0.0),
        max_depth=3,
    ),
)

DEEP_HIERARCHY = TopologyPreset(
    id="deepHierarchy",
    name="Deep Hierarchy",
    description="Planets with many moons, and moons with sub-moons of their own",
    grammar=Grammar(
        productions={
            S.SYSTEM: (ProductionRule(weight=1.0, expand=(S.STARS, S.PLANETS)),),
            S.STARS: (ProductionRule(weight=1.0, expand=(S.STAR,), min_count=1, max_count=1),),
            S.PLANETS: (
                ProductionRule(weight=1.0, expand=(S.PLANET,), repeat=UniformRepeat(2, 5)),
            ),
            S.PLANET: (ProductionRule(weight=1.0, expand=(S.MOONS,)),),
            S.MOONS: (
                ProductionRule(weight=1.0, expand=(S.MOON,), repeat=UniformRepeat(2, 6)),
            ),
            S.MOON: (
                ProductionRule(weight=0.5),
                ProductionRule(weight=0.5, expand=(S.SUBMOONS,)),
            ),
            S.SUBMOONS: (
                ProductionRule(weight=1.0, expand=(S.SUBMOON,), repeat=UniformRepeat(1, 4)),
            ),
            S.STAR: (ProductionRule(weight=1.0),),
        },
        max_depth=6,
        star_count=StarCountTable(1.0, 0.0, 0.0),
        allow_sub_moons=True,
        default_planet_geometric_p=0.35,
        default_moon_geometric_p=0.25,
    ),
    suggested_overrides=TopologyOverrides(
        planet_geometric_p=0.35,
        moon_geometric_p=0.25,
        star_probabilities=(1.0, 0.0, 0.0),
        max_depth=6,
    ),
)

BUILTIN_PRESETS: tuple[TopologyPreset, ...] = (
    CLASSIC,
    COMPACT,
    MULTI_STAR_HEAVY,
    MOON_RICH,
    SPARSE_OUTPOST,
    DEEP_HIERARCHY,
)

# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class PresetRegistry:
    """Lookup of topology presets by id, with a ``classic`` fallback."""

    def __init__(self, presets: tuple[TopologyPreset, ...] = ()) -> None:
        self._presets: dict[str, TopologyPreset] = {}
        for preset in presets:
            self.register(preset)

    def register(self, preset: TopologyPreset) -> None:
        if preset.id in self._presets:
            raise ValueError(f"preset {preset.id!r} is already registered")
        self._presets[preset.id] = preset

    def get(self, preset_id: str) -> TopologyPreset:
        """Exact lookup; raises ``KeyError`` for unknown ids."""
        return self._presets[preset_id]

    def resolve(self, preset_id: str) -> TopologyPreset:
        """Lookup that falls back to ``classic`` with a warning."""
        preset = self._presets.get(preset_id)
        if preset is not None:
            return preset
        message = f"unknown topology preset {preset_id!r}; using {DEFAULT_TOPOLOGY_PRESET!r}"
        logger.warning(message)
        warnings.warn(message, UnknownPresetWarning, stacklevel=2)
        return self._presets[DEFAULT_TOPOLOGY_PRESET]

    def ids(self) -> list[str]:
        return list(self._presets)

    def options(self) -> list[dict[str, str]]:
        """``id``/``name``/``description`` triples for pickers."""
        return [
            {"id": p.id, "name": p.name, "description": p.description}
            for p in self._presets.values()
        ]

    def __contains__(self, preset_id: object) -> bool:
        return preset_id in self._presets

    def __iter__(self) -> Iterator[TopologyPreset]:
        return iter(self._presets.values())

    def __len__(self) -> int:
        return len(self._presets)


def default_registry() -> PresetRegistry:
    """Fresh registry holding the six built-in presets."""
    return PresetRegistry(BUILTIN_PRESETS)
