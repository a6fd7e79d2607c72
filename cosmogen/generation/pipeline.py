"""Generation entry points.

``generate`` builds a whole universe; ``generate_system`` and
``generate_batch`` expose the per-system streams directly. System ``k`` is
always drawn from ``master.fork(f"system:{k}")``, so generating it alone
reproduces it exactly as it appears in a batch or a full run.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace

from cosmogen.config.types import GenerationConfig
from cosmogen.domain.entities import Entities
from cosmogen.domain.grammar import NodeType, expand
from cosmogen.domain.presets import PresetRegistry, TopologyPreset, default_registry
from cosmogen.domain.prng import Generator
from cosmogen.errors import ConfigValidationError
from cosmogen.generation.black_holes import generate_black_holes
from cosmogen.generation.bodies import assemble_bodies
from cosmogen.generation.comets import generate_comets
from cosmogen.generation.disks import generate_protoplanetary_disk
from cosmogen.generation.lagrange import generate_lagrange_points
from cosmogen.generation.small_bodies import generate_asteroid_belts, generate_kuiper_belt
from cosmogen.generation.stats import GenerationStats, compute_stats
from cosmogen.generation.universe import (
    generate_groups,
    generate_nebulae,
    generate_rogue_planets,
)
from cosmogen.generation.validate import check_integrity
from cosmogen.mapping import InternalParams, map_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    entities: Entities
    stats: GenerationStats

    def to_dict(self) -> dict[str, object]:
        return {"entities": self.entities.to_dict(), "stats": self.stats.to_dict()}

    def to_json(self, indent: int | None = None) -> str:
        """Stable JSON rendering; identical inputs give identical text."""
        return json.dumps(self.to_dict(), sort_keys=True, indent=indent)


@dataclass(frozen=True)
class _Resolved:
    params: InternalParams
    preset: TopologyPreset


def _require_seed(config: GenerationConfig) -> int | float | str:
    if config.seed is None:
        raise ConfigValidationError("seed is required; use random_seed() to pick one")
    return config.seed


def _resolve(config: GenerationConfig, registry: PresetRegistry | None) -> _Resolved:
    if registry is None:
        registry = default_registry()
    params = map_config(config)
    preset = registry.resolve(config.topology_preset)
    topology = params.topology.with_overrides(preset.suggested_overrides)
    params = replace(params, topology=topology)
    logger.debug(
        "resolved preset=%s star_probabilities=%s planet_p=%.3f moon_p=%.3f depth=%d",
        preset.id,
        topology.star_probabilities,
        topology.planet_geometric_p,
        topology.moon_geometric_p,
        topology.max_depth,
    )
    return _Resolved(params, preset)


def _build_system(
    master: Generator, index: int, resolved: _Resolved
) -> tuple[Entities, dict[NodeType, int]]:
    rng = master.fork(f"system:{index}")
    tree = expand(
        resolved.preset.grammar,
        rng.fork("topology"),
        resolved.params.topology.expansion_params(),
    )
    ctx = assemble_bodies(tree, rng, resolved.params, index)
    if ctx.center is not None:
        generate_black_holes(ctx)
        generate_asteroid_belts(ctx)
        generate_kuiper_belt(ctx)
        generate_protoplanetary_disk(ctx)
        generate_comets(ctx)
        generate_lagrange_points(ctx)
    return ctx.entities, dict(tree.count_by_type())


def generate_system(
    config: GenerationConfig, system_index: int = 0, *, registry: PresetRegistry | None = None
) -> GenerationResult:
    """Generate one system exactly as it appears at ``system_index`` in a batch."""
    if system_index < 0:
        raise ConfigValidationError("system_index must be >= 0")
    master = Generator.from_seed(_require_seed(config))
    entities, counts = _build_system(master, system_index, _resolve(config, registry))
    check_integrity(entities, {system_index: counts})
    return GenerationResult(entities, compute_stats(entities))


def generate_batch(
    config: GenerationConfig,
    *,
    count: int | None = None,
    registry: PresetRegistry | None = None,
) -> list[GenerationResult]:
    """Generate ``count`` (default ``max_systems``) independent systems."""
    count = config.max_systems if count is None else count
    if count < 0:
        raise ConfigValidationError("count must be >= 0")
    master = Generator.from_seed(_require_seed(config))
    resolved = _resolve(config, registry)
    results = []
    for index in range(count):
        entities, counts = _build_system(master, index, resolved)
        check_integrity(entities, {index: counts})
        results.append(GenerationResult(entities, compute_stats(entities)))
    return results


def generate(
    config: GenerationConfig, *, registry: PresetRegistry | None = None
) -> GenerationResult:
    """Generate ``max_systems`` systems plus the universe-level populations."""
    seed = _require_seed(config)
    master = Generator.from_seed(seed)
    resolved = _resolve(config, registry)
    params = resolved.params
    logger.debug("generating seed=%r systems=%d", seed, config.max_systems)

    entities = Entities()
    tree_counts: dict[int, dict[NodeType, int]] = {}
    for index in range(config.max_systems):
        system_entities, tree_counts[index] = _build_system(master, index, resolved)
        entities.merge(system_entities)

    generate_groups(entities, master.fork("groups"), params.grouping)
    generate_nebulae(entities, master.fork("nebulae"), params.nebulae)
    generate_rogue_planets(entities, master.fork("rogues"), params.rogue_planets)

    check_integrity(entities, tree_counts)
    stats = compute_stats(entities)
    logger.debug(
        "generated bodies=%d stars=%d planets=%d moons=%d groups=%d fields=%d nebulae=%d",
        stats.total_bodies,
        stats.total_stars,
        stats.total_planets,
        stats.total_moons,
        stats.total_groups,
        stats.total_small_body_belts,
        stats.total_nebulae,
    )
    return GenerationResult(entities, stats)
