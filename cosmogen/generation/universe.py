"""Universe-level populations: galaxy groups, nebulae and rogue planets.

These are drawn from their own forks of the master stream after every
system has been assembled, and only read the systems' root ids.
"""

from __future__ import annotations

import math

from cosmogen.config.constants import (
    GROUP_COLORS,
    MASS_MU,
    MASS_SIGMA,
    NEBULA_NAMES,
    PLANET_COLORS,
    PLANET_MASS_MULTIPLIER,
)
from cosmogen.domain.entities import (
    Body,
    BodyType,
    Entities,
    Group,
    GroupChild,
    NebulaRegion,
    RoguePlanetMeta,
    Vector3,
)
from cosmogen.domain.prng import Generator
from cosmogen.generation.bodies import body_radius
from cosmogen.mapping.grouping import GroupingParams
from cosmogen.mapping.nebulae import NebulaParams
from cosmogen.mapping.rogues import RogueParams


def _gaussian_point(rng: Generator, sigma: float) -> Vector3:
    return Vector3(rng.normal(0.0, sigma), rng.normal(0.0, sigma), rng.normal(0.0, sigma))


def _distance(a: Vector3, b: Vector3) -> float:
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2 + (a.z - b.z) ** 2)


def group_name(index: int) -> str:
    return f"Cluster {chr(ord('A') + index)}" if index < 26 else f"Cluster {index + 1}"


# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------


def _is_ancestor(groups: list[Group], candidate: int, descendant: int) -> bool:
    """True if ``candidate`` already sits below ``descendant`` in the hierarchy."""
    by_id = {g.id: g for g in groups}
    node: Group | None = groups[candidate]
    while node is not None:
        if node.id == groups[descendant].id:
            return True
        node = by_id.get(node.parent_group_id) if node.parent_group_id else None
    return False


def generate_groups(entities: Entities, rng: Generator, params: GroupingParams) -> None:
    """Partition the systems into groups, optionally nested without cycles."""
    if not params.enabled or not entities.root_ids:
        return
    count = params.group_count.sample(rng)
    count = max(1, min(count, len(entities.root_ids)))
    groups = [
        Group(
            id=f"group:{i}",
            name=group_name(i),
            color=GROUP_COLORS[i % len(GROUP_COLORS)],
            position=_gaussian_point(rng, params.position_sigma),
        )
        for i in range(count)
    ]
    for root_id in entities.root_ids:
        groups[rng.integer(0, count - 1)].children.append(GroupChild(root_id, "system"))
    for i in range(1, count):
        if not rng.chance(params.nesting_probability):
            continue
        parent = rng.integer(0, count - 1)
        if parent == i or _is_ancestor(groups, parent, i):
            continue
        groups[i].parent_group_id = groups[parent].id
        groups[parent].children.append(GroupChild(groups[i].id, "group"))
    for group in groups:
        entities.groups[group.id] = group
        if group.parent_group_id is None:
            entities.root_group_ids.append(group.id)


# ---------------------------------------------------------------------------
# Nebulae
# ---------------------------------------------------------------------------


def nebula_name(index: int) -> str:
    base = NEBULA_NAMES[index % len(NEBULA_NAMES)]
    cycle = index // len(NEBULA_NAMES)
    return f"{base} Nebula" if cycle == 0 else f"{base} Nebula {cycle + 1}"


def generate_nebulae(entities: Entities, rng: Generator, params: NebulaParams) -> None:
    if not params.enabled:
        return
    for k in range(params.count.sample(rng)):
        n_rng = rng.fork(f"nebula:{k}")
        position = _gaussian_point(n_rng, params.spread_sigma)
        radius = params.radius.sample(n_rng)
        dimensions = Vector3(
            radius * n_rng.uniform(0.6, 1.4),
            radius * n_rng.uniform(0.4, 1.0),
            radius * n_rng.uniform(0.6, 1.4),
        )
        base_color, accent_color = n_rng.choice(params.palette)
        reach = radius * params.association_radius_factor
        nebula = NebulaRegion(
            id=f"nebula:{k}",
            name=nebula_name(k),
            position=position,
            radius=radius,
            dimensions=dimensions,
            density=params.density.sample(n_rng),
            brightness=params.brightness.sample(n_rng),
            base_color=base_color,
            accent_color=accent_color,
            noise_scale=params.noise_scale.sample(n_rng),
            noise_detail=params.noise_detail.sample(n_rng),
            seed=n_rng.next_u32(),
            associated_group_ids=[
                g.id for g in entities.groups.values() if _distance(g.position, position) <= reach
            ],
        )
        entities.nebulae[nebula.id] = nebula


# ---------------------------------------------------------------------------
# Rogue planets
# ---------------------------------------------------------------------------


def _unit_vector(rng: Generator) -> Vector3:
    x, y, z = rng.normal(), rng.normal(), rng.normal()
    norm = math.sqrt(x * x + y * y + z * z)
    if norm == 0.0:
        return Vector3(1.0, 0.0, 0.0)
    return Vector3(x / norm, y / norm, z / norm)


def generate_rogue_planets(entities: Entities, rng: Generator, params: RogueParams) -> None:
    if not params.enabled:
        return
    count = min(rng.poisson(params.mean_count), params.max_count)
    for r in range(count):
        r_rng = rng.fork(f"rogue:{r}")
        mass = r_rng.log_normal(MASS_MU, MASS_SIGMA) * PLANET_MASS_MULTIPLIER
        color = r_rng.choice(PLANET_COLORS)
        highlight = r_rng.chance(params.highlight_probability)
        highlight_color = r_rng.choice(params.highlight_colors)
        position = _gaussian_point(r_rng, params.spawn_sigma)
        direction = _unit_vector(r_rng)
        speed = params.speed.sample(r_rng)
        curved = r_rng.chance(params.curved_probability)
        curvature = params.curvature.sample(r_rng)
        semi_major = params.semi_major_axis.sample(r_rng)
        eccentricity = params.eccentricity.sample(r_rng)
        offset = _gaussian_point(r_rng, semi_major * 0.1)
        rotation = Vector3(
            r_rng.uniform(0.0, 360.0), r_rng.uniform(0.0, 360.0), r_rng.uniform(0.0, 360.0)
        )
        meta = RoguePlanetMeta(
            seed=r_rng.next_u32(),
            initial_position=position,
            velocity=Vector3(direction.x * speed, direction.y * speed, direction.z * speed),
            color_override=highlight_color if highlight else None,
            path_curvature=curvature if curved else 0.0,
            semi_major_axis=semi_major if curved else None,
            eccentricity=eccentricity if curved else None,
            path_offset=offset if curved else None,
            path_rotation=rotation if curved else None,
            path_period=2.0 * math.pi * semi_major / speed if curved else None,
            show_trajectory=params.show_trajectory,
            trajectory_past_window=params.trajectory_window,
            trajectory_future_window=params.trajectory_window,
        )
        body = Body(
            id=f"rogue:{r}",
            name=f"Rogue {r + 1}",
            body_type=BodyType.PLANET,
            mass=mass,
            radius=body_radius(mass) * params.radius_scale,
            color=color,
            is_rogue_planet=True,
            rogue_planet=meta,
        )
        entities.add_body(body)
