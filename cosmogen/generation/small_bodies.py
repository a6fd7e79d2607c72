"""Main asteroid belts and Kuiper belts as particle fields.

Each field is mirrored by a legacy ``AsteroidBelt`` record so older
consumers keep working.
"""

from __future__ import annotations

from itertools import pairwise

from cosmogen.config.types import BeltPlacementMode
from cosmogen.domain.entities import AsteroidBelt, SmallBodyField
from cosmogen.domain.prng import Generator
from cosmogen.generation.bodies import SystemContext
from cosmogen.mapping.small_bodies import BeltLook

OUTER_BELT_INNER_FACTOR = 1.15


def _add_field(ctx: SystemContext, small_field: SmallBodyField, belt_id: str, name: str) -> None:
    ctx.entities.small_body_fields[small_field.id] = small_field
    ctx.entities.belts[belt_id] = AsteroidBelt(
        id=belt_id,
        name=name,
        parent_id=small_field.host_star_id,
        field_id=small_field.id,
        inner_radius=small_field.inner_radius,
        outer_radius=small_field.outer_radius,
        thickness=small_field.thickness,
        eccentricity=small_field.eccentricity,
        inclination=small_field.inclination_sigma,
        asteroid_count=small_field.particle_count,
        color=small_field.base_color,
        belt_type=small_field.belt_type,
        region_label=small_field.region_label,
        is_icy=small_field.is_icy,
        inclination_sigma=small_field.inclination_sigma,
        seed=small_field.seed,
    )


def _draw_field(
    ctx: SystemContext,
    rng: Generator,
    *,
    field_id: str,
    inner: float,
    outer: float,
    thickness: float,
    particle_count: int,
    eccentricity: float,
    inclination_sigma: float,
    look: BeltLook,
    belt_type: str,
    region_label: str,
    color_variation: float = 0.2,
) -> SmallBodyField:
    brightness = rng.uniform(0.7, 1.0) * (1.0 - color_variation * rng.float01())
    return SmallBodyField(
        id=field_id,
        system_index=ctx.index,
        host_star_id=ctx.primary.id,
        inner_radius=inner,
        outer_radius=outer,
        thickness=thickness * rng.uniform(0.8, 1.2),
        particle_count=particle_count,
        base_color=look.base_color,
        highlight_color=look.highlight_color,
        opacity=rng.uniform(0.6, 0.9),
        brightness=brightness,
        clumpiness=rng.uniform(0.2, 0.6),
        rotation_speed_multiplier=rng.uniform(0.8, 1.2),
        belt_type=belt_type,
        region_label=region_label,
        is_icy=look.is_icy,
        inclination_sigma=inclination_sigma,
        eccentricity=eccentricity,
        style=look.style,
        seed=rng.next_u32(),
    )


def belt_slots(ctx: SystemContext) -> list[tuple[float, float, str]]:
    """Candidate ``(inner, outer, label)`` radii for main belts."""
    belts = ctx.params.asteroid_belts
    distances = sorted(p.orbital_distance for p in ctx.planets)
    slots: list[tuple[float, float, str]] = []
    if belts.placement_mode in (BeltPlacementMode.BETWEEN_PLANETS, BeltPlacementMode.BOTH):
        for a, b in pairwise(distances):
            gap = b - a
            if gap > 0:
                inner = a + gap * belts.inner_gap_fraction
                outer = a + gap * belts.outer_gap_fraction
                slots.append((inner, outer, "Main Belt"))
    if belts.placement_mode in (BeltPlacementMode.OUTER_BELT, BeltPlacementMode.BOTH):
        ref = ctx.outermost_distance()
        slots.append((ref * OUTER_BELT_INNER_FACTOR, ref * belts.outer_multiplier, "Outer Belt"))
    return slots


def generate_asteroid_belts(ctx: SystemContext) -> None:
    belts = ctx.params.asteroid_belts
    if not belts.enabled or ctx.center is None:
        return
    rng = ctx.rng.fork("belts")
    slots = belt_slots(ctx)
    if not slots:
        return
    count = rng.integer(1, min(belts.max_per_system, len(slots)))
    available = list(range(len(slots)))
    chosen: list[int] = []
    for _ in range(count):
        chosen.append(available.pop(rng.integer(0, len(available) - 1)))
    for ordinal, slot in enumerate(sorted(chosen)):
        inner, outer, label = slots[slot]
        belt_rng = rng.fork(f"belt:{slot}")
        small_field = _draw_field(
            ctx,
            belt_rng,
            field_id=ctx.entity_id(f"belt:{ordinal}"),
            inner=inner,
            outer=outer,
            thickness=belts.thickness,
            particle_count=belts.particle_count.sample(belt_rng),
            eccentricity=belts.eccentricity.sample(belt_rng),
            inclination_sigma=belts.inclination_sigma,
            look=belts.look,
            belt_type="main",
            region_label=label,
            color_variation=belts.color_variation,
        )
        _add_field(
            ctx,
            small_field,
            ctx.entity_id(f"asteroid-belt:{ordinal}"),
            f"{ctx.primary.name} Belt {ordinal + 1}",
        )


def generate_kuiper_belt(ctx: SystemContext) -> None:
    kuiper = ctx.params.kuiper_belt
    if not kuiper.enabled or ctx.center is None:
        return
    rng = ctx.rng.fork("kuiper")
    ref = ctx.outermost_distance()
    inner = ref * kuiper.radial_range.lo * rng.uniform(0.95, 1.05)
    outer = max(ref * kuiper.radial_range.hi * rng.uniform(0.95, 1.05), inner * 1.1)
    small_field = _draw_field(
        ctx,
        rng,
        field_id=ctx.entity_id("kuiper:0"),
        inner=inner,
        outer=outer,
        thickness=kuiper.thickness,
        particle_count=kuiper.particle_count.sample(rng),
        eccentricity=kuiper.eccentricity.sample(rng),
        inclination_sigma=kuiper.inclination_sigma,
        look=kuiper.look,
        belt_type="kuiper",
        region_label="Kuiper Belt",
    )
    _add_field(
        ctx, small_field, ctx.entity_id("kuiper-belt:0"), f"{ctx.primary.name} Kuiper Belt"
    )
