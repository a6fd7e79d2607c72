"""Summary statistics derived purely from an entity set."""

from __future__ import annotations

from dataclasses import asdict, dataclass

import numpy as np

from cosmogen.config.constants import (
    INTERMEDIATE_BLACK_HOLE_MAX_MASS,
    STELLAR_BLACK_HOLE_MAX_MASS,
)
from cosmogen.domain.entities import BodyType, Entities


@dataclass(frozen=True)
class GenerationStats:
    """Aggregate counts over one entity set.

    ``total_asteroids`` counts free asteroid bodies only; Trojans sit in
    ``total_trojan_bodies``. ``total_kuiper_objects`` is the Kuiper belt
    particle population, since Kuiper objects exist only as field particles.
    """

    total_bodies: int
    total_stars: int
    total_planets: int
    total_moons: int
    total_groups: int
    total_belts: int
    total_asteroids: int
    total_ringed_planets: int
    total_rings: int
    total_comets: int
    total_lagrange_points: int
    total_lagrange_markers: int
    total_trojan_bodies: int
    total_kuiper_objects: int
    total_small_body_belts: int
    total_main_belts: int
    total_kuiper_belts: int
    total_small_body_particles: int
    total_main_belt_particles: int
    total_kuiper_belt_particles: int
    total_protoplanetary_disks: int
    total_protoplanetary_disk_particles: int
    total_nebulae: int
    rogue_planet_ids: tuple[str, ...]
    total_rogue_planets: int
    total_black_holes: int
    black_holes_with_disks: int
    black_holes_with_jets: int
    black_holes_with_photon_rings: int
    black_holes_with_quasar_accretion: int
    stellar_black_holes: int
    intermediate_black_holes: int
    supermassive_black_holes: int
    black_hole_spin_mean: float
    black_hole_spin_min: float
    black_hole_spin_max: float

    def to_dict(self) -> dict[str, object]:
        out = asdict(self)
        out["rogue_planet_ids"] = list(self.rogue_planet_ids)
        return out


def compute_stats(entities: Entities) -> GenerationStats:
    bodies = list(entities.bodies.values())

    def count(body_type: BodyType) -> int:
        return sum(1 for b in bodies if b.body_type is body_type)

    planets = [b for b in bodies if b.body_type is BodyType.PLANET]
    ringed = sum(1 for b in planets if b.ring is not None)
    markers = count(BodyType.LAGRANGE_POINT)
    rogue_ids = tuple(b.id for b in planets if b.is_rogue_planet)
    trojans = sum(
        1 for b in bodies if b.body_type is BodyType.ASTEROID and b.lagrange_host_id is not None
    )

    fields = list(entities.small_body_fields.values())
    main = [f for f in fields if f.belt_type == "main"]
    kuiper = [f for f in fields if f.belt_type == "kuiper"]
    main_particles = sum(f.particle_count for f in main)
    kuiper_particles = sum(f.particle_count for f in kuiper)

    holes = [b for b in bodies if b.black_hole is not None]
    masses = np.array([b.mass for b in holes], dtype=float)
    spins = np.array([b.black_hole.spin for b in holes], dtype=float)  # type: ignore[union-attr]
    stellar = int(np.count_nonzero(masses < STELLAR_BLACK_HOLE_MAX_MASS))
    intermediate = int(
        np.count_nonzero(
            (masses >= STELLAR_BLACK_HOLE_MAX_MASS) & (masses < INTERMEDIATE_BLACK_HOLE_MAX_MASS)
        )
    )
    props = [b.black_hole for b in holes if b.black_hole is not None]

    return GenerationStats(
        total_bodies=len(bodies),
        total_stars=count(BodyType.STAR),
        total_planets=len(planets) - len(rogue_ids),
        total_moons=count(BodyType.MOON),
        total_groups=len(entities.groups),
        total_belts=len(entities.belts),
        total_asteroids=count(BodyType.ASTEROID) - trojans,
        total_ringed_planets=ringed,
        total_rings=ringed,
        total_comets=count(BodyType.COMET),
        total_lagrange_points=markers,
        total_lagrange_markers=markers,
        total_trojan_bodies=trojans,
        total_kuiper_objects=kuiper_particles,
        total_small_body_belts=len(fields),
        total_main_belts=len(main),
        total_kuiper_belts=len(kuiper),
        total_small_body_particles=main_particles + kuiper_particles,
        total_main_belt_particles=main_particles,
        total_kuiper_belt_particles=kuiper_particles,
        total_protoplanetary_disks=len(entities.protoplanetary_disks),
        total_protoplanetary_disk_particles=sum(
            d.particle_count for d in entities.protoplanetary_disks.values()
        ),
        total_nebulae=len(entities.nebulae),
        rogue_planet_ids=rogue_ids,
        total_rogue_planets=len(rogue_ids),
        total_black_holes=len(holes),
        black_holes_with_disks=sum(1 for p in props if p.has_accretion_disk),
        black_holes_with_jets=sum(1 for p in props if p.has_relativistic_jet),
        black_holes_with_photon_rings=sum(1 for p in props if p.has_photon_ring),
        black_holes_with_quasar_accretion=sum(1 for p in props if p.quasar),
        stellar_black_holes=stellar,
        intermediate_black_holes=intermediate,
        supermassive_black_holes=len(holes) - stellar - intermediate,
        black_hole_spin_mean=float(spins.mean()) if spins.size else 0.0,
        black_hole_spin_min=float(spins.min()) if spins.size else 0.0,
        black_hole_spin_max=float(spins.max()) if spins.size else 0.0,
    )


def mass_histogram(
    entities: Entities, body_type: BodyType, bins: int = 10
) -> dict[str, list[float]]:
    """Histogram of log10 body masses for one body type (empty lists if none)."""
    masses = np.array(
        [b.mass for b in entities.bodies.values() if b.body_type is body_type and b.mass > 0],
        dtype=float,
    )
    if masses.size == 0:
        return {"counts": [], "edges": []}
    counts, edges = np.histogram(np.log10(masses), bins=bins)
    return {"counts": [float(c) for c in counts], "edges": [float(e) for e in edges]}
