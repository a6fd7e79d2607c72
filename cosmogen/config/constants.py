"""Centralized numeric constants for universe generation.

Limits, physical scalars and palettes used by more than one module live
here. Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Configuration limits
# ---------------------------------------------------------------------------

MAX_SYSTEMS = 10_000
"""Upper bound on systems generated by a single call."""

MAX_STARS_PER_SYSTEM = 3
"""Largest supported star multiplicity (ternary systems)."""

MAX_DEPTH_LIMIT = 8
"""Upper bound accepted for the configured hierarchy depth."""

MAX_BELTS_PER_SYSTEM = 8
"""Upper bound on main asteroid belts per system."""

MAX_REPEAT_COUNT = 4_096
"""Ceiling applied to every drawn count (repeats, comets, rogues)."""

POISSON_NORMAL_THRESHOLD = 30.0
"""Poisson means at or above this use the rounded normal approximation."""

DEFAULT_TOPOLOGY_PRESET = "classic"
"""Preset used when none is requested or the requested id is unknown."""

# ---------------------------------------------------------------------------
# Physical scalars
# ---------------------------------------------------------------------------

MASS_MU = 1.5
"""Log-normal location parameter for body masses."""

MASS_SIGMA = 0.8
"""Log-normal scale parameter for body masses."""

STAR_MASS_MULTIPLIER = 100.0
PLANET_MASS_MULTIPLIER = 10.0
MOON_MASS_MULTIPLIER = 1.0
SUBMOON_MASS_MULTIPLIER = 0.3

RADIUS_POWER = 0.4
"""Exponent of the mass-radius relation ``radius = mass**p * scale``."""

RADIUS_SCALE = 0.15
"""Scale of the mass-radius relation."""

ORBIT_JITTER = 0.1
"""Half-width of the uniform jitter added to every orbital distance."""

# (minimum mass, color) pairs checked in order; the last entry is the fallback.
STAR_COLOR_BY_MASS: tuple[tuple[float, str], ...] = (
    (600.0, "#9BB0FF"),
    (200.0, "#CAD7FF"),
    (100.0, "#F8F7FF"),
    (50.0, "#FFF4EA"),
    (0.0, "#FFD2A1"),
)

PLANET_COLORS: tuple[str, ...] = ("#4A90E2", "#E25822", "#8B7355", "#C0A080", "#A0C0E0")
MOON_COLOR = "#CCCCCC"
COMET_COLOR = "#B0E0E6"
LAGRANGE_MARKER_COLOR = "#FF00FF"
TROJAN_COLOR = "#8B8378"
BLACK_HOLE_COLOR = "#000000"

GROUP_COLORS: tuple[str, ...] = (
    "#FF6B6B",
    "#4ECDC4",
    "#45B7D1",
    "#FFA07A",
    "#98D8C8",
    "#F7DC6F",
    "#BB8FCE",
    "#85C1E2",
)

GROUP_POSITION_SIGMA = 50.0
"""Standard deviation of Gaussian group positions."""

# ---------------------------------------------------------------------------
# Black hole mass classes
# ---------------------------------------------------------------------------

STELLAR_BLACK_HOLE_MAX_MASS = 50.0
"""Black holes lighter than this are classed as stellar."""

INTERMEDIATE_BLACK_HOLE_MAX_MASS = 10_000.0
"""Black holes lighter than this (and not stellar) are intermediate."""

# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------

GREEK_LETTERS: tuple[str, ...] = (
    "Alpha",
    "Beta",
    "Gamma",
    "Delta",
    "Epsilon",
    "Zeta",
    "Eta",
    "Theta",
)

CONSTELLATIONS: tuple[str, ...] = (
    "Centauri",
    "Orionis",
    "Draconis",
    "Cygni",
    "Lyrae",
    "Aquilae",
    "Pegasi",
    "Andromedae",
)

PLANET_NAMES: tuple[str, ...] = (
    "Mercury",
    "Venus",
    "Earth",
    "Mars",
    "Jupiter",
    "Saturn",
    "Uranus",
    "Neptune",
    "Pluto",
)

MOON_NAMES: tuple[str, ...] = (
    "Moon",
    "Phobos",
    "Deimos",
    "Io",
    "Europa",
    "Ganymede",
    "Callisto",
    "Titan",
)

NEBULA_NAMES: tuple[str, ...] = (
    "Veil",
    "Crab",
    "Lagoon",
    "Eagle",
    "Rosette",
    "Helix",
    "Carina",
    "Horsehead",
)
