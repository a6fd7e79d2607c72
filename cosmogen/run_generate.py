"""CLI entrypoint for universe generation.

Builds a ``GenerationConfig`` from a JSON config file and command-line
flags (CLI overrides file values, file values override built-in defaults),
runs the generator and prints JSON on stdout.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from cosmogen.config.styles import random_seed, style_config
from cosmogen.config.types import GenerationConfig, StylePreset, coerce_int
from cosmogen.domain.presets import default_registry
from cosmogen.errors import ConfigValidationError
from cosmogen.generation.pipeline import GenerationResult, generate, generate_system
from cosmogen.io.tables import entities_to_tables

logger = logging.getLogger(__name__)

OUTPUT_MODES = ("summary", "entities", "tables")

_POPULATION_FLAGS = (
    "enable_groups",
    "enable_asteroid_belts",
    "enable_kuiper_belt",
    "enable_planetary_rings",
    "enable_comets",
    "enable_lagrange_points",
    "enable_protoplanetary_disks",
    "enable_nebulae",
    "enable_rogue_planets",
    "enable_black_holes",
)

# Flags whose argparse dest is also the config field name.
_FIELD_FLAGS = (
    "seed",
    "topology_preset",
    "apply_preset_overrides",
    "max_systems",
    "max_stars_per_system",
    "max_depth",
    "planet_density",
    "moon_density",
    "enable_nary_systems",
) + _POPULATION_FLAGS


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Generate a deterministic procedural universe")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--seed", type=str, default=None, help="text seed (random if omitted)")
    parser.add_argument(
        "--style-preset",
        type=str,
        choices=[preset.value for preset in StylePreset],
        default=None,
        help="start from a product style preset before applying file and CLI values",
    )
    parser.add_argument("--topology-preset", type=str, default=None)
    parser.add_argument(
        "--apply-preset-overrides", action=argparse.BooleanOptionalAction, default=None
    )
    parser.add_argument("--max-systems", type=int, default=None)
    parser.add_argument("--max-stars-per-system", type=int, default=None)
    parser.add_argument("--max-depth", type=int, default=None)
    parser.add_argument("--planet-density", type=float, default=None)
    parser.add_argument("--moon-density", type=float, default=None)
    parser.add_argument(
        "--enable-nary-systems", action=argparse.BooleanOptionalAction, default=None
    )
    for name in _POPULATION_FLAGS:
        parser.add_argument(
            "--" + name.replace("_", "-"), action=argparse.BooleanOptionalAction, default=None
        )
    parser.add_argument(
        "--system-index",
        type=int,
        default=None,
        help="generate only this system (as it appears in a full run)",
    )
    parser.add_argument("--output", type=str, choices=OUTPUT_MODES, default=None)
    parser.add_argument(
        "--list-presets", action="store_true", help="print the topology preset catalog"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    return parser


def _render(result: GenerationResult, output: str) -> dict[str, object]:
    if output == "entities":
        return result.to_dict()
    if output == "tables":
        tables = entities_to_tables(result.entities)
        return {
            name: {"rows": table.num_rows, "columns": table.schema.names}
            for name, table in tables.items()
        }
    return result.stats.to_dict()


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for generation.

    Supports ``--config path/to/config.json`` holding ``GenerationConfig``
    fields by name. CLI arguments override config-file values; config-file
    values override built-in defaults (or the ``--style-preset`` values).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.list_presets:
        print(json.dumps(default_registry().options(), ensure_ascii=False, indent=2))
        return

    # Load config file defaults (CLI overrides file, file overrides built-in)
    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must hold a JSON object: {args.config}")

    output = str(_get_val(args.output, "output", file_cfg, "summary"))
    if output not in OUTPUT_MODES:
        parser.error(f"output must be one of {', '.join(OUTPUT_MODES)}")
    system_index = _get_val(args.system_index, "system_index", file_cfg, None)

    raw: dict[str, object] = {}
    if args.style_preset is not None:
        raw.update(style_config(StylePreset(args.style_preset)).to_dict())
    raw.update({k: v for k, v in file_cfg.items() if k not in ("output", "system_index")})
    for name in _FIELD_FLAGS:
        value = getattr(args, name)
        if value is not None:
            raw[name] = value
    if raw.get("seed") is None:
        raw["seed"] = random_seed()
        logger.info("no seed given; using %s", raw["seed"])

    try:
        config = GenerationConfig.from_mapping(raw)
        if system_index is None:
            result = generate(config)
        else:
            result = generate_system(config, coerce_int(system_index, "system_index"))
    except ConfigValidationError as exc:
        parser.error(str(exc))

    summary = {"seed": config.seed, **_render(result, output)}
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
