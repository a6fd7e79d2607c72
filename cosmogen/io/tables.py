"""Columnar view of an entity set as in-memory Arrow tables."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pyarrow as pa

from cosmogen.domain.entities import Entities, to_plain
from cosmogen.io.schemas import ENTITY_TABLE_SCHEMAS

# Body attribute -> side table holding that metadata record.
_BODY_METADATA = {
    "ring": "rings",
    "comet": "comets",
    "lagrange_point": "lagrange_points",
    "black_hole": "black_holes",
    "rogue_planet": "rogue_planets",
}

_VECTOR_KEYS = {"x", "y", "z"}


def _row(plain: dict[str, Any], schema: pa.Schema, **extra: Any) -> dict[str, Any]:
    flat: dict[str, Any] = dict(extra)
    for key, value in plain.items():
        if isinstance(value, dict) and value.keys() == _VECTOR_KEYS:
            for axis in "xyz":
                flat[f"{key}_{axis}"] = value[axis]
        else:
            flat.setdefault(key, value)
    return {name: flat.get(name) for name in schema.names}


def _table(name: str, rows: Iterable[dict[str, Any]]) -> pa.Table:
    return pa.Table.from_pylist(list(rows), schema=ENTITY_TABLE_SCHEMAS[name])


def entities_to_tables(entities: Entities) -> dict[str, pa.Table]:
    """One Arrow table per entity collection, keyed like ``ENTITY_TABLE_SCHEMAS``.

    Rows follow the insertion order of the entity collections, so the
    tables are as deterministic as the entity set they come from.
    """
    schemas = ENTITY_TABLE_SCHEMAS
    rows: dict[str, list[dict[str, Any]]] = {name: [] for name in schemas}

    for body in entities.bodies.values():
        plain: dict[str, Any] = to_plain(body)  # type: ignore[assignment]
        rows["bodies"].append(_row(plain, schemas["bodies"]))
        for attr, table in _BODY_METADATA.items():
            meta = plain.get(attr)
            if meta is not None:
                rows[table].append(_row(meta, schemas[table], body_id=body.id))

    roots = set(entities.root_group_ids)
    for group in entities.groups.values():
        rows["groups"].append(
            _row(
                to_plain(group),  # type: ignore[arg-type]
                schemas["groups"],
                child_ids=[child.id for child in group.children],
                child_kinds=[child.kind for child in group.children],
                is_root=group.id in roots,
            )
        )

    for name in ("small_body_fields", "belts", "protoplanetary_disks", "nebulae"):
        collection: dict[str, Any] = getattr(entities, name)
        for record in collection.values():
            rows[name].append(_row(to_plain(record), schemas[name]))  # type: ignore[arg-type]

    return {name: _table(name, table_rows) for name, table_rows in rows.items()}
