"""Columnar export of entity sets (in-memory Arrow tables only)."""

from cosmogen.io.schemas import ENTITY_TABLE_SCHEMA_VERSION, ENTITY_TABLE_SCHEMAS
from cosmogen.io.tables import entities_to_tables

__all__ = ["ENTITY_TABLE_SCHEMAS", "ENTITY_TABLE_SCHEMA_VERSION", "entities_to_tables"]
