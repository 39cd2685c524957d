# ============================================================================
# MODELS MODULE
# ============================================================================
# STATUS: Model exports
# PURPOSE: Central export point for model base classes and mixins
# LAST_REVIEWED: 18 OCT 2026
# ============================================================================
"""
Models Module - Central Export Point

Model subclasses describe tables via __sql_* ClassVar attributes;
ModelToSQL reads them to generate DDL.
"""

from pgschema.models.base import (
    Mixin,
    Model,
    TableDefinition,
    get_mixin,
    register_mixin,
)
from pgschema.models.mixins import TimestampedMixin

__all__ = [
    "Mixin",
    "Model",
    "TableDefinition",
    "get_mixin",
    "register_mixin",
    "TimestampedMixin",
]
