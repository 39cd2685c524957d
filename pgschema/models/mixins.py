# ============================================================================
# STANDARD MIXINS
# ============================================================================
# STATUS: Model - Reusable field bundles
# PURPOSE: Timestamp columns shared by most tables
# LAST_REVIEWED: 18 OCT 2026
# ============================================================================
"""
Standard Mixins.

TimestampedMixin adds created_at / updated_at, both defaulting to
current_timestamp. It is registered as "timestamped" for structured
definitions.
"""

from typing import List

from pydantic import Field

from pgschema.contracts import PSQLFunction
from pgschema.models.base import Mixin, register_mixin
from pgschema.schema.fields import ColumnField, DateField


def _timestamp_fields() -> List[DateField]:
    return [
        DateField(
            column_name="created_at",
            default=PSQLFunction.CURRENT_TIMESTAMP,
            comment="Creation timestamp",
            struct_tag='json:"created_at" validate:"required"',
        ),
        DateField(
            column_name="updated_at",
            default=PSQLFunction.CURRENT_TIMESTAMP,
            comment="Update timestamp",
            struct_tag='json:"updated_at" validate:"required"',
        ),
    ]


class TimestampedMixin(Mixin):
    """created_at / updated_at tracking columns."""

    name: str = "timestamped"
    fields: List[ColumnField] = Field(default_factory=_timestamp_fields)


register_mixin(TimestampedMixin())


__all__ = ["TimestampedMixin"]
