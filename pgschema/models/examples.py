# ============================================================================
# EXAMPLE MODELS
# ============================================================================
# STATUS: Model - Reference schema for users and roles
# PURPOSE: Demonstrate every column kind, mixins and index styles
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: Role, User
# ============================================================================
"""
Example Models

Maps to:
    roles  - lookup table referenced by users.role_id
    users  - one row per account, timestamped

Used by scripts/generate_ddl.py as the default model.
"""

from typing import ClassVar, List

from pgschema.contracts import Annotation, OnDeleteOption, OnUpdateOption, PSQLFunction
from pgschema.models.base import Mixin, Model
from pgschema.models.mixins import TimestampedMixin
from pgschema.schema.expressions import Lower
from pgschema.schema.fields import (
    BaseField,
    BooleanField,
    CharField,
    ForeignKeyField,
    IntegerField,
    JSONField,
    NumericField,
    PositiveIntegerField,
    TextField,
    UUIDField,
)
from pgschema.schema.indexes import Index


class Role(Model):
    """Maps to: roles table"""

    __sql_table__: ClassVar[str] = "roles"
    __sql_fields__: ClassVar[List[BaseField]] = [
        IntegerField(
            column_name="id",
            unique=True,
            comment="Role identifier",
        ),
        CharField(
            column_name="name",
            max_length=64,
            unique=True,
            comment="Role name",
        ),
    ]


class User(Model):
    """
    Maps to: users table

    Identity is a generated uuid; role_id cascades from roles.
    """

    __sql_table__: ClassVar[str] = "users"
    __sql_mixins__: ClassVar[List[Mixin]] = [TimestampedMixin()]
    __sql_fields__: ClassVar[List[BaseField]] = [
        UUIDField(
            column_name="id",
            unique=True,
            default=PSQLFunction.UUID_GENERATE_V4,
            primary_key=True,
            comment="Unique identifier of the user",
            struct_tag='json:"id" validate:"required"',
        ),
        CharField(
            column_name="username",
            max_length=255,
            unique=True,
            comment="Username of the user",
            struct_tag='json:"username" validate:"required"',
        ),
        CharField(
            column_name="email",
            max_length=255,
            unique=True,
            comment="Email address of the user",
            struct_tag='json:"email" validate:"required,email"',
        ),
        TextField(
            column_name="bio",
            nullable=True,
            blank=True,
            comment="Biography of the user",
        ),
        BooleanField(
            column_name="is_active",
            default=True,
            comment="Is the user active",
        ),
        JSONField(
            column_name="metadata",
            nullable=True,
            comment="Metadata of the user",
        ),
        PositiveIntegerField(
            column_name="age",
            nullable=True,
            comment="Age of the user",
        ),
        NumericField(
            column_name="rating",
            precision=19,
            scale=2,
            nullable=True,
            default=19.0,
            comment="Rating of the user",
        ),
        ForeignKeyField(
            column_name="role_id",
            reference_table="roles",
            reference_field="id",
            default="1",
            comment="Role of the user",
            annotations=Annotation(
                on_delete=OnDeleteOption.CASCADE,
                on_update=OnUpdateOption.CASCADE,
            ),
        ),
    ]
    __sql_indexes__: ClassVar[List[Index]] = [
        Index(columns=["email"], unique=True),
        Index(columns=["is_active"]),
        Index(
            name="idx_unique_username_email",
            columns=["email"],
            expressions=[Lower(column="username")],
            unique=True,
        ),
    ]


__all__ = ["Role", "User"]
