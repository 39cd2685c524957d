# ============================================================================
# COLUMN FIELDS
# ============================================================================
# STATUS: Core - One variant per column kind
# PURPOSE: Render column DDL, comments and indexes; validate configuration
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: CharField, TextField, BooleanField, IntegerField,
#          PositiveIntegerField, NumericField, DateField, TimeField,
#          UUIDField, JSONField, ForeignKeyField, ColumnField
# DEPENDENCIES: pydantic, psycopg
# ============================================================================
"""
Column Fields.

Every variant answers the same questions about one column:

    definition()        '"email" VARCHAR(255) NOT NULL UNIQUE'
    name()              'email'
    validate()          raises FieldValidationError on bad configuration
    comment_sql(table)  'COMMENT ON COLUMN "users"."email" IS '...';' or ''
    index_sql(table)    'CREATE INDEX IF NOT EXISTS "users_email_idx" ...' or ''
    python_type()       host type name, e.g. 'Optional[str]'

Generation and validation are independent: definition() renders whatever
it is given and never calls validate(). Callers (or ModelToSQL) validate
first when they want guarantees.

Defaults are explicit: None means "no DEFAULT clause". A default of 0 or
0.0 is a real default and is rendered.

Variants carry a `kind` tag so ColumnField is a closed union that pydantic
can load from plain dicts:

    {"kind": "char", "column_name": "email", "max_length": 255}
"""

import datetime
import math
import uuid
from decimal import Decimal
from typing import Annotated, Any, ClassVar, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from psycopg import sql

from pgschema.config import get_defaults
from pgschema.contracts import Annotation, FunctionDefault, function_text
from pgschema.exceptions import FieldValidationError
from pgschema.schema.ddl_utils import (
    ColumnBuilder,
    CommentBuilder,
    ForeignKeyBuilder,
    IndexBuilder,
    string_literal,
)


# ============================================================================
# BASE FIELD
# ============================================================================

class BaseField(BaseModel):
    """
    Properties and behaviour common to all column kinds.

    Subclasses set DEFAULT_TYPE / HOST_TYPE / HOST_ANNOTATION and
    override the _hooks they need.
    """

    DEFAULT_TYPE: ClassVar[str] = "TEXT"
    HOST_TYPE: ClassVar[str] = "str"
    HOST_ANNOTATION: ClassVar[Any] = str

    column_name: str = ""
    nullable: bool = False
    unique: bool = False
    index: bool = False
    comment: str = ""
    custom_type: str = ""
    constraints: List[str] = Field(default_factory=list)
    struct_tag: str = ""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # -------------------------------------------------------------------------
    # Hooks
    # -------------------------------------------------------------------------

    def _default_type(self) -> str:
        return self.DEFAULT_TYPE

    def _not_null(self) -> bool:
        return not self.nullable

    def _primary_key(self) -> bool:
        return False

    def _default_sql(self) -> Optional[sql.Composable]:
        return None

    def _builtin_constraints(self) -> List[str]:
        return []

    def _validate_specific(self) -> None:
        pass

    def is_optional(self) -> bool:
        """Whether the host representation may hold None."""
        return self.nullable

    # -------------------------------------------------------------------------
    # Public contract
    # -------------------------------------------------------------------------

    def name(self) -> str:
        """Column name, verbatim."""
        return self.column_name

    def sql_type(self) -> str:
        """Custom type if set, else the variant's canonical type."""
        return self.custom_type or self._default_type()

    def definition(self) -> str:
        """Column definition for CREATE TABLE."""
        return ColumnBuilder.definition(
            self.column_name,
            self.sql_type(),
            not_null=self._not_null(),
            primary_key=self._primary_key(),
            unique=self.unique,
            default=self._default_sql(),
            constraints=[*self._builtin_constraints(), *self.constraints],
        )

    def validate(self) -> None:
        """
        Check the field's configuration.

        Raises:
            FieldValidationError: naming the field and the violated rule
        """
        if not self.column_name:
            raise FieldValidationError(
                self.column_name,
                f"{type(self).__name__}: column name cannot be empty",
            )
        self._validate_specific()

    def comment_sql(self, table: str) -> str:
        """COMMENT ON COLUMN statement, or '' without a comment."""
        if not self.comment:
            return ""
        return CommentBuilder.column(table, self.column_name, self.comment)

    def index_sql(self, table: str) -> str:
        """
        Single-column CREATE INDEX statement, or '' when not indexed.

        Named <table>_<column>_<suffix>, the same convention Index uses.
        An indexed unique field gets a UNIQUE index.
        """
        if not self.index:
            return ""
        suffix = get_defaults().generator.index_suffix
        name = IndexBuilder.generate_name(table, [self.column_name], suffix)
        return IndexBuilder.create(name, table, [self.column_name], unique=self.unique)

    def python_type(self) -> str:
        """Host type name, Optional-wrapped when the value may be None."""
        if self.is_optional():
            return f"Optional[{self.HOST_TYPE}]"
        return self.HOST_TYPE

    def annotation(self) -> Any:
        """Host type as a typing object (for building models at runtime)."""
        if self.is_optional():
            return Optional[self.HOST_ANNOTATION]
        return self.HOST_ANNOTATION

    def _fail(self, message: str) -> None:
        raise FieldValidationError(
            self.column_name,
            f"{type(self).__name__} '{self.column_name}': {message}",
        )


def _literal(value: str) -> sql.Composable:
    return string_literal(value)


def _raw(value: str) -> sql.Composable:
    return sql.SQL(value)


# ============================================================================
# TEXT-LIKE FIELDS
# ============================================================================

class _TextLikeField(BaseField):
    """
    Shared rules for CHAR/TEXT columns.

    `blank` permits empty values and, like `nullable`, suppresses NOT NULL.
    """

    blank: bool = False
    default: Optional[str] = None

    def _not_null(self) -> bool:
        return not (self.nullable or self.blank)

    def is_optional(self) -> bool:
        return self.nullable or self.blank

    def _default_sql(self) -> Optional[sql.Composable]:
        if self.default is None:
            return None
        return _literal(self.default)

    def _validate_specific(self) -> None:
        if self.nullable and self.default:
            self._fail("is nullable and has a default value")


class CharField(_TextLikeField):
    """VARCHAR(n) column."""

    kind: Literal["char"] = "char"
    max_length: int = 0

    def _default_type(self) -> str:
        return f"VARCHAR({self.max_length})"

    def _validate_specific(self) -> None:
        super()._validate_specific()
        if self.max_length <= 0:
            self._fail(f"max_length must be positive, got {self.max_length}")


class TextField(_TextLikeField):
    """TEXT column."""

    DEFAULT_TYPE: ClassVar[str] = "TEXT"

    kind: Literal["text"] = "text"


# ============================================================================
# BOOLEAN
# ============================================================================

class BooleanField(BaseField):
    """BOOLEAN column. Always carries an explicit DEFAULT TRUE/FALSE."""

    DEFAULT_TYPE: ClassVar[str] = "BOOLEAN"
    HOST_TYPE: ClassVar[str] = "bool"
    HOST_ANNOTATION: ClassVar[Any] = bool

    kind: Literal["boolean"] = "boolean"
    default: bool = False

    def _default_sql(self) -> Optional[sql.Composable]:
        return _raw("TRUE" if self.default else "FALSE")


# ============================================================================
# INTEGERS
# ============================================================================

class IntegerField(BaseField):
    """INTEGER column."""

    DEFAULT_TYPE: ClassVar[str] = "INTEGER"
    HOST_TYPE: ClassVar[str] = "int"
    HOST_ANNOTATION: ClassVar[Any] = int

    kind: Literal["integer"] = "integer"
    default: Optional[int] = None

    def _default_sql(self) -> Optional[sql.Composable]:
        if self.default is None:
            return None
        return _raw(str(self.default))


class PositiveIntegerField(IntegerField):
    """
    INTEGER column restricted to non-negative values.

    Adds CHECK ("<col>" >= 0) ahead of any caller-supplied constraints.
    Zero is allowed on purpose, so a default of 0 satisfies the check.
    """

    kind: Literal["positive_integer"] = "positive_integer"

    def _builtin_constraints(self) -> List[str]:
        condition = sql.SQL("{} >= 0").format(sql.Identifier(self.column_name))
        return [ColumnBuilder.check(condition)]

    def _validate_specific(self) -> None:
        if self.default is not None and self.default < 0:
            self._fail(f"default must not be negative, got {self.default}")


# ============================================================================
# NUMERIC
# ============================================================================

class NumericField(BaseField):
    """
    NUMERIC(precision, scale) column.

    The default is rendered with exactly `scale` decimal places.
    """

    HOST_TYPE: ClassVar[str] = "Decimal"
    HOST_ANNOTATION: ClassVar[Any] = Decimal

    kind: Literal["numeric"] = "numeric"
    precision: int = 0
    scale: int = 0
    default: Optional[float] = None

    def _default_type(self) -> str:
        return f"NUMERIC({self.precision}, {self.scale})"

    def format_default(self) -> Optional[str]:
        """Default formatted to `scale` decimal places, or None."""
        if self.default is None:
            return None
        return f"{self.default:.{max(self.scale, 0)}f}"

    def _default_sql(self) -> Optional[sql.Composable]:
        formatted = self.format_default()
        if formatted is None:
            return None
        return _raw(formatted)

    def _validate_specific(self) -> None:
        if self.precision <= 0 or self.scale < 0 or self.precision < self.scale:
            self._fail(
                f"invalid precision or scale: precision {self.precision}, scale {self.scale}"
            )

        if self.default is None:
            return
        if not math.isfinite(self.default):
            self._fail(f"default value {self.default} is not a finite number")

        formatted = self.format_default()
        # One digit of headroom for the leading zero of values below 1
        digits = sum(ch.isdigit() for ch in formatted)
        if digits > self.precision + 1:
            self._fail(
                f"default value {formatted} exceeds defined precision "
                f"{self.precision} and scale {self.scale}"
            )


# ============================================================================
# DATE / TIME
# ============================================================================

class _FunctionDefaultField(BaseField):
    """Columns whose default is a SQL function such as current_timestamp."""

    default: Optional[FunctionDefault] = None

    def _default_sql(self) -> Optional[sql.Composable]:
        if not self.default:
            return None
        return _raw(function_text(self.default))


class DateField(_FunctionDefaultField):
    """DATE column."""

    DEFAULT_TYPE: ClassVar[str] = "DATE"
    HOST_TYPE: ClassVar[str] = "date"
    HOST_ANNOTATION: ClassVar[Any] = datetime.date

    kind: Literal["date"] = "date"


class TimeField(_FunctionDefaultField):
    """TIME column."""

    DEFAULT_TYPE: ClassVar[str] = "TIME"
    HOST_TYPE: ClassVar[str] = "time"
    HOST_ANNOTATION: ClassVar[Any] = datetime.time

    kind: Literal["time"] = "time"


# ============================================================================
# UUID
# ============================================================================

class UUIDField(_FunctionDefaultField):
    """
    uuid column, typically the primary key.

    `blank` only affects the host type; NOT NULL follows `nullable`.
    """

    DEFAULT_TYPE: ClassVar[str] = "uuid"
    HOST_TYPE: ClassVar[str] = "UUID"
    HOST_ANNOTATION: ClassVar[Any] = uuid.UUID

    kind: Literal["uuid"] = "uuid"
    primary_key: bool = False
    blank: bool = False

    def _primary_key(self) -> bool:
        return self.primary_key

    def is_optional(self) -> bool:
        return self.nullable or self.blank

    def _validate_specific(self) -> None:
        if self.primary_key and self.nullable:
            self._fail("primary key field cannot be nullable")


# ============================================================================
# JSON
# ============================================================================

class JSONField(BaseField):
    """JSONB column. The default is a JSON document rendered as a literal."""

    DEFAULT_TYPE: ClassVar[str] = "JSONB"
    HOST_TYPE: ClassVar[str] = "Dict[str, Any]"
    HOST_ANNOTATION: ClassVar[Any] = Dict[str, Any]

    kind: Literal["json"] = "json"
    default: Optional[str] = None

    def _default_sql(self) -> Optional[sql.Composable]:
        if self.default is None:
            return None
        return _literal(self.default)


# ============================================================================
# FOREIGN KEY
# ============================================================================

# Host annotations for referenced_type names
_HOST_ANNOTATIONS: Dict[str, Any] = {
    "str": str,
    "int": int,
    "UUID": uuid.UUID,
    "Decimal": Decimal,
}


class ForeignKeyField(BaseField):
    """
    Column referencing another table.

    The column itself renders like any other; the FOREIGN KEY clause is
    produced separately by foreign_key_constraint() for the table body.
    """

    DEFAULT_TYPE: ClassVar[str] = "INTEGER"
    HOST_TYPE: ClassVar[str] = "int"
    HOST_ANNOTATION: ClassVar[Any] = int

    kind: Literal["foreign_key"] = "foreign_key"
    reference_table: str = ""
    reference_field: str = ""
    annotations: Annotation = Field(default_factory=Annotation)
    default: Optional[str] = None
    # Host type of the referenced column, e.g. "UUID"
    referenced_type: str = ""

    def _default_sql(self) -> Optional[sql.Composable]:
        if self.default is None:
            return None
        return _literal(self.default)

    def _validate_specific(self) -> None:
        if not self.reference_table or not self.reference_field:
            self._fail("reference table and reference field cannot be empty")

    def foreign_key_constraint(self, table: str) -> str:
        """Table-level FOREIGN KEY clause for this column."""
        return ForeignKeyBuilder.constraint(
            self.column_name,
            self.reference_table,
            self.reference_field,
            self.annotations,
        )

    def python_type(self) -> str:
        host = self.referenced_type or self.HOST_TYPE
        if self.is_optional():
            return f"Optional[{host}]"
        return host

    def annotation(self) -> Any:
        host = _HOST_ANNOTATIONS.get(self.referenced_type or self.HOST_TYPE, Any)
        if self.is_optional():
            return Optional[host]
        return host


# ============================================================================
# CLOSED UNION
# ============================================================================

ColumnField = Annotated[
    Union[
        CharField,
        TextField,
        BooleanField,
        IntegerField,
        PositiveIntegerField,
        NumericField,
        DateField,
        TimeField,
        UUIDField,
        JSONField,
        ForeignKeyField,
    ],
    Field(discriminator="kind"),
]


__all__ = [
    "BaseField",
    "CharField",
    "TextField",
    "BooleanField",
    "IntegerField",
    "PositiveIntegerField",
    "NumericField",
    "DateField",
    "TimeField",
    "UUIDField",
    "JSONField",
    "ForeignKeyField",
    "ColumnField",
]
