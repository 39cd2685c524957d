# ============================================================================
# SCHEMA MODULE
# ============================================================================
# STATUS: Core - Column fields, indexes and DDL generation
# PURPOSE: Generate PostgreSQL DDL from declarative table definitions
# LAST_REVIEWED: 18 OCT 2026
# ============================================================================

from pgschema.schema.ddl_utils import (
    ColumnBuilder,
    CommentBuilder,
    ForeignKeyBuilder,
    IndexBuilder,
    join_columns,
    quote_identifier,
    quote_literal,
    to_camel_case,
    to_snake_case,
)
from pgschema.schema.expressions import (
    Btree,
    Concat,
    Gin,
    Gist,
    Hash,
    IndexExpression,
    Lower,
    ToTsVector,
    Upper,
)
from pgschema.schema.fields import (
    BaseField,
    BooleanField,
    CharField,
    ColumnField,
    DateField,
    ForeignKeyField,
    IntegerField,
    JSONField,
    NumericField,
    PositiveIntegerField,
    TextField,
    TimeField,
    UUIDField,
)
from pgschema.schema.indexes import Index
from pgschema.schema.sql_generator import ModelToSQL, ValidationReport
from pgschema.schema.pydantic_generator import PydanticModelGenerator

__all__ = [
    # Generators
    "ModelToSQL",
    "ValidationReport",
    "PydanticModelGenerator",
    # Fields
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
    # Indexes
    "Index",
    "IndexExpression",
    "Lower",
    "Upper",
    "Concat",
    "Gist",
    "Gin",
    "Btree",
    "Hash",
    "ToTsVector",
    # Utilities
    "ColumnBuilder",
    "IndexBuilder",
    "CommentBuilder",
    "ForeignKeyBuilder",
    "quote_identifier",
    "quote_literal",
    "join_columns",
    "to_snake_case",
    "to_camel_case",
]
