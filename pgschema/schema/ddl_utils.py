# ============================================================================
# DDL UTILITIES
# ============================================================================
# STATUS: Core - DRY utilities for SQL DDL generation
# PURPOSE: Identifier quoting, column/index/comment/foreign-key builders
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: ColumnBuilder, IndexBuilder, CommentBuilder, ForeignKeyBuilder
# DEPENDENCIES: psycopg
# ============================================================================
"""
DDL Utilities - Shared SQL Generation Patterns.

Statements are composed with psycopg.sql and rendered to plain strings
without a connection, so identifiers and literals are always escaped the
same way: embedded double quotes in identifiers and embedded single quotes
in literals are doubled. Literals are standard-conforming strings, so
backslashes pass through untouched. Names and text that need no escaping
render unchanged ("users", 'Email address').

Usage:
    from pgschema.schema.ddl_utils import ColumnBuilder, IndexBuilder

    ColumnBuilder.definition("email", "VARCHAR(255)", not_null=True, unique=True)
    # '"email" VARCHAR(255) NOT NULL UNIQUE'

    IndexBuilder.create("users_email_idx", "users", ["email"])
    # 'CREATE INDEX IF NOT EXISTS "users_email_idx" ON "users" ("email");'
"""

import re
from typing import List, Optional, Sequence, Union

from psycopg import sql

from pgschema.contracts import Annotation, Constraint


# ============================================================================
# RENDERING & QUOTING
# ============================================================================

def render(stmt: sql.Composable) -> str:
    """Render a composed statement to text without a connection."""
    return stmt.as_string(None)


def quote_identifier(identifier: str) -> str:
    """Quote a PostgreSQL identifier."""
    return render(sql.Identifier(identifier))


def string_literal(value: str) -> sql.Composable:
    """
    Standard-conforming string literal; only embedded single quotes are doubled.

    Backslashes are kept as-is, never turned into an E'...' escape string.
    """
    return sql.SQL("'{}'".format(value.replace("'", "''")))


def quote_literal(value: str) -> str:
    """Quote a PostgreSQL string literal."""
    return render(string_literal(value))


def join_columns(columns: Sequence[str]) -> str:
    """Quote and comma-join column names."""
    return render(sql.SQL(", ").join(sql.Identifier(c) for c in columns))


# ============================================================================
# NAMING
# ============================================================================

def to_snake_case(value: str) -> str:
    """Convert CamelCase to snake_case."""
    return re.sub(r'(?<!^)(?=[A-Z])', '_', value).lower()


def to_camel_case(value: str) -> str:
    """Convert snake_case to CamelCase."""
    return "".join(part[:1].upper() + part[1:] for part in value.split("_") if part)


# ============================================================================
# COLUMN BUILDER
# ============================================================================

class ColumnBuilder:
    """
    Builder for column definitions.

    Every field variant renders through definition() so constraint
    order is decided in exactly one place.
    """

    @staticmethod
    def definition(
        column: str,
        sql_type: str,
        not_null: bool = False,
        primary_key: bool = False,
        unique: bool = False,
        default: Optional[sql.Composable] = None,
        constraints: Sequence[str] = (),
    ) -> str:
        """
        Render a column definition.

        Args:
            column: Column name (quoted on output)
            sql_type: Resolved SQL type, emitted verbatim
            not_null: Emit NOT NULL
            primary_key: Emit PRIMARY KEY
            unique: Emit UNIQUE
            default: Rendered default expression, or None for no DEFAULT
            constraints: Raw trailing clauses, emitted verbatim in order

        Returns:
            '"<column>" <type>[ NOT NULL][ PRIMARY KEY][ UNIQUE][ DEFAULT x][ extras]'
        """
        parts: List[sql.Composable] = [sql.Identifier(column), sql.SQL(sql_type)]

        if not_null:
            parts.append(sql.SQL(Constraint.NOT_NULL.value))
        if primary_key:
            parts.append(sql.SQL(Constraint.PRIMARY_KEY.value))
        if unique:
            parts.append(sql.SQL(Constraint.UNIQUE.value))
        if default is not None:
            parts.append(sql.SQL("{} {}").format(sql.SQL(Constraint.DEFAULT.value), default))

        parts.extend(sql.SQL(c) for c in constraints)

        return render(sql.SQL(" ").join(parts))

    @staticmethod
    def check(condition: sql.Composable) -> str:
        """Render a CHECK clause around a composed condition."""
        return render(sql.SQL("{} ({})").format(sql.SQL(Constraint.CHECK.value), condition))


# ============================================================================
# INDEX BUILDER
# ============================================================================

class IndexBuilder:
    """
    Builder for CREATE INDEX statements.

    All methods are static and return rendered strings.
    """

    @staticmethod
    def generate_name(table: str, parts: Sequence[str], suffix: str = "idx") -> str:
        """
        Generate conventional index name.

        <table>_<part1>_<part2>..._<suffix>
        """
        return "_".join([table, *parts, suffix])

    @staticmethod
    def create(
        name: str,
        table: str,
        elements: Sequence[Union[str, sql.Composable]],
        unique: bool = False,
    ) -> str:
        """
        Create an index.

        Args:
            name: Index name
            table: Table name
            elements: Plain column names (quoted) or pre-composed expressions
            unique: Create a UNIQUE index

        Returns:
            CREATE [UNIQUE ]INDEX IF NOT EXISTS statement
        """
        parts = [
            sql.Identifier(e) if isinstance(e, str) else e
            for e in elements
        ]

        stmt = sql.SQL("CREATE {unique}INDEX IF NOT EXISTS {name} ON {table} ({elements});").format(
            unique=sql.SQL("UNIQUE " if unique else ""),
            name=sql.Identifier(name),
            table=sql.Identifier(table),
            elements=sql.SQL(", ").join(parts),
        )
        return render(stmt)


# ============================================================================
# COMMENT BUILDER
# ============================================================================

class CommentBuilder:
    """
    Builder for PostgreSQL COMMENT statements.
    """

    @staticmethod
    def column(table: str, column: str, comment: str) -> str:
        """Add comment to column."""
        return render(sql.SQL("COMMENT ON COLUMN {}.{} IS {};").format(
            sql.Identifier(table),
            sql.Identifier(column),
            string_literal(comment),
        ))


# ============================================================================
# FOREIGN KEY BUILDER
# ============================================================================

class ForeignKeyBuilder:
    """
    Builder for table-level FOREIGN KEY clauses.
    """

    @staticmethod
    def constraint(
        column: str,
        reference_table: str,
        reference_column: str,
        annotation: Optional[Annotation] = None,
    ) -> str:
        """
        FOREIGN KEY ("col") REFERENCES "table"("ref")[ ON DELETE x][ ON UPDATE y]
        """
        stmt = sql.SQL("FOREIGN KEY ({}) REFERENCES {}({})").format(
            sql.Identifier(column),
            sql.Identifier(reference_table),
            sql.Identifier(reference_column),
        )
        clauses = annotation.clauses() if annotation is not None else []
        if clauses:
            stmt = sql.SQL(" ").join([stmt, *(sql.SQL(c) for c in clauses)])
        return render(stmt)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    'render',
    'quote_identifier',
    'string_literal',
    'quote_literal',
    'join_columns',
    'to_snake_case',
    'to_camel_case',
    'ColumnBuilder',
    'IndexBuilder',
    'CommentBuilder',
    'ForeignKeyBuilder',
]
