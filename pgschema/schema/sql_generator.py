# ============================================================================
# MODEL TO SQL GENERATOR
# ============================================================================
# STATUS: Core - DDL generation from declarative models
# PURPOSE: Assemble CREATE TABLE, COMMENT and CREATE INDEX statements
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: ModelToSQL, ValidationReport
# DEPENDENCIES: psycopg
# ============================================================================
"""
Model to PostgreSQL Schema Generator.

Walks a Model (own fields, then mixin fields) and produces:
- one CREATE TABLE IF NOT EXISTS with every column definition followed
  by one FOREIGN KEY clause per foreign-key field
- COMMENT ON COLUMN statements for fields that carry a comment
- one CREATE INDEX per Index on the model
- single-column CREATE INDEX statements for fields flagged index=True

Usage:
    generator = ModelToSQL()
    for stmt in generator.generate_all(User()):
        print(stmt)
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional

from psycopg import sql

from pgschema.config import get_defaults
from pgschema.exceptions import SchemaError, SchemaValidationError
from pgschema.logging import get_logger, log_context
from pgschema.schema.ddl_utils import render
from pgschema.schema.fields import ForeignKeyField

if TYPE_CHECKING:
    from pgschema.models.base import Model

logger = get_logger(__name__)


# ============================================================================
# RESULT
# ============================================================================

@dataclass
class ValidationReport:
    """
    Result of validating a whole model.

    Collects all errors rather than stopping at the first one.
    """
    table: str
    errors: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


class ModelToSQL:
    """
    Convert Models to PostgreSQL DDL statements.
    """

    def __init__(self, validate_before_generate: Optional[bool] = None):
        """
        Initialize the generator.

        Args:
            validate_before_generate: Validate in generate_all() and raise on
                errors. Defaults to the PGSCHEMA_VALIDATE setting.
        """
        if validate_before_generate is None:
            validate_before_generate = get_defaults().generator.validate_before_generate
        self.validate_before_generate = validate_before_generate

    # =========================================================================
    # VALIDATION
    # =========================================================================

    def validate(self, model: "Model") -> ValidationReport:
        """
        Validate every field and index of a model.

        Never raises for configuration problems; see ValidationReport.errors.
        """
        table = model.table_name()
        report = ValidationReport(table=table)

        seen: Dict[str, int] = {}
        for column in model.all_fields():
            try:
                column.validate()
            except SchemaError as e:
                report.errors.append(str(e))
            name = column.name()
            if name:
                seen[name] = seen.get(name, 0) + 1

        for name, count in seen.items():
            if count > 1:
                report.errors.append(f"column '{name}' is defined {count} times")

        for position, index in enumerate(model.indexes()):
            try:
                index.validate()
            except SchemaError as e:
                label = index.name or f"#{position}"
                report.errors.append(f"index {label}: {e}")

        if not report.valid:
            with log_context(table=table, operation="validate"):
                logger.warning(f"Model {type(model).__name__} has {len(report.errors)} validation errors")

        return report

    # =========================================================================
    # TABLE GENERATION
    # =========================================================================

    def generate_table(self, model: "Model") -> str:
        """
        Generate CREATE TABLE DDL for a model.

        Returns:
            CREATE TABLE IF NOT EXISTS "<table>" (<definitions>, <foreign keys>);
        """
        table = model.table_name()

        with log_context(model=type(model).__name__, table=table, operation="generate_table"):
            definitions = []
            foreign_keys = []

            for column in model.all_fields():
                definitions.append(column.definition())
                if isinstance(column, ForeignKeyField):
                    foreign_keys.append(column.foreign_key_constraint(table))

            logger.debug(f"Rendered {len(definitions)} columns, {len(foreign_keys)} foreign keys")

            body = sql.SQL(", ").join(sql.SQL(part) for part in definitions + foreign_keys)
            return render(sql.SQL("CREATE TABLE IF NOT EXISTS {} ({});").format(
                sql.Identifier(table),
                body,
            ))

    def generate_comments(self, model: "Model") -> List[str]:
        """COMMENT ON COLUMN statements for every commented field."""
        table = model.table_name()
        comments = []
        for column in model.all_fields():
            comment_sql = column.comment_sql(table)
            if comment_sql:
                comments.append(comment_sql)
        return comments

    # =========================================================================
    # INDEX GENERATION
    # =========================================================================

    def generate_indexes(self, model: "Model") -> List[str]:
        """
        One CREATE INDEX statement per Index on the model.

        Raises:
            IndexValidationError: an index has no columns or expressions
        """
        table = model.table_name()
        return [index.sql(table) for index in model.indexes()]

    def generate_field_indexes(self, model: "Model") -> List[str]:
        """Single-column indexes for fields declared with index=True."""
        table = model.table_name()
        result = []
        for column in model.all_fields():
            index_sql = column.index_sql(table)
            if index_sql:
                result.append(index_sql)
        return result

    # =========================================================================
    # COMPLETE GENERATION
    # =========================================================================

    def generate_all(self, model: "Model") -> List[str]:
        """
        Generate complete DDL for one model.

        Order: CREATE TABLE, comments, model indexes, field indexes.

        Raises:
            SchemaValidationError: validation is enabled and the model is invalid
        """
        table = model.table_name()

        if self.validate_before_generate:
            report = self.validate(model)
            if not report.valid:
                raise SchemaValidationError(table, report.errors)

        statements = [self.generate_table(model)]
        statements.extend(self.generate_comments(model))
        statements.extend(self.generate_indexes(model))
        statements.extend(self.generate_field_indexes(model))

        with log_context(model=type(model).__name__, table=table):
            logger.info(f"Generated {len(statements)} DDL statements for table {table}")
        return statements

    def generate_many(self, models: Iterable["Model"]) -> List[str]:
        """generate_all() for several models, concatenated in order."""
        statements: List[str] = []
        for model in models:
            statements.extend(self.generate_all(model))
        return statements


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = ['ModelToSQL', 'ValidationReport']
