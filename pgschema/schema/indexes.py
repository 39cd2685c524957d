# ============================================================================
# INDEX DEFINITIONS
# ============================================================================
# STATUS: Core - Multi-column and expression indexes
# PURPOSE: Validate index definitions, derive names, render CREATE INDEX
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: Index
# DEPENDENCIES: pydantic, psycopg
# ============================================================================
"""
Index Definitions.

An Index combines plain columns and expressions (columns first, then
expressions, each in declaration order):

    Index(columns=["organization_id"], expressions=[Lower(column="code")], unique=True)
        .sql("equipment_types")
    # CREATE UNIQUE INDEX IF NOT EXISTS "equipment_types_organization_id_code_idx"
    #     ON "equipment_types" ("organization_id", LOWER("code"));

sql() is a pure function of the definition and the table name. A derived
name is recomputed on every call and never written back, so one Index can
be shared between tables and threads.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from psycopg import sql

from pgschema.config import get_defaults
from pgschema.exceptions import IndexValidationError
from pgschema.schema.ddl_utils import IndexBuilder
from pgschema.schema.expressions import IndexExpression


class Index(BaseModel):
    """
    One index on one table.

    Attributes:
        name: Explicit index name; derived from table and columns when empty
        columns: Plain column names
        expressions: Computed expressions (LOWER, CONCAT, ...)
        unique: Create a UNIQUE index
    """

    name: Optional[str] = None
    columns: List[str] = Field(default_factory=list)
    expressions: List[IndexExpression] = Field(default_factory=list)
    unique: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")

    def validate(self) -> None:
        """
        Check the index has something to index.

        Raises:
            IndexValidationError: when both columns and expressions are empty
        """
        if not self.columns and not self.expressions:
            raise IndexValidationError(
                "at least one column or expression must be specified",
                index_name=self.name,
            )

    def name_parts(self) -> List[str]:
        """Naming fragments: column names, then expression column names."""
        return [*self.columns, *(e.column_name() for e in self.expressions)]

    def generate_name(self, table: str) -> str:
        """Explicit name if given, else <table>_<parts...>_idx."""
        if self.name:
            return self.name
        suffix = get_defaults().generator.index_suffix
        return IndexBuilder.generate_name(table, self.name_parts(), suffix)

    def sql(self, table: str) -> str:
        """
        CREATE INDEX statement for this index on `table`.

        Raises:
            IndexValidationError: when the definition is empty
        """
        self.validate()

        elements = [
            *self.columns,
            *(sql.SQL(e.expression()) for e in self.expressions),
        ]
        return IndexBuilder.create(self.generate_name(table), table, elements, unique=self.unique)


__all__ = ["Index"]
