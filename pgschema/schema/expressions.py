# ============================================================================
# INDEX EXPRESSIONS
# ============================================================================
# STATUS: Core - Computed expressions usable inside index definitions
# PURPOSE: Render LOWER/UPPER/CONCAT/access-method/tsvector fragments
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: Lower, Upper, Concat, Gist, Gin, Btree, Hash, ToTsVector, IndexExpression
# DEPENDENCIES: pydantic, psycopg
# ============================================================================
"""
Index Expressions.

Each expression renders a SQL fragment via expression() and a naming
fragment via column_name(); the latter feeds derived index names, so it
is deterministic and never empty.

Expressions are tagged with `kind`, which makes IndexExpression a closed
union that pydantic can load from plain dicts:

    {"kind": "lower", "column": "email"}
    {"kind": "concat", "columns": ["first_name", "last_name"]}
"""

from typing import Annotated, ClassVar, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from psycopg import sql

from pgschema.schema.ddl_utils import render


class BaseExpression(BaseModel):
    """Base for index expressions."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    def expression(self) -> str:
        raise NotImplementedError

    def column_name(self) -> str:
        raise NotImplementedError


class SingleColumnExpression(BaseExpression):
    """Expression wrapping one column in a fixed template."""

    TEMPLATE: ClassVar[str] = "{}"

    column: str = Field(..., min_length=1)

    def expression(self) -> str:
        return render(sql.SQL(self.TEMPLATE).format(sql.Identifier(self.column)))

    def column_name(self) -> str:
        return self.column


class Lower(SingleColumnExpression):
    """LOWER("col")"""
    TEMPLATE: ClassVar[str] = "LOWER({})"
    kind: Literal["lower"] = "lower"


class Upper(SingleColumnExpression):
    """UPPER("col")"""
    TEMPLATE: ClassVar[str] = "UPPER({})"
    kind: Literal["upper"] = "upper"


class Gist(SingleColumnExpression):
    """USING GIST ("col")"""
    TEMPLATE: ClassVar[str] = "USING GIST ({})"
    kind: Literal["gist"] = "gist"


class Gin(SingleColumnExpression):
    """USING GIN ("col")"""
    TEMPLATE: ClassVar[str] = "USING GIN ({})"
    kind: Literal["gin"] = "gin"


class Btree(SingleColumnExpression):
    """USING BTREE ("col")"""
    TEMPLATE: ClassVar[str] = "USING BTREE ({})"
    kind: Literal["btree"] = "btree"


class Hash(SingleColumnExpression):
    """USING HASH ("col")"""
    TEMPLATE: ClassVar[str] = "USING HASH ({})"
    kind: Literal["hash"] = "hash"


class Concat(BaseExpression):
    """
    CONCAT("a", "b", ...)

    Arguments are column identifiers, so this concatenates column values.
    The naming fragment joins the column names with underscores.
    """
    kind: Literal["concat"] = "concat"
    columns: List[str] = Field(..., min_length=1)

    def expression(self) -> str:
        args = sql.SQL(", ").join(sql.Identifier(c) for c in self.columns)
        return render(sql.SQL("CONCAT({})").format(args))

    def column_name(self) -> str:
        return "_".join(self.columns)


class ToTsVector(BaseExpression):
    """
    to_tsvector("config", "col") for full-text search indexes.

    The text search configuration is rendered as an identifier, matching
    how existing schemas were generated.
    """
    kind: Literal["to_tsvector"] = "to_tsvector"
    config: str = Field(..., min_length=1)
    column: str = Field(..., min_length=1)

    def expression(self) -> str:
        return render(sql.SQL("to_tsvector({}, {})").format(
            sql.Identifier(self.config),
            sql.Identifier(self.column),
        ))

    def column_name(self) -> str:
        return self.column


IndexExpression = Annotated[
    Union[Lower, Upper, Concat, Gist, Gin, Btree, Hash, ToTsVector],
    Field(discriminator="kind"),
]


__all__ = [
    "BaseExpression",
    "Lower",
    "Upper",
    "Concat",
    "Gist",
    "Gin",
    "Btree",
    "Hash",
    "ToTsVector",
    "IndexExpression",
]
