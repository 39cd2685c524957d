# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# STATUS: Foundation - Constraint vocabulary and SQL function constants
# PURPOSE: Closed enumerations shared by fields, indexes and the generator
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: Constraint, PSQLFunction, OnDeleteOption, OnUpdateOption, Annotation
# DEPENDENCIES: enum, pydantic
# ============================================================================
"""
Base contracts for schema definitions.

These are the fixed vocabularies that end up verbatim in generated DDL:
- Column constraint keywords
- Well-known PostgreSQL functions usable as column defaults
- Referential actions for foreign keys
"""

from enum import Enum
from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict


# ============================================================================
# CONSTRAINT KEYWORDS
# ============================================================================

class Constraint(str, Enum):
    """
    Column constraint keywords.

    Rendering order in a column definition is fixed:
        type -> NOT NULL -> PRIMARY KEY -> UNIQUE -> DEFAULT -> extras
    """
    NOT_NULL = "NOT NULL"
    PRIMARY_KEY = "PRIMARY KEY"
    UNIQUE = "UNIQUE"
    DEFAULT = "DEFAULT"
    CHECK = "CHECK"


# ============================================================================
# SQL FUNCTIONS
# ============================================================================

class PSQLFunction(str, Enum):
    """PostgreSQL functions commonly used as column defaults."""
    CURRENT_TIMESTAMP = "current_timestamp"
    CURRENT_DATE = "current_date"
    CURRENT_TIME = "current_time"
    NOW = "now()"
    UUID_GENERATE_V4 = "uuid_generate_v4()"      # requires uuid-ossp
    GEN_RANDOM_UUID = "gen_random_uuid()"        # pgcrypto / PG13+


# Function defaults accept the enum or any raw function text
FunctionDefault = Union[PSQLFunction, str]


def function_text(value: FunctionDefault) -> str:
    """Raw SQL text of a function default."""
    if isinstance(value, Enum):
        return value.value
    return value


# ============================================================================
# REFERENTIAL ACTIONS
# ============================================================================

class OnDeleteOption(str, Enum):
    """ON DELETE behaviour for foreign keys."""
    CASCADE = "CASCADE"
    SET_NULL = "SET NULL"
    RESTRICT = "RESTRICT"
    NO_ACTION = "NO ACTION"


class OnUpdateOption(str, Enum):
    """ON UPDATE behaviour for foreign keys."""
    CASCADE = "CASCADE"
    SET_NULL = "SET NULL"
    RESTRICT = "RESTRICT"
    NO_ACTION = "NO ACTION"


class Annotation(BaseModel):
    """
    Referential actions attached to a foreign key.

    Either action may be left unset, in which case the clause is omitted
    and PostgreSQL's own default (NO ACTION) applies.
    """
    on_delete: Optional[OnDeleteOption] = None
    on_update: Optional[OnUpdateOption] = None

    model_config = ConfigDict(frozen=True)

    def clauses(self) -> List[str]:
        """ON DELETE / ON UPDATE clauses, in that order."""
        result = []
        if self.on_delete is not None:
            result.append(f"ON DELETE {self.on_delete.value}")
        if self.on_update is not None:
            result.append(f"ON UPDATE {self.on_update.value}")
        return result

    def __str__(self) -> str:
        return " ".join(self.clauses())


__all__ = [
    "Constraint",
    "PSQLFunction",
    "FunctionDefault",
    "function_text",
    "OnDeleteOption",
    "OnUpdateOption",
    "Annotation",
]
