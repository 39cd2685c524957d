# ============================================================================
# PGSCHEMA
# ============================================================================
# STATUS: Package root
# PURPOSE: Declarative PostgreSQL table definitions and DDL generation
# LAST_REVIEWED: 18 OCT 2026
# ============================================================================
"""
pgschema - PostgreSQL schema definitions as code.

    from pgschema import ModelToSQL
    from pgschema.models.examples import User

    for stmt in ModelToSQL().generate_all(User()):
        print(stmt)
"""

from pgschema.__version__ import __version__
from pgschema.contracts import (
    Annotation,
    Constraint,
    OnDeleteOption,
    OnUpdateOption,
    PSQLFunction,
)
from pgschema.exceptions import (
    FieldValidationError,
    IndexValidationError,
    SchemaError,
    SchemaValidationError,
    TableNameNotSetError,
)
from pgschema.models import Mixin, Model, TableDefinition, TimestampedMixin
from pgschema.schema import Index, ModelToSQL, PydanticModelGenerator

__all__ = [
    "__version__",
    "Annotation",
    "Constraint",
    "OnDeleteOption",
    "OnUpdateOption",
    "PSQLFunction",
    "SchemaError",
    "FieldValidationError",
    "IndexValidationError",
    "SchemaValidationError",
    "TableNameNotSetError",
    "Mixin",
    "Model",
    "TableDefinition",
    "TimestampedMixin",
    "Index",
    "ModelToSQL",
    "PydanticModelGenerator",
]
