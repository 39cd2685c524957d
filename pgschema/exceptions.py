# ============================================================================
# SCHEMA EXCEPTIONS
# ============================================================================
# STATUS: Foundation - Error taxonomy for schema definition and DDL generation
# PURPOSE: Configuration errors returned to callers, one fatal condition
# CREATED: 18 OCT 2026
# ============================================================================
"""
Schema Exceptions

Configuration errors (everything a field, index or model can get wrong)
derive from SchemaError, which is a ValueError so callers that already
catch ValueError keep working.

TableNameNotSetError is the single unrecoverable condition: a model asked
for its table name before one was configured.
"""

from typing import List, Optional


class SchemaError(ValueError):
    """Base class for schema configuration errors."""


class FieldValidationError(SchemaError):
    """A column field failed validation."""

    def __init__(self, column: str, message: str):
        self.column = column
        super().__init__(message)


class IndexValidationError(SchemaError):
    """An index definition failed validation."""

    def __init__(self, message: str, index_name: Optional[str] = None):
        self.index_name = index_name
        super().__init__(message)


class SchemaValidationError(SchemaError):
    """
    One or more validation errors across a whole model.

    Raised by the generator when validation runs before generation;
    `errors` holds every problem found, not just the first.
    """

    def __init__(self, table: str, errors: List[str]):
        self.table = table
        self.errors = list(errors)
        summary = "; ".join(self.errors)
        super().__init__(f"Model for table '{table}' is invalid: {summary}")


class TableNameNotSetError(RuntimeError):
    """A model's table name was read before being set."""

    def __init__(self, model_name: str):
        self.model_name = model_name
        super().__init__(f"Table name not set for schema {model_name}")


__all__ = [
    "SchemaError",
    "FieldValidationError",
    "IndexValidationError",
    "SchemaValidationError",
    "TableNameNotSetError",
]
