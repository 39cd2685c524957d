# ============================================================================
# MODEL & MIXIN BASE
# ============================================================================
# STATUS: Core - Declarative table definitions
# PURPOSE: One Model per table; Mixins share field bundles between tables
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: Model, Mixin, TableDefinition, register_mixin, get_mixin
# DEPENDENCIES: pydantic
# ============================================================================
"""
Model & Mixin Base.

Model Metadata Convention:
    Models define their table via ClassVar attributes:
    - __sql_table__: Table name (required before generation)
    - __sql_fields__: Ordered list of column fields
    - __sql_mixins__: Ordered list of mixins contributing more fields
    - __sql_indexes__: List of Index definitions

    class Role(Model):
        __sql_table__ = "roles"
        __sql_fields__ = [IntegerField(column_name="id", ...)]

Structured definitions load through TableDefinition, where mixins are
referenced by registered name:

    Model.from_definition({
        "table": "tags",
        "fields": [{"kind": "text", "column_name": "label"}],
        "mixins": ["timestamped"],
    })
"""

from typing import Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from pgschema.exceptions import SchemaError, TableNameNotSetError
from pgschema.logging import get_logger
from pgschema.schema.fields import BaseField, ColumnField
from pgschema.schema.indexes import Index

logger = get_logger(__name__)


# ============================================================================
# MIXINS
# ============================================================================

class Mixin(BaseModel):
    """A named, reusable ordered bundle of fields."""

    name: str
    fields: List[ColumnField] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


_mixin_registry: Dict[str, Mixin] = {}


def register_mixin(mixin: Mixin) -> Mixin:
    """Register a mixin under its name for use in structured definitions."""
    _mixin_registry[mixin.name] = mixin
    return mixin


def get_mixin(name: str) -> Mixin:
    """Look up a registered mixin."""
    try:
        return _mixin_registry[name]
    except KeyError:
        known = ", ".join(sorted(_mixin_registry)) or "none"
        raise SchemaError(f"Unknown mixin '{name}' (registered: {known})") from None


# ============================================================================
# STRUCTURED DEFINITION
# ============================================================================

class TableDefinition(BaseModel):
    """Structured-configuration form of a model."""

    table: str = Field(..., min_length=1)
    fields: List[ColumnField] = Field(default_factory=list)
    mixins: List[str] = Field(default_factory=list)
    indexes: List[Index] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


# ============================================================================
# MODEL
# ============================================================================

class Model:
    """
    Declarative description of one table.

    Class-level __sql_* metadata provides the definition; constructor
    arguments override it per instance.
    """

    __sql_table__: ClassVar[Optional[str]] = None
    __sql_fields__: ClassVar[List[BaseField]] = []
    __sql_mixins__: ClassVar[List[Mixin]] = []
    __sql_indexes__: ClassVar[List[Index]] = []

    def __init__(
        self,
        table_name: Optional[str] = None,
        fields: Optional[List[BaseField]] = None,
        mixins: Optional[List[Mixin]] = None,
        indexes: Optional[List[Index]] = None,
    ):
        self._table_name = table_name
        self._fields = list(self.__sql_fields__ if fields is None else fields)
        self._mixins = list(self.__sql_mixins__ if mixins is None else mixins)
        self._indexes = list(self.__sql_indexes__ if indexes is None else indexes)

    @classmethod
    def from_definition(cls, data: Dict[str, Any]) -> "Model":
        """
        Build a model from a structured definition.

        Raises:
            pydantic.ValidationError: malformed definition or unknown field kind
            SchemaError: unknown mixin name
        """
        definition = TableDefinition.model_validate(data)
        mixins = [get_mixin(name) for name in definition.mixins]
        logger.debug(
            f"Loaded definition for {definition.table}: "
            f"{len(definition.fields)} fields, {len(mixins)} mixins, "
            f"{len(definition.indexes)} indexes"
        )
        return cls(
            table_name=definition.table,
            fields=list(definition.fields),
            mixins=mixins,
            indexes=list(definition.indexes),
        )

    def set_table_name(self, name: str) -> None:
        """Override the table name for this instance."""
        self._table_name = name

    def table_name(self) -> str:
        """
        Table name for this model.

        Raises:
            TableNameNotSetError: neither the instance nor the class sets one
        """
        name = self._table_name or self.__sql_table__
        if not name:
            raise TableNameNotSetError(type(self).__name__)
        return name

    def fields(self) -> List[BaseField]:
        """The model's own fields."""
        return list(self._fields)

    def mixins(self) -> List[Mixin]:
        return list(self._mixins)

    def indexes(self) -> List[Index]:
        return list(self._indexes)

    def all_fields(self) -> List[BaseField]:
        """Own fields followed by every mixin's fields."""
        result = self.fields()
        for mixin in self._mixins:
            result.extend(mixin.fields)
        return result

    def __repr__(self) -> str:
        table = self._table_name or self.__sql_table__
        return f"{type(self).__name__}(table={table!r})"


__all__ = [
    "Mixin",
    "register_mixin",
    "get_mixin",
    "TableDefinition",
    "Model",
]
