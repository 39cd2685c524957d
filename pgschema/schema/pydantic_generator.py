# ============================================================================
# PYDANTIC MODEL GENERATOR
# ============================================================================
# STATUS: Core - Host-side row models from table definitions
# PURPOSE: Render pydantic model source, or build the model class at runtime
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: PydanticModelGenerator
# DEPENDENCIES: pydantic
# ============================================================================
"""
Pydantic Model Generator.

The reverse direction of ModelToSQL: a table definition becomes a row
model whose attributes follow each field's host type (python_type()).

    PydanticModelGenerator().generate_source(Role())

    from datetime import date, time
    from decimal import Decimal
    from typing import Any, Dict, Optional
    from uuid import UUID

    from pydantic import BaseModel, Field


    class Roles(BaseModel):
        id: int = Field(..., description='Role identifier')
        name: str = Field(..., description='Role name')

Optional fields default to None. Struct tags are carried through as
json_schema_extra so downstream code generators can read them.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Tuple, Type

from pydantic import BaseModel, Field, create_model

from pgschema.logging import get_logger, log_context
from pgschema.schema.ddl_utils import to_camel_case

if TYPE_CHECKING:
    from pgschema.models.base import Model
    from pgschema.schema.fields import BaseField

logger = get_logger(__name__)


_SOURCE_HEADER = [
    "from datetime import date, time",
    "from decimal import Decimal",
    "from typing import Any, Dict, Optional",
    "from uuid import UUID",
    "",
    "from pydantic import BaseModel, Field",
]


class PydanticModelGenerator:
    """Generate pydantic row models for Models."""

    def class_name(self, model: "Model") -> str:
        """users_roles -> UsersRoles"""
        return to_camel_case(model.table_name())

    def _field_line(self, column: "BaseField") -> str:
        annotation = column.python_type()
        required = not column.is_optional()

        arguments = []
        if column.comment:
            arguments.append("..." if required else "None")
            arguments.append(f"description={column.comment!r}")
        if column.struct_tag:
            if not arguments:
                arguments.append("..." if required else "None")
            arguments.append(f"json_schema_extra={{'struct_tag': {column.struct_tag!r}}}")

        line = f"    {column.name()}: {annotation}"
        if arguments:
            return f"{line} = Field({', '.join(arguments)})"
        if not required:
            return f"{line} = None"
        return line

    def generate_source(self, model: "Model") -> str:
        """
        Python source for a pydantic model of the table's rows.

        Fields appear in column order (own fields, then mixin fields).
        """
        name = self.class_name(model)
        lines = [*_SOURCE_HEADER, "", "", f"class {name}(BaseModel):"]

        columns = model.all_fields()
        if not columns:
            lines.append("    pass")
        for column in columns:
            lines.append(self._field_line(column))

        with log_context(model=type(model).__name__, table=model.table_name(), operation="generate_source"):
            logger.debug(f"Rendered pydantic source for {name} with {len(columns)} fields")
        return "\n".join(lines) + "\n"

    def build(self, model: "Model") -> Type[BaseModel]:
        """Create the pydantic row model class at runtime."""
        definitions: Dict[str, Tuple[Any, Any]] = {}
        for column in model.all_fields():
            extra = {"struct_tag": column.struct_tag} if column.struct_tag else None
            default = None if column.is_optional() else ...
            definitions[column.name()] = (
                column.annotation(),
                Field(default, description=column.comment or None, json_schema_extra=extra),
            )
        return create_model(self.class_name(model), **definitions)

    def build_many(self, models: List["Model"]) -> Dict[str, Type[BaseModel]]:
        """build() for several models, keyed by table name."""
        return {model.table_name(): self.build(model) for model in models}


__all__ = ["PydanticModelGenerator"]
