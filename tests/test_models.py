# ============================================================================
# MODEL & MIXIN TESTS
# ============================================================================
# STATUS: Tests - Declarative models, mixins and structured definitions
# PURPOSE: Verify table naming, field ordering, mixin registry, loading
# CREATED: 18 OCT 2026
# ============================================================================
"""
Model & Mixin Tests

Run with:
    pytest tests/test_models.py -v
"""

import pytest
from pydantic import ValidationError

from pgschema.contracts import PSQLFunction
from pgschema.exceptions import SchemaError, TableNameNotSetError
from pgschema.models import (
    Mixin,
    Model,
    TimestampedMixin,
    get_mixin,
    register_mixin,
)
from pgschema.models.examples import Role, User
from pgschema.schema.fields import CharField, DateField, IntegerField, TextField
from pgschema.schema.indexes import Index


# ============================================================================
# TABLE NAME
# ============================================================================

class TestTableName:
    def test_unset_table_name_raises(self):
        with pytest.raises(TableNameNotSetError, match="Table name not set for schema Model"):
            Model().table_name()

    def test_error_names_subclass(self):
        class Unnamed(Model):
            pass

        with pytest.raises(TableNameNotSetError, match="Unnamed"):
            Unnamed().table_name()

    def test_table_name_not_set_is_runtime_error(self):
        assert issubclass(TableNameNotSetError, RuntimeError)
        assert not issubclass(TableNameNotSetError, SchemaError)

    def test_class_level_name(self):
        assert User().table_name() == "users"

    def test_set_table_name_overrides(self):
        model = User()
        model.set_table_name("accounts")
        assert model.table_name() == "accounts"
        assert User().table_name() == "users"

    def test_constructor_name(self):
        assert Model(table_name="tags").table_name() == "tags"

    def test_repr(self):
        assert repr(Role()) == "Role(table='roles')"


# ============================================================================
# FIELDS & MIXINS
# ============================================================================

class TestFieldOrdering:
    def test_own_fields(self):
        names = [f.name() for f in User().fields()]
        assert names == [
            "id", "username", "email", "bio", "is_active",
            "metadata", "age", "rating", "role_id",
        ]

    def test_all_fields_appends_mixins(self):
        names = [f.name() for f in User().all_fields()]
        assert names[-2:] == ["created_at", "updated_at"]
        assert len(names) == 11

    def test_accessors_return_copies(self):
        model = User()
        model.fields().clear()
        model.indexes().clear()
        assert len(model.fields()) == 9
        assert len(model.indexes()) == 3

    def test_instance_override_of_fields(self):
        model = Role(fields=[IntegerField(column_name="id")])
        assert [f.name() for f in model.all_fields()] == ["id"]

    def test_mixins_in_order(self):
        extra = Mixin(name="audit", fields=[TextField(column_name="changed_by", nullable=True)])
        model = Model(
            table_name="docs",
            fields=[TextField(column_name="body")],
            mixins=[TimestampedMixin(), extra],
        )
        names = [f.name() for f in model.all_fields()]
        assert names == ["body", "created_at", "updated_at", "changed_by"]


class TestTimestampedMixin:
    def test_fields(self):
        mixin = TimestampedMixin()
        assert mixin.name == "timestamped"
        assert all(isinstance(f, DateField) for f in mixin.fields)
        assert [f.default for f in mixin.fields] == [PSQLFunction.CURRENT_TIMESTAMP] * 2

    def test_definitions(self):
        created_at = TimestampedMixin().fields[0]
        assert created_at.definition() == '"created_at" DATE NOT NULL DEFAULT current_timestamp'
        assert created_at.comment == "Creation timestamp"


class TestMixinRegistry:
    def test_timestamped_registered(self):
        assert get_mixin("timestamped").name == "timestamped"

    def test_register_custom(self):
        mixin = register_mixin(Mixin(
            name="soft_delete",
            fields=[DateField(column_name="deleted_at", nullable=True)],
        ))
        assert get_mixin("soft_delete") is mixin

    def test_unknown_mixin(self):
        with pytest.raises(SchemaError, match="Unknown mixin 'missing'"):
            get_mixin("missing")


# ============================================================================
# STRUCTURED DEFINITIONS
# ============================================================================

class TestFromDefinition:
    def test_load(self):
        model = Model.from_definition({
            "table": "tags",
            "fields": [
                {"kind": "integer", "column_name": "id", "unique": True},
                {"kind": "char", "column_name": "label", "max_length": 64},
            ],
            "mixins": ["timestamped"],
            "indexes": [{"columns": ["label"], "unique": True}],
        })

        assert model.table_name() == "tags"
        fields = model.all_fields()
        assert isinstance(fields[0], IntegerField)
        assert isinstance(fields[1], CharField)
        assert [f.name() for f in fields] == ["id", "label", "created_at", "updated_at"]
        assert model.indexes() == [Index(columns=["label"], unique=True)]

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            Model.from_definition({
                "table": "tags",
                "fields": [{"kind": "geometry", "column_name": "shape"}],
            })

    def test_empty_table_rejected(self):
        with pytest.raises(ValidationError):
            Model.from_definition({"table": ""})

    def test_unknown_mixin_rejected(self):
        with pytest.raises(SchemaError, match="Unknown mixin"):
            Model.from_definition({"table": "tags", "mixins": ["nope"]})

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            Model.from_definition({"table": "tags", "columns": []})
