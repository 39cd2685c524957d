# ============================================================================
# INDEX & EXPRESSION TESTS
# ============================================================================
# STATUS: Tests - Index definitions and index expressions
# PURPOSE: Verify expression rendering, index naming, purity and validation
# CREATED: 18 OCT 2026
# ============================================================================
"""
Index & Expression Tests

Run with:
    pytest tests/test_indexes.py -v
"""

import pytest
from pydantic import TypeAdapter, ValidationError

from pgschema.exceptions import IndexValidationError
from pgschema.schema.expressions import (
    Btree,
    Concat,
    Gin,
    Gist,
    Hash,
    IndexExpression,
    Lower,
    ToTsVector,
    Upper,
)
from pgschema.schema.indexes import Index


# ============================================================================
# EXPRESSIONS
# ============================================================================

class TestExpressions:
    @pytest.mark.parametrize("expression,expected", [
        (Lower(column="email"), 'LOWER("email")'),
        (Upper(column="code"), 'UPPER("code")'),
        (Gist(column="location"), 'USING GIST ("location")'),
        (Gin(column="tags"), 'USING GIN ("tags")'),
        (Btree(column="created_at"), 'USING BTREE ("created_at")'),
        (Hash(column="token"), 'USING HASH ("token")'),
    ])
    def test_single_column(self, expression, expected):
        assert expression.expression() == expected
        assert expression.column_name() == expression.column

    def test_concat(self):
        expr = Concat(columns=["first_name", "last_name"])
        assert expr.expression() == 'CONCAT("first_name", "last_name")'
        assert expr.column_name() == "first_name_last_name"

    def test_concat_requires_columns(self):
        with pytest.raises(ValidationError):
            Concat(columns=[])

    def test_to_tsvector(self):
        expr = ToTsVector(config="english", column="body")
        assert expr.expression() == 'to_tsvector("english", "body")'
        assert expr.column_name() == "body"

    def test_empty_column_rejected(self):
        with pytest.raises(ValidationError):
            Lower(column="")

    def test_identifier_escaping(self):
        assert Lower(column='we"ird').expression() == 'LOWER("we""ird")'


class TestExpressionUnion:
    def test_loads_by_kind(self):
        adapter = TypeAdapter(IndexExpression)
        assert adapter.validate_python({"kind": "lower", "column": "email"}) == Lower(column="email")
        assert isinstance(
            adapter.validate_python({"kind": "concat", "columns": ["a", "b"]}),
            Concat,
        )

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            TypeAdapter(IndexExpression).validate_python({"kind": "reverse", "column": "x"})


# ============================================================================
# INDEX
# ============================================================================

class TestIndexSql:
    def test_derived_name(self):
        index = Index(columns=["col1", "col2"])
        assert index.sql("table") == (
            'CREATE INDEX IF NOT EXISTS "table_col1_col2_idx" ON "table" ("col1", "col2");'
        )

    def test_unique(self):
        index = Index(columns=["email"], unique=True)
        assert index.sql("users") == (
            'CREATE UNIQUE INDEX IF NOT EXISTS "users_email_idx" ON "users" ("email");'
        )

    def test_explicit_name_with_expression(self):
        index = Index(
            name="idx_unique_username_email",
            columns=["email"],
            expressions=[Lower(column="username")],
            unique=True,
        )
        assert index.sql("users") == (
            'CREATE UNIQUE INDEX IF NOT EXISTS "idx_unique_username_email" '
            'ON "users" ("email", LOWER("username"));'
        )

    def test_columns_precede_expressions_in_name(self):
        index = Index(
            columns=["organization_id"],
            expressions=[Lower(column="code")],
            unique=True,
        )
        assert index.sql("equipment_types") == (
            'CREATE UNIQUE INDEX IF NOT EXISTS "equipment_types_organization_id_code_idx" '
            'ON "equipment_types" ("organization_id", LOWER("code"));'
        )

    def test_expression_only(self):
        index = Index(expressions=[Concat(columns=["first_name", "last_name"])])
        assert index.sql("people") == (
            'CREATE INDEX IF NOT EXISTS "people_first_name_last_name_idx" '
            'ON "people" (CONCAT("first_name", "last_name"));'
        )

    def test_gist_inside_parentheses(self):
        index = Index(expressions=[Gist(column="location")])
        assert index.sql("sites") == (
            'CREATE INDEX IF NOT EXISTS "sites_location_idx" ON "sites" (USING GIST ("location"));'
        )

    def test_empty_index_fails(self):
        with pytest.raises(IndexValidationError, match="at least one column or expression"):
            Index().sql("users")

    def test_empty_index_error_carries_name(self):
        with pytest.raises(IndexValidationError) as exc:
            Index(name="idx_nothing").validate()
        assert exc.value.index_name == "idx_nothing"


class TestIndexPurity:
    def test_name_not_written_back(self):
        index = Index(columns=["email"])
        index.sql("users")
        assert index.name is None

    def test_repeated_calls_identical(self):
        index = Index(columns=["col1", "col2"])
        assert index.sql("table") == index.sql("table")

    def test_shared_between_tables(self):
        index = Index(columns=["email"])
        first = index.sql("users")
        second = index.sql("admins")
        assert '"users_email_idx"' in first
        assert '"admins_email_idx"' in second
        assert index.sql("users") == first

    def test_generate_name(self):
        assert Index(columns=["a", "b"]).generate_name("t") == "t_a_b_idx"
        assert Index(name="custom", columns=["a"]).generate_name("t") == "custom"

    def test_loads_from_dict(self):
        index = Index.model_validate({
            "columns": ["label"],
            "expressions": [{"kind": "upper", "column": "code"}],
        })
        assert index.name_parts() == ["label", "code"]
