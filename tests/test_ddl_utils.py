# ============================================================================
# DDL UTILITY TESTS
# ============================================================================
# STATUS: Tests - Quoting and statement builders
# PURPOSE: Verify identifier/literal quoting and the shared builders
# CREATED: 18 OCT 2026
# ============================================================================
"""
DDL Utility Tests

Run with:
    pytest tests/test_ddl_utils.py -v
"""

import pytest

from pgschema.contracts import Annotation, OnDeleteOption, OnUpdateOption
from pgschema.schema.ddl_utils import (
    ColumnBuilder,
    CommentBuilder,
    ForeignKeyBuilder,
    IndexBuilder,
    join_columns,
    quote_identifier,
    quote_literal,
    to_camel_case,
    to_snake_case,
)


class TestQuoting:
    def test_identifier(self):
        assert quote_identifier("users") == '"users"'

    def test_identifier_with_quote(self):
        assert quote_identifier('a"b') == '"a""b"'

    def test_literal(self):
        assert quote_literal("Email address") == "'Email address'"

    def test_literal_with_quote(self):
        assert quote_literal("O'Brien") == "'O''Brien'"

    def test_literal_with_backslash(self):
        assert quote_literal(r"C:\tmp") == r"'C:\tmp'"

    def test_join_columns(self):
        assert join_columns(["a", "b", "c"]) == '"a", "b", "c"'


class TestNaming:
    @pytest.mark.parametrize("value,expected", [
        ("UserRole", "user_role"),
        ("User", "user"),
        ("already_snake", "already_snake"),
    ])
    def test_to_snake_case(self, value, expected):
        assert to_snake_case(value) == expected

    @pytest.mark.parametrize("value,expected", [
        ("user_roles", "UserRoles"),
        ("users", "Users"),
        ("a__b", "AB"),
    ])
    def test_to_camel_case(self, value, expected):
        assert to_camel_case(value) == expected


class TestColumnBuilder:
    def test_minimal(self):
        assert ColumnBuilder.definition("n", "INTEGER") == '"n" INTEGER'

    def test_full_order(self):
        from psycopg import sql

        result = ColumnBuilder.definition(
            "id",
            "uuid",
            not_null=True,
            primary_key=True,
            unique=True,
            default=sql.SQL("gen_random_uuid()"),
            constraints=["CHECK (true)"],
        )
        assert result == '"id" uuid NOT NULL PRIMARY KEY UNIQUE DEFAULT gen_random_uuid() CHECK (true)'


class TestIndexBuilder:
    def test_generate_name(self):
        assert IndexBuilder.generate_name("users", ["email"]) == "users_email_idx"
        assert IndexBuilder.generate_name("users", ["a", "b"], "index") == "users_a_b_index"

    def test_create(self):
        assert IndexBuilder.create("users_email_idx", "users", ["email"]) == (
            'CREATE INDEX IF NOT EXISTS "users_email_idx" ON "users" ("email");'
        )


class TestCommentBuilder:
    def test_column(self):
        assert CommentBuilder.column("users", "bio", "About") == (
            "COMMENT ON COLUMN \"users\".\"bio\" IS 'About';"
        )


class TestForeignKeyBuilder:
    def test_with_annotation(self):
        annotation = Annotation(on_delete=OnDeleteOption.RESTRICT, on_update=OnUpdateOption.NO_ACTION)
        assert ForeignKeyBuilder.constraint("a_id", "a", "id", annotation) == (
            'FOREIGN KEY ("a_id") REFERENCES "a"("id") ON DELETE RESTRICT ON UPDATE NO ACTION'
        )

    def test_annotation_str(self):
        annotation = Annotation(on_update=OnUpdateOption.CASCADE)
        assert str(annotation) == "ON UPDATE CASCADE"
        assert str(Annotation()) == ""
