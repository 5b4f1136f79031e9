"""Tests for argument-to-variable binding."""

import pytest

from gql_querygen.core.binder import (
    args_to_variable_refs,
    bind_arguments,
    variables_to_type_decls,
)
from gql_querygen.core.ir import IRArgument, IRField


def make_field(name, *args):
    return IRField(
        name=name,
        type_signature="String",
        arguments=[IRArgument(name=a, type_signature=t) for a, t in args],
    )


@pytest.fixture
def id_field():
    return make_field("user", ("id", "ID!"))


class TestBindArguments:
    """Tests for bind_arguments."""

    def test_unused_name_is_kept(self, id_field):
        counts = {}
        table = bind_arguments(id_field, counts, {})
        assert list(table) == ["id"]
        assert table["id"] is id_field.arguments[0]
        assert counts == {}

    def test_first_collision_gets_suffix_one(self, id_field):
        existing = {"id": IRArgument(name="id", type_signature="Int")}
        counts = {}
        table = bind_arguments(id_field, counts, existing)
        assert list(table) == ["id1"]
        assert counts == {"id": 1}

    def test_counter_keeps_increasing(self, id_field):
        counts = {}
        all_args = {}
        names = []
        for _ in range(3):
            table = bind_arguments(id_field, counts, all_args)
            all_args.update(table)
            names.extend(table)
        assert names == ["id", "id1", "id2"]
        assert counts == {"id": 2}

    def test_skips_names_already_declared_literally(self, id_field):
        # A schema argument literally called "id1" is already declared
        existing = {
            "id": IRArgument(name="id", type_signature="ID"),
            "id1": IRArgument(name="id1", type_signature="ID"),
        }
        counts = {}
        table = bind_arguments(id_field, counts, existing)
        assert list(table) == ["id2"]
        assert counts == {"id": 2}

    def test_literal_name_on_same_field_keeps_both(self):
        field = make_field("find", ("id", "ID"), ("id1", "Int"))
        existing = {"id": IRArgument(name="id", type_signature="ID")}
        table = bind_arguments(field, {}, existing)
        assert len(table) == 2
        assert table["id1"] is field.arguments[0]
        assert table["id11"] is field.arguments[1]
        assert args_to_variable_refs(table) == "id: $id1, id1: $id11"

    def test_literal_name_declared_first_on_same_field(self):
        field = make_field("find", ("id1", "Int"), ("id", "ID"))
        existing = {"id": IRArgument(name="id", type_signature="ID")}
        table = bind_arguments(field, {}, existing)
        assert list(table) == ["id1", "id2"]
        assert table["id2"] is field.arguments[1]

    def test_preserves_declaration_order(self):
        field = make_field("search", ("term", "String!"), ("limit", "Int"), ("id", "ID"))
        table = bind_arguments(field, {}, {"limit": IRArgument("limit", "Int")})
        assert list(table) == ["term", "limit1", "id"]

    def test_field_without_arguments(self):
        assert bind_arguments(make_field("ping"), {}, {}) == {}


class TestRendering:
    """Tests for the variable rendering helpers."""

    def test_args_to_variable_refs(self):
        table = {
            "id1": IRArgument(name="id", type_signature="ID!"),
            "lang": IRArgument(name="lang", type_signature="String"),
        }
        assert args_to_variable_refs(table) == "id: $id1, lang: $lang"

    def test_variables_to_type_decls(self):
        table = {
            "ids": IRArgument(name="ids", type_signature="[ID!]!"),
            "lang2": IRArgument(name="lang", type_signature="String"),
        }
        assert variables_to_type_decls(table) == "$ids: [ID!]!, $lang2: String"

    def test_empty_table(self):
        assert args_to_variable_refs({}) == ""
        assert variables_to_type_decls({}) == ""
