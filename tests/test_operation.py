"""Tests for building complete operations."""

from typing import Any

import pytest
from pydantic import BaseModel

from gql_select.core.arguments import Variable
from gql_select.core.errors import SelectionError
from gql_select.core.formatting import Formatting
from gql_select.core.operation import build_operation, collect_variables
from gql_select.core.selection import SelectionTree

NODE_ID = Variable("id", "ID", is_optional=False)


class UserFilter(BaseModel):
    id: Any = None
    name: str | None = None


@pytest.fixture
def node_tree():
    tree = SelectionTree()
    tree.include_object("node", SelectionTree().include_scalar("name"), {"id": NODE_ID})
    return tree


class TestVariable:
    """Tests for Variable type strings."""

    def test_optional(self):
        assert Variable("q", "String").type_string == "String"

    def test_required(self):
        assert NODE_ID.type_string == "ID!"

    def test_list(self):
        assert Variable("ids", "ID", is_list=True).type_string == "[ID]"
        assert Variable("ids", "ID", is_list=True, is_optional=False).type_string == "[ID]!"


class TestCollectVariables:
    """Tests for collect_variables."""

    def test_no_variables(self):
        assert collect_variables(SelectionTree().include_scalar("id")) == []

    def test_nested_and_ordered(self):
        first = Variable("first", "Int")
        inner = SelectionTree().include_scalar("items", {"first": first})
        tree = SelectionTree()
        tree.include_object("node", inner, {"id": NODE_ID})
        assert collect_variables(tree) == [NODE_ID, first]

    def test_inside_lists_and_objects(self):
        tree = SelectionTree()
        tree.include_scalar("search", {
            "filter": {"status": Variable("status", "Status")},
            "ids": [NODE_ID],
        })
        assert [v.name for v in collect_variables(tree)] == ["status", "id"]

    def test_inside_input_models(self):
        tree = SelectionTree()
        tree.include_scalar("users", {"filter": UserFilter(id=NODE_ID)})
        assert collect_variables(tree) == [NODE_ID]

    def test_duplicates_declared_once(self):
        tree = SelectionTree()
        tree.include_scalar("a", {"id": NODE_ID})
        tree.include_scalar("b", {"id": NODE_ID})
        assert collect_variables(tree) == [NODE_ID]

    def test_conflicting_types(self):
        tree = SelectionTree()
        tree.include_scalar("a", {"id": NODE_ID})
        tree.include_scalar("b", {"id": Variable("id", "String")})
        with pytest.raises(SelectionError, match=r"\$id"):
            collect_variables(tree)


class TestBuildOperation:
    """Tests for build_operation."""

    def test_compact(self, node_tree):
        result = build_operation(node_tree, name="Node")
        assert result == "query Node($id:ID!){node(id:$id){name}}"

    def test_indented(self, node_tree):
        result = build_operation(node_tree, name="Node", formatting=Formatting.INDENTED)
        assert result == "query Node($id: ID!) {\n  node (id: $id) {\n    name\n  }\n}"

    def test_anonymous(self):
        tree = SelectionTree().include_scalar("id")
        assert build_operation(tree) == "query{id}"
        assert build_operation(tree, formatting=Formatting.INDENTED) == "query {\n  id\n}"

    def test_mutation(self):
        tree = SelectionTree().include_scalar("deleteUser", {"id": "42"})
        result = build_operation(tree, "mutation", "DeleteUser")
        assert result == 'mutation DeleteUser{deleteUser(id:"42")}'

    def test_multiple_variables(self):
        tree = SelectionTree().include_scalar(
            "items", {"first": Variable("first", "Int"), "after": Variable("after", "String")}
        )
        result = build_operation(tree, name="Items", formatting=Formatting.INDENTED)
        assert result.startswith("query Items($first: Int, $after: String) {")

    def test_variable_in_input_model(self):
        tree = SelectionTree().include_scalar("users", {"filter": UserFilter(id=NODE_ID)})
        result = build_operation(tree, name="Users")
        assert result == "query Users($id:ID!){users(filter:{id:$id})}"

    def test_unknown_operation_type(self, node_tree):
        with pytest.raises(ValueError):
            build_operation(node_tree, "fetch")
