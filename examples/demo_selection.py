#!/usr/bin/env python3
"""Demonstration of building GraphQL selection documents.

This script shows how to:
1. Declare builders with field catalogs
2. Select all fields, or pick fields with arguments
3. Render compact and indented documents and wrap them in an operation
"""

from enum import Enum

from gql_select.core import (
    ArgumentEncoder,
    FieldMetadata,
    Formatting,
    SelectionTree,
    SchemaParser,
    CatalogRegistry,
    Variable,
    WireNameRegistry,
    build_operation,
)


class Resolution(Enum):
    Low = 1
    High = 2


class AddressSelection(SelectionTree):
    catalog = (FieldMetadata("city"), FieldMetadata("zip"))


class PersonSelection(SelectionTree):
    catalog = (
        FieldMetadata("id"),
        FieldMetadata("name"),
        FieldMetadata("address", is_complex=True, builder_factory=AddressSelection),
    )


SDL = """
type Image { url: String width: Int }
type Album { id: ID! title: String cover: Image }
type Query { album(id: ID!): Album }
"""


def main():
    print("=== Selection Demo ===\n")

    print("1. Select all fields of Person")
    person = PersonSelection().include_all()
    print(f"   {person.render()}")
    print(person.render(Formatting.INDENTED))

    print("\n2. Pick fields with arguments")
    wire_names = WireNameRegistry()
    wire_names.register(Resolution, {Resolution.Low: "low", Resolution.High: "high"})
    encoder = ArgumentEncoder(wire_names=wire_names)

    tree = SelectionTree()
    tree.include_scalar("avatar", {"resolution": Resolution.High})
    tree.include_object(
        "friends",
        PersonSelection().include_all_scalars(),
        {"first": 10, "after": None},
    )
    print(f"   {tree.render(encoder=encoder)}")

    print("\n3. Operation with variables, from a parsed schema")
    registry = CatalogRegistry(SchemaParser().parse_string(SDL))
    query = SelectionTree()
    query.include_object(
        "album",
        registry.new_builder("Album").include_all(),
        {"id": Variable("id", "ID", is_optional=False)},
    )
    print(build_operation(query, "query", "Album", Formatting.INDENTED))


if __name__ == "__main__":
    main()
