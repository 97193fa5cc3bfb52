"""Intermediate Representation (IR) of the selectable part of a GraphQL schema.

Only what select-all expansion needs is kept: output types, their fields,
and which type names are leaves (scalars and enums).
"""

from dataclasses import dataclass, field

# Scalars every GraphQL schema has without declaring them
BUILTIN_SCALARS = frozenset({"String", "Int", "Float", "Boolean", "ID"})


@dataclass
class IRField:
    """Represents a field in a GraphQL object type or interface."""
    name: str
    type_name: str
    is_list: bool = False
    is_optional: bool = True  # True if nullable (no ! in GraphQL)
    description: str | None = None


@dataclass
class IREnum:
    """Represents a GraphQL enum type."""
    name: str
    values: list[str]
    description: str | None = None


@dataclass
class IRType:
    """Represents a GraphQL object type or interface."""
    name: str
    fields: list[IRField]
    interfaces: list[str] = field(default_factory=list)
    description: str | None = None
    is_interface: bool = False


@dataclass
class IRUnion:
    """Represents a GraphQL union type."""
    name: str
    members: list[str]
    description: str | None = None


@dataclass
class IRSchema:
    """Complete intermediate representation of a GraphQL schema."""
    scalars: set[str] = field(default_factory=set)
    enums: dict[str, IREnum] = field(default_factory=dict)
    types: dict[str, IRType] = field(default_factory=dict)
    unions: dict[str, IRUnion] = field(default_factory=dict)

    def get_type_by_name(self, name: str) -> IRType | None:
        """Look up an object type or interface by name."""
        return self.types.get(name)

    def is_leaf(self, type_name: str) -> bool:
        """Check if a type is a scalar or enum (no subfields)."""
        return (
            type_name in BUILTIN_SCALARS
            or type_name in self.scalars
            or type_name in self.enums
        )
