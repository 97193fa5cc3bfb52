"""Argument values and their GraphQL literal encoding."""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel

from .errors import UnsupportedArgumentError
from .formatting import Formatting
from .scalars import ScalarRegistry


@dataclass(frozen=True)
class Argument:
    """A named argument attached to a selected field."""
    name: str
    value: Any


@dataclass(frozen=True)
class Variable:
    """A reference to an operation variable, rendered as ``$name``.

    The type information is only used to declare the variable in the
    operation header, e.g. ``query Node($id: ID!)``.
    """
    name: str
    type_name: str
    is_list: bool = False
    is_optional: bool = True

    @property
    def type_string(self) -> str:
        """GraphQL type reference: ID, ID!, [ID], [ID]!"""
        type_str = self.type_name
        if self.is_list:
            type_str = f"[{type_str}]"
        if not self.is_optional:
            type_str = f"{type_str}!"
        return type_str


# Shared by every field selected without arguments; never mutated.
NO_ARGUMENTS: tuple[Argument, ...] = ()


def model_items(model: BaseModel) -> dict[str, Any]:
    """Field values of an input model keyed by their serialization names.

    Values are taken as-is rather than dumped, so nested Variables, enums
    and models keep their types.
    """
    items = {}
    for name, info in type(model).model_fields.items():
        key = info.serialization_alias or info.alias or name
        items[key] = getattr(model, name)
    return items


def normalize_arguments(
    arguments: Mapping[str, Any] | Sequence[Argument] | None,
) -> tuple[Argument, ...]:
    """Turn caller-supplied arguments into an ordered tuple, dropping nulls."""
    if not arguments:
        return NO_ARGUMENTS
    if isinstance(arguments, Mapping):
        items = [Argument(name, value) for name, value in arguments.items()]
    else:
        items = list(arguments)
    result = tuple(arg for arg in items if arg.value is not None)
    return result or NO_ARGUMENTS


class WireNameRegistry:
    """Explicit enum member -> wire name tables.

    Schema layers register one table per enum whose GraphQL value names
    differ from the Python member names. Members without an entry are
    written using their plain member name.

    Example:
        registry = WireNameRegistry()
        registry.register(Resolution, {Resolution.High: "high"})
        registry.wire_name(Resolution.High)  # "high"
    """

    def __init__(self):
        self._tables: dict[type[Enum], dict[Enum, str]] = {}

    def register(self, enum_cls: type[Enum], table: Mapping[Enum, str]):
        """Register (or extend) the wire name table for an enum class."""
        for member in table:
            if not isinstance(member, enum_cls):
                raise ValueError(f"{member!r} is not a member of {enum_cls.__name__}")
        self._tables.setdefault(enum_cls, {}).update(table)

    def wire_name(self, member: Enum) -> str:
        """Return the wire name for a member, defaulting to its name."""
        table = self._tables.get(type(member))
        if table and member in table:
            return table[member]
        return member.name


class ArgumentEncoder:
    """Converts argument values into GraphQL literal text.

    Strings are quoted without escaping, enums use their registered wire
    names, numbers and booleans use locale-independent literals. Lists,
    mappings and pydantic models are encoded recursively as list and input
    object literals.

    Scalar handlers are consulted before the built-in string and number
    encodings, so a handler registered for a ``str`` or ``int`` subclass
    takes effect. Enum members always use their wire names.
    """

    def __init__(
        self,
        wire_names: WireNameRegistry | None = None,
        scalars: ScalarRegistry | None = None,
    ):
        self.wire_names = wire_names or WireNameRegistry()
        self.scalars = scalars or ScalarRegistry()

    def encode(self, value: Any, formatting: Formatting = Formatting.COMPACT) -> str:
        """Encode a single value.

        Raises:
            UnsupportedArgumentError: If the value has no literal form
        """
        if value is None:
            return "null"
        if isinstance(value, Variable):
            return f"${value.name}"
        # Enum first: str and int mixin enums must not be encoded as plain values
        if isinstance(value, Enum):
            return self.wire_names.wire_name(value)

        handler = self.scalars.get(type(value))
        if handler is not None:
            return handler.to_literal(value)

        if isinstance(value, str):
            return f'"{value}"'
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            if not math.isfinite(value):
                raise UnsupportedArgumentError(value)
            return repr(value)

        if isinstance(value, BaseModel):
            return self._encode_object(model_items(value), formatting)
        if isinstance(value, Mapping):
            return self._encode_object(value, formatting)
        if isinstance(value, (list, tuple)):
            items = [self.encode(item, formatting) for item in value]
            return f"[{f',{formatting.separator}'.join(items)}]"

        raise UnsupportedArgumentError(value)

    def _encode_object(self, value: Mapping, formatting: Formatting) -> str:
        """Encode an input object literal: {key:value,...}"""
        sep = formatting.separator
        fields = [
            f"{key}:{sep}{self.encode(item, formatting)}"
            for key, item in value.items()
            if item is not None
        ]
        return f"{{{f',{sep}'.join(fields)}}}"
