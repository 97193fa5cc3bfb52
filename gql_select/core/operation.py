"""Operation builder for GraphQL documents.

Wraps a selection tree into a named query/mutation/subscription, declaring
every variable referenced by the tree's arguments.
"""

from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel

from .arguments import ArgumentEncoder, Variable, model_items
from .errors import SelectionError
from .formatting import Formatting
from .selection import ObjectFieldCriteria, SelectionTree

OPERATION_TYPES = ("query", "mutation", "subscription")


def collect_variables(tree: SelectionTree) -> list[Variable]:
    """Collect the variables used by a tree, in first-use order.

    Raises:
        SelectionError: If one variable name is used with two different types
    """
    seen: dict[str, Variable] = {}
    for variable in _iter_variables(tree):
        previous = seen.setdefault(variable.name, variable)
        if previous != variable:
            raise SelectionError(
                f"Variable ${variable.name} declared as both "
                f"{previous.type_string} and {variable.type_string}"
            )
    return list(seen.values())


def _iter_variables(tree: SelectionTree) -> Iterator[Variable]:
    for criteria in tree:
        for arg in criteria.arguments:
            yield from _variables_in(arg.value)
        if isinstance(criteria, ObjectFieldCriteria):
            yield from _iter_variables(criteria.selection)


def _variables_in(value: Any) -> Iterator[Variable]:
    if isinstance(value, Variable):
        yield value
    elif isinstance(value, BaseModel):
        yield from _variables_in(model_items(value))
    elif isinstance(value, Mapping):
        for item in value.values():
            yield from _variables_in(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _variables_in(item)


def build_operation(
    tree: SelectionTree,
    operation_type: str = "query",
    name: str | None = None,
    formatting: Formatting = Formatting.COMPACT,
    *,
    encoder: ArgumentEncoder | None = None,
    indent_size: int = 2,
) -> str:
    """Build a complete GraphQL operation string.

    Args:
        tree: The root selection
        operation_type: 'query', 'mutation' or 'subscription'
        name: Optional operation name
        formatting: Compact or indented output

    Returns:
        e.g. ``query Node($id:ID!){node(id:$id){name}}``
    """
    if operation_type not in OPERATION_TYPES:
        raise ValueError(f"Unknown operation type: {operation_type}")

    sep = formatting.separator
    header = operation_type
    if name:
        header = f"{header} {name}"

    variables = collect_variables(tree)
    if variables:
        decls = [f"${v.name}:{sep}{v.type_string}" for v in variables]
        header = f"{header}({f',{sep}'.join(decls)})"

    body = tree.render(formatting, encoder=encoder, indent_size=indent_size)
    return f"{header}{sep}{body}"
