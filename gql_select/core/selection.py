"""Field selection trees and their rendering into query documents.

A SelectionTree records which fields of a node type are requested, in
order, together with their arguments. Object fields own a nested tree
for the fields selected on the referenced type.

Example:
    address = SelectionTree().include_scalar("city").include_scalar("zip")
    tree = SelectionTree()
    tree.include_scalar("id")
    tree.include_object("address", address)
    tree.render()  # '{id,address{city,zip}}'
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .arguments import NO_ARGUMENTS, Argument, ArgumentEncoder, normalize_arguments
from .expansion import DEFAULT_MAX_DEPTH, include_all, include_all_scalars
from .formatting import Formatting

ArgumentsLike = Mapping[str, Any] | Sequence[Argument] | None


@dataclass
class FieldCriteria(ABC):
    """A selected field with its arguments."""
    field_name: str
    arguments: tuple[Argument, ...] = NO_ARGUMENTS
    alias: str | None = None

    @property
    def key(self) -> str:
        """Name under which the field is stored in its tree."""
        return self.alias or self.field_name

    @abstractmethod
    def render(
        self,
        formatting: Formatting,
        level: int,
        encoder: ArgumentEncoder,
        indent_size: int = 2,
    ) -> str:
        """Render the field, or an empty string if there is nothing to select."""

    def _head(self, formatting: Formatting, level: int, indent_size: int) -> str:
        name = f"{self.alias}:{self.field_name}" if self.alias else self.field_name
        return formatting.indentation(level, indent_size) + name

    def _argument_clause(self, formatting: Formatting, encoder: ArgumentEncoder) -> str:
        """Build the argument clause: (first: 10, after: "abc") """
        if not self.arguments:
            return ""
        sep = formatting.separator
        args = [
            f"{arg.name}:{sep}{encoder.encode(arg.value, formatting)}"
            for arg in self.arguments
        ]
        return f"({f',{sep}'.join(args)}){sep}"


@dataclass
class ScalarFieldCriteria(FieldCriteria):
    """A leaf field: scalars and enums."""

    def render(
        self,
        formatting: Formatting,
        level: int,
        encoder: ArgumentEncoder,
        indent_size: int = 2,
    ) -> str:
        return (
            self._head(formatting, level, indent_size)
            + self._argument_clause(formatting, encoder)
        )


@dataclass
class ObjectFieldCriteria(FieldCriteria):
    """A field referencing another node type, with its own selection."""
    selection: "SelectionTree" = field(default_factory=lambda: SelectionTree())

    def render(
        self,
        formatting: Formatting,
        level: int,
        encoder: ArgumentEncoder,
        indent_size: int = 2,
    ) -> str:
        # Nothing selected below this field, so there's nothing to ask for
        if not self.selection:
            return ""
        return (
            self._head(formatting, level, indent_size)
            + formatting.separator
            + self._argument_clause(formatting, encoder)
            + self.selection.render_level(formatting, level + 1, encoder, indent_size)
        )


class SelectionTree:
    """Ordered, unique collection of field criteria for one node type.

    Including a field under a key that's already present replaces the
    previous criteria in place: the field keeps its original position and
    the old arguments and nested selection are discarded.

    Subclasses for concrete node types set ``catalog`` to the type's
    field metadata so that ``include_all`` knows what to select.

    Not thread-safe; use one tree per request or guard it externally.
    """

    catalog: tuple = ()

    def __init__(self, catalog: Sequence | None = None):
        if catalog is not None:
            self.catalog = tuple(catalog)
        self._criteria: dict[str, FieldCriteria] = {}

    def include_scalar(
        self,
        name: str,
        arguments: ArgumentsLike = None,
        *,
        alias: str | None = None,
    ) -> "SelectionTree":
        """Select a leaf field."""
        return self._include(ScalarFieldCriteria(
            field_name=name,
            arguments=normalize_arguments(arguments),
            alias=alias,
        ))

    def include_object(
        self,
        name: str,
        selection: "SelectionTree",
        arguments: ArgumentsLike = None,
        *,
        alias: str | None = None,
    ) -> "SelectionTree":
        """Select an object field; the tree takes ownership of ``selection``."""
        return self._include(ObjectFieldCriteria(
            field_name=name,
            arguments=normalize_arguments(arguments),
            alias=alias,
            selection=selection,
        ))

    def _include(self, criteria: FieldCriteria) -> "SelectionTree":
        self._criteria[criteria.key] = criteria
        return self

    def exclude(self, name: str) -> "SelectionTree":
        """Remove the field stored under ``name`` (alias or field name), if any."""
        self._criteria.pop(name, None)
        return self

    def clear(self) -> "SelectionTree":
        """Remove all selected fields."""
        self._criteria.clear()
        return self

    def include_all(self, max_depth: int | None = DEFAULT_MAX_DEPTH) -> "SelectionTree":
        """Select every field of this node type, expanding nested types."""
        return include_all(self, max_depth=max_depth)

    def include_all_scalars(self) -> "SelectionTree":
        """Select every leaf field of this node type."""
        return include_all_scalars(self)

    def field_names(self) -> list[str]:
        """Keys of the selected fields in render order."""
        return list(self._criteria)

    def __getitem__(self, name: str) -> FieldCriteria:
        return self._criteria[name]

    def __contains__(self, name: object) -> bool:
        return name in self._criteria

    def __iter__(self) -> Iterator[FieldCriteria]:
        return iter(self._criteria.values())

    def __len__(self) -> int:
        return len(self._criteria)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.render()})"

    def render(
        self,
        formatting: Formatting = Formatting.COMPACT,
        *,
        encoder: ArgumentEncoder | None = None,
        indent_size: int = 2,
    ) -> str:
        """Render the selection as a query document, including the root braces.

        Args:
            formatting: Compact single-line or indented multi-line output
            encoder: Argument encoder (defaults to one without wire name overrides)
            indent_size: Spaces per nesting level in indented output

        Returns:
            The document text, e.g. ``{id,address{city,zip}}``
        """
        return self.render_level(
            formatting, 1, encoder or ArgumentEncoder(), indent_size
        )

    def render_level(
        self,
        formatting: Formatting,
        level: int,
        encoder: ArgumentEncoder,
        indent_size: int = 2,
    ) -> str:
        """Render this tree as the selection set of a field at ``level - 1``."""
        rendered = [
            criteria.render(formatting, level, encoder, indent_size)
            for criteria in self._criteria.values()
        ]

        if formatting is Formatting.COMPACT:
            return "{" + ",".join(text for text in rendered if text) + "}"

        # Empty object fields still produce their (blank) line here. Kept for
        # output compatibility with existing consumers of indented documents.
        lines = ["{\n"]
        for text in rendered:
            lines.append(f"{text}\n")
        lines.append(formatting.indentation(level - 1, indent_size) + "}")
        return "".join(lines)
