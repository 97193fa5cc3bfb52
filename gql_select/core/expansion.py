"""Select-all expansion driven by field catalogs.

A field catalog is the ordered list of fields a node type defines, as
provided by the schema layer (generated builders or CatalogRegistry).
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import BuilderFactoryError, ExpansionDepthError

if TYPE_CHECKING:
    from .selection import SelectionTree

logger = logging.getLogger(__name__)

# Nested levels below the expanded tree; guards against self-referential types
DEFAULT_MAX_DEPTH = 10


@dataclass(frozen=True)
class FieldMetadata:
    """Describes one field of a node type."""
    name: str
    is_complex: bool = False
    # Builds an empty tree (carrying its own catalog) for the field's type
    builder_factory: Callable[[], "SelectionTree"] | None = None


def include_all(
    tree: "SelectionTree",
    catalog: Sequence[FieldMetadata] | None = None,
    *,
    max_depth: int | None = DEFAULT_MAX_DEPTH,
) -> "SelectionTree":
    """Select every field in the catalog, fully expanding object fields.

    Each object field gets a new tree from its builder factory, which is
    expanded against its own catalog before being attached.

    Args:
        tree: The tree to populate
        catalog: Fields to select; defaults to ``tree.catalog``
        max_depth: Maximum nesting below ``tree``, or None for no limit

    Raises:
        BuilderFactoryError: If an object field has no builder factory
        ExpansionDepthError: If expansion nests deeper than ``max_depth``
    """
    _expand(tree, tree.catalog if catalog is None else catalog, [], max_depth)
    return tree


def _expand(
    tree: "SelectionTree",
    catalog: Sequence[FieldMetadata],
    path: list[str],
    max_depth: int | None,
):
    for entry in catalog:
        if not entry.is_complex:
            tree.include_scalar(entry.name)
            continue

        field_path = path + [entry.name]
        if max_depth is not None and len(field_path) > max_depth:
            raise ExpansionDepthError(field_path, max_depth)
        if entry.builder_factory is None:
            raise BuilderFactoryError(entry.name)

        nested = entry.builder_factory()
        logger.debug("Expanding %s", ".".join(field_path))
        _expand(nested, nested.catalog, field_path, max_depth)
        tree.include_object(entry.name, nested)


def include_all_scalars(
    tree: "SelectionTree",
    catalog: Sequence[FieldMetadata] | None = None,
) -> "SelectionTree":
    """Select every leaf field in the catalog, skipping object fields."""
    for entry in tree.catalog if catalog is None else catalog:
        if not entry.is_complex:
            tree.include_scalar(entry.name)
    return tree
