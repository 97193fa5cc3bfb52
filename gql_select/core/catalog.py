"""Field catalogs and builder factories derived from a parsed schema.

Example:
    schema = SchemaParser("./schema").parse_all()
    registry = CatalogRegistry(schema)
    tree = registry.new_builder("Query").include_all()
"""

from functools import partial

from .errors import UnknownTypeError
from .expansion import FieldMetadata
from .ir import IRSchema
from .selection import SelectionTree


class CatalogRegistry:
    """Builds and caches a field catalog per schema type.

    Leaf fields (scalars and enums) become simple entries. Every other
    field is complex and carries a factory that builds an empty tree for
    the referenced type, so nested catalogs are only computed when
    expansion actually reaches them.
    """

    def __init__(self, schema: IRSchema):
        self.schema = schema
        self._catalogs: dict[str, tuple[FieldMetadata, ...]] = {}

    def catalog(self, type_name: str) -> tuple[FieldMetadata, ...]:
        """Return the field catalog of an object type, interface or union.

        Unions have an empty catalog: their members can only be selected
        through fragments.

        Raises:
            UnknownTypeError: If the schema doesn't define the type
        """
        if type_name not in self._catalogs:
            self._catalogs[type_name] = self._build_catalog(type_name)
        return self._catalogs[type_name]

    def _build_catalog(self, type_name: str) -> tuple[FieldMetadata, ...]:
        if type_name in self.schema.unions:
            return ()
        type_def = self.schema.get_type_by_name(type_name)
        if type_def is None:
            raise UnknownTypeError(type_name)

        entries = []
        for ir_field in type_def.fields:
            if self.schema.is_leaf(ir_field.type_name):
                entries.append(FieldMetadata(ir_field.name))
            else:
                entries.append(FieldMetadata(
                    ir_field.name,
                    is_complex=True,
                    builder_factory=partial(self.new_builder, ir_field.type_name),
                ))
        return tuple(entries)

    def new_builder(self, type_name: str) -> SelectionTree:
        """Create an empty selection tree for a type, carrying its catalog."""
        return SelectionTree(catalog=self.catalog(type_name))

    def has_type(self, type_name: str) -> bool:
        """Check if a type can be selected from."""
        return (
            type_name in self.schema.types
            or type_name in self.schema.unions
        )
