"""GraphQL schema parser using graphql-core.

Parses SDL files and produces an IRSchema.
"""

import logging
import os

from graphql import (
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    ScalarTypeDefinitionNode,
    TypeNode,
    UnionTypeDefinitionNode,
    parse,
)

from .ir import IREnum, IRField, IRSchema, IRType, IRUnion

logger = logging.getLogger(__name__)

SCHEMA_EXTENSIONS = (".graphql", ".graphqls")


class SchemaParser:
    """Parses GraphQL schema files into IR."""

    def __init__(self, schema_path: str | None = None):
        """Initialize a parser with a path to a schema file or directory."""
        self.schema_path = schema_path
        self.ir = IRSchema()
        self.current_file = ""

    def parse_all(self) -> IRSchema:
        """Parse all schema files and return the complete IR."""
        if self.schema_path is None:
            raise ValueError("No schema path given")

        for file_path in self._collect_schema_files():
            self.current_file = os.path.basename(file_path)
            logger.debug("Parsing %s", file_path)
            with open(file_path) as f:
                self.parse_string(f.read())
        return self.ir

    def parse_string(self, content: str) -> IRSchema:
        """Parse SDL text into the IR accumulated so far."""
        try:
            document = parse(content)
        except Exception:
            logger.error("Error parsing %s", self.current_file or "<string>")
            raise
        for definition in document.definitions:
            self._process_definition(definition)
        return self.ir

    def _collect_schema_files(self) -> list[str]:
        """Collect all schema files from path."""
        files = []
        if os.path.isfile(self.schema_path):
            if self.schema_path.endswith(SCHEMA_EXTENSIONS):
                files.append(self.schema_path)
        else:
            for root, _, filenames in os.walk(self.schema_path):
                for filename in filenames:
                    if filename.endswith(SCHEMA_EXTENSIONS):
                        files.append(os.path.join(root, filename))
        return sorted(files)

    def _process_definition(self, definition):
        if isinstance(definition, ScalarTypeDefinitionNode):
            self.ir.scalars.add(definition.name.value)
        elif isinstance(definition, (EnumTypeDefinitionNode, EnumTypeExtensionNode)):
            self._process_enum(definition)
        elif isinstance(definition, (ObjectTypeDefinitionNode, InterfaceTypeDefinitionNode)):
            self._process_type(definition)
        elif isinstance(definition, (ObjectTypeExtensionNode, InterfaceTypeExtensionNode)):
            self._merge_extension_fields(definition)
        elif isinstance(definition, UnionTypeDefinitionNode):
            name = definition.name.value
            self.ir.unions[name] = IRUnion(
                name=name,
                members=[t.name.value for t in definition.types],
                description=_description(definition),
            )

    def _process_enum(self, node: EnumTypeDefinitionNode | EnumTypeExtensionNode):
        name = node.name.value
        values = [v.name.value for v in node.values or ()]
        existing = self.ir.enums.get(name)
        if existing:
            existing.values.extend(v for v in values if v not in existing.values)
        else:
            self.ir.enums[name] = IREnum(
                name=name,
                values=values,
                description=_description(node),
            )

    def _process_type(self, node: ObjectTypeDefinitionNode | InterfaceTypeDefinitionNode):
        name = node.name.value
        fields = self._process_fields(node.fields)
        interfaces = [i.name.value for i in node.interfaces or ()]
        is_interface = isinstance(node, InterfaceTypeDefinitionNode)

        # Check if the type already exists (from earlier extension processing)
        existing = self.ir.types.get(name)
        if existing:
            # Base fields go first, extension fields keep their relative order
            existing_names = {f.name for f in existing.fields}
            existing.fields = [f for f in fields if f.name not in existing_names] + existing.fields
            existing.interfaces = interfaces
            existing.is_interface = is_interface
            if node.description:
                existing.description = node.description.value
        else:
            self.ir.types[name] = IRType(
                name=name,
                fields=fields,
                interfaces=interfaces,
                description=_description(node),
                is_interface=is_interface,
            )

    def _merge_extension_fields(self, node: ObjectTypeExtensionNode | InterfaceTypeExtensionNode):
        """Merge `extend type` fields into the existing type definition."""
        name = node.name.value
        extension_fields = self._process_fields(node.fields)

        existing = self.ir.types.get(name)
        if existing:
            existing_names = {f.name for f in existing.fields}
            for field in extension_fields:
                if field.name not in existing_names:
                    existing.fields.append(field)
                    existing_names.add(field.name)
        else:
            # Type doesn't exist yet, create it
            self.ir.types[name] = IRType(
                name=name,
                fields=extension_fields,
                is_interface=isinstance(node, InterfaceTypeExtensionNode),
            )

    def _process_fields(self, field_nodes) -> list[IRField]:
        """Process field definitions into an IRField list."""
        fields = []
        for node in field_nodes or ():
            type_name, is_list, is_optional = self._get_type_info(node.type)
            fields.append(
                IRField(
                    name=node.name.value,
                    type_name=type_name,
                    is_list=is_list,
                    is_optional=is_optional,
                    description=_description(node),
                )
            )
        return fields

    @staticmethod
    def _get_type_info(type_node: TypeNode) -> tuple[str, bool, bool]:
        """Extract the type name, is_list, and is_optional from a type node."""
        is_optional = True
        is_list = False

        # NonNull wrapper means not optional
        if isinstance(type_node, NonNullTypeNode):
            is_optional = False
            type_node = type_node.type

        # Unwrap lists, including nested [[Type!]!]
        while isinstance(type_node, (ListTypeNode, NonNullTypeNode)):
            if isinstance(type_node, ListTypeNode):
                is_list = True
            type_node = type_node.type

        if not isinstance(type_node, NamedTypeNode):
            raise ValueError(f"Expected NamedTypeNode, got {type(type_node).__name__}")
        return type_node.name.value, is_list, is_optional


def _description(node) -> str | None:
    return node.description.value if getattr(node, "description", None) else None
