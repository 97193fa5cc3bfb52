"""Core modules for building GraphQL selection documents."""

from .arguments import (
    NO_ARGUMENTS,
    Argument,
    ArgumentEncoder,
    Variable,
    WireNameRegistry,
)
from .catalog import CatalogRegistry
from .errors import (
    BuilderFactoryError,
    ExpansionDepthError,
    SelectionError,
    UnknownTypeError,
    UnsupportedArgumentError,
)
from .expansion import (
    DEFAULT_MAX_DEPTH,
    FieldMetadata,
    include_all,
    include_all_scalars,
)
from .formatting import Formatting
from .ir import IREnum, IRField, IRSchema, IRType, IRUnion
from .operation import build_operation, collect_variables
from .parser import SchemaParser
from .scalars import (
    DateHandler,
    DateTimeHandler,
    DecimalHandler,
    LiteralHandler,
    ScalarRegistry,
    UUIDHandler,
)
from .selection import (
    FieldCriteria,
    ObjectFieldCriteria,
    ScalarFieldCriteria,
    SelectionTree,
)

__all__ = [
    # Selection
    "Formatting",
    "FieldCriteria",
    "ScalarFieldCriteria",
    "ObjectFieldCriteria",
    "SelectionTree",
    # Arguments
    "NO_ARGUMENTS",
    "Argument",
    "ArgumentEncoder",
    "Variable",
    "WireNameRegistry",
    # Scalars
    "LiteralHandler",
    "ScalarRegistry",
    "DateTimeHandler",
    "DateHandler",
    "UUIDHandler",
    "DecimalHandler",
    # Expansion
    "DEFAULT_MAX_DEPTH",
    "FieldMetadata",
    "include_all",
    "include_all_scalars",
    # Operations
    "build_operation",
    "collect_variables",
    # Schema
    "IREnum",
    "IRField",
    "IRSchema",
    "IRType",
    "IRUnion",
    "SchemaParser",
    "CatalogRegistry",
    # Errors
    "SelectionError",
    "BuilderFactoryError",
    "ExpansionDepthError",
    "UnknownTypeError",
    "UnsupportedArgumentError",
]
