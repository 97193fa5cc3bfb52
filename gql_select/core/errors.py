"""Exceptions raised while building or rendering selections."""


class SelectionError(Exception):
    """Base class for selection building errors."""


class BuilderFactoryError(SelectionError):
    """Raised when a complex field has no way to build its nested selection."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Field '{field_name}' is complex but has no builder factory")


class ExpansionDepthError(SelectionError):
    """Raised when select-all expansion nests deeper than allowed.

    This usually means the schema is self-referential, e.g. ``User.friends``
    returning ``User``.
    """

    def __init__(self, path: list[str], max_depth: int):
        self.path = path
        self.max_depth = max_depth
        super().__init__(
            f"Expansion of '{'.'.join(path)}' exceeds max depth {max_depth}"
        )


class UnsupportedArgumentError(SelectionError, TypeError):
    """Raised when an argument value has no literal representation."""

    def __init__(self, value):
        self.value = value
        super().__init__(
            f"Cannot encode argument value of type {type(value).__name__}: {value!r}"
        )


class UnknownTypeError(SelectionError, KeyError):
    """Raised when a catalog is requested for a type the schema doesn't define."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(type_name)

    def __str__(self) -> str:
        return f"Unknown type: {self.type_name}"
