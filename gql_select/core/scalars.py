"""Literal handlers for custom scalar argument values.

Provides a protocol for defining how Python values that back GraphQL custom
scalars are written as argument literals in a query document.

Example usage:
    from gql_select.core.scalars import LiteralHandler, ScalarRegistry

    class MoneyHandler:
        python_type = Money

        def to_literal(self, value):
            return f'"{value.amount} {value.currency}"'

    registry = ScalarRegistry()
    registry.register(MoneyHandler())
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable
from uuid import UUID

from .errors import UnsupportedArgumentError


@runtime_checkable
class LiteralHandler(Protocol):
    """Protocol for custom scalar literal handlers.

    Attributes:
        python_type: The Python type handled (subclasses are handled too)
    """

    python_type: type

    def to_literal(self, value: Any) -> str:
        """Convert a Python value to its GraphQL literal text."""
        ...


class DateTimeHandler:
    """Handler for DateTime scalars using ISO 8601 format."""

    python_type = datetime

    def to_literal(self, value: datetime) -> str:
        return f'"{value.isoformat()}"'


class DateHandler:
    """Handler for Date scalars using ISO 8601 date format."""

    python_type = date

    def to_literal(self, value: date) -> str:
        return f'"{value.isoformat()}"'


class UUIDHandler:
    """Handler for UUID scalars."""

    python_type = UUID

    def to_literal(self, value: UUID) -> str:
        return f'"{value}"'


class DecimalHandler:
    """Handler for decimal numbers, written as unquoted float literals."""

    python_type = Decimal

    def to_literal(self, value: Decimal) -> str:
        if not value.is_finite():
            raise UnsupportedArgumentError(value)
        return str(value)


class ScalarRegistry:
    """Registry for scalar literal handlers.

    Handlers are looked up along the value type's MRO, so a handler
    registered for ``date`` is not used for ``datetime`` values when a
    ``datetime`` handler exists.

    Example:
        registry = ScalarRegistry()
        handler = registry.get(datetime)
        if handler:
            text = handler.to_literal(datetime.now())
    """

    def __init__(self):
        self._handlers: dict[type, LiteralHandler] = {}
        self._register_defaults()

    def _register_defaults(self):
        """Register built-in default handlers."""
        self.register(DateTimeHandler())
        self.register(DateHandler())
        self.register(UUIDHandler())
        self.register(DecimalHandler())

    def register(self, handler: LiteralHandler):
        """Register a handler for its python_type, replacing any previous one."""
        self._handlers[handler.python_type] = handler

    def get(self, python_type: type) -> LiteralHandler | None:
        """Get the closest handler for a type, or None if not registered."""
        for klass in python_type.__mro__:
            handler = self._handlers.get(klass)
            if handler is not None:
                return handler
        return None

    def has(self, python_type: type) -> bool:
        """Check if a handler applies to a type."""
        return self.get(python_type) is not None
