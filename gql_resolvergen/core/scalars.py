"""Scalar type mapping for generated TypeScript.

Every GraphQL scalar maps to one of three TypeScript primitives. Unknown
scalars fall back to ``string``.

Example usage:
    from gql_resolvergen.core.scalars import ScalarRegistry

    registry = ScalarRegistry()
    registry.register("Money", "number")

    registry.get("Money")      # "number"
    registry.get("Whatever")   # "string"
"""

from typing import Literal, get_args

TSScalarType = Literal["boolean", "number", "string"]

TS_SCALAR_TYPES: tuple[str, ...] = get_args(TSScalarType)

DEFAULT_SCALAR_TYPE: TSScalarType = "string"

BUILTIN_SCALARS = {"Int", "Float", "String", "Boolean", "ID"}


class ScalarRegistry:
    """Registry mapping GraphQL scalar names to TypeScript primitives.

    Example:
        registry = ScalarRegistry()
        registry.get("Int")  # "number"
    """

    def __init__(self, overrides: dict[str, TSScalarType] | None = None):
        self._types: dict[str, TSScalarType] = {}
        self._register_defaults()
        for name, ts_type in (overrides or {}).items():
            self.register(name, ts_type)

    def _register_defaults(self):
        """Register the built-in GraphQL scalars."""
        self.register("Int", "number")
        self.register("Float", "number")
        self.register("Boolean", "boolean")
        self.register("String", "string")
        self.register("ID", "string")
        self.register("DateTime", "string")

    def register(self, scalar_name: str, ts_type: TSScalarType):
        """Register the TypeScript primitive for a scalar."""
        if ts_type not in TS_SCALAR_TYPES:
            raise ValueError(
                f"Unsupported TypeScript type {ts_type!r} for scalar {scalar_name!r}, "
                f"expected one of {', '.join(TS_SCALAR_TYPES)}"
            )
        self._types[scalar_name] = ts_type

    def get(self, scalar_name: str) -> TSScalarType:
        """Get the primitive for a scalar, defaulting to ``string``."""
        return self._types.get(scalar_name, DEFAULT_SCALAR_TYPE)

    def has(self, scalar_name: str) -> bool:
        """Check if a mapping is registered for a scalar."""
        return scalar_name in self._types


_default_registry = ScalarRegistry()


def map_scalar(scalar_name: str) -> TSScalarType:
    """Map a GraphQL scalar name using the default mappings."""
    return _default_registry.get(scalar_name)
