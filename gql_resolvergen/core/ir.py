"""Intermediate Representation (IR) for GraphQL schemas.

This module defines dataclasses describing the parsed schema and the
model/context declarations the generator binds it to.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional


class TypeKind(str, Enum):
    """Kind of a named schema type."""

    OBJECT = "object"
    INPUT = "input"
    SCALAR = "scalar"
    ENUM = "enum"
    UNION = "union"
    INTERFACE = "interface"


@dataclass
class IRTypeRef:
    """Reference to a named type from a field or argument."""
    name: str
    is_list: bool = False
    is_required: bool = False  # True if non-null (! in GraphQL)
    kind: TypeKind = TypeKind.OBJECT

    @property
    def is_scalar(self) -> bool:
        return self.kind == TypeKind.SCALAR

    @property
    def is_input(self) -> bool:
        return self.kind == TypeKind.INPUT

    @property
    def is_enum(self) -> bool:
        return self.kind == TypeKind.ENUM

    @property
    def is_object(self) -> bool:
        # Unions and interfaces resolve to model types like objects do
        return self.kind in (TypeKind.OBJECT, TypeKind.UNION, TypeKind.INTERFACE)


@dataclass
class IRArgument:
    """Represents an argument to a field."""
    name: str
    type: IRTypeRef
    default_value: Any = None
    description: Optional[str] = None


@dataclass
class IRField:
    """Represents a field in an object or input type."""
    name: str
    type: IRTypeRef
    arguments: List[IRArgument] = field(default_factory=list)
    description: Optional[str] = None


@dataclass
class IRType:
    """Represents a named schema type of any kind."""
    name: str
    kind: TypeKind
    fields: List[IRField] = field(default_factory=list)
    description: Optional[str] = None
    values: List[str] = field(default_factory=list)  # enum values
    members: List[str] = field(default_factory=list)  # union members

    @property
    def is_object(self) -> bool:
        return self.kind == TypeKind.OBJECT

    @property
    def is_input(self) -> bool:
        return self.kind == TypeKind.INPUT

    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]


@dataclass
class IRSchema:
    """Complete intermediate representation of a GraphQL schema.

    Types are kept in declaration order.
    """
    types: List[IRType] = field(default_factory=list)

    def __iter__(self) -> Iterator[IRType]:
        return iter(self.types)

    def get_type_by_name(self, name: str) -> Optional[IRType]:
        """Look up a type by name."""
        for ir_type in self.types:
            if ir_type.name == name:
                return ir_type
        return None

    def object_types(self) -> List[IRType]:
        return [t for t in self.types if t.is_object]

    def input_types(self) -> List[IRType]:
        return [t for t in self.types if t.is_input]

    def kinds(self) -> Dict[str, TypeKind]:
        """Map every declared type name to its kind."""
        return {t.name: t.kind for t in self.types}


@dataclass(frozen=True)
class ModelDefinition:
    """A TypeScript declaration standing in for a schema type at runtime."""
    model_type_name: str
    absolute_file_path: str
    import_path_relative_to_output: str


# Schema type name -> model definition
ModelMap = Dict[str, ModelDefinition]


@dataclass(frozen=True)
class ContextDefinition:
    """The resolver context interface and where to import it from."""
    interface_name: str
    context_path: str
    absolute_file_path: Optional[str] = None


@dataclass(frozen=True)
class ModelMember:
    """A property of a model declaration."""
    name: str
    optional: bool = False
