"""Core modules for resolver type generation."""

from .association import AssociationIndex
from .defaults import DefaultResolver, derive_default_resolvers
from .errors import (
    ConfigError,
    ModelDeclarationNotFoundError,
    ModelSourceError,
    ResolverGenError,
)
from .generator import ResolverTypesGenerator
from .introspection import DeclarationIntrospector, TypeScriptDeclarationReader
from .ir import (
    ContextDefinition,
    IRArgument,
    IRField,
    IRSchema,
    IRType,
    IRTypeRef,
    ModelDefinition,
    ModelMap,
    ModelMember,
    TypeKind,
)
from .parser import SchemaParser
from .printer import print_field_type
from .renderer import NamespaceRenderer
from .scalars import ScalarRegistry, map_scalar

__all__ = [
    # IR types
    "ContextDefinition",
    "IRArgument",
    "IRField",
    "IRSchema",
    "IRType",
    "IRTypeRef",
    "ModelDefinition",
    "ModelMap",
    "ModelMember",
    "TypeKind",
    # Errors
    "ConfigError",
    "ModelDeclarationNotFoundError",
    "ModelSourceError",
    "ResolverGenError",
    # Parser
    "SchemaParser",
    # Generation
    "AssociationIndex",
    "DeclarationIntrospector",
    "DefaultResolver",
    "NamespaceRenderer",
    "ResolverTypesGenerator",
    "ScalarRegistry",
    "TypeScriptDeclarationReader",
    "derive_default_resolvers",
    "map_scalar",
    "print_field_type",
]
