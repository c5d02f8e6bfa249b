"""Declaration tree for the generated TypeScript module.

Renderers build these nodes; the ``resolvers.ts.j2`` template serializes
them in one pass. Each node carries a ``kind`` used by the template to
dispatch.
"""

from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Union

from .defaults import DefaultResolver


@dataclass
class TSImport:
    names: List[str]
    module: str

    @property
    def line(self) -> str:
        return f"import {{ {', '.join(self.names)} }} from '{self.module}'"


@dataclass
class TSTypeAlias:
    kind: ClassVar[str] = "type_alias"
    name: str
    type: str


@dataclass
class TSParameter:
    name: str
    type: str


@dataclass
class TSFunctionType:
    """``(params) => T | Promise<T>``"""
    kind: ClassVar[str] = "function_type"
    params: List[TSParameter]
    return_type: str


# A property type is either a plain type expression or a function type
TSTypeExpr = Union[str, TSFunctionType]


@dataclass
class TSProperty:
    name: str
    type: TSTypeExpr


@dataclass
class TSInterface:
    kind: ClassVar[str] = "interface"
    name: str
    properties: List[TSProperty] = field(default_factory=list)
    exported: bool = True


@dataclass
class TSFunctionTypeAlias:
    kind: ClassVar[str] = "function_type_alias"
    name: str
    function: TSFunctionType


@dataclass
class TSDefaultResolvers:
    kind: ClassVar[str] = "default_resolvers"
    entries: List[DefaultResolver] = field(default_factory=list)


NamespaceMember = Union[TSDefaultResolvers, TSInterface, TSFunctionTypeAlias]


@dataclass
class TSNamespace:
    kind: ClassVar[str] = "namespace"
    name: str
    members: List[NamespaceMember] = field(default_factory=list)


@dataclass
class TSModule:
    """The whole generated file."""
    header: str
    imports: List[TSImport] = field(default_factory=list)
    aliases: List[TSTypeAlias] = field(default_factory=list)
    namespaces: List[TSNamespace] = field(default_factory=list)
    resolvers: Optional[TSInterface] = None
