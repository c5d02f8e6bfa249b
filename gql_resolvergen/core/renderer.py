"""Build the per-object-type resolver namespace."""

from typing import List, Optional

from .association import AssociationIndex
from .defaults import derive_default_resolvers
from .introspection import DeclarationIntrospector
from .ir import ContextDefinition, IRField, IRType, ModelMap
from .nodes import (
    TSDefaultResolvers,
    TSFunctionType,
    TSFunctionTypeAlias,
    TSInterface,
    TSNamespace,
    TSParameter,
    TSProperty,
)
from .printer import EMPTY_TYPE, get_model_name, print_field_type
from .scalars import ScalarRegistry

DEFAULT_CONTEXT_NAME = "Context"
INFO_TYPE = "GraphQLResolveInfo"
ARGS_PREFIX = "Args"


def upper_first(name: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return name[:1].upper() + name[1:]


def get_context_name(context: Optional[ContextDefinition]) -> str:
    if context is None:
        return DEFAULT_CONTEXT_NAME
    return context.interface_name


def args_interface_name(ir_field: IRField) -> str:
    return f"{ARGS_PREFIX}{upper_first(ir_field.name)}"


def resolver_type_name(ir_field: IRField) -> str:
    return f"{upper_first(ir_field.name)}Resolver"


def namespace_name(ir_type: IRType) -> str:
    return f"{ir_type.name}Resolvers"


class NamespaceRenderer:
    """Renders ``<Type>Resolvers`` namespaces for object types.

    The association index is computed once by the caller and shared by
    every namespace of a run.
    """

    def __init__(
        self,
        association: AssociationIndex,
        model_map: ModelMap,
        introspector: DeclarationIntrospector,
        context: Optional[ContextDefinition] = None,
        scalars: Optional[ScalarRegistry] = None,
    ):
        self.association = association
        self.model_map = model_map
        self.introspector = introspector
        self.context = context
        self.scalars = scalars

    def render(self, ir_type: IRType) -> TSNamespace:
        members = [self.render_default_resolvers(ir_type)]
        members.extend(self.render_input_type_interfaces(ir_type))
        members.extend(self.render_args_interfaces(ir_type))
        members.extend(self.render_resolver_types(ir_type))
        members.append(self.render_type_interface(ir_type))
        return TSNamespace(name=namespace_name(ir_type), members=members)

    def render_default_resolvers(self, ir_type: IRType) -> TSDefaultResolvers:
        return TSDefaultResolvers(
            entries=derive_default_resolvers(ir_type, self.model_map, self.introspector)
        )

    def render_input_type_interfaces(self, ir_type: IRType) -> List[TSInterface]:
        # Input fields carry no nullable marker, unlike args and outputs
        input_types = self.association.inputs_for(ir_type.name)
        input_types.extend(self.association.nested_inputs_for(ir_type.name))
        return [
            TSInterface(
                name=input_type.name,
                properties=[
                    TSProperty(
                        name=f.name,
                        type=print_field_type(
                            f.type, self.model_map, self.scalars, nullable=False
                        ),
                    )
                    for f in input_type.fields
                ],
            )
            for input_type in input_types
        ]

    def render_args_interfaces(self, ir_type: IRType) -> List[TSInterface]:
        return [
            TSInterface(
                name=args_interface_name(f),
                properties=[
                    TSProperty(
                        name=arg.name,
                        type=print_field_type(arg.type, self.model_map, self.scalars),
                    )
                    for arg in f.arguments
                ],
            )
            for f in ir_type.fields
            if f.arguments
        ]

    def resolver_function(self, ir_type: IRType, ir_field: IRField) -> TSFunctionType:
        args_type = args_interface_name(ir_field) if ir_field.arguments else EMPTY_TYPE
        return TSFunctionType(
            params=[
                TSParameter("parent", get_model_name(ir_type.name, self.model_map)),
                TSParameter("args", args_type),
                TSParameter("ctx", get_context_name(self.context)),
                TSParameter("info", INFO_TYPE),
            ],
            return_type=print_field_type(ir_field.type, self.model_map, self.scalars),
        )

    def render_resolver_types(self, ir_type: IRType) -> List[TSFunctionTypeAlias]:
        return [
            TSFunctionTypeAlias(
                name=resolver_type_name(f),
                function=self.resolver_function(ir_type, f),
            )
            for f in ir_type.fields
        ]

    def render_type_interface(self, ir_type: IRType) -> TSInterface:
        return TSInterface(
            name="Type",
            properties=[
                TSProperty(name=f.name, type=self.resolver_function(ir_type, f))
                for f in ir_type.fields
            ],
        )
