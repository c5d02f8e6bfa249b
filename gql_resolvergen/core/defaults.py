"""Default pass-through resolvers derived from model declarations."""

from dataclasses import dataclass
from typing import List

from ..log import log
from .errors import ModelDeclarationNotFoundError
from .introspection import DeclarationIntrospector
from .ir import IRType, ModelMap


@dataclass(frozen=True)
class DefaultResolver:
    """A resolver reading ``field_name`` straight off the parent model.

    Optional model members normalize ``undefined`` to ``null``.
    """
    field_name: str
    parent_type: str
    optional: bool = False

    @property
    def getter(self) -> str:
        value = f"parent.{self.field_name}"
        if self.optional:
            return f"{value} === undefined ? null : {value}"
        return value


def derive_default_resolvers(
    ir_type: IRType,
    model_map: ModelMap,
    introspector: DeclarationIntrospector,
) -> List[DefaultResolver]:
    """Default resolvers for the fields an object type shares with its model.

    Returns an empty list when the type has no model.

    Raises:
        ModelDeclarationNotFoundError: the model is registered but its
            declaration does not exist
    """
    model = model_map.get(ir_type.name)
    if model is None:
        return []

    members = introspector.find_members(model.absolute_file_path, model.model_type_name)
    if members is None:
        raise ModelDeclarationNotFoundError(
            model.model_type_name, model.absolute_file_path, ir_type.name
        )

    field_names = set(ir_type.field_names())
    resolvers = [
        DefaultResolver(
            field_name=member.name,
            parent_type=model.model_type_name,
            optional=member.optional,
        )
        for member in members
        if member.name in field_names
    ]
    log.debug(
        "%s: %d default resolvers from %s",
        ir_type.name, len(resolvers), model.model_type_name,
    )
    return resolvers
