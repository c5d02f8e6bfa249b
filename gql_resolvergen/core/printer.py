"""Render TypeScript type expressions for fields and arguments."""

from typing import Optional

from .ir import IRTypeRef, ModelMap
from .scalars import ScalarRegistry, map_scalar

EMPTY_TYPE = "{}"
ARRAY_MARKER = "[]"
NULLABLE_MARKER = " | null"


def get_model_name(type_name: str, model_map: ModelMap) -> str:
    """Return the model bound to a schema type, or the empty type.

    Root operation types (Query, Mutation, Subscription) usually have no
    model, so a missing entry is not an error.
    """
    model = model_map.get(type_name)
    if model is None:
        return EMPTY_TYPE
    return model.model_type_name


def print_base_type(
    type_ref: IRTypeRef,
    model_map: ModelMap,
    scalars: Optional[ScalarRegistry] = None,
) -> str:
    """Type name for a reference, without list or null modifiers."""
    if type_ref.is_scalar or type_ref.is_enum:
        # Enums travel as their string value
        if scalars is not None:
            return scalars.get(type_ref.name)
        return map_scalar(type_ref.name)
    if type_ref.is_input:
        return type_ref.name
    return get_model_name(type_ref.name, model_map)


def print_field_type(
    type_ref: IRTypeRef,
    model_map: ModelMap,
    scalars: Optional[ScalarRegistry] = None,
    nullable: bool = True,
) -> str:
    """Render the full TypeScript type of a field or argument.

    The array marker is always applied before the nullable marker. Passing
    ``nullable=False`` drops the nullable marker entirely (used for input
    type interface fields).
    """
    text = print_base_type(type_ref, model_map, scalars)
    if type_ref.is_list:
        text += ARRAY_MARKER
    if nullable and not type_ref.is_required:
        text += NULLABLE_MARKER
    return text
