"""Association between object types and the input types their arguments use."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .ir import IRType


def build_input_types_map(types: Iterable[IRType]) -> Dict[str, IRType]:
    """Map input type names to their declarations."""
    return {t.name: t for t in types if t.is_input}


def build_type_to_input_association(types: Iterable[IRType]) -> Dict[str, List[str]]:
    """Map object type names to the input types referenced by their arguments.

    Only object types with at least one input argument get an entry. Names
    keep source order and are not deduplicated: an input used by two fields
    is listed twice.
    """
    association: Dict[str, List[str]] = {}
    for ir_type in types:
        if not ir_type.is_object:
            continue
        input_names = [
            arg.type.name
            for ir_field in ir_type.fields
            for arg in ir_field.arguments
            if arg.type.is_input
        ]
        if input_names:
            association[ir_type.name] = input_names
    return association


@dataclass(frozen=True)
class AssociationIndex:
    """Input type lookups computed once per generation run."""
    type_to_inputs: Dict[str, List[str]] = field(default_factory=dict)
    inputs: Dict[str, IRType] = field(default_factory=dict)

    @classmethod
    def build(cls, types: Iterable[IRType]) -> "AssociationIndex":
        types = list(types)
        return cls(
            type_to_inputs=build_type_to_input_association(types),
            inputs=build_input_types_map(types),
        )

    def inputs_for(self, type_name: str) -> List[IRType]:
        """Input declarations associated with an object type, in order."""
        return [
            self.inputs[name]
            for name in self.type_to_inputs.get(type_name, [])
            if name in self.inputs
        ]

    def nested_inputs_for(self, type_name: str) -> List[IRType]:
        """Input declarations reachable through fields of the associated inputs.

        Each nested input is listed once, breadth first, and only when the
        object type does not already take it as a direct argument.
        """
        seen = set(self.type_to_inputs.get(type_name, []))
        queue = self.inputs_for(type_name)
        nested: List[IRType] = []
        while queue:
            current = queue.pop(0)
            for ir_field in current.fields:
                name = ir_field.type.name
                if not ir_field.type.is_input or name in seen or name not in self.inputs:
                    continue
                seen.add(name)
                nested.append(self.inputs[name])
                queue.append(self.inputs[name])
        return nested
