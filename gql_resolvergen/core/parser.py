"""GraphQL schema parser using graphql-core.

Parses .graphql/.graphqls/.gql files and produces an IRSchema.
"""

import os
from typing import Any, Dict, List

from graphql import (
    EnumTypeDefinitionNode,
    GraphQLSyntaxError,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    InterfaceTypeDefinitionNode,
    ListTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    ScalarTypeDefinitionNode,
    UnionTypeDefinitionNode,
    parse,
    print_ast,
)

from ..log import log
from .ir import IRArgument, IRField, IRSchema, IRType, IRTypeRef, TypeKind
from .scalars import BUILTIN_SCALARS

SCHEMA_EXTENSIONS = (".graphql", ".graphqls", ".gql")


class SchemaParser:
    """Parses GraphQL schema files into IR."""

    def __init__(self, schema_path: str):
        """Initialize parser with path to schema file or directory."""
        self.schema_path = schema_path
        self.ir = IRSchema()
        self.current_file = ""

    def parse_all(self) -> IRSchema:
        """Parse all schema files and return the complete IR."""
        for file_path in self._collect_schema_files():
            self.current_file = os.path.basename(file_path)
            with open(file_path, encoding="utf-8") as f:
                content = f.read()
            self.parse_source(content)

        self._resolve_kinds()
        return self.ir

    def parse_source(self, content: str):
        """Add the definitions of one SDL document to the IR."""
        try:
            ast = parse(content)
        except GraphQLSyntaxError as e:
            log.error("Error parsing %s: %s", self.current_file or "<string>", e)
            raise
        self._process_ast(ast)

    @classmethod
    def from_string(cls, content: str) -> IRSchema:
        """Parse SDL held in memory."""
        parser = cls("")
        parser.parse_source(content)
        parser._resolve_kinds()
        return parser.ir

    def _collect_schema_files(self) -> List[str]:
        """Collect all schema files from path."""
        files = []
        if os.path.isfile(self.schema_path):
            if self.schema_path.endswith(SCHEMA_EXTENSIONS):
                files.append(self.schema_path)
        else:
            for root, _, filenames in os.walk(self.schema_path):
                for filename in filenames:
                    if filename.endswith(SCHEMA_EXTENSIONS):
                        files.append(os.path.join(root, filename))
        if not files:
            log.warning("No schema files found in %s", self.schema_path)
        return sorted(files)

    def _process_ast(self, ast):
        """Process GraphQL AST and populate IR."""
        for definition in ast.definitions:
            if isinstance(definition, ScalarTypeDefinitionNode):
                self._add(definition, TypeKind.SCALAR)
            elif isinstance(definition, EnumTypeDefinitionNode):
                ir_type = self._add(definition, TypeKind.ENUM)
                ir_type.values = [v.name.value for v in definition.values or []]
            elif isinstance(definition, UnionTypeDefinitionNode):
                ir_type = self._add(definition, TypeKind.UNION)
                ir_type.members = [t.name.value for t in definition.types or []]
            elif isinstance(definition, InterfaceTypeDefinitionNode):
                ir_type = self._add(definition, TypeKind.INTERFACE)
                self._set_fields(ir_type, definition.fields or [])
            elif isinstance(definition, ObjectTypeDefinitionNode):
                ir_type = self._add(definition, TypeKind.OBJECT)
                self._set_fields(ir_type, definition.fields or [])
            elif isinstance(definition, InputObjectTypeDefinitionNode):
                ir_type = self._add(definition, TypeKind.INPUT)
                self._set_fields(ir_type, definition.fields or [])
            elif isinstance(definition, ObjectTypeExtensionNode):
                self._process_extension(definition, TypeKind.OBJECT)
            elif isinstance(definition, InputObjectTypeExtensionNode):
                self._process_extension(definition, TypeKind.INPUT)
            else:
                log.debug("Skipping %s in %s", type(definition).__name__, self.current_file)

    def _add(self, node, kind: TypeKind) -> IRType:
        name = node.name.value
        description = node.description.value if node.description else None
        ir_type = self.ir.get_type_by_name(name)
        if ir_type is not None:
            # Created by an extension seen before the definition
            ir_type.kind = kind
            ir_type.description = description
            return ir_type
        ir_type = IRType(name=name, kind=kind, description=description)
        self.ir.types.append(ir_type)
        return ir_type

    def _set_fields(self, ir_type: IRType, field_nodes):
        """Set the declared fields, keeping fields added by earlier extensions."""
        fields = self._process_fields(field_nodes)
        declared = {f.name for f in fields}
        ir_type.fields = fields + [f for f in ir_type.fields if f.name not in declared]

    def _process_extension(self, node, kind: TypeKind):
        """Merge ``extend type``/``extend input`` fields into the existing type.

        The type is created if the extension comes before its definition.
        """
        name = node.name.value
        ir_type = self.ir.get_type_by_name(name)
        if ir_type is None:
            ir_type = IRType(name=name, kind=kind)
            self.ir.types.append(ir_type)
        existing_names = {f.name for f in ir_type.fields}
        for ir_field in self._process_fields(node.fields or []):
            if ir_field.name not in existing_names:
                ir_type.fields.append(ir_field)
                existing_names.add(ir_field.name)

    def _process_fields(self, field_nodes) -> List[IRField]:
        """Process field definitions into IRField list."""
        fields = []
        for node in field_nodes:
            args = []
            if hasattr(node, "arguments") and node.arguments:
                for arg_node in node.arguments:
                    args.append(
                        IRArgument(
                            name=arg_node.name.value,
                            type=self._get_type_ref(arg_node.type),
                            default_value=print_ast(arg_node.default_value)
                            if arg_node.default_value
                            else None,
                            description=arg_node.description.value
                            if arg_node.description
                            else None,
                        )
                    )
            fields.append(
                IRField(
                    name=node.name.value,
                    type=self._get_type_ref(node.type),
                    arguments=args,
                    description=node.description.value if node.description else None,
                )
            )
        return fields

    def _get_type_ref(self, type_node) -> IRTypeRef:
        info = self._get_type_info(type_node)
        return IRTypeRef(
            name=info["name"],
            is_list=info["is_list"],
            is_required=info["is_required"],
        )

    def _get_type_info(self, type_node) -> Dict[str, Any]:
        """Extract type name, is_list, and is_required from type node."""
        is_required = False
        is_list = False

        # NonNull wrapper means required
        if isinstance(type_node, NonNullTypeNode):
            is_required = True
            type_node = type_node.type

        # List wrapper; inner non-null and nested lists collapse into one list
        while isinstance(type_node, (ListTypeNode, NonNullTypeNode)):
            if isinstance(type_node, ListTypeNode):
                is_list = True
            type_node = type_node.type

        return {
            "name": type_node.name.value,
            "is_list": is_list,
            "is_required": is_required,
        }

    def _resolve_kinds(self):
        """Set the kind of every field and argument reference."""
        kinds = self.ir.kinds()
        for ir_type in self.ir.types:
            for ir_field in ir_type.fields:
                ir_field.type.kind = self._kind_of(ir_field.type.name, kinds)
                for arg in ir_field.arguments:
                    arg.type.kind = self._kind_of(arg.type.name, kinds)

    @staticmethod
    def _kind_of(name: str, kinds: Dict[str, TypeKind]) -> TypeKind:
        if name in BUILTIN_SCALARS:
            return TypeKind.SCALAR
        # Undeclared names are treated as object types
        return kinds.get(name, TypeKind.OBJECT)
