"""Resolver type generator for GraphQL schemas.

Builds a declaration tree from the IR and renders it through a Jinja2
template into one TypeScript module.

Supports custom templates via the template_dir parameter:
    generator = ResolverTypesGenerator(ir, model_map, template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import os
from pathlib import Path
from typing import List, Optional

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from ..log import log
from .association import AssociationIndex
from .hooks import HookRunner
from .introspection import DeclarationIntrospector, TypeScriptDeclarationReader
from .ir import ContextDefinition, IRSchema, ModelMap
from .nodes import TSImport, TSInterface, TSModule, TSProperty, TSTypeAlias
from .renderer import DEFAULT_CONTEXT_NAME, INFO_TYPE, NamespaceRenderer, namespace_name
from .scalars import ScalarRegistry

HEADER = "// Code generated by gql-resolvergen, DO NOT EDIT."
TEMPLATE_NAME = "resolvers.ts.j2"


class ResolverTypesGenerator:
    """Generates TypeScript resolver types from GraphQL IR.

    Supports custom templates via the template_dir parameter. A
    ``resolvers.ts.j2`` in template_dir takes precedence over the built-in
    template and receives the same ``module`` declaration tree.

    Example:
        generator = ResolverTypesGenerator(
            ir=schema,
            model_map={"User": ModelDefinition("User", "/src/types.ts", "../types")},
        )
        code = generator.generate_code()
    """

    def __init__(
        self,
        ir: IRSchema,
        model_map: Optional[ModelMap] = None,
        context: Optional[ContextDefinition] = None,
        introspector: Optional[DeclarationIntrospector] = None,
        scalars: Optional[ScalarRegistry] = None,
        template_dir: Optional[str] = None,
        hooks: Optional[HookRunner] = None,
    ):
        """Initialize the generator.

        Args:
            ir: The intermediate representation of the GraphQL schema
            model_map: Schema type name -> model declaration
            context: Resolver context interface; ``any`` when omitted
            introspector: Source of model members, defaults to reading
                          TypeScript files
            scalars: Scalar mappings, defaults to the built-in ones
            template_dir: Optional directory with a custom Jinja2 template
            hooks: Pre/post generation hooks
        """
        self.ir = ir
        self.model_map = model_map or {}
        self.context = context
        self.introspector = introspector or TypeScriptDeclarationReader()
        self.scalars = scalars or ScalarRegistry()
        self.template_dir = template_dir
        self.hooks = hooks or HookRunner()

        # Build template loader - custom templates take precedence
        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_resolvergen", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def _prepare_schema(self) -> IRSchema:
        # Hooks may rebind ``types``, so they get a shallow copy
        return self.hooks.run_pre_hooks(IRSchema(types=list(self.ir.types)))

    def _surviving_models(self, schema: IRSchema) -> ModelMap:
        """Models whose schema type is still present after the pre hooks."""
        return {
            name: model
            for name, model in self.model_map.items()
            if schema.get_type_by_name(name) is not None
        }

    def build_imports(self, model_map: Optional[ModelMap] = None) -> List[TSImport]:
        if model_map is None:
            model_map = self.model_map
        imports = [TSImport(names=[INFO_TYPE], module="graphql")]
        if self.context is not None:
            imports.append(
                TSImport(names=[self.context.interface_name], module=self.context.context_path)
            )
        seen = set()
        for model in model_map.values():
            key = (model.model_type_name, model.import_path_relative_to_output)
            if key in seen:
                continue
            seen.add(key)
            imports.append(
                TSImport(
                    names=[model.model_type_name],
                    module=model.import_path_relative_to_output,
                )
            )
        return imports

    def build_aliases(self) -> List[TSTypeAlias]:
        if self.context is not None:
            return []
        return [TSTypeAlias(name=DEFAULT_CONTEXT_NAME, type="any")]

    def build_module(self) -> TSModule:
        """Build the declaration tree for the whole output file.

        Raises:
            ModelDeclarationNotFoundError: a registered model declaration is missing
            ModelSourceError: a model declaration cannot be parsed
        """
        schema = self._prepare_schema()
        model_map = self._surviving_models(schema)
        association = AssociationIndex.build(schema.types)
        renderer = NamespaceRenderer(
            association=association,
            model_map=model_map,
            introspector=self.introspector,
            context=self.context,
            scalars=self.scalars,
        )
        object_types = schema.object_types()
        log.debug(
            "Rendering %d object types (%d with input arguments)",
            len(object_types), len(association.type_to_inputs),
        )
        return TSModule(
            header=HEADER,
            imports=self.build_imports(model_map),
            aliases=self.build_aliases(),
            namespaces=[renderer.render(t) for t in object_types],
            resolvers=TSInterface(
                name="Resolvers",
                properties=[
                    TSProperty(name=t.name, type=f"{namespace_name(t)}.Type")
                    for t in object_types
                ],
            ),
        )

    def generate_code(self) -> str:
        """Render the unformatted TypeScript module."""
        module = self.build_module()
        template = self.env.get_template(TEMPLATE_NAME)
        return template.render(module=module).strip() + "\n"

    def generate(self, output_path: str) -> str:
        """Render, run post hooks and write the module to ``output_path``.

        Nothing is written if generation fails.
        """
        content = self.generate_code()
        content = self.hooks.run_post_hooks(os.path.basename(output_path), content)

        directory = os.path.dirname(os.path.abspath(output_path))
        os.makedirs(directory, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)
        log.info("Wrote %s", output_path)
        return content
