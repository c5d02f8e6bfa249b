"""Configuration file support (``resolvergen.yml``).

Example:
    schema: ./schema.graphql
    output: ./generated/resolvers.ts
    context: ./types.ts:Context
    models:
      files: [./types.ts]
      override:
        Post: ./db.ts:PostRecord
    scalars:
      Money: number
    exclude_prefix: _
    header: "/* eslint-disable */"
"""

import os
from pathlib import Path
from typing import Any, Optional, cast

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core.errors import ConfigError
from .core.introspection import TypeScriptDeclarationReader
from .core.ir import ContextDefinition, IRSchema, ModelDefinition, ModelMap, TypeKind
from .core.scalars import TSScalarType
from .log import log

DEFAULT_CONFIG_FILE = "resolvergen.yml"

TS_EXTENSIONS = (".d.ts", ".tsx", ".ts")

# Kinds whose references print as model types
MODEL_KINDS = (TypeKind.OBJECT, TypeKind.UNION, TypeKind.INTERFACE)


class ModelsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    files: list[str] = Field(default_factory=list)
    override: dict[str, str] = Field(default_factory=dict)


class ResolverGenConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    schema_path: str = Field(alias="schema")
    output: str
    context: Optional[str] = None
    models: ModelsConfig = Field(default_factory=ModelsConfig)
    scalars: dict[str, TSScalarType] = Field(default_factory=dict)
    format: bool = True
    exclude_prefix: Optional[str] = None
    header: Optional[str] = None
    template_dir: Optional[str] = None

    def resolve_paths(self, base_dir: Path) -> "ResolverGenConfig":
        """Return a copy with every relative path anchored at ``base_dir``."""

        def anchor(path: str) -> str:
            return str((base_dir / path).resolve())

        def anchor_ref(ref: str) -> str:
            path, name = split_declaration_ref(ref)
            return f"{anchor(path)}:{name}"

        return self.model_copy(
            update={
                "schema_path": anchor(self.schema_path),
                "output": anchor(self.output),
                "context": anchor_ref(self.context) if self.context else None,
                "template_dir": anchor(self.template_dir) if self.template_dir else None,
                "models": ModelsConfig(
                    files=[anchor(f) for f in self.models.files],
                    override={k: anchor_ref(v) for k, v in self.models.override.items()},
                ),
            }
        )


def split_declaration_ref(ref: str) -> tuple[str, str]:
    """Split ``path/to/file.ts:Name`` into its path and declaration name."""
    path, sep, name = ref.rpartition(":")
    if not sep or not path or not name:
        raise ConfigError(f"Expected 'path:Name', got {ref!r}")
    return path, name


def load_config(config_path: Path) -> ResolverGenConfig:
    """Load and validate a configuration file.

    Relative paths in the file are resolved against its directory.

    Raises:
        ConfigError: the file is unreadable, not YAML, or fails validation
    """
    raw: Any
    try:
        with config_path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config {config_path}: {e}") from e

    log.debug("Loaded config from %s", config_path)

    if not isinstance(raw, dict):
        raise ConfigError(
            f"Config root must be a mapping (YAML object), got {type(raw).__name__}"
        )

    try:
        config = ResolverGenConfig.model_validate(cast(dict[str, Any], raw))
    except ValidationError as e:
        raise ConfigError(f"Invalid config {config_path}:\n{e}") from e
    return config.resolve_paths(config_path.resolve().parent)


def import_path_relative_to(output_path: str, file_path: str) -> str:
    """Module specifier importing ``file_path`` from the file at ``output_path``."""
    relative = os.path.relpath(file_path, os.path.dirname(os.path.abspath(output_path)))
    for extension in TS_EXTENSIONS:
        if relative.endswith(extension):
            relative = relative[: -len(extension)]
            break
    relative = relative.replace(os.sep, "/")
    if not relative.startswith("."):
        relative = f"./{relative}"
    return relative


def build_context(config: ResolverGenConfig) -> Optional[ContextDefinition]:
    if not config.context:
        return None
    path, name = split_declaration_ref(config.context)
    return ContextDefinition(
        interface_name=name,
        context_path=import_path_relative_to(config.output, path),
        absolute_file_path=path,
    )


def build_model_map(
    config: ResolverGenConfig,
    schema: IRSchema,
    reader: Optional[TypeScriptDeclarationReader] = None,
) -> ModelMap:
    """Bind schema types to TypeScript models.

    A type is bound to the first model file declaring an interface or type
    of the same name. Explicit overrides win over discovery.
    """
    reader = reader or TypeScriptDeclarationReader()
    model_map: ModelMap = {}

    for ir_type in schema.types:
        if ir_type.kind not in MODEL_KINDS:
            continue
        for file_path in config.models.files:
            if reader.has_declaration(file_path, ir_type.name):
                model_map[ir_type.name] = ModelDefinition(
                    model_type_name=ir_type.name,
                    absolute_file_path=file_path,
                    import_path_relative_to_output=import_path_relative_to(
                        config.output, file_path
                    ),
                )
                break

    for type_name, ref in config.models.override.items():
        if schema.get_type_by_name(type_name) is None:
            log.warning("Model override for unknown type %s", type_name)
        path, name = split_declaration_ref(ref)
        model_map[type_name] = ModelDefinition(
            model_type_name=name,
            absolute_file_path=path,
            import_path_relative_to_output=import_path_relative_to(config.output, path),
        )

    log.debug("Bound %d schema types to models", len(model_map))
    return model_map
