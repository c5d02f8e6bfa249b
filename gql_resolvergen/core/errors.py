"""Exceptions raised while generating resolver types."""


class ResolverGenError(Exception):
    """Base class for all generator errors."""


class ModelDeclarationNotFoundError(ResolverGenError):
    """A model is registered for a type but its declaration cannot be found."""

    def __init__(self, model_type_name: str, file_path: str, type_name: str):
        self.model_type_name = model_type_name
        self.file_path = file_path
        self.type_name = type_name
        super().__init__(
            f"No declaration found for model {model_type_name!r} of type "
            f"{type_name!r} in {file_path}"
        )


class ConfigError(ResolverGenError):
    """Raised when the configuration file is missing or invalid."""


class ModelSourceError(ResolverGenError):
    """A model declaration exists but its source cannot be parsed."""

    def __init__(self, file_path: str, declaration_name: str, reason: str):
        self.file_path = file_path
        self.declaration_name = declaration_name
        super().__init__(
            f"Cannot parse declaration {declaration_name!r} in {file_path}: {reason}"
        )
