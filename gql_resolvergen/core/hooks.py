"""Generation hooks for customizing code generation.

Provides protocols for pre- and post-generation hooks that can modify
the IR before generation or transform the generated code after.

Example usage:
    from gql_resolvergen.core.hooks import PreGenerateHook, PostGenerateHook

    # Pre-generation hook to filter types
    class FilterInternalTypes(PreGenerateHook):
        def pre_generate(self, ir):
            ir.types = [t for t in ir.types if not t.name.startswith("_")]
            return ir

    # Post-generation hook to add headers
    class AddLicenseHeader(PostGenerateHook):
        def post_generate(self, filename, content):
            header = "// Copyright 2024 My Company\\n\\n"
            return header + content
"""

import shutil
import subprocess
from typing import Protocol, runtime_checkable

from ..log import log
from .ir import IRSchema


@runtime_checkable
class PreGenerateHook(Protocol):
    """Protocol for pre-generation hooks.

    Pre-generation hooks receive the IR schema before code generation
    and can modify it. The modified IR is then used for generation.
    """

    def pre_generate(self, ir: IRSchema) -> IRSchema:
        """Called before code generation.

        Args:
            ir: The intermediate representation of the schema

        Returns:
            The (possibly modified) IR to use for generation
        """
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generation hooks.

    Post-generation hooks receive the generated code and can transform it
    before it's written to disk.
    """

    def post_generate(self, filename: str, content: str) -> str:
        """Called after code generation.

        Args:
            filename: The name of the generated file (e.g., "resolvers.ts")
            content: The generated code content

        Returns:
            The (possibly transformed) code to write
        """
        ...


class AddHeaderHook:
    """Built-in hook prepending a header (e.g. a lint directive) to the output.

    Example:
        hook = AddHeaderHook("/* eslint-disable */")
    """

    def __init__(self, header: str):
        self.header = header.rstrip("\n")

    def post_generate(self, _filename: str, content: str) -> str:
        return f"{self.header}\n\n{content}"


class FilterTypesHook:
    """Built-in hook dropping schema types whose name starts with a prefix.

    Example:
        # Remove all types starting with underscore
        hook = FilterTypesHook(exclude_prefix="_")
    """

    def __init__(self, exclude_prefix: str | None = None):
        self.exclude_prefix = exclude_prefix

    def pre_generate(self, ir: IRSchema) -> IRSchema:
        """Filter types from the IR."""
        if self.exclude_prefix:
            ir.types = [t for t in ir.types if not t.name.startswith(self.exclude_prefix)]
        return ir


class PrettierFormatHook:
    """Built-in hook formatting the output with ``prettier``.

    If prettier is not installed or rejects the code, the unformatted code
    is returned and a warning is logged.
    """

    def __init__(self, executable: str = "prettier", timeout: float = 60):
        self.executable = executable
        self.timeout = timeout

    def post_generate(self, filename: str, content: str) -> str:
        """Pipe the content through ``prettier --parser typescript``."""
        binary = shutil.which(self.executable)
        if binary is None:
            log.warning("%s not found, writing %s unformatted", self.executable, filename)
            return content
        try:
            result = subprocess.run(
                [binary, "--parser", "typescript"],
                input=content,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=True,
            )
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired) as e:
            stderr = getattr(e, "stderr", None) or str(e)
            log.warning(
                "There is a syntax error in generated code, unformatted code written: %s",
                stderr.strip(),
            )
            return content
        return result.stdout


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_pre_hook(self, hook: PreGenerateHook):
        """Add a pre-generation hook."""
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        """Add a post-generation hook."""
        self.post_hooks.append(hook)

    def run_pre_hooks(self, ir: IRSchema) -> IRSchema:
        """Run all pre-generation hooks in order."""
        for hook in self.pre_hooks:
            ir = hook.pre_generate(ir)
        return ir

    def run_post_hooks(self, filename: str, content: str) -> str:
        """Run all post-generation hooks in order."""
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
