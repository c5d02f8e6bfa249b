"""Introspection of model declarations in TypeScript sources.

The generator only needs one capability from a model source: given a file
and a declaration name, list the declaration's properties in order. That
capability is the ``DeclarationIntrospector`` protocol; the
``TypeScriptDeclarationReader`` implements it for ``interface`` and
object-literal ``type`` declarations.

Example usage:
    reader = TypeScriptDeclarationReader()
    members = reader.find_members("./src/types.ts", "User")
    if members is None:
        ...  # no such declaration
"""

import os
import re
from typing import List, Optional, Protocol, runtime_checkable

from ..log import log
from .errors import ModelSourceError
from .ir import ModelMember

# Matches string literals (kept) or comments (dropped)
_COMMENT_RE = re.compile(
    r"(\"(?:\\.|[^\"\\])*\"|'(?:\\.|[^'\\])*'|`(?:\\.|[^`\\])*`)"
    r"|/\*.*?\*/"
    r"|//[^\n]*",
    re.DOTALL,
)

_PROPERTY_RE = re.compile(
    r"^\s*(?:readonly\s+)?"
    r"(?P<name>[A-Za-z_$][\w$]*|'[^']*'|\"[^\"]*\")"
    r"\s*(?P<optional>\?)?\s*:"
)

_OPENERS = "{[("
_CLOSERS = "}])"


@runtime_checkable
class DeclarationIntrospector(Protocol):
    """Protocol for model declaration sources.

    Example:
        class StaticIntrospector:
            def find_members(self, file_path, declaration_name):
                return [ModelMember("id"), ModelMember("name", optional=True)]
    """

    def find_members(
        self, file_path: str, declaration_name: str
    ) -> Optional[List[ModelMember]]:
        """List the members of a declaration.

        Returns:
            The ordered member list, or None if the declaration does not exist
        """
        ...


def strip_comments(source: str) -> str:
    """Remove line and block comments, leaving string literals intact."""
    return _COMMENT_RE.sub(lambda m: m.group(1) or "", source)


def _declaration_pattern(name: str) -> re.Pattern:
    name = re.escape(name)
    return re.compile(
        rf"\binterface\s+{name}\b(?:\s*<[^{{]*>)?(?:\s+extends\s+[^{{]+)?\s*{{"
        rf"|\btype\s+{name}\b(?:\s*<[^=]*>)?\s*=\s*{{"
    )


def _matching_brace(source: str, start: int) -> int:
    """Index of the brace closing the one at ``start``."""
    depth = 0
    for index in range(start, len(source)):
        char = source[index]
        if char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth -= 1
            if depth == 0:
                return index
    raise ValueError(f"Unbalanced braces at offset {start}")


def _split_members(body: str) -> List[str]:
    """Split a declaration body on top-level separators."""
    parts = []
    depth = 0
    current: List[str] = []
    for char in body:
        if char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth -= 1
        if depth == 0 and char in ";,\n":
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    parts.append("".join(current))
    return [p for p in parts if p.strip()]


def parse_members(body: str) -> List[ModelMember]:
    """Parse property signatures out of a declaration body.

    Method signatures, index signatures and continuation lines of
    multi-line types are skipped.
    """
    members = []
    for part in _split_members(body):
        match = _PROPERTY_RE.match(part)
        if not match:
            continue
        name = match.group("name").strip("'\"")
        members.append(ModelMember(name=name, optional=bool(match.group("optional"))))
    return members


def find_declaration_body(source: str, declaration_name: str) -> Optional[str]:
    """Return the text between the braces of a named declaration."""
    match = _declaration_pattern(declaration_name).search(source)
    if not match:
        return None
    open_index = match.end() - 1
    close_index = _matching_brace(source, open_index)
    return source[open_index + 1:close_index]


class TypeScriptDeclarationReader:
    """Reads ``interface``/``type`` declarations from TypeScript files.

    Files are read on every lookup, so edits between runs are picked up.
    """

    def _read(self, file_path: str) -> Optional[str]:
        path = os.path.abspath(file_path)
        if not os.path.isfile(path):
            log.debug("Model file %s does not exist", path)
            return None
        with open(path, encoding="utf-8") as f:
            return strip_comments(f.read())

    def has_declaration(self, file_path: str, declaration_name: str) -> bool:
        source = self._read(file_path)
        if source is None:
            return False
        return _declaration_pattern(declaration_name).search(source) is not None

    def find_members(
        self, file_path: str, declaration_name: str
    ) -> Optional[List[ModelMember]]:
        """List the members of a declaration.

        Raises:
            ModelSourceError: the declaration's braces are unbalanced
        """
        source = self._read(file_path)
        if source is None:
            return None
        try:
            body = find_declaration_body(source, declaration_name)
        except ValueError as e:
            raise ModelSourceError(file_path, declaration_name, str(e)) from e
        if body is None:
            return None
        members = parse_members(body)
        log.debug(
            "Found %d members on %s in %s", len(members), declaration_name, file_path
        )
        return members
