"""Shared fixtures for resolver generation tests."""

import re
from pathlib import Path

import pytest

from gql_resolvergen.core.ir import ModelDefinition, ModelMember
from gql_resolvergen.core.parser import SchemaParser

DATA_DIR = Path(__file__).parent / "data"
SCHEMA_FILE = DATA_DIR / "schema.graphql"
MODELS_FILE = DATA_DIR / "models.ts"
CONTEXT_FILE = DATA_DIR / "context.ts"


def normalize_whitespace(text: str) -> str:
    """Collapse runs of whitespace so assertions ignore layout."""
    return re.sub(r"\s+", " ", text).strip()


class StaticIntrospector:
    """Introspector answering from a dict of declaration name -> members."""

    def __init__(self, declarations):
        self.declarations = declarations
        self.calls = []

    def find_members(self, file_path, declaration_name):
        self.calls.append((file_path, declaration_name))
        return self.declarations.get(declaration_name)


@pytest.fixture
def schema_ir():
    """The sample blog schema parsed into IR."""
    return SchemaParser(str(SCHEMA_FILE)).parse_all()


@pytest.fixture
def model_map():
    """User and Post bound to the sample models file."""
    return {
        "User": ModelDefinition("User", str(MODELS_FILE), "./models"),
        "Post": ModelDefinition("Post", str(MODELS_FILE), "./models"),
    }


@pytest.fixture
def introspector():
    """Members matching tests/data/models.ts."""
    return StaticIntrospector(
        {
            "User": [
                ModelMember("id"),
                ModelMember("name", optional=True),
                ModelMember("passwordHash"),
            ],
            "Post": [
                ModelMember("id"),
                ModelMember("title"),
                ModelMember("published"),
                ModelMember("rating", optional=True),
                ModelMember("authorId"),
                ModelMember("createdAt"),
                ModelMember("status"),
            ],
        }
    )
