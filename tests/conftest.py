"""Shared pytest fixtures for Monolith tests."""

from pathlib import Path

import pytest
import yaml

from monolith.catalog import FunctionCatalog, build_catalog
from monolith.models import FunctionMetadata
from monolith.tools import Tools


# Helper functions for creating valid test entries
def make_valid_entry(**overrides) -> FunctionMetadata:
    """Create a valid catalog entry with all required fields.

    Args:
        **overrides: Override default values for any field

    Returns:
        FunctionMetadata with all required fields populated
    """
    defaults = {
        "name": "strings/testOp",
        "category": "strings",
        "description": "Test operation for unit tests",
        "parameters": [
            {
                "name": "input",
                "type": "string",
                "description": "Input value",
                "required": True,
            }
        ],
        "returns": "string",
        "tags": ["test"],
    }
    return FunctionMetadata.model_validate({**defaults, **overrides})


@pytest.fixture
def make_entry():
    """Fixture providing the make_valid_entry helper function."""
    return make_valid_entry


@pytest.fixture
def catalog() -> FunctionCatalog:
    """Frozen catalog built by the standard registration sequence."""
    return build_catalog()


@pytest.fixture
def small_catalog() -> FunctionCatalog:
    """Hand-built catalog, registered out of alphabetical order."""
    catalog = FunctionCatalog()
    catalog.register(
        make_valid_entry(
            name="strings/upper", description="Upper case a string", tags=["case"]
        )
    )
    catalog.register(
        make_valid_entry(
            name="math/double",
            category="math",
            description="Double a number",
            tags=["arithmetic"],
        )
    )
    catalog.register(
        make_valid_entry(
            name="strings/lower", description="Lower case a string", tags=["Case"]
        )
    )
    catalog.register(
        make_valid_entry(
            name="zeta/op",
            category="Zeta",
            description="Capitalised category",
            tags=[],
        )
    )
    return catalog.freeze()


@pytest.fixture
def tools(catalog) -> Tools:
    return Tools(catalog=catalog)


@pytest.fixture
def dispatcher(tools):
    return tools.dispatcher


@pytest.fixture
def catalog_file(tmp_path) -> Path:
    """Write a catalog YAML file holding the packaged entries, reversed."""
    entries = [e.to_payload() for e in reversed(build_catalog().all())]
    path = tmp_path / "functions.yml"
    path.write_text(yaml.safe_dump({"functions": entries}), encoding="utf-8")
    return path
