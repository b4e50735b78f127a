"""Replay every documented catalog example through the router."""

import pytest

from monolith.catalog import build_catalog
from monolith.tools import Tools

_CATALOG = build_catalog()
_EXAMPLES = [
    pytest.param(entry.name, example, id=f"{entry.name}:{example.description}")
    for entry in _CATALOG.all()
    for example in entry.examples
]


@pytest.fixture(scope="module")
def router():
    return Tools(catalog=_CATALOG).dispatcher


def test_every_function_has_an_example():
    assert all(entry.examples for entry in _CATALOG.all())


@pytest.mark.parametrize("name, example", _EXAMPLES)
def test_example_output(router, name, example):
    outcome = router.dispatch(name, example.arguments())
    assert not outcome.is_error, outcome.payload
    assert outcome.payload["success"] is True
    assert outcome.payload["result"] == example.expected()
