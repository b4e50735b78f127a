import pytest
from pydantic import ValidationError

from monolith.models import CategoryInfo, FunctionMetadata, category_description


def test_entry_is_frozen(make_entry):
    entry = make_entry()
    with pytest.raises(ValidationError):
        entry.description = "changed"  # type: ignore[misc]


def test_sequences_are_stored_as_tuples(make_entry):
    entry = make_entry(tags=["a", "b"])
    assert entry.tags == ("a", "b")
    assert isinstance(entry.parameters, tuple)


@pytest.mark.parametrize(
    "name",
    ["strings/toCamelCase", "data/arrays/unique", "math/round", "encoding/base64Decode"],
)
def test_valid_names(make_entry, name):
    assert make_entry(name=name).name == name


@pytest.mark.parametrize(
    "name", ["toCamelCase", "Strings/upper", "strings/", "/upper", "strings/to-kebab"]
)
def test_invalid_names_rejected(make_entry, name):
    with pytest.raises(ValidationError):
        make_entry(name=name)


def test_blank_category_rejected(make_entry):
    with pytest.raises(ValidationError):
        make_entry(category="  ")


def test_unknown_field_rejected(make_entry):
    with pytest.raises(ValidationError):
        make_entry(owner="someone")


def test_to_payload_omits_unset_optionals(make_entry):
    payload = make_entry().to_payload()
    assert "subcategory" not in payload
    assert "performance" not in payload
    assert payload["tags"] == ["test"]
    assert payload["parameters"][0]["name"] == "input"


def test_to_payload_keeps_example_io(make_entry):
    entry = make_entry(
        examples=[{"description": "d", "input": {"input": "x"}, "output": False}]
    )
    example = entry.to_payload()["examples"][0]
    assert example == {"description": "d", "input": {"input": "x"}, "output": False}


def test_summary_projection(make_entry):
    summary = make_entry(tags=["x"]).summary()
    assert summary == {
        "name": "strings/testOp",
        "category": "strings",
        "description": "Test operation for unit tests",
        "tags": ["x"],
    }


def test_category_description():
    assert category_description("strings") == "Strings utility functions"
    info = CategoryInfo(name="math", description=category_description("math"), count=2)
    assert info.model_dump() == {
        "name": "math",
        "description": "Math utility functions",
        "count": 2,
    }


def test_model_validate_from_mapping():
    entry = FunctionMetadata.model_validate(
        {
            "name": "math/noop",
            "category": "math",
            "description": "No operation",
            "returns": "nothing",
        }
    )
    assert entry.parameters == ()
    assert entry.examples == ()


def test_example_input_is_read_only(catalog):
    entry = catalog.by_name("strings/truncate")
    with pytest.raises(TypeError):
        entry.examples[0].input["length"] = 1  # type: ignore[index]
    assert catalog.by_name("strings/truncate").examples[0].input["length"] == 8


def test_nested_example_values_are_read_only(catalog):
    example = catalog.by_name("data/arrays/sortBy").examples[0]
    with pytest.raises(AttributeError):
        example.input["array"].append({"name": "Eve"})  # type: ignore[attr-defined]
    with pytest.raises(TypeError):
        example.output[0]["age"] = 99  # type: ignore[index]


def test_parameter_default_is_read_only(make_entry):
    entry = make_entry(
        parameters=[
            {
                "name": "options",
                "type": "object",
                "description": "Options",
                "required": False,
                "default": {"flags": ["a"]},
            }
        ]
    )
    with pytest.raises(TypeError):
        entry.parameters[0].default["flags"] = []  # type: ignore[index]
    assert entry.to_payload()["parameters"][0]["default"] == {"flags": ["a"]}


def test_example_arguments_are_mutable_copies(catalog):
    example = catalog.by_name("strings/truncate").examples[0]
    arguments = example.arguments()
    arguments["length"] = 1
    assert example.input["length"] == 8
    assert catalog.by_name("strings/truncate").to_payload()["examples"][0]["input"] == {
        "input": "Hello World",
        "length": 8,
    }
