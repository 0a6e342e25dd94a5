import json
from pathlib import Path

import pytest

from json_schema_to_rust.pipeline import CodeGeneratorConfig, PipelineGenerator


def load_test_data():
    """Load test cases from JSON file"""
    test_data_path = Path(__file__).parent / "test_data" / "default_values_tests.json"
    with open(test_data_path) as f:
        return json.load(f)


@pytest.mark.parametrize("test_case", load_test_data(), ids=lambda case: case["name"])
def test_default_values(test_case):
    """Test default strategy selection and helper generation"""
    config = CodeGeneratorConfig(add_generation_comment=False)

    # Apply config if provided in test case
    for key, value in test_case.get("config", {}).items():
        setattr(config, key, value)

    schema = {
        "type": "object",
        "title": "Sample",
        "required": test_case.get("required", []),
        "properties": test_case["properties"],
    }
    output = PipelineGenerator(schema, config).generate()

    for expected in test_case["expected"]:
        assert expected in output, f"Expected '{expected}' not found in output:\n{output}"
    for unexpected in test_case["not_expected"]:
        assert unexpected not in output, f"Unexpected '{unexpected}' found in output:\n{output}"


def test_helpers_follow_struct_emission_order():
    schema = {
        "type": "object",
        "title": "Outer",
        "properties": {
            "z": {"type": "string", "default": "outer"},
            "inner": {
                "type": "object",
                "properties": {"b": {"type": "boolean", "default": True}, "a": {"type": "integer", "default": 3}},
            },
        },
    }
    output = PipelineGenerator(schema, CodeGeneratorConfig(add_generation_comment=False)).generate()

    positions = [
        output.index("fn default_Inner_a()"),
        output.index("fn default_Inner_b()"),
        output.index("fn default_Outer_z()"),
        output.index("pub struct Inner"),
    ]
    assert positions == sorted(positions)


if __name__ == "__main__":
    pytest.main([__file__])
