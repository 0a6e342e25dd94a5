import pytest

from json_schema_to_rust.pipeline.config import CodeGeneratorConfig, FormatterConfig, OutputConfig, OutputMode


def test_defaults():
    config = CodeGeneratorConfig()
    assert config.root_name == "Root"
    assert config.add_generation_comment
    assert not config.deny_invalid_unknown_json_schema
    assert not config.use_uuid_format
    assert config.formatter == FormatterConfig()
    assert config.output == OutputConfig()
    assert config.output.mode is OutputMode.ERROR_IF_EXISTS


def test_from_dict():
    config = CodeGeneratorConfig.from_dict(
        {
            "root_name": "Settings",
            "use_uuid_format": True,
            "formatter": {"enabled": True, "edition": "2018"},
            "output": {"mode": "force", "atomic_write": False},
            "unknown_option": 1,
        }
    )
    assert config.root_name == "Settings"
    assert config.use_uuid_format
    assert config.formatter == FormatterConfig(enabled=True, edition="2018")
    assert config.output.mode is OutputMode.FORCE
    assert not config.output.atomic_write
    assert config.output.validate_before_write
    assert not hasattr(config, "unknown_option")


def test_dict_round_trip():
    config = CodeGeneratorConfig(root_name="Settings", deny_invalid_unknown_json_schema=True)
    config.output.mode = OutputMode.FORCE
    assert CodeGeneratorConfig.from_dict(config.to_dict()) == config


def test_invalid_output_mode():
    with pytest.raises(ValueError):
        CodeGeneratorConfig.from_dict({"output": {"mode": "sometimes"}})
