import pytest

from json_schema_to_rust.pipeline import CodeGeneratorConfig, PipelineGenerator, SchemaValidationError
from json_schema_to_rust.validator import IssueKind, SchemaValidationIssue, SchemaValidator


def issues_of(schema):
    return [(issue.path, issue.kind) for issue in SchemaValidator().validate(schema)]


def root(**properties):
    return {"type": "object", "properties": properties}


def test_clean_schema_has_no_issues():
    schema = {
        "type": "object",
        "title": "Clean",
        "description": "All supported keywords.",
        "required": ["id"],
        "additionalProperties": {"type": "string"},
        "properties": {
            "id": {"type": "string", "format": "uuid"},
            "count": {"type": "integer", "minimum": 0, "maximum": 10, "default": 1},
            "tags": {"type": "array", "items": {"type": "string"}, "default": []},
            "status": {"type": "string", "enum": ["a", "b"]},
        },
    }
    assert issues_of(schema) == []


@pytest.mark.parametrize(
    "schema,expected",
    [
        ([], [("", IssueKind.ROOT_NOT_OBJECT)]),
        ({"properties": {"x": {"type": "string"}}}, [("", IssueKind.ROOT_MISSING_TYPE)]),
        ({"type": "array", "items": {"type": "string"}}, [("", IssueKind.ROOT_NOT_OBJECT)]),
        (
            {"type": ["object", "null"], "properties": {"x": {"type": "string"}}},
            [("", IssueKind.TYPE_ARRAY_NOT_SUPPORTED), ("/type", IssueKind.TYPE_ARRAY_NOT_SUPPORTED)],
        ),
        ({"type": "object"}, [("", IssueKind.NO_STRUCTS_TO_GENERATE)]),
    ],
)
def test_root_checks(schema, expected):
    assert issues_of(schema) == expected


@pytest.mark.parametrize(
    "prop,path,kind",
    [
        ({"type": "null"}, "/properties/p/type", IssueKind.NULL_TYPE_NOT_SUPPORTED),
        ({"type": ["string", "null"]}, "/properties/p/type", IssueKind.TYPE_ARRAY_NOT_SUPPORTED),
        ({"type": 5}, "/properties/p/type", IssueKind.INVALID_TYPE_VALUE),
        ({"type": "date"}, "/properties/p/type", IssueKind.PROPERTY_WITH_UNSUPPORTED_TYPE),
        ({"type": "string", "enum": "a"}, "/properties/p/enum", IssueKind.INVALID_ENUM_FORMAT),
        ({"type": "string", "enum": []}, "/properties/p/enum", IssueKind.ENUM_EMPTY),
        ({"type": "string", "enum": ["a", 1]}, "/properties/p/enum", IssueKind.ENUM_CONTAINS_NON_STRING_VALUES),
        ({"type": "array"}, "/properties/p", IssueKind.ARRAY_MISSING_ITEMS),
        ({"type": "array", "items": [{"type": "string"}]}, "/properties/p/items", IssueKind.INVALID_ITEMS_FORMAT),
        ({"type": "object", "properties": {"x": {"type": "string"}}, "default": {}}, "/properties/p/default",
         IssueKind.UNSUPPORTED_DEFAULT_OBJECT),
        ({"type": "array", "items": {"type": "string"}, "default": ["a"]}, "/properties/p/default",
         IssueKind.UNSUPPORTED_DEFAULT_NON_EMPTY_ARRAY),
        ({"type": "integer", "minimum": "0"}, "/properties/p/minimum", IssueKind.INVALID_MINIMUM_MAXIMUM),
        ({"type": "integer", "maximum": True}, "/properties/p/maximum", IssueKind.INVALID_MINIMUM_MAXIMUM),
        ({"type": "string", "pattern": "^a"}, "/properties/p/pattern", IssueKind.UNSUPPORTED_KEYWORD),
        ({"$ref": "#/definitions/Other"}, "/properties/p/$ref", IssueKind.UNSUPPORTED_KEYWORD),
        ({"type": "string", "optional": True}, "/properties/p/optional", IssueKind.UNSUPPORTED_KEYWORD),
        ({"type": "string", "colour": "red"}, "/properties/p/colour", IssueKind.UNKNOWN_KEYWORD),
    ],
)
def test_property_issues(prop, path, kind):
    assert issues_of(root(p=prop)) == [(path, kind)]


class TestRequired:
    def test_not_a_list(self):
        schema = root(x={"type": "string"})
        schema["required"] = "x"
        assert issues_of(schema) == [("/required", IssueKind.INVALID_REQUIRED_FORMAT)]

    def test_non_string_entry(self):
        schema = root(x={"type": "string"})
        schema["required"] = ["x", 3]
        assert issues_of(schema) == [("/required", IssueKind.INVALID_REQUIRED_FORMAT)]

    def test_one_issue_per_list(self):
        schema = root(x={"type": "string"})
        schema["required"] = ["y", "z"]
        assert issues_of(schema) == [("/required", IssueKind.REQUIRED_PROPERTY_NOT_IN_PROPERTIES)]


class TestAdditionalProperties:
    @pytest.mark.parametrize("value", [True, False, {"type": "integer"}])
    def test_supported_forms(self, value):
        schema = root(x={"type": "string"})
        schema["additionalProperties"] = value
        assert issues_of(schema) == []

    @pytest.mark.parametrize("value", [{"type": "null"}, {"type": ["string"]}, {}, "yes"])
    def test_unsupported_forms(self, value):
        schema = root(x={"type": "string"})
        schema["additionalProperties"] = value
        assert ("/additionalProperties", IssueKind.ADDITIONAL_PROPERTIES_UNSUPPORTED_SCHEMA) in issues_of(schema)


def test_nested_paths_are_escaped():
    schema = root(**{"a/b": {"type": "object", "properties": {"c~d": {"type": "null"}}}})
    assert issues_of(schema) == [("/properties/a~1b/properties/c~0d/type", IssueKind.NULL_TYPE_NOT_SUPPORTED)]


def test_every_issue_is_reported():
    schema = root(a={"type": "null"}, b={"type": "string", "pattern": "x"}, c={"type": "array"})
    assert len(issues_of(schema)) == 3


@pytest.mark.parametrize(
    "issue,text",
    [
        (SchemaValidationIssue("", IssueKind.ROOT_MISSING_TYPE), "(root): root has no type key"),
        (
            SchemaValidationIssue("/properties/p/optional", IssueKind.UNSUPPORTED_KEYWORD, "optional"),
            "/properties/p/optional: keyword optional not supported (use required array)",
        ),
        (
            SchemaValidationIssue("/properties/p/pattern", IssueKind.UNSUPPORTED_KEYWORD, "pattern"),
            "/properties/p/pattern: keyword pattern not supported",
        ),
        (
            SchemaValidationIssue("/properties/p/colour", IssueKind.UNKNOWN_KEYWORD, "colour"),
            "/properties/p/colour: unknown keyword: colour",
        ),
    ],
)
def test_issue_messages(issue, text):
    assert str(issue) == text


class TestStrictGeneration:
    def test_strict_mode_raises_with_all_issues(self):
        config = CodeGeneratorConfig(add_generation_comment=False, deny_invalid_unknown_json_schema=True)
        schema = root(a={"type": "null"}, b={"type": "string", "pattern": "x"})

        with pytest.raises(SchemaValidationError) as exc_info:
            PipelineGenerator(schema, config).generate()

        assert len(exc_info.value.issues) == 2
        assert "2 issue(s)" in str(exc_info.value)
        assert "/properties/a/type" in str(exc_info.value)

    def test_lenient_mode_skips_the_same_schema(self):
        config = CodeGeneratorConfig(add_generation_comment=False)
        schema = root(a={"type": "null"}, b={"type": "string", "pattern": "x"})

        output = PipelineGenerator(schema, config).generate()
        assert "pub b: Option<String>," in output
        assert "pub a" not in output

    def test_strict_mode_accepts_a_clean_schema(self):
        config = CodeGeneratorConfig(add_generation_comment=False, deny_invalid_unknown_json_schema=True)
        output = PipelineGenerator(root(x={"type": "string"}), config).generate()
        assert "pub struct Root {" in output


if __name__ == "__main__":
    pytest.main([__file__])
