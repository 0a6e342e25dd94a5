import pytest

from json_schema_to_rust.pipeline.backends import RustBackend
from json_schema_to_rust.pipeline.backends.rust_backend import doc_comment_lines
from json_schema_to_rust.pipeline.config import CodeGeneratorConfig


@pytest.fixture
def backend():
    return RustBackend(CodeGeneratorConfig())


def test_render_accepts_a_name_in_the_context(backend):
    code = backend.render("default_fn", name="default_Widget_size", return_type="u8", body="3u8")
    assert code == "fn default_Widget_size() -> u8 {\n    3u8\n}"


def test_render_enum(backend):
    code = backend.render(
        "enum",
        doc_lines=[],
        derive="#[derive(Debug)]",
        name="Mode",
        variants=[{"rename": '"on"', "identifier": "On"}],
    )
    assert code == '#[derive(Debug)]\npub enum Mode {\n    #[serde(rename = "on")]\n    On,\n}'


@pytest.mark.parametrize(
    "description,expected",
    [
        (None, []),
        ("", []),
        ("  \n\t\n", []),
        ("One line.", ["/// One line."]),
        ("  padded  ", ["/// padded"]),
        ("a\n\n  b", ["/// a", "/// b"]),
        ("first\r\n   second  \n\n", ["/// first", "/// second"]),
    ],
)
def test_doc_comment_lines(description, expected):
    assert doc_comment_lines(description) == expected
