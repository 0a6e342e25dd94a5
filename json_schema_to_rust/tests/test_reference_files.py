from pathlib import Path
from unittest import TestCase

from json_schema_to_rust.pipeline import CodeGeneratorConfig, PipelineGenerator

TEST_DATA = Path(__file__).parent / "test_data"


def json_schema_to_rust(path):
    config = CodeGeneratorConfig(add_generation_comment=False, use_uuid_format=True)
    return PipelineGenerator(path.read_text(), config).generate()


class TestReferenceFiles(TestCase):
    def check(self, name):
        out = json_schema_to_rust(TEST_DATA / f"{name}.schema.json")
        ref = (TEST_DATA / f"{name}.rs").read_text()
        self.assertEqual(out, ref)

    def test_readme_example(self):
        self.check("readme_example")

    def test_order(self):
        self.check("order")
