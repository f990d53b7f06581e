import importlib.util
import pathlib
import sys
import types
import unittest


REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
BRIDGE_ROOT = REPO_ROOT / "name_bridge"

if "name_bridge" not in sys.modules:
    package = types.ModuleType("name_bridge")
    package.__path__ = [str(BRIDGE_ROOT)]
    sys.modules["name_bridge"] = package

if "name_bridge.core" not in sys.modules:
    core_package = types.ModuleType("name_bridge.core")
    core_package.__path__ = [str(BRIDGE_ROOT / "core")]
    sys.modules["name_bridge.core"] = core_package


MODULE_PATH = BRIDGE_ROOT / "core" / "list_parse.py"
SPEC = importlib.util.spec_from_file_location(
    "name_bridge.core.list_parse",
    MODULE_PATH,
    submodule_search_locations=[str(BRIDGE_ROOT / "core")],
)
module = importlib.util.module_from_spec(SPEC)
assert SPEC.loader is not None
module.__package__ = "name_bridge.core"
sys.modules["name_bridge.core.list_parse"] = module
SPEC.loader.exec_module(module)  # type: ignore[arg-type]


parse_list = module.parse_list
describe_length_mismatch = module.describe_length_mismatch


class ListParseTests(unittest.TestCase):
    def test_parses_bracketed_list(self):
        self.assertEqual(parse_list("[name1,name2,name3]"), ["name1", "name2", "name3"])

    def test_keeps_empty_entries_and_spaces(self):
        self.assertEqual(parse_list("[a,,b]"), ["a", "", "b"])
        self.assertEqual(parse_list("[a, b]"), ["a", " b"])

    def test_empty_inputs(self):
        self.assertEqual(parse_list("[]"), [])
        self.assertEqual(parse_list(""), [])
        self.assertEqual(parse_list("["), [])

    def test_single_entry(self):
        self.assertEqual(parse_list("[Chair]"), ["Chair"])

    def test_mismatch_message_names_what_is_left_out(self):
        self.assertEqual(describe_length_mismatch(3, 3), "")
        more_names = describe_length_mismatch(3, 1)
        self.assertIn("last 2 name(s) are ignored", more_names)
        fewer_names = describe_length_mismatch(1, 3)
        self.assertIn("last 2 object(s) keep their names", fewer_names)
        self.assertNotIn("ignored", fewer_names)


if __name__ == "__main__":
    unittest.main()
