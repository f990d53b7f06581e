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


MODULE_PATH = BRIDGE_ROOT / "core" / "identifier.py"
SPEC = importlib.util.spec_from_file_location(
    "name_bridge.core.identifier",
    MODULE_PATH,
    submodule_search_locations=[str(BRIDGE_ROOT / "core")],
)
identifier = importlib.util.module_from_spec(SPEC)
assert SPEC.loader is not None
identifier.__package__ = "name_bridge.core"
sys.modules["name_bridge.core.identifier"] = identifier
SPEC.loader.exec_module(identifier)  # type: ignore[arg-type]


Identifier = identifier.Identifier
split_suffix = identifier.split_suffix
format_identifier = identifier.format_identifier


class IdentifierTests(unittest.TestCase):
    def test_split_suffix(self):
        self.assertEqual(split_suffix("Chair"), ("Chair", 0))
        self.assertEqual(split_suffix("Chair_5"), ("Chair", 5))
        self.assertEqual(split_suffix("Big_Chair_12"), ("Big_Chair", 12))

    def test_split_suffix_ignores_non_suffix_tails(self):
        self.assertEqual(split_suffix("Chair_05"), ("Chair_05", 0))
        self.assertEqual(split_suffix("Chair_0"), ("Chair_0", 0))
        self.assertEqual(split_suffix("_5"), ("_5", 0))
        self.assertEqual(split_suffix("Chair_"), ("Chair_", 0))
        self.assertEqual(split_suffix("Chair_5a"), ("Chair_5a", 0))

    def test_custom_separator(self):
        self.assertEqual(split_suffix("Chair.3", "."), ("Chair", 3))
        self.assertEqual(split_suffix("Chair_3", "."), ("Chair_3", 0))

    def test_format_identifier(self):
        self.assertEqual(format_identifier("Chair", 0), "Chair")
        self.assertEqual(format_identifier("Chair", 10), "Chair_10")

    def test_next_increments_suffix(self):
        ident = Identifier.parse("Chair")
        self.assertEqual(ident.next().text, "Chair_1")
        self.assertEqual(Identifier.parse("Chair_9").next().text, "Chair_10")
        self.assertEqual(str(Identifier.parse("Door_1")), "Door_1")

    def test_parse_round_trip_keeps_text(self):
        for name in ("Chair", "Chair_7", "Chair_07", "_3"):
            self.assertEqual(Identifier.parse(name).text, name)


if __name__ == "__main__":
    unittest.main()
