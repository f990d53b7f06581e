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


MODULE_PATH = BRIDGE_ROOT / "core" / "resolver.py"
SPEC = importlib.util.spec_from_file_location(
    "name_bridge.core.resolver",
    MODULE_PATH,
    submodule_search_locations=[str(BRIDGE_ROOT / "core")],
)
resolver = importlib.util.module_from_spec(SPEC)
assert SPEC.loader is not None
resolver.__package__ = "name_bridge.core"
sys.modules["name_bridge.core.resolver"] = resolver
SPEC.loader.exec_module(resolver)  # type: ignore[arg-type]


find_free_identifier = resolver.find_free_identifier
ContainerLookup = resolver.ContainerLookup


class CountingLookup:
    def __init__(self):
        self.checked = []

    def exists(self, identifier, scope):
        self.checked.append(identifier)
        return identifier in scope


class ResolverTests(unittest.TestCase):
    def test_free_base_is_returned_on_first_check(self):
        lookup = CountingLookup()
        self.assertEqual(find_free_identifier("Lamp", {"Chair"}, lookup), "Lamp")
        self.assertEqual(lookup.checked, ["Lamp"])

    def test_appends_suffix_on_collision(self):
        self.assertEqual(find_free_identifier("Door", {"Door"}), "Door_1")

    def test_ten_collisions_need_eleven_checks(self):
        scope = {"Chair"} | {f"Chair_{i}" for i in range(1, 10)}
        lookup = CountingLookup()
        self.assertEqual(find_free_identifier("Chair", scope, lookup), "Chair_10")
        self.assertLessEqual(len(lookup.checked), len(scope) + 1)
        self.assertEqual(len(lookup.checked), 11)

    def test_search_starts_at_existing_suffix(self):
        lookup = CountingLookup()
        scope = {"Chair_5", "Chair_6"}
        self.assertEqual(find_free_identifier("Chair_5", scope, lookup), "Chair_7")
        self.assertEqual(lookup.checked, ["Chair_5", "Chair_6", "Chair_7"])

    def test_leading_zero_tail_is_part_of_base(self):
        self.assertEqual(find_free_identifier("Chair_05", {"Chair_05"}), "Chair_05_1")

    def test_mapping_scope_and_custom_separator(self):
        scope = {"Crate": object(), "Crate-1": object()}
        self.assertEqual(find_free_identifier("Crate", scope, ContainerLookup(), separator="-"), "Crate-2")

    def test_result_is_unique_in_scope(self):
        scope = {"Box", "Box_1", "Box_3"}
        result = find_free_identifier("Box", scope)
        self.assertNotIn(result, scope)
        self.assertEqual(result, "Box_2")

    def test_rejects_empty_base_and_missing_scope(self):
        with self.assertRaises(ValueError):
            find_free_identifier("", {"A"})
        with self.assertRaises(ValueError):
            find_free_identifier("A", None)


if __name__ == "__main__":
    unittest.main()
