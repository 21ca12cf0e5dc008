"""Every registered example prints exactly its documented sample output."""
import importlib

import pytest

from pattern_catalog.domain.base.pattern_unit import PatternCategory

EXPECTED_CATEGORIES = {
    "singleton": PatternCategory.CREATIONAL,
    "factory": PatternCategory.CREATIONAL,
    "builder": PatternCategory.CREATIONAL,
    "decorator": PatternCategory.STRUCTURAL,
    "adapter": PatternCategory.STRUCTURAL,
    "proxy": PatternCategory.STRUCTURAL,
    "facade": PatternCategory.STRUCTURAL,
    "composite": PatternCategory.STRUCTURAL,
    "observer": PatternCategory.BEHAVIORAL,
    "strategy": PatternCategory.BEHAVIORAL,
    "command": PatternCategory.BEHAVIORAL,
}


@pytest.mark.conformance
class TestCatalogConformance:
    def test_registry_holds_every_unit_in_catalog_order(self, pattern_registry, expected_keys):
        assert pattern_registry.get_registered_keys() == expected_keys

    @pytest.mark.parametrize("key", sorted(EXPECTED_CATEGORIES))
    def test_output_matches_sample(self, pattern_registry, key):
        example = pattern_registry.create(key)
        assert example.render() == example.unit.sample_output

    @pytest.mark.parametrize("key", sorted(EXPECTED_CATEGORIES))
    def test_unit_documentation_is_complete(self, pattern_registry, key):
        unit = pattern_registry.get(key).unit
        assert unit.key == key
        assert unit.category == EXPECTED_CATEGORIES[key]
        assert unit.description
        assert unit.advantages
        assert unit.disadvantages

    @pytest.mark.parametrize("key", sorted(EXPECTED_CATEGORIES))
    def test_running_twice_is_repeatable(self, pattern_registry, key):
        example = pattern_registry.create(key)
        assert example.render() == example.render()

    @pytest.mark.parametrize("key", sorted(EXPECTED_CATEGORIES))
    def test_module_main_prints_sample(self, key, capsys):
        module = importlib.import_module(f"pattern_catalog.patterns.{key}")
        module.main()
        printed = capsys.readouterr().out.splitlines()
        example_class = next(
            obj for obj in vars(module).values()
            if getattr(obj, "_is_pattern_example", False) and obj.__module__ == module.__name__
        )
        assert printed == example_class.unit.sample_output
