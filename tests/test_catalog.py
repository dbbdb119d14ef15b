import pytest

from prism_picker.catalog import CATALOGS, DARK_THEMES, LIGHT_THEMES, OTHER_THEMES, get_catalog


def test_catalogs_are_disjoint():
    dark, light, other = set(DARK_THEMES), set(LIGHT_THEMES), set(OTHER_THEMES)
    assert not dark & light
    assert not dark & other
    assert not light & other


def test_catalog_registry_keys_and_prompts():
    assert list(CATALOGS) == ["dark", "light", "other"]
    assert get_catalog("light").themes == LIGHT_THEMES
    assert get_catalog("dark").prompt.startswith("Dark")


def test_unknown_catalog_lists_valid_keys():
    with pytest.raises(KeyError, match="dark, light, other"):
        get_catalog("neon")
