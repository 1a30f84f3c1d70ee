import pytest
from placement_test.components.catalog import ProficiencyGroup
from placement_test.components.pools import (
    DEFAULT_POOL_CATALOG,
    GENERIC_TAG,
    PoolCatalog,
    QuestionTemplate,
    load_pool_catalog,
)

def test_default_catalog_has_five_templates_per_group():
    for group in ProficiencyGroup:
        assert len(DEFAULT_POOL_CATALOG.pool(group)) == 5
    assert len(DEFAULT_POOL_CATALOG.generic) == 5

def test_default_templates_are_well_formed():
    templates = [t for g in ProficiencyGroup for t in DEFAULT_POOL_CATALOG.pool(g)] + list(DEFAULT_POOL_CATALOG.generic)
    for t in templates:
        assert len(t.options) == 4
        assert len(set(t.options)) == 4
        assert 0 <= t.correct_index < 4

def test_empty_group_falls_back_to_generic():
    generic = (QuestionTemplate("stem", ("a", "b"), 0),)
    catalog = PoolCatalog(pools={ProficiencyGroup.DOMESTIC_DAILY: ()}, generic=generic)
    assert catalog.pool(ProficiencyGroup.DOMESTIC_DAILY) == generic
    assert catalog.pool(ProficiencyGroup.OVERSEAS_EXAM) == generic

def test_load_pool_catalog(tmp_path):
    path = tmp_path / "pools.yaml"
    path.write_text(
        "pools:\n"
        "  domestic_middle:\n"
        "    - stem: 'Pick b'\n"
        "      options: [a, b, c, d]\n"
        "      correct_index: 1\n"
        "generic:\n"
        "  - stem: 'Pick a'\n"
        "    options: [a, b]\n"
        "    correct_index: 0\n",
        encoding="utf-8",
    )
    catalog = load_pool_catalog(str(path))
    middle = catalog.pool(ProficiencyGroup.DOMESTIC_MIDDLE)
    assert len(middle) == 1
    assert middle[0].correct_option == "b"
    assert middle[0].level_tag == "domestic_middle"
    # group missing from the file gets the generic set
    assert catalog.pool(ProficiencyGroup.DOMESTIC_HIGH)[0].level_tag == GENERIC_TAG

def test_load_pool_catalog_unknown_group(tmp_path):
    path = tmp_path / "pools.yaml"
    path.write_text("pools:\n  martian: []\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_pool_catalog(str(path))

def test_load_pool_catalog_bad_correct_index(tmp_path):
    path = tmp_path / "pools.yaml"
    path.write_text(
        "generic:\n"
        "  - stem: 'x'\n"
        "    options: [a, b]\n"
        "    correct_index: 5\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError):
        load_pool_catalog(str(path))
