import pytest
from placement_test.components.catalog import (
    LEVELS,
    PASS_THRESHOLD,
    ProficiencyGroup,
    ProficiencyLevel,
    fallback_chain,
    get_level,
    levels_in_group,
    validate_catalog,
)

def test_every_group_has_levels():
    for group in ProficiencyGroup:
        assert levels_in_group(group), group

def test_pass_threshold_is_fixed():
    assert all(lv.pass_threshold == PASS_THRESHOLD == 0.6 for lv in LEVELS.values())

def test_get_level_unknown_raises():
    with pytest.raises(KeyError):
        get_level("primary7")

def test_junior1_falls_back_to_primary6():
    assert get_level("junior1").fallback_level == get_level("primary6")

def test_grade_numbers():
    assert get_level("primary1").grade_number == 1
    assert get_level("junior1").grade_number == 7
    assert get_level("senior3").grade_number == 12
    assert get_level("ielts").grade_number is None

def test_overseas_exams_fall_back_to_cefr_b2():
    assert get_level("ielts").fallback_id == "cefr_b2"
    assert get_level("toefl").fallback_id == "cefr_b2"

@pytest.mark.parametrize("level_id", list(LEVELS))
def test_fallback_chain_terminates_at_floor(level_id):
    level = get_level(level_id)
    chain = fallback_chain(level)
    assert len(chain) <= len(LEVELS)
    last = chain[-1] if chain else level
    assert last.is_floor

def test_graduate_chain_reaches_primary1():
    chain = [lv.id for lv in fallback_chain(get_level("graduate"))]
    assert chain[0] == "cet6"
    assert chain[-1] == "primary1"
    assert "junior1" in chain and "primary6" in chain

def test_validate_catalog_rejects_cycle():
    g = ProficiencyGroup.OVERSEAS_CEFR
    levels = {
        "a": ProficiencyLevel(id="a", group=g, label="A", vocab_estimate=1, fallback_id="b"),
        "b": ProficiencyLevel(id="b", group=g, label="B", vocab_estimate=1, fallback_id="a"),
    }
    with pytest.raises(ValueError):
        validate_catalog(levels)

def test_validate_catalog_rejects_unknown_fallback():
    g = ProficiencyGroup.OVERSEAS_CEFR
    levels = {"a": ProficiencyLevel(id="a", group=g, label="A", vocab_estimate=1, fallback_id="zzz")}
    with pytest.raises(ValueError):
        validate_catalog(levels)
