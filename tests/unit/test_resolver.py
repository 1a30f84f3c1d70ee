import pytest
from placement_test.components.catalog import LEVELS, get_level
from placement_test.components.resolver import downgrade_target, is_passed, resolve

def test_threshold_is_inclusive():
    level = get_level("junior1")
    assert resolve(level, 0.6) is level
    assert is_passed(level, 0.6)

def test_below_threshold_falls_back():
    level = get_level("junior1")
    assert resolve(level, 0.5999999) == get_level("primary6")
    assert not is_passed(level, 0.5999999)

def test_floor_level_cannot_be_downgraded():
    level = get_level("primary1")
    assert resolve(level, 0.0) is level
    assert downgrade_target(level) is None

@pytest.mark.parametrize("level_id", list(LEVELS))
def test_resolve_moves_at_most_one_step(level_id):
    level = get_level(level_id)
    out = resolve(level, 0.0)
    assert out == (level.fallback_level or level)

def test_downgrade_target_ignores_score():
    # passing and failing learners are offered the same manual downgrade
    level = get_level("fce")
    assert resolve(level, 1.0) == level
    assert downgrade_target(level) == get_level("pet")
