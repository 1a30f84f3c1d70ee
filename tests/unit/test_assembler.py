import pytest
from placement_test.components.assembler import (
    MIN_QUESTIONS,
    PoolUnavailableError,
    assemble,
    question_count,
    shuffle_in_place,
    shuffle_options,
)
from placement_test.components.catalog import ProficiencyGroup, get_level
from placement_test.components.pools import DEFAULT_POOL_CATALOG, PoolCatalog, QuestionTemplate
from placement_test.components.rng import SplitMix64, make_attempt_seed

def _signature(attempt):
    return tuple((q.stem, q.options, q.correct_index) for q in attempt.questions)

def _big_pool(n):
    return tuple(
        QuestionTemplate(f"q{i}", (f"q{i}-a", f"q{i}-b", f"q{i}-c", f"q{i}-d"), i % 4)
        for i in range(n)
    )

def test_assemble_is_deterministic():
    level = get_level("senior2")
    a1 = assemble(level, "attempt-1", 10)
    a2 = assemble(level, "attempt-1", 10)
    assert _signature(a1) == _signature(a2)
    assert a1.seed == a2.seed == make_attempt_seed("attempt-1")

def test_assemble_differs_across_attempt_ids():
    level = get_level("senior2")
    signatures = {_signature(assemble(level, f"attempt-{i}", 10)) for i in range(10)}
    assert len(signatures) == 10

def test_assemble_never_exceeds_pool_size():
    attempt = assemble(get_level("cet4"), "big-request", 100)
    assert len(attempt) == 5

def test_question_count_boundaries():
    assert question_count(100, 5) == 5
    assert question_count(3, 5) == 5
    assert question_count(3, 20) == MIN_QUESTIONS
    assert question_count(10, 20) == 10
    assert question_count(100, 20) == 20
    assert question_count(0, 20) == MIN_QUESTIONS

def test_assemble_large_pool_respects_requested_count():
    catalog = PoolCatalog(pools={ProficiencyGroup.OVERSEAS_CEFR: _big_pool(20)})
    level = get_level("cefr_b1")
    assert len(assemble(level, "x", 10, catalog=catalog)) == 10
    assert len(assemble(level, "x", 2, catalog=catalog)) == MIN_QUESTIONS

def test_assemble_questions_come_from_the_group_pool_without_repeats():
    level = get_level("pet")
    attempt = assemble(level, "T9", 10)
    pool_stems = {t.stem for t in DEFAULT_POOL_CATALOG.pool(level.group)}
    stems = [q.stem for q in attempt.questions]
    assert set(stems) <= pool_stems
    assert len(stems) == len(set(stems))
    assert all(q.level_tag == "pet" for q in attempt.questions)

def test_correct_option_text_is_preserved():
    level = get_level("junior2")
    originals = {t.stem: t.correct_option for t in DEFAULT_POOL_CATALOG.pool(level.group)}
    for i in range(20):
        attempt = assemble(level, f"check-{i}", 10)
        for q in attempt.questions:
            assert q.options[q.correct_index] == originals[q.stem]

def test_options_are_a_permutation():
    level = get_level("daily")
    originals = {t.stem: t.options for t in DEFAULT_POOL_CATALOG.pool(level.group)}
    attempt = assemble(level, "perm", 10)
    for q in attempt.questions:
        assert sorted(q.options) == sorted(originals[q.stem])

def test_assemble_uses_generic_pool_when_group_empty():
    generic = _big_pool(7)
    catalog = PoolCatalog(pools={}, generic=generic)
    attempt = assemble(get_level("ket"), "g", 10, catalog=catalog)
    assert len(attempt) == 7
    assert {q.stem for q in attempt.questions} == {t.stem for t in generic}

def test_assemble_raises_when_no_pool_available():
    with pytest.raises(PoolUnavailableError):
        assemble(get_level("ket"), "g", 10, catalog=PoolCatalog())

def test_shuffle_options_keeps_index_when_correct_missing():
    # correct_index outside the option list cannot be located after shuffling
    broken = QuestionTemplate("broken", ("a", "b", "c"), 7)
    shuffled = shuffle_options(broken, SplitMix64(1))
    assert shuffled.correct_index == 7
    assert sorted(shuffled.options) == ["a", "b", "c"]

def test_shuffle_in_place_is_a_permutation():
    items = list(range(30))
    shuffle_in_place(items, SplitMix64(99))
    assert sorted(items) == list(range(30))
    assert items != list(range(30))

def test_option_shuffle_continues_the_pool_stream():
    # reseeding per question would make equal option lists shuffle identically
    same = ("w", "x", "y", "z")
    pool = tuple(QuestionTemplate(f"s{i}", same, 0) for i in range(6))
    catalog = PoolCatalog(pools={ProficiencyGroup.DOMESTIC_EXAM: pool})
    attempt = assemble(get_level("graduate"), "stream", 6, catalog=catalog)
    assert len({q.options for q in attempt.questions}) > 1

def test_assemble_junior1_t1_golden_attempt():
    # pinned output; any change to seeding, shuffling or remapping breaks it
    attempt = assemble(get_level("junior1"), "T1", 10)
    assert attempt.seed == 663435453709889526
    assert _signature(attempt) == (
        ("Choose the question for: 'I get up at seven.'",
         ("What time are you get up?", "What time do you get up?", "What time you get up?", "What time does you get up?"), 1),
        ("Choose a synonym of 'big'.", ("large", "short", "small", "thin"), 0),
        ("Choose the correct sentence.",
         ("She doesn't like milk.", "She doesn't likes milk.", "She don't likes milk.", "She don't like milk."), 0),
        ("Choose the correct preposition: I am ___ school.", ("at", "by", "in", "on"), 0),
        ("Choose the past tense of 'go'.", ("going", "went", "gone", "goes"), 1),
    )
