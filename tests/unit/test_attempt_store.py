from placement_test.components.assembler import assemble
from placement_test.components.attempt_store import AttemptStore, make_cache_key
from placement_test.components.catalog import get_level

def test_attempt_store_get_returns_none_when_missing():
    store = AttemptStore()
    key = ("junior1", "T1", 10)
    assert store.get(key) is None

def test_attempt_store_set_then_get_returns_same_object():
    store = AttemptStore()
    level = get_level("junior1")
    attempt = assemble(level, "T1", 10)
    key = make_cache_key(level, "T1", 10)

    store.set(key, attempt)
    assert store.get(key) is attempt

def test_get_or_assemble_caches():
    store = AttemptStore()
    level = get_level("cae")
    first = store.get_or_assemble(level, "A", 10)
    second = store.get_or_assemble(level, "A", 10)
    assert first is second
    assert len(store.attempts) == 1

def test_get_or_assemble_key_includes_requested_count():
    store = AttemptStore()
    level = get_level("cae")
    store.get_or_assemble(level, "A", 10)
    store.get_or_assemble(level, "A", 5)
    assert len(store.attempts) == 2

def test_cached_attempt_matches_fresh_assembly():
    store = AttemptStore()
    level = get_level("fce")
    cached = store.get_or_assemble(level, "same", 10)
    assert cached == assemble(level, "same", 10)

def test_attempt_store_evicts_oldest_when_full():
    store = AttemptStore(max_entries=2)
    level = get_level("ket")
    store.get_or_assemble(level, "a", 10)
    store.get_or_assemble(level, "b", 10)
    store.get_or_assemble(level, "c", 10)
    assert len(store.attempts) == 2
    assert store.get(make_cache_key(level, "a", 10)) is None
    assert store.get(make_cache_key(level, "c", 10)) is not None

def test_attempt_store_restoring_a_key_refreshes_it():
    store = AttemptStore(max_entries=2)
    level = get_level("ket")
    a = store.get_or_assemble(level, "a", 10)
    store.get_or_assemble(level, "b", 10)
    store.set(make_cache_key(level, "a", 10), a)
    store.get_or_assemble(level, "c", 10)
    assert store.get(make_cache_key(level, "a", 10)) is a
    assert store.get(make_cache_key(level, "b", 10)) is None

def test_attempt_store_unbounded():
    store = AttemptStore(max_entries=None)
    level = get_level("ket")
    for i in range(300):
        store.get_or_assemble(level, i, 10)
    assert len(store.attempts) == 300
