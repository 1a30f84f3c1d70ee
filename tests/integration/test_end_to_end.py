from placement_test import (
    SessionState,
    TestSession,
    assemble,
    get_level,
    resolve,
)

def test_junior1_attempt_t1_two_of_five_falls_back_to_primary6():
    level = get_level("junior1")
    attempt = assemble(level, "T1", 10)
    assert len(attempt) == 5

    session = TestSession(attempt.questions)
    for i, q in enumerate(attempt.questions):
        choice = q.correct_index if i < 2 else (q.correct_index + 1) % len(q.options)
        session.select_option(choice)
        session.advance()

    assert session.state == SessionState.COMPLETED
    assert session.score == 0.4
    assert resolve(level, session.score) == get_level("primary6")

def test_reset_replays_identical_attempt():
    attempt = assemble(get_level("cefr_c1"), "replay", 10)
    session = TestSession(attempt.questions)
    before = [q.stem for q in session.questions]
    session.select_option(0)
    session.advance()
    session.reset()
    assert [q.stem for q in session.questions] == before
    assert session.score == 0.0
