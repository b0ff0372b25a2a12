from src.core.expansion import ExpansionState


def test_unknown_path_reads_collapsed():
    state = ExpansionState()
    assert state.is_expanded("a.ts") is False
    assert "a.ts" not in state


def test_toggle_twice_restores_value():
    state = ExpansionState()

    assert state.toggle("a.ts") is True
    assert state.is_expanded("a.ts") is True
    assert state.toggle("a.ts") is False
    assert state.is_expanded("a.ts") is False


def test_toggle_accepts_paths_outside_any_grouping():
    state = ExpansionState()
    state.toggle("ghost.ts")
    assert state.snapshot() == {"ghost.ts": True}


def test_expand_all_and_collapse_all_are_idempotent():
    state = ExpansionState()
    paths = ["a.ts", "b.ts"]

    state.expand_all(paths)
    first = state.snapshot()
    state.expand_all(paths)
    assert state.snapshot() == first == {"a.ts": True, "b.ts": True}

    state.collapse_all()
    state.collapse_all()
    assert state.snapshot() == {}
    assert len(state) == 0


def test_collapse_then_toggle_leaves_other_paths_absent():
    state = ExpansionState()
    state.expand_all(["a.ts", "b.ts"])

    state.collapse_all()
    state.toggle("a.ts")

    assert state.snapshot() == {"a.ts": True}
    assert state.is_expanded("b.ts") is False


def test_reset_is_collapse_all():
    state = ExpansionState()
    state.expand_all(["a.ts"])
    state.reset()
    assert state.snapshot() == {}
