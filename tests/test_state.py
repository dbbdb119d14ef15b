from prism_picker.errors import LoadError


def test_apply_replaces_active_theme(make_state):
    state = make_state({"a", "b"}, active="a")
    result = state.apply("b")
    assert result.ok
    assert state.list_active() == ["b"]
    assert state.backend.calls == [("deactivate", "a"), ("activate", "b")]


def test_apply_failure_is_reported_not_raised(make_state, notices):
    state = make_state({"a", "bad"}, broken={"bad"}, active="a")
    result = state.apply("bad")

    assert not result.ok
    assert isinstance(result.error, LoadError)
    assert result.error.theme == "bad"
    assert isinstance(result.error.cause, ValueError)
    assert state.current is None
    assert state.backend.rendered is None
    message, severity = notices.items[-1]
    assert severity == "error"
    assert "bad" in message and "invalid color" in message


def test_deactivate_all_clears_state(make_state):
    state = make_state({"a"}, active="a")
    state.deactivate_all()
    assert state.current is None
    assert state.list_active() == []
    assert state.backend.calls == [("deactivate", "a")]


def test_is_loadable_delegates_to_backend(make_state):
    state = make_state({"a"})
    assert state.is_loadable("a")
    assert not state.is_loadable("b")


def test_adopt_records_external_theme_without_backend_calls(make_state):
    state = make_state({"a", "b"}, active="a")
    state.adopt("b")
    assert state.list_active() == ["b"]
    state.adopt(None)
    assert state.current is None
    assert state.backend.calls == []
