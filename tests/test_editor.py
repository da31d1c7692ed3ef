from neonize.config import PLACEHOLDER_IMAGE_URL
from neonize.editor import (EditorSession, EditorState, initial_state,
                            replace_source, reset_filters, set_filter)
from neonize.filters import DEFAULT_VALUES, FilterStateManager
from neonize.services.images import SourceImage


def test_initial_state_uses_placeholder():
    state = initial_state()
    assert state.source == SourceImage(url=PLACEHOLDER_IMAGE_URL)
    assert state.filters == DEFAULT_VALUES


def test_transitions_return_new_states():
    state = EditorState()
    updated = set_filter(state, "brightness", 150)
    assert updated.filters["brightness"] == 150
    assert state.filters["brightness"] == 100
    assert reset_filters(updated).filters == DEFAULT_VALUES


def test_new_source_resets_filters():
    state = set_filter(initial_state(), "invert", 100)
    source = SourceImage(url="https://example.com/new.png")
    updated = replace_source(state, source)
    assert updated.source is source
    assert updated.filters == DEFAULT_VALUES


def test_session_filters_are_a_filter_state_manager():
    session = EditorSession(EditorState())
    assert isinstance(session.filters, FilterStateManager)
    assert session.state.source is None
    assert session.filters.set("blur", 25)["blur"] == 10
    assert session.state.filters["blur"] == 10
    session.filters.set("sepia", 30)
    assert session.filters.reset() == DEFAULT_VALUES
    assert session.state.filters == DEFAULT_VALUES


def test_session_replace_source_resets_its_filters():
    session = EditorSession(EditorState())
    session.filters.set("blur", 6)
    snapshot = session.filters.current_state()
    filters = session.filters
    session.replace_source(SourceImage(url="https://example.com/new.png"))
    assert session.state.source == SourceImage(url="https://example.com/new.png")
    assert filters.current_state() == DEFAULT_VALUES
    assert snapshot["blur"] == 6


def test_manager_load_replaces_state():
    manager = FilterStateManager()
    state = FilterStateManager().set("invert", 40)
    assert manager.load(state) is state
    assert manager.current_state()["invert"] == 40
