"""
Editor state

The editor is a value (source image + filter state) and every user action is
a pure transition from one value to the next. EditorSession keeps the current
value for the single in-process user.

A new source image always resets the filters to their defaults, whether it
was uploaded, picked or generated.
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from neonize.config import PLACEHOLDER_IMAGE_URL
from neonize.filters import (FilterState, FilterStateManager, default_state,
                             with_value)
from neonize.services.images import SourceImage


@dataclass(frozen=True)
class EditorState:
    source: Optional[SourceImage] = None
    filters: FilterState = field(default_factory=default_state)


def initial_state() -> EditorState:
    return EditorState(source=SourceImage(url=PLACEHOLDER_IMAGE_URL))


def set_filter(state: EditorState, name: str, value: float) -> EditorState:
    return replace(state, filters=with_value(state.filters, name, value))


def reset_filters(state: EditorState) -> EditorState:
    return replace(state, filters=default_state())


def replace_source(state: EditorState, source: SourceImage) -> EditorState:
    return EditorState(source=source, filters=default_state())


class EditorSession:
    """
    The editor of the single in-process user.

    ``filters`` is the session's FilterStateManager, written by the filter
    sliders; ``state`` is the EditorState value of the session right now.
    Source changes go through the replace_source transition.
    """

    def __init__(self, state: Optional[EditorState] = None):
        state = state if state is not None else initial_state()
        self.source = state.source
        self.filters = FilterStateManager(state.filters)

    @property
    def state(self) -> EditorState:
        return EditorState(source=self.source, filters=self.filters.current_state())

    def _apply(self, state: EditorState) -> EditorState:
        self.source = state.source
        self.filters.load(state.filters)
        return state

    def replace_source(self, source: SourceImage) -> EditorState:
        return self._apply(replace_source(self.state, source))
