"""
Filter state for the wallpaper editor

Holds the fixed set of cosmetic adjustments the editor exposes, their ranges
and defaults, and turns a state into the ordered list of filter steps that
both the live preview (as a CSS ``filter`` string) and the PNG export apply.

The order of FILTER_SPECS is the order the filters are applied in.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Real
from types import MappingProxyType
from typing import Iterator, Optional

from neonize.errors import InvalidFilterName


@dataclass(frozen=True)
class FilterSpec:
    name: str
    minimum: float
    maximum: float
    default: float
    unit: str  # "%" or "px"


FILTER_SPECS: tuple[FilterSpec, ...] = (
    FilterSpec("brightness", 0, 200, 100, "%"),
    FilterSpec("contrast", 0, 200, 100, "%"),
    FilterSpec("saturate", 0, 200, 100, "%"),
    FilterSpec("sepia", 0, 100, 0, "%"),
    FilterSpec("grayscale", 0, 100, 0, "%"),
    FilterSpec("invert", 0, 100, 0, "%"),
    FilterSpec("blur", 0, 10, 0, "px"),
)

_SPECS_BY_NAME = {spec.name: spec for spec in FILTER_SPECS}

FILTER_NAMES: tuple[str, ...] = tuple(_SPECS_BY_NAME)
DEFAULT_VALUES: Mapping[str, float] = MappingProxyType(
    {spec.name: float(spec.default) for spec in FILTER_SPECS}
)


def get_spec(name: str) -> FilterSpec:
    try:
        return _SPECS_BY_NAME[name]
    except KeyError:
        raise InvalidFilterName(name) from None


def clamp_value(spec: FilterSpec, value: float) -> float:
    """Clamp ``value`` into the spec's range. Non-numeric and NaN values are rejected."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError(f"{spec.name} must be a number, got {value!r}")
    value = float(value)
    if math.isnan(value):
        raise ValueError(f"{spec.name} must be a number, got NaN")
    return min(max(value, float(spec.minimum)), float(spec.maximum))


class FilterState(Mapping):
    """
    Immutable mapping of filter name to value.

    Iterates in application order. Every value is within its declared range:
    construct one through default_state(), with_value() or a FilterStateManager.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, float]):
        self._values = MappingProxyType(
            {spec.name: float(values[spec.name]) for spec in FILTER_SPECS}
        )

    def __getitem__(self, name: str) -> float:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"FilterState({dict(self._values)!r})"

    def as_dict(self) -> dict[str, float]:
        return dict(self._values)


def default_state() -> FilterState:
    return FilterState(DEFAULT_VALUES)


def with_value(state: FilterState, name: str, value: float) -> FilterState:
    """Return a copy of ``state`` with ``name`` set to the clamped ``value``."""
    spec = get_spec(name)
    values = state.as_dict()
    values[name] = clamp_value(spec, value)
    return FilterState(values)


def filter_pipeline(state: Mapping[str, float]) -> list[tuple[str, float]]:
    """The (filter, value) steps of ``state`` in application order."""
    return [(spec.name, float(state[spec.name])) for spec in FILTER_SPECS]


def css_filter(state: Mapping[str, float]) -> str:
    """
    Render ``state`` as a CSS ``filter`` value for the live preview, e.g.
    ``brightness(100%) contrast(100%) ... blur(0px)``.
    """
    return " ".join(
        f"{name}({value:g}{_SPECS_BY_NAME[name].unit})"
        for name, value in filter_pipeline(state)
    )


class FilterStateManager:
    """
    Single-writer holder of the current FilterState.

    The UI writes through set() and reset(); an export reads one snapshot via
    current_state(). Snapshots are immutable, so later edits never reach an
    export that is already running.
    """

    def __init__(self, state: Optional[FilterState] = None):
        self._state = state if state is not None else default_state()

    def set(self, name: str, value: float) -> FilterState:
        self._state = with_value(self._state, name, value)
        return self._state

    def reset(self) -> FilterState:
        self._state = default_state()
        return self._state

    def load(self, state: FilterState) -> FilterState:
        """Replace the whole state with ``state``."""
        self._state = state
        return self._state

    def current_state(self) -> FilterState:
        return self._state
