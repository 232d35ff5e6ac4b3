from numbers import Number
from typing import Any, Sequence


def _position(values: Sequence[Any], current: Any) -> int | None:
    # numeric match first, so "2021.0" finds 2021; then the str() forms
    try:
        wanted = float(current)
    except (TypeError, ValueError):
        wanted = None
    if wanted is not None:
        for idx, value in enumerate(values):
            if isinstance(value, Number) and not isinstance(value, bool) and float(value) == wanted:
                return idx

    keys = [str(v) for v in values]
    try:
        return keys.index(str(current))
    except ValueError:
        return None


def circular_neighbours(values: Sequence[Any], current: Any) -> tuple[Any, Any]:
    """
    Previous and next entries around `current`, wrapping at both ends.

    The URL gives a string while an INTEGER column gives ints, so `current`
    is compared as a number against numeric entries before falling back to
    comparing str() forms.
    """
    if not values:
        return None, None

    idx = _position(values, current)
    if idx is None:
        return values[-1], values[0]

    prev = values[idx - 1] if idx > 0 else values[-1]
    nxt = values[idx + 1] if idx < len(values) - 1 else values[0]
    return prev, nxt
