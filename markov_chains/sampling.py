import numpy as np


def check_occurrences(occurrences):
    # a table must define a distribution: non-empty, no negative weight, positive total
    if not occurrences:
        raise ValueError("empty occurrence table")
    if any(w < 0 for w in occurrences.values()):
        raise ValueError(f"negative weight in occurrence table: {occurrences!r}")
    if not any(w > 0 for w in occurrences.values()):
        raise ValueError(f"occurrence table has no positive weight: {occurrences!r}")


def random_key(occurrences, uniform01):
    """
    Draws a key of an occurrence table, skewed by the values.

    Args:
        occurrences: dict pairing tokens with non-negative weights
        uniform01: callable returning a float in [0, 1)

    Returns:
        the first key, in the table's iteration order, whose cumulated weight
        reaches uniform01() * total weight
    """
    check_occurrences(occurrences)
    # zero weights can never be drawn
    keys = [k for k, w in occurrences.items() if w > 0]
    cumulated = np.cumsum([occurrences[k] for k in keys], dtype=float)
    index = int(np.searchsorted(cumulated, uniform01() * cumulated[-1], side="left"))
    # rounding may push the draw past the last sum
    return keys[min(index, len(keys) - 1)]


def random_element(items, uniform01):
    if not items:
        raise ValueError("cannot choose from an empty collection")
    return items[min(int(uniform01() * len(items)), len(items) - 1)]
