"""Logic for deep merging configuration dictionaries."""

from typing import Any

ADDITIVE_KEYS = {"std_roots"}


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Overlay a user configuration on the defaults.

    Nested sections combine key by key. A user list takes the place of the
    default one, but lists under ADDITIVE_KEYS (the standard library roots)
    extend the defaults instead, so a user can allow another root crate
    without repeating std, core and alloc.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            # First occurrence keeps its position.
            result[key] = list(dict.fromkeys([*result[key], *value]))
        else:
            result[key] = value
    return result
