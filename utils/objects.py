from __future__ import annotations

from typing import Any, Dict, Mapping


def shallow_clone(obj: Any) -> Dict[str, Any]:
    """Return a new dict with the top-level entries of ``obj``.

    Mappings contribute their items and plain objects their instance
    attributes. Nested values are shared with the original.
    """

    if obj is None:
        return {}
    if isinstance(obj, Mapping):
        return dict(obj)
    return dict(vars(obj))
