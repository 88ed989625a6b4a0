import math
from typing import Any


def sanitize_for_json(obj: Any) -> Any:
    """
    Recursively replace NaN and Infinity floats with None.

    Standard JSON has no literal for either, so anything echoed back to a
    client (validation error details in particular) goes through here first.
    """
    if isinstance(obj, float):
        if math.isnan(obj) or math.isinf(obj):
            return None
        return obj
    elif isinstance(obj, dict):
        return {k: sanitize_for_json(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [sanitize_for_json(item) for item in obj]
    elif isinstance(obj, tuple):
        return tuple(sanitize_for_json(item) for item in obj)
    return obj
