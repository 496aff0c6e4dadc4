# feedclean/core/keys.py
from __future__ import annotations

from typing import Union

# Provider ids and metric keys: feeds use small integers, callers may use names.
Key = Union[str, int]


def is_valid_key(key: object) -> bool:
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return True
    return isinstance(key, str) and bool(key.strip())
