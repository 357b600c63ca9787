# telemetry_normalizer/normalizers/arrays.py
from collections.abc import Mapping
from typing import Optional, Sequence

from .types import NormalizableValue, Record


def convert_array_to_map(
    data: Sequence[NormalizableValue], key_name: str, key_prefix: Optional[str] = None
) -> Record:
    """
    Pivot a list of records into a dict keyed by each record's `key_name` field.

      [{"name": "a", "value": 1}]  ->  {"a": {"value": 1}}

    The key field is dropped from the pivoted record. Later records win
    when two share the same key.
    """
    if not isinstance(data, (list, tuple)):
        raise TypeError(f"convert_array_to_map() requires a list, got {type(data).__name__}")

    ret: Record = {}
    for item in data:
        if not isinstance(item, Mapping) or key_name not in item:
            raise ValueError(f"convert_array_to_map() item has no '{key_name}' field: {item!r}")
        ret[f"{key_prefix or ''}{item[key_name]}"] = {
            k: v for k, v in item.items() if k != key_name
        }
    return ret
