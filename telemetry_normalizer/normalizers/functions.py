# telemetry_normalizer/normalizers/functions.py
"""
Custom functions available to the `runCustomFunction` option.

Each function takes a single args dict holding the current payload under
"data" plus the caller's named arguments, and returns the new payload.
The set is closed: names are enumerated in CustomFunctionName and nothing
outside CUSTOM_FUNCTIONS can be invoked.
"""
from enum import Enum
from numbers import Number
from typing import Any, Callable, Dict, List

from .types import NormalizableValue, Record


class CustomFunctionName(str, Enum):
    GET_AVERAGE = "getAverage"
    GET_SUM = "getSum"
    GET_FIRST_KEY = "getFirstKey"
    GET_PERCENT_FROM_KEYS = "getPercentFromKeys"
    CONVERT_MAP_TO_ARRAY = "convertMapToArray"


def get_average(args: Record) -> int:
    """Average of child[keyWithValue] across all children, truncated to int."""
    data = args["data"]
    key = args["keyWithValue"]
    values = [child[key] for child in data.values()]
    return int(sum(values) / len(values))


def get_sum(args: Record) -> Record:
    """Sum numeric fields by name across all children."""
    ret: Record = {}
    for child in args["data"].values():
        for k, v in child.items():
            if isinstance(v, bool) or not isinstance(v, Number):
                continue
            ret[k] = ret.get(k, 0) + v
    return ret


def get_first_key(args: Record) -> str:
    # e.g. "https://localhost/mgmt/tm/sys/host-info/0" with splitOnValue "/" -> "0"
    key = str(next(iter(args["data"])))
    split_on = args.get("splitOnValue")
    if split_on:
        key = key.split(split_on)[-1]
    return f"{args.get('keyPrefix') or ''}{key}"


def get_percent_from_keys(args: Record) -> int:
    data = args["data"]
    percent = int(data[args["partialKey"]] / data[args["totalKey"]] * 100)
    return 100 - percent if args.get("inverse") else percent


def convert_map_to_array(args: Record) -> List[NormalizableValue]:
    return list(args["data"].values())


CUSTOM_FUNCTIONS: Dict[CustomFunctionName, Callable[[Record], Any]] = {
    CustomFunctionName.GET_AVERAGE: get_average,
    CustomFunctionName.GET_SUM: get_sum,
    CustomFunctionName.GET_FIRST_KEY: get_first_key,
    CustomFunctionName.GET_PERCENT_FROM_KEYS: get_percent_from_keys,
    CustomFunctionName.CONVERT_MAP_TO_ARRAY: convert_map_to_array,
}


def validate_registry() -> None:
    """Fail loudly if an enumerated name has no callable behind it."""
    missing = [n.value for n in CustomFunctionName if not callable(CUSTOM_FUNCTIONS.get(n))]
    if missing:
        raise RuntimeError(f"custom functions not registered: {', '.join(missing)}")


def lookup(name: str) -> Callable[[Record], Any]:
    """Resolve a custom function by name. Raises ValueError for unknown names."""
    return CUSTOM_FUNCTIONS[CustomFunctionName(name)]
