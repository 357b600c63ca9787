# telemetry_normalizer/normalizers/reducer.py
from collections.abc import Mapping
from typing import Any, Dict, Optional

from telemetry_normalizer import settings

from .arrays import convert_array_to_map
from .errors import PayloadTooDeepError
from .options import ArrayToMapOptions, NormalizationOptions
from .types import NodeKind, NormalizableValue, Record, kind_of


def reduce_data(
    data: NormalizableValue, options: "NormalizationOptions | Dict[str, Any] | None" = None
) -> NormalizableValue:
    """
    Collapse the wrapper structure of a device payload.

    Strips sole-key wrappers (nestedStats, value, description, color),
    flattens `entries` collections and, when `convertArrayToMap.keyName`
    is set, pivots lists into dicts. Only `convertArrayToMap` is read
    from the options. Returns a new tree; `data` is not modified.
    """
    catm = NormalizationOptions.coerce(options).convert_array_to_map
    return _reduce(data, catm, 0)


def _reduce(data: NormalizableValue, catm: Optional[ArrayToMapOptions], depth: int) -> NormalizableValue:
    if depth > settings.MAX_DEPTH:
        raise PayloadTooDeepError(settings.MAX_DEPTH)

    kind = kind_of(data)

    if kind is NodeKind.MAPPING:
        # sole-key wrapper such as {"nestedStats": {...}}
        if len(data) == 1:
            (only_key,) = data.keys()
            if only_key in settings.SCAFFOLD_KEYS:
                return _reduce(data[only_key], catm, depth + 1)

        entries = data.get("entries")
        if isinstance(entries, Mapping):
            # recurse into the rebuilt dict as a whole so a scaffold check can fire on it
            return _reduce(_flatten_entries(entries), catm, depth + 1)

        ret = {k: _reduce(v, catm, depth + 1) for k, v in data.items()}
        # a pivoted list can turn `entries` into a dict only after its values are reduced
        if isinstance(ret.get("entries"), Mapping):
            return _reduce(_flatten_entries(ret["entries"]), catm, depth + 1)
        return ret

    if kind is NodeKind.SEQUENCE:
        if catm is not None and catm.key_name:
            pivoted = convert_array_to_map(data, catm.key_name, key_prefix=catm.key_name_prefix)
            return _reduce(pivoted, catm, depth + 1)
        return [_reduce(item, catm, depth + 1) for item in data]

    # scalars
    return data


def _flatten_entries(entries: Mapping) -> Record:
    """Re-key an `entries` dict by its shortened entry names."""
    ret: Record = {}
    for k, v in entries.items():
        ret[shorten_entry_key(k)] = v
    return ret


def shorten_entry_key(key: str) -> str:
    """
    Entry keys may look like https://localhost/mgmt/tm/sys/tmm-info/0.0/stats,
    keep only the part after the host and the first known path prefix.
    """
    if not isinstance(key, str):
        return key
    key = key.removeprefix(settings.ENTRIES_HOST_PREFIX)
    for prefix in settings.ENTRIES_PATH_PREFIXES:
        if key.startswith(prefix):
            return key[len(prefix):]
    return key
