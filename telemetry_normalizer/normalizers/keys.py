# telemetry_normalizer/normalizers/keys.py
import logging
from collections.abc import Mapping
from typing import Any, Iterable, Optional

from telemetry_normalizer import settings

from .errors import PayloadTooDeepError
from .options import RenamePattern
from .types import NodeKind, NormalizableValue, kind_of

log = logging.getLogger(__name__)

# Returned instead of raising: many stats are absent unless configured on the device
MISSING_KEY = "missing key"


def get_data_by_key(data: NormalizableValue, key: str) -> NormalizableValue:
    """Return the value at a `::` delimited path, or MISSING_KEY."""
    ret = data
    for segment in key.split(settings.STATS_KEY_SEP):
        if isinstance(ret, Mapping) and segment in ret:
            ret = ret[segment]
        else:
            ret = MISSING_KEY
    if ret is MISSING_KEY:
        log.debug("key path %r not found in data", key)
    return ret


def filter_data_by_keys(data: NormalizableValue, keys: Iterable[str]) -> NormalizableValue:
    """
    Keep only dict keys that contain at least one of `keys` (plain substring,
    case-sensitive). Lists are left as they are.
    """
    return _filter(data, tuple(keys), 0)


def _filter(data, keys, depth):
    _check_depth(depth)
    if kind_of(data) is not NodeKind.MAPPING:
        return data
    return {
        k: _filter(v, keys, depth + 1)
        for k, v in data.items()
        if any(i in k for i in keys)
    }


def rename_keys_in_data(data: NormalizableValue, patterns: Mapping[str, Any]) -> NormalizableValue:
    """
    Rename dict keys using regex patterns.

    `patterns` maps a trigger substring to a RenamePattern (or anything
    RenamePattern accepts: a dict with pattern/group, a regex string or
    a compiled regex). A pattern is only tried on keys containing its
    trigger; the new key is the selected capture group. When several
    patterns match, the last one in insertion order wins.
    """
    compiled = {trigger: _as_rename_pattern(p) for trigger, p in patterns.items()}
    return _rename(data, compiled, 0)


def _as_rename_pattern(value: Any) -> RenamePattern:
    if isinstance(value, RenamePattern):
        return value
    return RenamePattern.model_validate(value)


def _rename(data, patterns, depth):
    _check_depth(depth)
    kind = kind_of(data)
    if kind is NodeKind.SEQUENCE:
        return [_rename(item, patterns, depth + 1) for item in data]
    if kind is NodeKind.SCALAR:
        return data

    ret = {}
    for k, v in data.items():
        ret[_renamed_key(k, patterns)] = _rename(v, patterns, depth + 1)
    return ret


def _renamed_key(key: str, patterns: Mapping[str, RenamePattern]) -> str:
    renamed: Optional[str] = None
    for trigger, p in patterns.items():
        if trigger not in key:
            continue
        m = p.pattern.search(key)
        if m and m.group(p.group) is not None:
            renamed = m.group(p.group)
    return key if renamed is None else renamed


def _check_depth(depth: int):
    if depth > settings.MAX_DEPTH:
        raise PayloadTooDeepError(settings.MAX_DEPTH)
