import re
from copy import deepcopy

import pytest

from telemetry_normalizer import settings
from telemetry_normalizer.normalizers import (
    MISSING_KEY,
    PayloadTooDeepError,
    filter_data_by_keys,
    get_data_by_key,
    rename_keys_in_data,
)


# --- key path ---

def test_get_data_by_key_nested():
    data = {"system": {"cpu": {"user": 5}}}
    assert get_data_by_key(data, "system::cpu") == {"user": 5}
    assert get_data_by_key(data, "system::cpu::user") == 5


def test_get_data_by_key_missing_returns_sentinel():
    data = {"system": {"cpu": 5}}
    before = deepcopy(data)
    assert get_data_by_key(data, "system::memory") == MISSING_KEY
    assert data == before


def test_get_data_by_key_stays_missing():
    # once a segment is missing later segments cannot recover the path
    assert get_data_by_key({"a": {"b": 1}}, "x::a::b") == MISSING_KEY


def test_get_data_by_key_through_scalar():
    assert get_data_by_key({"a": 1}, "a::b") == MISSING_KEY
    assert get_data_by_key("text", "a") == MISSING_KEY


# --- filter ---

def test_filter_substring_match():
    data = {"cpuUtil": 1, "memUtil": 2, "other": 3}
    assert filter_data_by_keys(data, ["Util"]) == {"cpuUtil": 1, "memUtil": 2}


def test_filter_recurses_into_kept_subtrees():
    data = {"cpuUtil": {"coreUtil": 1, "temp": 2}, "fan": {"Util": 3}}
    assert filter_data_by_keys(data, ["Util"]) == {"cpuUtil": {"coreUtil": 1}}


def test_filter_is_case_sensitive():
    assert filter_data_by_keys({"cpuutil": 1}, ["Util"]) == {}


def test_filter_any_key_matches():
    data = {"cpuUtil": 1, "memoryTotal": 2, "other": 3}
    assert filter_data_by_keys(data, {"Util", "memory"}) == {"cpuUtil": 1, "memoryTotal": 2}


def test_filter_leaves_lists_and_scalars():
    data = {"diskUtil": [{"x": 1}, {"y": 2}]}
    assert filter_data_by_keys(data, ["Util"]) == data
    assert filter_data_by_keys([{"x": 1}], ["Util"]) == [{"x": 1}]
    assert filter_data_by_keys(MISSING_KEY, ["Util"]) == MISSING_KEY


def test_filter_does_not_mutate_input():
    data = {"cpuUtil": {"a": 1}, "other": 2}
    before = deepcopy(data)
    filter_data_by_keys(data, ["Util"])
    assert data == before


# --- rename ---

def test_rename_capture_group():
    patterns = {"tmm": {"pattern": r"tmm_(\d+)", "group": 1}}
    assert rename_keys_in_data({"tmm_0": 5}, patterns) == {"0": 5}


def test_rename_default_group_is_whole_match():
    patterns = {"tmm": {"pattern": r"tmm_\d+"}}
    assert rename_keys_in_data({"cpu-tmm_0-extra": 5}, patterns) == {"tmm_0": 5}


def test_rename_pattern_shorthand():
    assert rename_keys_in_data({"cpu-tmm_0": 5}, {"tmm": r"tmm_\d+"}) == {"tmm_0": 5}
    assert rename_keys_in_data({"cpu-tmm_0": 5}, {"tmm": re.compile(r"tmm_\d+")}) == {"tmm_0": 5}


def test_rename_requires_trigger_substring():
    patterns = {"tmm": {"pattern": r"\w+_(\d+)", "group": 1}}
    assert rename_keys_in_data({"cpu_0": 1}, patterns) == {"cpu_0": 1}


def test_rename_last_matching_pattern_wins():
    data = {"tmm_cpu_3": 1}
    cpu_last = {"tmm": {"pattern": r"tmm"}, "cpu": {"pattern": r"cpu_(\d+)", "group": 1}}
    tmm_last = {"cpu": {"pattern": r"cpu_(\d+)", "group": 1}, "tmm": {"pattern": r"tmm"}}
    assert rename_keys_in_data(data, cpu_last) == {"3": 1}
    assert rename_keys_in_data(data, tmm_last) == {"tmm": 1}


def test_rename_non_matching_pattern_keeps_earlier_match():
    patterns = {"tmm": {"pattern": r"tmm_(\d+)", "group": 1}, "_": {"pattern": r"^nomatch$"}}
    assert rename_keys_in_data({"tmm_4": 1}, patterns) == {"4": 1}


def test_rename_unset_group_keeps_key():
    patterns = {"tmm": {"pattern": r"tmm(_x)?", "group": 1}}
    assert rename_keys_in_data({"tmm_0": 1}, patterns) == {"tmm_0": 1}


def test_rename_nested_and_lists():
    patterns = {"tmm": {"pattern": r"tmm_(\d+)", "group": 1}}
    data = {"tmm_0": {"tmm_1": 1}, "list": [{"tmm_2": 2}, 3]}
    assert rename_keys_in_data(data, patterns) == {"0": {"1": 1}, "list": [{"2": 2}, 3]}


def test_rename_does_not_mutate_input():
    data = {"tmm_0": {"tmm_1": 1}}
    before = deepcopy(data)
    rename_keys_in_data(data, {"tmm": {"pattern": r"tmm_(\d+)", "group": 1}})
    assert data == before


def test_rename_rejects_negative_group():
    with pytest.raises(ValueError):
        rename_keys_in_data({"a": 1}, {"a": {"pattern": "a", "group": -1}})


def test_rename_rejects_group_beyond_pattern():
    with pytest.raises(ValueError, match="out of range"):
        rename_keys_in_data({"tmm_0": 1}, {"tmm": {"pattern": r"tmm_(\d+)", "group": 2}})


def _nested(depth):
    data = 1
    for _ in range(depth):
        data = {"tmm_a": data}
    return data


def test_filter_depth_limit(monkeypatch):
    monkeypatch.setattr(settings, "MAX_DEPTH", 3)
    with pytest.raises(PayloadTooDeepError):
        filter_data_by_keys(_nested(10), ["tmm"])


def test_rename_depth_limit(monkeypatch):
    monkeypatch.setattr(settings, "MAX_DEPTH", 3)
    with pytest.raises(PayloadTooDeepError):
        rename_keys_in_data(_nested(10), {"tmm": r"tmm_\w"})
