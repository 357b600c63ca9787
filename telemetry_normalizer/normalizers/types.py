# telemetry_normalizer/normalizers/types.py
from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict

# Deserialized device payload: scalars, lists and string-keyed dicts, nested freely
NormalizableValue = Any
Record = Dict[str, Any]


class NodeKind(str, Enum):
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def kind_of(node: NormalizableValue) -> NodeKind:
    """Classify a payload node. Strings and bytes count as scalars."""
    if isinstance(node, Mapping):
        return NodeKind.MAPPING
    if isinstance(node, (list, tuple)):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR


__all__ = ["NormalizableValue", "Record", "NodeKind", "kind_of"]
