from .pipeline import get_default_normalizer, normalize_data, NormalizerPipeline
from .reducer import reduce_data
from .keys import MISSING_KEY, get_data_by_key, filter_data_by_keys, rename_keys_in_data
from .custom import run_custom_function
from .arrays import convert_array_to_map
from .functions import CustomFunctionName, validate_registry
from .options import NormalizationOptions, RenamePattern
from .errors import (
    NormalizationError,
    InvalidArgumentError,
    CustomFunctionError,
    PayloadTooDeepError,
)
from .types import NodeKind, NormalizableValue, kind_of
from .base import Stage

__all__ = [
    "get_default_normalizer",
    "normalize_data",
    "NormalizerPipeline",
    "reduce_data",
    "MISSING_KEY",
    "get_data_by_key",
    "filter_data_by_keys",
    "rename_keys_in_data",
    "run_custom_function",
    "convert_array_to_map",
    "CustomFunctionName",
    "validate_registry",
    "NormalizationOptions",
    "RenamePattern",
    "NormalizationError",
    "InvalidArgumentError",
    "CustomFunctionError",
    "PayloadTooDeepError",
    "NodeKind",
    "NormalizableValue",
    "kind_of",
    "Stage",
]
