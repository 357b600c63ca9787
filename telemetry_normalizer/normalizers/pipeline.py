import logging
from typing import Any, Dict, List

from .base import Stage
from .custom import run_custom_function
from .keys import filter_data_by_keys, get_data_by_key, rename_keys_in_data
from .options import NormalizationOptions
from .reducer import reduce_data
from .types import NormalizableValue

log = logging.getLogger(__name__)


class ReduceStage:
    name = "reduce"

    def enabled(self, options: NormalizationOptions) -> bool:
        return True

    def run(self, data, options):
        return reduce_data(data, NormalizationOptions(convert_array_to_map=options.convert_array_to_map))


class KeyPathStage:
    name = "key"

    def enabled(self, options: NormalizationOptions) -> bool:
        return bool(options.key)

    def run(self, data, options):
        return get_data_by_key(data, options.key)


class FilterKeysStage:
    name = "filterByKeys"

    def enabled(self, options: NormalizationOptions) -> bool:
        return options.filter_by_keys is not None

    def run(self, data, options):
        return filter_data_by_keys(data, options.filter_by_keys)


class RenameKeysStage:
    name = "renameKeysByPattern"

    def enabled(self, options: NormalizationOptions) -> bool:
        return options.rename_keys_by_pattern is not None

    def run(self, data, options):
        return rename_keys_in_data(data, options.rename_keys_by_pattern)


class CustomFunctionStage:
    name = "runCustomFunction"

    def enabled(self, options: NormalizationOptions) -> bool:
        return options.run_custom_function is not None

    def run(self, data, options):
        rcf = options.run_custom_function
        return run_custom_function(data, rcf.name, rcf.args)


class NormalizerPipeline:
    """
    A fixed chain of normalization stages.
    Each enabled stage takes the output of the previous one; the order
    matters: filtering expects already extracted data, renaming expects
    already filtered data, and a custom function sees the final shape.
    """
    def __init__(self, stages: List[Stage]):
        self.stages = stages

    def normalize(self, data: NormalizableValue, options: "NormalizationOptions | Dict[str, Any] | None" = None) -> NormalizableValue:
        opts = NormalizationOptions.coerce(options)
        out = data
        for stage in self.stages:
            if not stage.enabled(opts):
                continue
            log.debug("running normalization stage %s", stage.name)
            out = stage.run(out, opts)
        return out


def get_default_normalizer() -> NormalizerPipeline:
    """Factory for the standard reduce -> key -> filter -> rename -> custom function pipeline."""
    return NormalizerPipeline([
        ReduceStage(),
        KeyPathStage(),
        FilterKeysStage(),
        RenameKeysStage(),
        CustomFunctionStage(),
    ])


def normalize_data(data: NormalizableValue, options: "NormalizationOptions | Dict[str, Any] | None" = None) -> NormalizableValue:
    """Run the default pipeline over one payload."""
    return get_default_normalizer().normalize(data, options)
