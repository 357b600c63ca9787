# telemetry_normalizer/normalizers/base.py
from typing import Protocol
from .options import NormalizationOptions
from .types import NormalizableValue

class Stage(Protocol):
    name: str

    def enabled(self, options: NormalizationOptions) -> bool:
        """Whether the options ask for this stage at all."""
        ...

    def run(self, data: NormalizableValue, options: NormalizationOptions) -> NormalizableValue:
        """Return a NEW tree. Do not mutate `data`."""
        ...
