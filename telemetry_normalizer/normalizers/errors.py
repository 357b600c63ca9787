# telemetry_normalizer/normalizers/errors.py

CUSTOM_FUNCTION_ERROR_PREFIX = "runCustomFunction failed: "


class NormalizationError(Exception):
    """Base class for errors that abort a normalization call."""


class InvalidArgumentError(NormalizationError, ValueError):
    """Caller supplied an argument the pipeline refuses to accept."""


class CustomFunctionError(NormalizationError):
    """A registered custom function could not be found or raised."""

    def __init__(self, cause: BaseException):
        super().__init__(f"{CUSTOM_FUNCTION_ERROR_PREFIX}{cause}")
        self.cause = cause


class PayloadTooDeepError(NormalizationError):
    def __init__(self, max_depth: int):
        super().__init__(f"payload nesting exceeds {max_depth} levels")
        self.max_depth = max_depth
