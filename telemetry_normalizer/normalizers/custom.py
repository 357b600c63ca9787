# telemetry_normalizer/normalizers/custom.py
import logging
from typing import Any, Dict, Optional

from .errors import CustomFunctionError, InvalidArgumentError
from .functions import lookup
from .types import NormalizableValue

log = logging.getLogger(__name__)


def run_custom_function(
    data: NormalizableValue, func: str, args: Optional[Dict[str, Any]] = None
) -> NormalizableValue:
    """
    Run a registered custom function on `data`.

    The function receives {"data": data, **args}. Passing "data" inside
    `args` is rejected before anything runs. Lookup and runtime failures
    are re-raised as CustomFunctionError.
    """
    call_args: Dict[str, Any] = {"data": data}
    for k, v in (args or {}).items():
        if k == "data":
            raise InvalidArgumentError("Named argument (data) is not allowed")
        call_args[k] = v

    try:
        return lookup(func)(call_args)
    except Exception as e:
        log.warning("custom function %r failed: %s", func, e)
        raise CustomFunctionError(e) from e
