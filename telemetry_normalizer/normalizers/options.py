# telemetry_normalizer/normalizers/options.py
import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Options(BaseModel):
    # camelCase on the wire, snake_case in code
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class RenamePattern(_Options):
    pattern: re.Pattern
    group: int = Field(0, ge=0)  # 0 = whole match

    @model_validator(mode="before")
    @classmethod
    def _shorthand(cls, value: Any) -> Any:
        # {"tmm": "tmm_\\d+"} is accepted as {"tmm": {"pattern": "tmm_\\d+"}}
        if isinstance(value, (str, re.Pattern)):
            return {"pattern": value}
        return value

    @model_validator(mode="after")
    def _group_exists(self) -> "RenamePattern":
        if self.group > self.pattern.groups:
            raise ValueError(
                f"group {self.group} out of range, pattern {self.pattern.pattern!r} "
                f"has {self.pattern.groups} group(s)"
            )
        return self


class ArrayToMapOptions(_Options):
    key_name: Optional[str] = Field(None, alias="keyName")
    key_name_prefix: Optional[str] = Field(None, alias="keyNamePrefix")


class CustomFunctionOptions(_Options):
    name: str
    args: Optional[Dict[str, Any]] = None


class NormalizationOptions(_Options):
    """
    Options accepted by the normalization pipeline.
    Every field is optional; an empty options object only reduces the payload.
    """
    key: Optional[str] = None
    filter_by_keys: Optional[List[str]] = Field(None, alias="filterByKeys")
    rename_keys_by_pattern: Optional[Dict[str, RenamePattern]] = Field(
        None, alias="renameKeysByPattern"
    )
    convert_array_to_map: Optional[ArrayToMapOptions] = Field(None, alias="convertArrayToMap")
    run_custom_function: Optional[CustomFunctionOptions] = Field(None, alias="runCustomFunction")

    @classmethod
    def coerce(cls, options: "NormalizationOptions | Dict[str, Any] | None") -> "NormalizationOptions":
        """Accept None, a plain dict (camelCase or snake_case) or an instance."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(options)
