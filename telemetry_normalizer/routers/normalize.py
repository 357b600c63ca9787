import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from telemetry_normalizer.normalizers import (
    NormalizationError,
    NormalizationOptions,
    normalize_data,
)

log = logging.getLogger(__name__)

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="", tags=["normalize"])


# Request schema: raw device payload + normalization options
class NormalizeRequest(BaseModel):
    data: Any                # deserialized device response
    options: NormalizationOptions = Field(default_factory=NormalizationOptions)


@router.post("/normalize")
def normalize(req: NormalizeRequest) -> Dict[str, Any]:
    """
    Normalize one device payload.

    Request body:
      {"data": {"entries": {...}}, "options": {"filterByKeys": ["Util"]}}

    Response JSON:
      {"ok": True, "data": <normalized payload>}
    """
    try:
        out = normalize_data(req.data, req.options)
    except NormalizationError as e:
        raise HTTPException(400, str(e))
    except ValueError as e:
        # payload shape the options cannot apply to, e.g. a record without keyName
        raise HTTPException(400, str(e))
    except Exception as e:
        log.exception("normalize failed")
        raise HTTPException(500, f"Normalize failed: {e}")

    return {"ok": True, "data": out}
