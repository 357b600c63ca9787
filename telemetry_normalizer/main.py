from contextlib import asynccontextmanager
from fastapi import FastAPI

from telemetry_normalizer.routers.normalize import router as normalize_router
from telemetry_normalizer.setup_logging import setup_logging
from telemetry_normalizer.normalizers import validate_registry

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging() # Init Logging

# --------------------------------------------------------------------
# FastAPI application with lifespan hook
# --------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context runs once at startup and once at shutdown.
    Here we check that every enumerated custom function is registered
    so a broken registry shows up in /healthz instead of mid-request.
    """
    app.state.functions_ready = False
    app.state.functions_error = None
    try:
        validate_registry()
        app.state.functions_ready = True
    except RuntimeError as e:
        app.state.functions_error = str(e)

    yield
    # No special shutdown logic needed

# Create the FastAPI app instance
app = FastAPI(title="Telemetry Normalizer", lifespan=lifespan)

# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/healthz")
def health():
    """
    Simple health probe for monitoring.
    Returns:
      - ok: static True if the app is alive
      - functions_ready: True when the custom function registry checked out
      - functions_error: registry problem (None if healthy)
    """
    return {
        "ok": True,
        "service": "telemetry-normalizer",
        "version": 1,
        "functions_ready": bool(getattr(app.state, "functions_ready", False)),
        "functions_error": getattr(app.state, "functions_error", None),
    }

# Register API routers:
app.include_router(normalize_router)
